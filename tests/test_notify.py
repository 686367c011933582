from pathlib import Path

import requests

from feasibility.cli.__main__ import main
from feasibility.notify import slack

SAMPLE = Path(__file__).resolve().parents[1] / "samples" / "client_portal.yaml"


class FakeResponse:
    def __init__(self, status=200):
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


def test_notify_is_noop_without_webhook(monkeypatch):
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)

    def boom(*a, **kw):
        raise AssertionError("should not post")

    monkeypatch.setattr(slack.requests, "post", boom)
    assert slack.notify("hello") is False


def test_notify_posts_json(monkeypatch):
    calls = []
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.example/abc")
    monkeypatch.setattr(slack.requests, "post", lambda url, **kw: calls.append((url, kw)) or FakeResponse())

    assert slack.notify("hello") is True
    url, kw = calls[0]
    assert url == "https://hooks.example/abc"
    assert kw["data"] == '{"text": "hello"}'
    assert kw["timeout"] == 10


def test_completion_message():
    msg = slack.completion_message("Portal", 74, "AMBER", 0, "new-solution")
    assert msg == "Portal: 74/100 AMBER | risks=0 matrix=new-solution"


def test_cli_sends_completion_notice(monkeypatch, capsys):
    sent = []
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.example/abc")
    monkeypatch.setattr(slack.requests, "post", lambda url, **kw: sent.append(kw["data"]) or FakeResponse())

    assert main(["evaluate", "--answers", str(SAMPLE)]) == 0
    assert len(sent) == 1
    assert "Global Client Portal Implementation: 74/100 AMBER" in sent[0]


def test_cli_survives_webhook_failure(monkeypatch, capsys):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.example/abc")
    monkeypatch.setattr(slack.requests, "post", lambda url, **kw: FakeResponse(500))

    assert main(["evaluate", "--answers", str(SAMPLE)]) == 0
    assert "completion notification failed" in capsys.readouterr().err
