import json
from pathlib import Path

import yaml

from feasibility.cli.__main__ import main
from feasibility.models.record import AssessmentRecord

SAMPLE = Path(__file__).resolve().parents[1] / "samples" / "client_portal.yaml"


def test_plan_lists_steps(capsys):
    assert main(["plan", "--size", "small"]) == 0
    out = capsys.readouterr().out
    assert "Small Initiative" in out
    assert "6/6  [9] Decision Matrix & Business Case" in out


def test_plan_without_size(capsys):
    assert main(["plan"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 2


def test_evaluate_sample(capsys, monkeypatch):
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    assert main(["evaluate", "--answers", str(SAMPLE)]) == 0
    out = capsys.readouterr().out
    assert "Overall: 74/100  AMBER - CONDITIONAL SUCCESS" in out
    assert "Technology Fit: 70" in out
    assert "-> new-solution" in out


def test_evaluate_json_output(capsys, monkeypatch):
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    assert main(["evaluate", "--answers", str(SAMPLE), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["result"]["overall_score"] == 74
    assert payload["result"]["assessment"]["rating"] == "AMBER"
    assert payload["record"]["completed"] is True
    assert payload["record"]["projectSize"] == "medium"


def test_evaluate_transport_json(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    record = AssessmentRecord.from_mapping(yaml.safe_load(SAMPLE.read_text()))
    path = tmp_path / "record.json"
    path.write_text(record.to_json())
    assert main(["evaluate", "--answers", str(path)]) == 0
    assert "Overall: 74/100" in capsys.readouterr().out


def test_incomplete_answers_exit_2(tmp_path, capsys):
    path = tmp_path / "answers.yaml"
    path.write_text(yaml.safe_dump({"initiativeName": "Portal", "projectSize": "small"}))
    assert main(["evaluate", "--answers", str(path)]) == 2
    err = capsys.readouterr().err
    assert "Step 1 (Basic Information) is incomplete" in err
    assert "initiative_owner: Initiative owner is required" in err


def test_missing_requirements_exit_2(tmp_path, capsys):
    path = tmp_path / "answers.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "initiativeName": "Portal",
                "initiativeOwner": "Jordan",
                "region": "uk",
                "description": "Portal",
                "projectSize": "small",
            }
        )
    )
    assert main(["evaluate", "--answers", str(path)]) == 2
    assert "Please add at least one requirement" in capsys.readouterr().err


def test_unreadable_answers_exit_1(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{ nope")
    assert main(["evaluate", "--answers", str(path)]) == 1
    assert "unable to load assessment" in capsys.readouterr().err


def test_missing_file_exit_1(tmp_path, capsys):
    assert main(["evaluate", "--answers", str(tmp_path / "absent.yaml")]) == 1
    assert "unable to load assessment" in capsys.readouterr().err


def test_report_command_writes_file(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    out_dir = tmp_path / "reports"
    assert main(["report", "--answers", str(SAMPLE), "--out-dir", str(out_dir)]) == 0
    files = list(out_dir.glob("initiative-assessment-global-client-portal-implementation-*.txt"))
    assert len(files) == 1
    assert "Overall Feasibility Score: 74/100" in files[0].read_text()
    assert "Wrote" in capsys.readouterr().out


def test_evaluate_completed_record(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    assert main(["evaluate", "--answers", str(SAMPLE), "--json"]) == 0
    record = json.loads(capsys.readouterr().out)["record"]
    path = tmp_path / "completed.json"
    path.write_text(json.dumps(record))
    assert main(["evaluate", "--answers", str(path)]) == 0
    assert "Overall: 74/100" in capsys.readouterr().out
