import os
import json
import requests

def notify(text: str) -> bool:
    url = os.getenv("SLACK_WEBHOOK_URL")
    if not url:
        return False

    resp = requests.post(
        url,
        data=json.dumps({"text": text}),
        headers={"Content-Type": "application/json"},
        timeout=10,
    )
    resp.raise_for_status()
    return True


def completion_message(name: str, overall_score: int, rating: str, risk_count: int, matrix_choice: str) -> str:
    return (
        f"{name}: {overall_score}/100 {rating} | "
        f"risks={risk_count} matrix={matrix_choice}"
    )
