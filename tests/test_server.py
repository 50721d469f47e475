from fastapi.testclient import TestClient

from conftest import FakeTextService
from gpdesk.composer import SERVICE_UNAVAILABLE_REPLY
from gpdesk.errors import ServiceError
from gpdesk.server import create_app


def test_liveness_endpoint(make_pipeline, test_settings) -> None:
    client = TestClient(create_app(test_settings, make_pipeline(FakeTextService(reply="null"))))

    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "gpdesk bot is running!"


def test_message_webhook_returns_reply(make_pipeline, test_settings) -> None:
    reply = '{"gp_id": "1001", "seeker_id": "78", "event_date": "d", "event_time": "t", "issue_details": "i"}'
    client = TestClient(create_app(test_settings, make_pipeline(FakeTextService(reply=reply))))

    response = client.post("/messages", json={"sender": "8801@c.us", "body": "GP ID: 1001 ..."})

    assert response.status_code == 200
    assert response.json() == {
        "sender": "8801@c.us",
        "outcome": "mismatch_secondary",
        "reply": '❌ Incorrect Seeker ID: "78".',
    }


def test_message_webhook_without_data_has_null_reply(make_pipeline, test_settings) -> None:
    client = TestClient(create_app(test_settings, make_pipeline(FakeTextService(reply="null"))))

    response = client.post("/messages", json={"sender": "8801@c.us", "body": "good morning"})

    assert response.json() == {"sender": "8801@c.us", "outcome": "no_data", "reply": None}


def test_message_webhook_hides_service_errors(make_pipeline, test_settings) -> None:
    service = FakeTextService(error=ServiceError("HTTP 500: quota exceeded for key test-key"))
    client = TestClient(create_app(test_settings, make_pipeline(service)))

    response = client.post("/messages", json={"sender": "8801@c.us", "body": "GP ID: 1001"})

    assert response.json()["reply"] == SERVICE_UNAVAILABLE_REPLY
    assert "quota" not in response.text


def test_message_webhook_rejects_missing_body(make_pipeline, test_settings) -> None:
    client = TestClient(create_app(test_settings, make_pipeline(FakeTextService(reply="null"))))

    response = client.post("/messages", json={"sender": "8801@c.us"})

    assert response.status_code == 422
