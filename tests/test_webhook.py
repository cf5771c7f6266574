from fastapi.testclient import TestClient
import pytest

from app.main import app
from app.services.gateway_service import get_gateway_service
from app.services.state_store import get_state_store
from app.flow.states import UserState
from utils.constants import WELCOME_MESSAGE

USER = "94770000000@s.whatsapp.net"
WEBHOOK_URL = "/api/v1/webhook"


@pytest.fixture
def client(store, sender):
    app.dependency_overrides[get_state_store] = lambda: store
    app.dependency_overrides[get_gateway_service] = lambda: sender
    yield TestClient(app)
    app.dependency_overrides.clear()


def _post(client, message, remote_jid=USER, from_me=False):
    return client.post(WEBHOOK_URL, json={
        "key": {"remoteJid": remote_jid, "fromMe": from_me, "id": "3EB0"},
        "pushName": "Nimal",
        "message": message
    })


def test_first_message_replies_with_welcome(client, sender):
    response = _post(client, {"conversation": "hello"})

    assert response.status_code == 200
    assert response.json() == {"status": "success", "reason": None, "replied": True}
    assert sender.sent[0][0] == USER
    assert sender.sent[0][1]["text"] == WELCOME_MESSAGE


def test_button_reply_opens_company_menu(client, sender, store):
    _post(client, {"conversation": "hello"})
    _post(client, {"buttonsResponseMessage": {"selectedButtonId": "1"}})
    _post(client, {"buttonsResponseMessage": {"selectedButtonId": "next_page"}})

    assert "Page 2/3" in sender.sent[-1][1]["text"]
    assert store._records[USER] == {"step": "software", "page": 2, "company": "software"}


def test_list_reply_shows_service(client, sender):
    _post(client, {"conversation": "hello"})
    response = _post(client, {"listResponseMessage": {"singleSelectReply": {"selectedRowId": "service20"}}})

    assert response.json()["replied"] is True
    assert sender.sent[-1][1]["text"].startswith("*8️⃣ Website & Funnel Marketing*")


def test_group_message_is_ignored(client, sender):
    response = _post(client, {"conversation": "hi"}, remote_jid="120363@g.us")

    assert response.status_code == 200
    assert response.json()["status"] == "ignored"
    assert sender.sent == []


def test_own_message_is_ignored(client, sender):
    response = _post(client, {"conversation": "hi"}, from_me=True)

    assert response.json()["reason"] == "from_me"
    assert sender.sent == []


def test_send_failure_still_acknowledged(store, failing_sender):
    app.dependency_overrides[get_state_store] = lambda: store
    app.dependency_overrides[get_gateway_service] = lambda: failing_sender
    try:
        response = _post(TestClient(app), {"conversation": "hi"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json()["replied"] is False
    assert store._records[USER] == UserState.welcome().to_dict()


def test_invalid_payload_is_rejected(client):
    response = client.post(WEBHOOK_URL, json={"message": {"conversation": "hi"}})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_webhook_get_verification(client):
    response = client.get(WEBHOOK_URL)

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health_endpoints(client):
    assert client.get("/live").json() == {"status": "alive"}
    assert client.get("/ready").json() == {"status": "ready"}

    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["checks"]["gateway"] == "configured"
    assert "X-Process-Time" in health.headers
