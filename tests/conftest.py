import pytest

from app.core.exceptions import ExternalServiceError
from app.services.state_store import InMemoryStateStore


class FakeSender:
    """Records sends instead of calling the gateway."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []

    async def send_message(self, to, payload):
        if self.fail:
            raise ExternalServiceError("Gateway API error: 500")
        self.sent.append((to, payload))
        return {"id": f"msg-{len(self.sent)}"}


@pytest.fixture
def store():
    return InMemoryStateStore()


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def failing_sender():
    return FakeSender(fail=True)
