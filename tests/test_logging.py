import asyncio
import logging

from app.core.logging import LogContext, get_logger
from app.flow.dispatcher import dispatch_message
from app.schemas.webhook import parse_inbound_message

USER = "94770000000@s.whatsapp.net"


def _fresh_record():
    return logging.getLogRecordFactory()("test", logging.INFO, __file__, 1, "msg", None, None)


def _event(text):
    return parse_inbound_message({
        "key": {"remoteJid": USER, "fromMe": False},
        "message": {"conversation": text}
    })


def test_log_context_sets_and_clears_fields():
    with LogContext(user_id="A", state="welcome"):
        record = _fresh_record()
        assert record.user_id == "A"
        assert record.state == "welcome"

    assert not hasattr(_fresh_record(), "user_id")


def test_nested_log_context_restores_outer_fields():
    with LogContext(user_id="A", state="welcome"):
        with LogContext(state="software"):
            inner = _fresh_record()
        outer = _fresh_record()

    assert (inner.user_id, inner.state) == ("A", "software")
    assert (outer.user_id, outer.state) == ("A", "welcome")


def test_interleaved_requests_keep_their_own_context():
    seen = {}

    async def handle(user_id, delay):
        with LogContext(user_id=user_id):
            await asyncio.sleep(delay)
            seen[user_id] = _fresh_record().user_id

    async def main():
        await asyncio.gather(handle("A", 0.01), handle("B", 0.02))

    asyncio.run(main())

    assert seen == {"A": "A", "B": "B"}
    assert not hasattr(_fresh_record(), "user_id")


def test_dispatch_logs_carry_user_and_state(caplog, store, sender):
    caplog.set_level(logging.INFO, logger="novonex")

    asyncio.run(dispatch_message(_event("hi"), store, sender))

    text_records = [r for r in caplog.records if "Message text" in r.getMessage()]
    assert text_records
    assert text_records[0].user_id == USER
    assert text_records[0].state == "start"
    assert not hasattr(_fresh_record(), "user_id")


def test_failed_send_is_logged_as_error(caplog, store, failing_sender):
    caplog.set_level(logging.INFO, logger="novonex")

    asyncio.run(dispatch_message(_event("hi"), store, failing_sender))

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].user_id == USER
    assert "Failed to send reply" in errors[0].getMessage()


def test_get_logger_namespace():
    assert get_logger("app.flow.dispatcher").name == "novonex.app.flow.dispatcher"
