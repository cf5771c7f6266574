import asyncio

import pytest

from app.flow.dispatcher import dispatch_message, route
from app.flow.handlers.info import handle_contact_info
from app.flow.menus import max_pages
from app.flow.states import Company, DispatchResult, Step, UserState
from app.schemas.webhook import parse_inbound_message
from utils.constants import (
    CONTACT_INFO_MESSAGE,
    SERVICE_DETAILS,
    SERVICE_NOT_FOUND_MESSAGE,
    WELCOME_MESSAGE,
)
from utils.whatsapp_utils import get_button_ids

USER = "94770000000@s.whatsapp.net"


def _event(text, remote_jid=USER, from_me=False):
    return parse_inbound_message({
        "key": {"remoteJid": remote_jid, "fromMe": from_me, "id": "ABC"},
        "message": {"conversation": text}
    })


# ------------------------------------------------------------
# route()
# ------------------------------------------------------------

@pytest.mark.parametrize("text", ["", "1", "2", "next_page", "service3", "contact_info", "hello"])
def test_first_message_always_gets_welcome(text):
    result = route(UserState.initial(), text)

    assert result.reply["text"] == WELCOME_MESSAGE
    assert result.state == UserState.welcome()


@pytest.mark.parametrize("text", ["1", "I need software", "SOFTWARE please"])
def test_software_selection(text):
    result = route(UserState.welcome(), text)

    assert result.state == UserState(step=Step.SOFTWARE, page=1, company=Company.SOFTWARE)
    assert "Software Solutions – Page 1/3" in result.reply["text"]


@pytest.mark.parametrize("text", ["2", "digital marketing", "Digital"])
def test_digital_selection(text):
    result = route(UserState.welcome(), text)

    assert result.state == UserState(step=Step.DIGITAL, page=1, company=Company.DIGITAL)
    assert "Digital Works – Page 1/4" in result.reply["text"]


def test_company_selection_resets_page_from_other_menu():
    state = UserState.browsing(Company.DIGITAL, page=3)

    result = route(state, "1")

    assert result.state == UserState.browsing(Company.SOFTWARE, page=1)


def test_next_page_advances():
    result = route(UserState.browsing(Company.SOFTWARE, page=1), "next_page")

    assert result.state.page == 2
    assert "Page 2/3" in result.reply["text"]


def test_prev_page_goes_back():
    result = route(UserState.browsing(Company.DIGITAL, page=3), "prev_page")

    assert result.state.page == 2
    assert result.state.company == Company.DIGITAL
    assert "Page 2/4" in result.reply["text"]


@pytest.mark.parametrize("company", list(Company))
def test_next_page_clamps_at_last_page(company):
    last = max_pages(company)

    result = route(UserState.browsing(company, page=last), "next_page")

    assert result.state.page == last
    assert f"Page {last}/{last}" in result.reply["text"]


@pytest.mark.parametrize("company", list(Company))
def test_prev_page_clamps_at_first_page(company):
    result = route(UserState.browsing(company, page=1), "prev_page")

    assert result.state.page == 1
    assert "Page 1/" in result.reply["text"]


@pytest.mark.parametrize("company", list(Company))
def test_pagination_never_leaves_bounds(company):
    state = UserState.browsing(company)
    for token in ["next_page"] * 10 + ["prev_page"] * 10 + ["next_page"] * 2:
        state = route(state, token).state
        assert 1 <= state.page <= max_pages(company)
    assert state.page == 3


@pytest.mark.parametrize("token", ["next_page", "prev_page"])
def test_pagination_without_company_sends_nothing(token):
    state = UserState.welcome()

    result = route(state, token)

    assert result.reply is None
    assert result.state == state


def test_back_to_welcome_resets_state():
    result = route(UserState.browsing(Company.DIGITAL, page=4), "back_to_welcome")

    assert result.state == UserState.welcome()
    assert result.reply["text"] == WELCOME_MESSAGE
    assert get_button_ids(result.reply) == ["1", "2", "contact_info"]


def test_contact_info_keeps_state():
    state = UserState.browsing(Company.SOFTWARE, page=2)

    result = route(state, "contact_info")

    assert result.state == state
    assert result.reply == {"text": CONTACT_INFO_MESSAGE}


def test_contact_info_handler_takes_only_state():
    state = UserState.browsing(Company.DIGITAL, page=4)

    result = handle_contact_info(state)

    assert result == DispatchResult(state=state, reply={"text": CONTACT_INFO_MESSAGE})


def test_service_detail_keeps_state():
    state = UserState.browsing(Company.SOFTWARE, page=2)

    result = route(state, "service7")

    assert result.state == state
    assert result.reply["text"] == SERVICE_DETAILS["service7"]
    assert get_button_ids(result.reply) == ["back_to_welcome", "contact_info"]


@pytest.mark.parametrize("service_id", ["service0", "service26", "service", "services", "service7x"])
def test_unknown_service_gets_fallback(service_id):
    result = route(UserState.welcome(), service_id)

    assert result.reply["text"] == SERVICE_NOT_FOUND_MESSAGE


def test_unrecognised_text_resets_to_welcome():
    result = route(UserState.browsing(Company.DIGITAL, page=2), "what do you do?")

    assert result.state == UserState.welcome()
    assert result.reply["text"] == WELCOME_MESSAGE


def test_keyword_match_wins_over_service_prefix():
    # "service" ids never contain the company keywords, free text can
    result = route(UserState.welcome(), "service for digital ads")

    assert result.state.company == Company.DIGITAL


# ------------------------------------------------------------
# dispatch_message()
# ------------------------------------------------------------

def test_dispatch_first_contact_stores_welcome_state(store, sender):
    result = asyncio.run(dispatch_message(_event("hi"), store, sender))

    assert result == {"status": "success", "reason": None, "replied": True}
    assert sender.sent[0][0] == USER
    assert sender.sent[0][1]["text"] == WELCOME_MESSAGE
    assert asyncio.run(store.get(USER)) == UserState.welcome()


def test_dispatch_conversation_flow(store, sender):
    async def chat(*texts):
        for text in texts:
            await dispatch_message(_event(text), store, sender)
        return await store.get(USER)

    state = asyncio.run(chat("hi", "2", "next_page", "next_page", "service19"))

    assert state == UserState.browsing(Company.DIGITAL, page=3)
    assert len(sender.sent) == 5
    assert sender.sent[-1][1]["text"] == SERVICE_DETAILS["service19"]


def test_dispatch_ignores_group_messages(store, sender):
    result = asyncio.run(dispatch_message(_event("hi", remote_jid="12345-678@g.us"), store, sender))

    assert result["status"] == "ignored"
    assert result["reason"] == "group"
    assert sender.sent == []
    assert asyncio.run(store.count()) == 0


def test_dispatch_ignores_own_messages(store, sender):
    result = asyncio.run(dispatch_message(_event("hi", from_me=True), store, sender))

    assert result["reason"] == "from_me"
    assert sender.sent == []
    assert asyncio.run(store.count()) == 0


def test_dispatch_ignores_events_without_message(store, sender):
    event = parse_inbound_message({"key": {"remoteJid": USER}})

    result = asyncio.run(dispatch_message(event, store, sender))

    assert result["reason"] == "empty"
    assert sender.sent == []


def test_dispatch_send_failure_is_swallowed_and_state_stored(store, failing_sender):
    result = asyncio.run(dispatch_message(_event("hi"), store, failing_sender))

    assert result["status"] == "success"
    assert result["replied"] is False
    assert asyncio.run(store.get(USER)) == UserState.welcome()


def test_dispatch_pagination_without_company_sends_nothing(store, sender):
    async def chat():
        await dispatch_message(_event("hi"), store, sender)
        return await dispatch_message(_event("next_page"), store, sender)

    result = asyncio.run(chat())

    assert result["replied"] is False
    assert len(sender.sent) == 1
