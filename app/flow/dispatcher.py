"""
app/flow/dispatcher.py

Purpose: Central message dispatcher

- Receives parsed gateway events from the webhook
- Filters out empty events, group chats and the bot's own messages
- Routes the text to a handler based on the user's state
- Sends the reply via the gateway and stores the new state
"""

from typing import Dict, Any

from app.schemas.webhook import InboundMessage
from app.services.gateway_service import GatewayService
from app.services.state_store import StateStore
from app.flow.states import Company, DispatchResult, Step, UserState
from app.flow.handlers.welcome import handle_welcome
from app.flow.handlers.company_menu import handle_company_selection, handle_page_change
from app.flow.handlers.info import handle_contact_info, handle_service_selection
from app.core.logging import get_logger, LogContext
from utils.constants import (
    BUTTON_ID_CONTACT,
    BUTTON_ID_DIGITAL,
    BUTTON_ID_MAIN_MENU,
    BUTTON_ID_NEXT_PAGE,
    BUTTON_ID_PREV_PAGE,
    BUTTON_ID_SOFTWARE,
    DIGITAL_KEYWORD,
    SERVICE_ID_PREFIX,
    SOFTWARE_KEYWORD,
)

logger = get_logger(__name__)


async def dispatch_message(
    message: InboundMessage,
    store: StateStore,
    sender: GatewayService
) -> Dict[str, Any]:
    """
    Main dispatcher for incoming WhatsApp messages

    Args:
        message: Parsed gateway event
        store: User state store
        sender: Outbound gateway client

    Returns:
        {"status": "success" | "ignored", "reason": ..., "replied": bool}
    """
    if message.message is None:
        logger.debug("Ignoring event without message body")
        return {"status": "ignored", "reason": "empty", "replied": False}

    user_id = message.sender

    if message.is_group:
        logger.info(f"🚫 Ignoring group message from {user_id}")
        return {"status": "ignored", "reason": "group", "replied": False}

    if message.key.fromMe:
        logger.debug(f"🤖 Ignoring own message to {user_id}")
        return {"status": "ignored", "reason": "from_me", "replied": False}

    state = await store.get(user_id) or UserState.initial()
    text = message.text

    with LogContext(user_id=user_id, state=state.step.value):
        logger.info(f"📨 Message text: \"{text}\" (page={state.page}, company={state.company})")

        result = route(state, text)

        replied = False
        if result.reply is not None:
            replied = await send_reply(sender, user_id, result.reply)

        await store.set(user_id, result.state)

    return {"status": "success", "reason": None, "replied": replied}


def route(state: UserState, text: str) -> DispatchResult:
    """
    Picks the reply and next state for a message.

    Pure and deterministic given (state, text). Guards are checked in
    order; the first match wins.

    Args:
        state: Current user state
        text: Extracted message text

    Returns:
        DispatchResult with the state to store and the reply to send
    """
    lower_text = text.lower()

    # First message always gets the welcome menu
    if state.step == Step.START:
        return handle_welcome(state, text)

    if text == BUTTON_ID_SOFTWARE or SOFTWARE_KEYWORD in lower_text:
        return handle_company_selection(state, Company.SOFTWARE)

    if text == BUTTON_ID_DIGITAL or DIGITAL_KEYWORD in lower_text:
        return handle_company_selection(state, Company.DIGITAL)

    if text == BUTTON_ID_NEXT_PAGE:
        return handle_page_change(state, +1)

    if text == BUTTON_ID_PREV_PAGE:
        return handle_page_change(state, -1)

    if text == BUTTON_ID_MAIN_MENU:
        return handle_welcome(state, text)

    if text == BUTTON_ID_CONTACT:
        return handle_contact_info(state)

    if text.startswith(SERVICE_ID_PREFIX):
        return handle_service_selection(state, text)

    logger.info("🔄 Unrecognised message, showing welcome menu")
    return handle_welcome(state, text)


async def send_reply(sender: GatewayService, to: str, payload: Dict[str, Any]) -> bool:
    """
    Sends a reply, logging instead of raising on failure.

    There is no retry: if the send fails the user gets no reply.

    Returns:
        True if the gateway accepted the message
    """
    try:
        await sender.send_message(to, payload)
        return True
    except Exception as e:
        logger.error(f"❌ Failed to send reply to {to}: {e}")
        return False
