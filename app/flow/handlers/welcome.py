"""
app/flow/handlers/welcome.py

Handles: Entry / Welcome

- First contact (any text) and unrecognised text
- "Main Menu" button
- Resets navigation to the welcome step
"""

from app.flow.menus import render_welcome
from app.flow.states import DispatchResult, UserState
from app.core.logging import get_logger

logger = get_logger(__name__)


def handle_welcome(state: UserState, text: str) -> DispatchResult:
    """
    Shows the welcome menu and resets the user to the welcome step.

    Args:
        state: Current user state
        text: Inbound text (not inspected)

    Returns:
        Welcome menu with a fresh welcome state
    """
    logger.info(f"Showing welcome menu (from step={state.step.value})")

    return DispatchResult(state=UserState.welcome(), reply=render_welcome())
