"""
app/flow/handlers/info.py

Handles: Static information replies

- Contact information
- Service details by service id (with fallback text)

Neither changes the user's navigation state.
"""

from app.flow.menus import render_contact_info, render_service_detail
from app.flow.states import DispatchResult, UserState
from utils.constants import SERVICE_DETAILS
from app.core.logging import get_logger

logger = get_logger(__name__)


def handle_contact_info(state: UserState) -> DispatchResult:
    logger.info("Contact info requested")
    return DispatchResult(state=state, reply=render_contact_info())


def handle_service_selection(state: UserState, service_id: str) -> DispatchResult:
    """
    Shows the details of a service.

    Args:
        state: Current user state
        service_id: Service identifier such as "service7"

    Returns:
        Service details, or the fallback text for unknown ids
    """
    if service_id in SERVICE_DETAILS:
        logger.info(f"Service selected: {service_id}")
    else:
        logger.warning(f"Unknown service id: {service_id}, sending fallback details")

    return DispatchResult(state=state, reply=render_service_detail(service_id))
