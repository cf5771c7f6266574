"""
app/flow/handlers/company_menu.py

Handles: Company service menus

- Opens a company menu on page 1
- Moves between pages with next_page / prev_page, clamped to the
  company's page count
"""

from app.flow.menus import clamp_page, render_menu_page
from app.flow.states import Company, DispatchResult, UserState
from app.core.logging import get_logger

logger = get_logger(__name__)


def handle_company_selection(state: UserState, company: Company) -> DispatchResult:
    """
    Opens the first page of a company's menu.

    Args:
        state: Current user state
        company: Selected company

    Returns:
        Page 1 of the company menu
    """
    logger.info(f"Company selected: {company.value}")

    return DispatchResult(
        state=UserState.browsing(company, page=1),
        reply=render_menu_page(company, 1)
    )


def handle_page_change(state: UserState, step: int) -> DispatchResult:
    """
    Moves the user's menu page by `step` and re-renders it.

    The target page is clamped to [1, max_pages(company)], so asking for
    the next page on the last page re-sends the last page.

    Args:
        state: Current user state
        step: +1 for next page, -1 for previous page

    Returns:
        The re-rendered page, or no reply when no company menu is open
    """
    if state.company is None:
        logger.info("Page change ignored, no company menu open")
        return DispatchResult(state=state, reply=None)

    new_page = clamp_page(state.company, state.page + step)
    logger.info(f"{state.company.value} menu page {state.page} -> {new_page}")

    return DispatchResult(
        state=state.with_page(new_page),
        reply=render_menu_page(state.company, new_page)
    )
