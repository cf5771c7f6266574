"""
app/flow/menus.py

Purpose: Static menus and their rendering

- MenuPage / MenuItem tables per company, built from utils.constants
- Renders the welcome menu, company menu pages, service details and
  contact info into outbound payloads
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from app.flow.states import Company
from utils.constants import (
    BUTTON_CONTACT,
    BUTTON_CONTACT_INFO,
    BUTTON_DIGITAL,
    BUTTON_ID_CONTACT,
    BUTTON_ID_DIGITAL,
    BUTTON_ID_MAIN_MENU,
    BUTTON_ID_NEXT_PAGE,
    BUTTON_ID_PREV_PAGE,
    BUTTON_ID_SOFTWARE,
    BUTTON_MAIN_MENU,
    BUTTON_MORE_INFO,
    BUTTON_NEXT,
    BUTTON_PREVIOUS,
    BUTTON_SOFTWARE,
    CONTACT_INFO_MESSAGE,
    DIGITAL_MENU_PAGES,
    DIGITAL_MENU_TITLE,
    MENU_PAGE_HEADER,
    SERVICE_DETAILS,
    SERVICE_NOT_FOUND_MESSAGE,
    SOFTWARE_MENU_PAGES,
    SOFTWARE_MENU_TITLE,
    WELCOME_MESSAGE,
)
from utils.whatsapp_utils import create_button_message, create_text_message


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: str


@dataclass(frozen=True)
class MenuPage:
    title: str
    items: Tuple[MenuItem, ...]


def _build_pages(title_template: str, pages: List[List[Tuple[str, str]]]) -> Tuple[MenuPage, ...]:
    total = len(pages)
    return tuple(
        MenuPage(
            title=title_template.format(page=number, total=total),
            items=tuple(MenuItem(id=service_id, label=label) for service_id, label in rows),
        )
        for number, rows in enumerate(pages, start=1)
    )


COMPANY_MENUS: Dict[Company, Tuple[MenuPage, ...]] = {
    Company.SOFTWARE: _build_pages(SOFTWARE_MENU_TITLE, SOFTWARE_MENU_PAGES),
    Company.DIGITAL: _build_pages(DIGITAL_MENU_TITLE, DIGITAL_MENU_PAGES),
}


def max_pages(company: Company) -> int:
    """Number of menu pages for a company."""
    return len(COMPANY_MENUS[company])


def clamp_page(company: Company, page: int) -> int:
    """Clamps a page number into [1, max_pages(company)]."""
    return max(1, min(page, max_pages(company)))


def get_menu_page(company: Company, page: int) -> MenuPage:
    """
    Looks up a menu page.

    Raises:
        IndexError: If the page is outside [1, max_pages(company)]
    """
    if not 1 <= page <= max_pages(company):
        raise IndexError(f"{company.value} menu has no page {page}")
    return COMPANY_MENUS[company][page - 1]


def render_welcome() -> Dict[str, Any]:
    """Welcome menu with the two company buttons and contact info."""
    return create_button_message(
        text=WELCOME_MESSAGE,
        buttons=[
            {"id": BUTTON_ID_SOFTWARE, "title": BUTTON_SOFTWARE},
            {"id": BUTTON_ID_DIGITAL, "title": BUTTON_DIGITAL},
            {"id": BUTTON_ID_CONTACT, "title": BUTTON_CONTACT_INFO},
        ]
    )


def render_menu_page(company: Company, page: int) -> Dict[str, Any]:
    """
    Renders one page of a company's service menu.

    Navigation buttons are only offered where there is a page to go to.
    """
    menu_page = get_menu_page(company, page)

    buttons = []
    if page > 1:
        buttons.append({"id": BUTTON_ID_PREV_PAGE, "title": BUTTON_PREVIOUS})
    buttons.append({"id": BUTTON_ID_MAIN_MENU, "title": BUTTON_MAIN_MENU})
    if page < max_pages(company):
        buttons.append({"id": BUTTON_ID_NEXT_PAGE, "title": BUTTON_NEXT})
    buttons.append({"id": BUTTON_ID_CONTACT, "title": BUTTON_CONTACT})

    service_list = "\n".join(item.label for item in menu_page.items)

    return create_button_message(
        text=f"*{menu_page.title}*\n\n{MENU_PAGE_HEADER}\n\n{service_list}",
        buttons=buttons
    )


def render_service_detail(service_id: str) -> Dict[str, Any]:
    """Service detail text, or the fallback text for unknown ids."""
    return create_button_message(
        text=SERVICE_DETAILS.get(service_id, SERVICE_NOT_FOUND_MESSAGE),
        buttons=[
            {"id": BUTTON_ID_MAIN_MENU, "title": BUTTON_MAIN_MENU},
            {"id": BUTTON_ID_CONTACT, "title": BUTTON_MORE_INFO},
        ]
    )


def render_contact_info() -> Dict[str, Any]:
    return create_text_message(CONTACT_INFO_MESSAGE)
