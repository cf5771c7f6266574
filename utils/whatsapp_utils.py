"""
utils/whatsapp_utils.py

Purpose: WhatsApp message builders

- Constructs text and button payloads in the gateway's format
- Abstracts WhatsApp button formatting away from the handlers
"""

from typing import List, Dict, Any


def create_text_message(text: str) -> Dict[str, Any]:
    """
    Creates a plain text message (no buttons).

    Args:
        text: Message text (supports WhatsApp markdown)

    Returns:
        Message payload dict
    """
    return {"text": text}


def create_button(button_id: str, title: str) -> Dict[str, Any]:
    """
    Creates a single quick reply button.

    The id is echoed back by WhatsApp as the selected button id when the
    user taps it.
    """
    return {
        "buttonId": button_id,
        "buttonText": {"displayText": title}
    }


def create_button_message(text: str, buttons: List[Dict[str, str]]) -> Dict[str, Any]:
    """
    Creates a message with quick reply buttons.

    Args:
        text: Body text
        buttons: List of button dicts with 'id' and 'title' keys

    Returns:
        Button message payload

    Example:
        buttons = [
            {"id": "back_to_welcome", "title": "🏠 Main Menu"},
            {"id": "contact_info", "title": "📞 Contact"}
        ]
    """
    payload: Dict[str, Any] = {"text": text}

    if buttons:
        payload["buttons"] = [create_button(btn["id"], btn["title"]) for btn in buttons]

    return payload


def get_button_ids(payload: Dict[str, Any]) -> List[str]:
    """
    Returns the ids of the buttons attached to a payload, in order.
    """
    return [btn["buttonId"] for btn in payload.get("buttons", [])]
