"""
app/schemas/webhook.py

Purpose: WhatsApp gateway event schemas

- Validates inbound message events posted by the gateway
- Extracts plain text from the four supported message shapes
- Identifies group chats and the bot's own messages
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

GROUP_JID_SUFFIX = "@g.us"


class MessageKey(BaseModel):
    """Addressing part of a gateway event."""
    remoteJid: str = Field(..., description="Chat id, e.g. 94770000000@s.whatsapp.net")
    fromMe: bool = Field(default=False, description="True for messages sent by the bot itself")
    id: Optional[str] = Field(default=None, description="Gateway message id")


class ExtendedTextMessage(BaseModel):
    text: Optional[str] = None


class ButtonsResponseMessage(BaseModel):
    selectedButtonId: Optional[str] = None


class SingleSelectReply(BaseModel):
    selectedRowId: Optional[str] = None


class ListResponseMessage(BaseModel):
    singleSelectReply: Optional[SingleSelectReply] = None


class MessageContent(BaseModel):
    """
    Message body. Exactly one of the fields is usually present; other
    message kinds (images, stickers, ...) arrive as unknown fields.
    """
    conversation: Optional[str] = None
    extendedTextMessage: Optional[ExtendedTextMessage] = None
    buttonsResponseMessage: Optional[ButtonsResponseMessage] = None
    listResponseMessage: Optional[ListResponseMessage] = None


class InboundMessage(BaseModel):
    """
    Inbound message event as posted by the gateway webhook.
    """
    key: MessageKey
    message: Optional[MessageContent] = None
    pushName: Optional[str] = Field(default=None, description="Sender's display name")

    class Config:
        json_schema_extra = {
            "example": {
                "key": {
                    "remoteJid": "94770000000@s.whatsapp.net",
                    "fromMe": False,
                    "id": "3EB0C767D26A1D8E"
                },
                "pushName": "Nimal",
                "message": {"conversation": "Hi"}
            }
        }

    @property
    def sender(self) -> str:
        return self.key.remoteJid

    @property
    def is_group(self) -> bool:
        return self.key.remoteJid.endswith(GROUP_JID_SUFFIX)

    @property
    def text(self) -> str:
        return extract_text(self.message)


def extract_text(message: Optional[MessageContent]) -> str:
    """
    Extracts the plain text of a message.

    Checked in order: plain conversation text, extended text, button reply
    id, list reply row id. Typed text is stripped; button and list ids are
    returned as sent. Returns "" when none is present.
    """
    if message is None:
        return ""

    if message.conversation:
        return message.conversation.strip()

    if message.extendedTextMessage and message.extendedTextMessage.text:
        return message.extendedTextMessage.text.strip()

    if message.buttonsResponseMessage and message.buttonsResponseMessage.selectedButtonId:
        return message.buttonsResponseMessage.selectedButtonId

    reply = message.listResponseMessage.singleSelectReply if message.listResponseMessage else None
    if reply and reply.selectedRowId:
        return reply.selectedRowId

    return ""


def parse_inbound_message(payload: Dict[str, Any]) -> InboundMessage:
    """
    Parses a raw gateway event.

    Raises:
        pydantic.ValidationError: If the event has no usable key
    """
    return InboundMessage.model_validate(payload)
