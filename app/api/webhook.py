"""
app/api/webhook.py

Purpose: WhatsApp gateway webhook endpoint

- Receives inbound message events from the gateway (JSON)
- Validates them into InboundMessage
- Passes control to the flow dispatcher
"""

from fastapi import APIRouter, Depends

from app.core.logging import get_logger
from app.flow.dispatcher import dispatch_message
from app.schemas.response import WebhookResponse
from app.schemas.webhook import InboundMessage
from app.services.gateway_service import GatewayService, get_gateway_service
from app.services.state_store import StateStore, get_state_store

logger = get_logger(__name__)
router = APIRouter()


@router.post("/webhook", response_model=WebhookResponse)
async def webhook_handler(
    message: InboundMessage,
    store: StateStore = Depends(get_state_store),
    sender: GatewayService = Depends(get_gateway_service),
):
    """
    Webhook endpoint for inbound WhatsApp messages.

    Always acknowledges a valid event; failed replies are logged by the
    dispatcher and not reported back to the gateway.
    """
    logger.info(f"📱 Gateway event received from {message.sender}")

    result = await dispatch_message(message, store, sender)
    return WebhookResponse(**result)


@router.get("/webhook")
async def webhook_verification():
    """
    Webhook verification endpoint (for gateways that probe with GET)
    """
    return {"status": "ok", "message": "Webhook endpoint is active"}
