"""
app/services/gateway_service.py

Purpose: WhatsApp message sending

- Sends text / button messages through the WhatsApp gateway HTTP API
- Raises ExternalServiceError on any failed send
"""

import httpx
from typing import Dict, Any, Optional
from app.core.config import settings
from app.core.exceptions import ExternalServiceError
from app.core.logging import get_logger

logger = get_logger(__name__)


class GatewayService:
    """Service for sending WhatsApp messages via the gateway"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.GATEWAY_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.GATEWAY_API_KEY
        self.timeout = timeout or settings.GATEWAY_TIMEOUT
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def send_message(self, to: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Sends a WhatsApp message via the gateway

        Args:
            to: Recipient chat id (94770000000@s.whatsapp.net)
            payload: {"text": ..., "buttons": [...]} message payload

        Returns:
            Gateway response body (empty dict if the body is not JSON)

        Raises:
            ExternalServiceError: On timeout, transport error or non-2xx status
        """
        url = f"{self.base_url}/send"

        logger.info(f"📤 Sending message to {to} ({len(payload.get('buttons', []))} buttons)")

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.post(
                    url,
                    json={"to": to, "message": payload},
                    headers=self._headers()
                )
        except httpx.TimeoutException as e:
            raise ExternalServiceError("Gateway API timeout", details={"to": to}) from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Gateway API unreachable: {e}", details={"to": to}) from e

        if response.status_code not in (200, 201, 202):
            raise ExternalServiceError(
                f"Gateway API error: {response.status_code}",
                details={"to": to, "body": response.text[:200]}
            )

        try:
            result = response.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        logger.info(f"✅ Message sent to {to}: id={result.get('id', 'N/A')}")
        return result

    def is_configured(self) -> bool:
        """Check if the gateway is configured"""
        return bool(self.base_url)


# Singleton instance
gateway_service = GatewayService()


def get_gateway_service() -> GatewayService:
    """FastAPI dependency returning the process-wide gateway client."""
    return gateway_service
