from pydantic import BaseModel
from typing import Optional, Any, Literal

class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None

class WebhookResponse(BaseModel):
    """
    Acknowledgement returned to the gateway for every event.
    """
    status: Literal["success", "ignored"]
    reason: Optional[str] = None
    replied: bool = False
