from typing import Optional, Any

class NovoNexError(Exception):
    """
    Base exception for the NovoNex bot.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ResourceNotFoundError(NovoNexError):
    """
    Raised when a requested resource is not found.
    """
    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)

class ValidationError(NovoNexError):
    """
    Raised when input validation fails.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=422, details=details)

class ExternalServiceError(NovoNexError):
    """
    Raised when the WhatsApp gateway rejects or fails a send.
    """
    def __init__(self, message: str = "External service error", details: Optional[Any] = None):
        super().__init__(message, code="EXTERNAL_SERVICE_ERROR", status_code=502, details=details)

class StateStoreError(NovoNexError):
    """
    Raised when the user state store cannot read or write a record.
    """
    def __init__(self, message: str = "State store error", details: Optional[Any] = None):
        super().__init__(message, code="STATE_STORE_ERROR", status_code=500, details=details)
