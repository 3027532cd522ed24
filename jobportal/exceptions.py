"""Job Portal: exception types."""

from fastapi import HTTPException


class AuthException(HTTPException):
    def __init__(self, detail: str = "Missing user identity headers"):
        super().__init__(status_code=401, detail=detail)


class ConfigurationError(Exception):
    """A required credential or service URL is missing."""


class StoreError(Exception):
    """The hosted data store rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


class CompletionError(Exception):
    """Base class for completion API failures surfaced to the caller."""

    status_code = 500


class RateLimitError(CompletionError):
    status_code = 429

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message)


class PaymentRequiredError(CompletionError):
    status_code = 402

    def __init__(self, message: str = "Payment required. Please add credits to your workspace."):
        super().__init__(message)


class GatewayError(CompletionError):
    def __init__(self, message: str = "AI gateway error"):
        super().__init__(message)
