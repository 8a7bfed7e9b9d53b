"""Custom exceptions for Gemini API errors."""
from typing import Optional


class GeminiAPIError(RuntimeError):
    """
    Base exception for Gemini API errors.

    Attributes:
        status_code: HTTP status of the failed request, if there was one.
        response_text: Raw response body (truncated), if there was one.
    """
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class MissingCredentialError(GeminiAPIError):
    """Raised when neither a per-call API key nor a fallback key is available."""
    pass
