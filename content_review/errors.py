"""
Error taxonomy for the review endpoint.
Each error knows its HTTP status and renders as {"error", "message", "retryAfter"?}.
"""
from typing import Any, Dict, Optional


class ReviewError(Exception):
    status_code: int = 500
    error: str = "Processing failed"
    message: str = "An error occurred while processing your document. Please try again."
    retry_after: Optional[int] = None

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.details = details

    def to_dict(self, include_details: bool = False) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error, "message": self.message}
        if self.retry_after is not None:
            body["retryAfter"] = self.retry_after
        if include_details and self.details:
            body["details"] = self.details
        return body


class MethodNotAllowed(ReviewError):
    status_code = 405
    error = "Method not allowed"
    message = "This endpoint only accepts POST requests"


class RateLimited(ReviewError):
    status_code = 429
    error = "Rate limit exceeded"
    message = "Too many requests. Please wait 1 minute before trying again."
    retry_after = 60


class ConfigurationError(ReviewError):
    status_code = 500
    error = "Configuration error"
    message = "API key not configured. Please check server settings."


class InvalidInput(ReviewError):
    status_code = 400
    error = "Invalid input"
    message = "Document content is required and cannot be empty"


class PayloadTooLarge(ReviewError):
    status_code = 400
    error = "Document too large"
    message = "Document must be less than 5MB. Please split into smaller sections."


class AuthenticationFailure(ReviewError):
    status_code = 401
    error = "Authentication failed"
    message = "Invalid API key. Please check your configuration."


class QuotaExceeded(ReviewError):
    status_code = 429
    error = "Daily quota exceeded"
    message = "Free tier limit reached for today. Please try again tomorrow."
    retry_after = 86400


class RequestTimeout(ReviewError):
    status_code = 408
    error = "Request timeout"
    message = "Document processing took too long. Please try with a smaller document."


class ProcessingFailure(ReviewError):
    pass
