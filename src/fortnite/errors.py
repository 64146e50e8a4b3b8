"""
Fortnite client error types.
"""

from typing import Any, Optional

from fortnite.constants import TWO_FACTOR_REQUIRED_CODE


class FortniteError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class TransportError(FortniteError):
    """Network-level failure (connection, DNS, timeout). The httpx error is the __cause__."""

    def __init__(self, message: str):
        super().__init__("transport_error", message)


class ServiceError(FortniteError):
    """The Epic service answered with a non-2xx status."""

    def __init__(self, code: str, message: str, status: Optional[int] = None, body: Any = None):
        super().__init__(code, message, body if isinstance(body, dict) else None)
        self.status = status
        self.body = body

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, status={self.status!r})"


class TwoFactorRequired(ServiceError):
    """Login needs an OTP code. Pass it to `two_factor()` on the same client."""

    def __init__(self, challenge: str, message: str = "Two factor authentication is required.",
                 status: Optional[int] = None, body: Any = None):
        super().__init__(TWO_FACTOR_REQUIRED_CODE, message, status, body)
        self.challenge = challenge


class PreconditionError(FortniteError):
    def __init__(self, message: str, code: str = "precondition_failed"):
        super().__init__(code, message)


class NotAuthenticatedError(PreconditionError):
    def __init__(self, message: str = "Not authenticated. Call login() first."):
        super().__init__(message, code="not_authenticated")
