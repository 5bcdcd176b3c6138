"""
AWS SDK error types.
"""

from typing import Any, Optional


class AWSError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class ClientError(AWSError):
    """Raised for failures on the client side: bad input, serialization, transport."""

    def __init__(self, message: str, code: str = "client_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class InvalidArgumentError(ClientError):
    def __init__(self, message: str = "Invalid argument passed to marshall(...)"):
        super().__init__(message, code="invalid_argument")


class MarshallingError(ClientError):
    def __init__(self, message: str):
        super().__init__(message, code="marshalling_error")


class ServiceError(AWSError):
    """Raised when the service answers with an HTTP error status."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        request_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(code, message, details)
        self.status_code = status_code
        self.request_id = request_id
