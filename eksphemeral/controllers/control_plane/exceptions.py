"""Control plane client exceptions."""

from __future__ import annotations


class ControlPlaneError(Exception):
    """Base exception for control plane request failures.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (if a response was received).
        endpoint: The endpoint that was called.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint

    def __str__(self) -> str:
        return self.message


class TransportError(ControlPlaneError):
    """Raised when no response was received (connection, DNS, timeout)."""

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, endpoint=endpoint)
        self.original_error = original_error


class ServiceError(ControlPlaneError):
    """Raised on a non-success response, or a response of the wrong shape.

    The message carries the server-provided body text.
    """


__all__ = [
    "ControlPlaneError",
    "ServiceError",
    "TransportError",
]
