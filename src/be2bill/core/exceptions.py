"""
Errors raised by the Be2bill clients.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "Be2billError",
    "HostConnectionError",
    "InvalidSignature",
    "MalformedResponse",
    "NoHostsConfigured",
    "RequestTimeout",
    "ServerError",
    "UnsupportedAmountError",
]


class Be2billError(Exception):
    """Base class for every error raised by this package."""


class NoHostsConfigured(Be2billError):
    """Raised when the environment holds no URL; no request is attempted."""

    def __init__(self, message: str = "no URL provided") -> None:
        super().__init__(message)


class RequestTimeout(Be2billError):
    """Raised when a host did not answer within the request timeout."""

    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(f"timeout after {timeout:g}s waiting for {url}")
        self.url = url
        self.timeout = timeout


class HostConnectionError(Be2billError):
    """Raised once every configured host failed at the connection level."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"could not reach {url}: {reason}")
        self.url = url


class ServerError(Be2billError):
    """Raised when a host answered with a non-success HTTP status."""

    def __init__(self, url: str, status_code: int, body: str = "") -> None:
        super().__init__(f"{url} responded with {status_code}")
        self.url = url
        self.status_code = status_code
        self.body = body


class MalformedResponse(Be2billError, ValueError):
    """Raised when a response body is not the JSON object the API promises."""

    def __init__(self, url: str, body: str, reason: Optional[str] = None) -> None:
        message = f"Failed to parse JSON from {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url
        self.body = body


class InvalidSignature(Be2billError):
    """Raised when a received HASH does not match the recomputed one."""


class UnsupportedAmountError(Be2billError, TypeError):
    """Raised when an operation receives an amount kind it cannot send."""
