"""Error types raised by the third-party API clients.

Purpose:
- Give route handlers one exception family for FatSecret, Clarifai and Google
  failures.
- Carry the upstream HTTP status and body so a proxy can pass them through.

Usage:
- Catch ``UpstreamRequestError`` when the request never produced a usable
  response (connection failure, timeout, unparseable body).
- Catch ``FatSecretMethodError`` when FatSecret answered 2xx with an ``error``
  object in the body.
- Catch ``UpstreamApiError`` for everything else and inspect ``status_code``
  and ``details``.
"""

from __future__ import annotations

from typing import Any, Optional


class UpstreamApiError(Exception):
    """Base error for third-party API failures.

    Args:
        message: Human-readable error description.
        status_code: HTTP status returned by the provider, if any.
        details: Provider response body (parsed JSON when possible, else text).
        provider: Short provider name used in logs.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        provider: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.provider = provider


class UpstreamRequestError(UpstreamApiError):
    """Raised when a provider could not be reached or returned an unreadable body."""


class FatSecretMethodError(UpstreamApiError):
    """Raised when FatSecret reports a method-level error in a successful response."""
