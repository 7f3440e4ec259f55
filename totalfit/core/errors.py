"""Error types raised by TotalFit services and routes.

Purpose:
- Give the service layer typed failures that carry the HTTP status they map to.
- Keep route handlers free of status-code bookkeeping; the server registers a
  handler that turns any ``TotalFitError`` into the ``{"success": false,
  "error": ...}`` envelope.

Usage:
- Raise ``NotFoundError`` when a looked-up record does not exist.
- Raise ``ValidationFailedError`` for missing or malformed request input.
- Raise ``ConfigurationError`` when a server-side credential is absent.
"""

from __future__ import annotations

from typing import Any, Optional


class TotalFitError(Exception):
    """Base error for TotalFit failures.

    Args:
        message: Human-readable error description returned to the client.
        status_code: HTTP status the error maps to.
        details: Optional structured payload for diagnosis (logged, not returned).
    """

    status_code: int = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class NotFoundError(TotalFitError):
    """Raised when a requested record does not exist."""

    status_code = 404


class ValidationFailedError(TotalFitError):
    """Raised when request input is missing or invalid."""

    status_code = 400


class ConfigurationError(TotalFitError):
    """Raised when the server lacks configuration needed to serve a request."""

    status_code = 500
