from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PayloadError(DomainError):
    """Raised when an API payload does not have the expected shape."""


class UpstreamError(DomainError):
    """Raised when the ZopperTrack API is unreachable or answers non-OK."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
