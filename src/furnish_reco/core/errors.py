from __future__ import annotations

from typing import Optional


class RecoError(Exception):
    """Base class for recommendation engine errors."""


class AIServiceError(RecoError):
    """AI service related errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class AIServiceClientError(AIServiceError):
    """HTTP 4xx errors excluding 429."""


class AIServiceTransientError(AIServiceError):
    """HTTP 5xx, 429, timeout, or temporary network errors."""


class AIServiceRetryExhaustedError(AIServiceError):
    """Transient failures persisted through every retry attempt."""


class AIServiceResponseError(AIServiceError):
    """Response body is malformed or references unknown products."""


class DbError(RecoError):
    """Database related errors."""
