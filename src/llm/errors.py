from __future__ import annotations
from typing import Optional


class GenerationError(Exception):
    """Base error; `status_code` is the HTTP status the relay answers with."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(GenerationError):
    status_code = 400


class AuthError(GenerationError):
    status_code = 401


class ProviderError(GenerationError):
    """Upstream answered with a non-2xx status or could not be reached."""

    status_code = 500

    def __init__(self, status: Optional[int], message: str):
        super().__init__(message)
        self.status = status


class NoContentError(GenerationError):
    status_code = 500
