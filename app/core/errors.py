"""Domain errors raised by the service layer.

Handlers in ``app.main`` turn them into HTTP responses; services never
import anything from FastAPI.
"""

from __future__ import annotations


class DomainError(Exception):
    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    """A unique field (email, student id) is already taken."""

    status_code = 400
