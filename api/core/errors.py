"""
Error types surfaced by the API.

`ApiError` subclasses carry the HTTP status they map to. The handlers in
`api/main.py` render them as plain text with the raw message.
"""

from __future__ import annotations


class ApiError(RuntimeError):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    status_code = 404


class StorageError(ApiError):
    """
    Any database failure. The driver's message is kept as-is.
    """

    status_code = 500


class MigrationError(RuntimeError):
    pass
