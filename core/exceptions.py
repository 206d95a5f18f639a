"""
Error types raised by the CA stub routes.
"""
from fastapi import HTTPException


class NotFoundError(HTTPException):
    """A requested record does not exist. Rendered as HTTP 404."""

    def __init__(self, message: str):
        super().__init__(status_code=404, detail=message)
        self.message = message
