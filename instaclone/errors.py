"""
Error types raised by the user directory and post feed stores.
"""
from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"
    VALIDATION = "VALIDATION"
    NOT_CREATOR = "NOT_CREATOR"


class StoreError(Exception):
    """A failed store operation. The message is meant for display."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.kind.value, "message": self.message}
