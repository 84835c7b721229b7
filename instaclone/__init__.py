"""In-memory user directory and post feed for the instaclone demo."""
from .app_state import AppState
from .errors import ErrorKind, StoreError

__all__ = ["AppState", "ErrorKind", "StoreError"]
