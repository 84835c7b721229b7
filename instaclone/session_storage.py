"""Session persistence helpers for instaclone.

Only one thing is ever persisted: a JSON snapshot of the currently
authenticated user, stored in the system keyring under the service
``config.KEYRING_SERVICE`` and key ``config.SESSION_KEY``.

Profile images may be inline data URLs, so a snapshot can exceed the
per-credential size limit of some keyring backends (Windows Credential
Manager in particular). Values larger than the chunk size are split into
base64-encoded parts stored under ``{key}.part{i}`` with the part count at
``{key}.parts``.
"""

from __future__ import annotations

import base64
import json
from typing import Optional

import keyring
from keyring.errors import PasswordDeleteError

from . import config
from .data_models import User
from .logging_utils import get_logger

logger = get_logger("instaclone.session_storage")


class SessionStorage:
    def __init__(
        self,
        service: str = config.KEYRING_SERVICE,
        key: str = config.SESSION_KEY,
        chunk_size: int = config.SESSION_CHUNK_SIZE,
    ):
        self.service = service
        self.key = key
        self.chunk_size = chunk_size

    # --- helpers ---
    def _delete(self, name: str) -> None:
        try:
            keyring.delete_password(self.service, name)
        except PasswordDeleteError:
            pass

    def _store_chunked(self, value: str) -> None:
        """Store a large string as base64 chunks plus a parts index."""
        self._delete_chunked()
        data = value.encode("utf-8")
        parts = [data[i : i + self.chunk_size] for i in range(0, len(data), self.chunk_size)]
        for idx, part in enumerate(parts):
            b64 = base64.b64encode(part).decode("ascii")
            keyring.set_password(self.service, f"{self.key}.part{idx}", b64)
        keyring.set_password(self.service, f"{self.key}.parts", str(len(parts)))
        logger.debug("session_storage: stored %s in %d chunk(s)", self.key, len(parts))

    def _read_chunked(self) -> Optional[str]:
        count_s = keyring.get_password(self.service, f"{self.key}.parts")
        if not count_s:
            return None
        try:
            count = int(count_s)
        except ValueError:
            logger.debug("session_storage: invalid parts index for %s: %r", self.key, count_s)
            return None

        parts = []
        for i in range(count):
            part_key = f"{self.key}.part{i}"
            b64 = keyring.get_password(self.service, part_key)
            if b64 is None:
                # missing part -> treat as corruption
                raise RuntimeError(f"missing chunk {part_key}")
            parts.append(base64.b64decode(b64.encode("ascii")))
        return b"".join(parts).decode("utf-8")

    def _delete_chunked(self) -> None:
        count_s = keyring.get_password(self.service, f"{self.key}.parts")
        if not count_s:
            return
        try:
            count = int(count_s)
        except ValueError:
            count = 0
        for i in range(count):
            self._delete(f"{self.key}.part{i}")
        self._delete(f"{self.key}.parts")

    # --- public API ---
    def save(self, user: User) -> None:
        """Persist ``user`` as the current session, replacing any previous one."""
        value = json.dumps(user.to_dict())
        if len(value.encode("utf-8")) <= self.chunk_size:
            self._delete_chunked()
            keyring.set_password(self.service, self.key, value)
        else:
            self._delete(self.key)
            self._store_chunked(value)
        logger.debug("session_storage: saved session for user %s", user.id)

    def load(self) -> Optional[User]:
        """Return the persisted user, or None when there is no usable session."""
        value = keyring.get_password(self.service, self.key)
        if not value:
            value = self._read_chunked()
        if not value:
            return None
        try:
            return User.from_dict(json.loads(value))
        except (ValueError, TypeError, AttributeError):
            logger.warning("session_storage: discarding unreadable session snapshot")
            return None

    def clear(self) -> None:
        """Remove the persisted session, single-key and chunked forms alike."""
        self._delete(self.key)
        self._delete_chunked()
        logger.debug("session_storage: cleared session")
