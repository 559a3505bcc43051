"""Carries the accepted submission from the entry page to the response page.

The record lives in the Flask session by default, a signed cookie that is
dropped when the browser session ends. No operation on :class:`HandoffStore`
raises: storage problems are logged and reported as "no data".
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

import structlog
from flask import session
from pydantic import BaseModel, ConfigDict

log = structlog.get_logger(__name__)

HANDOFF_KEY = "hello_world_form_data"


class Submission(BaseModel):
    """Sanitized, fully validated form payload."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    name: str
    date: str


class HandoffStore:
    """Session-scoped storage for a single :class:`Submission`.

    Args:
        backend: Mapping to store the serialized record in. Defaults to the
            Flask session of the current request.
        key: Well-known key the record is stored under.
    """

    def __init__(
        self,
        backend: MutableMapping[str, Any] | None = None,
        key: str = HANDOFF_KEY,
    ) -> None:
        self._backend = backend
        self.key = key

    @property
    def backend(self) -> MutableMapping[str, Any]:
        # Outside a request this raises RuntimeError, handled like disabled storage.
        if self._backend is not None:
            return self._backend
        return session

    def save(self, submission: Submission) -> bool:
        """Serialize and store ``submission``; return whether it was written."""
        try:
            self.backend[self.key] = submission.model_dump_json()
        except Exception as exc:
            log.warning("handoff_save_failed", key=self.key, error=str(exc))
            return False
        log.debug("handoff_saved", key=self.key)
        return True

    def load(self) -> Submission | None:
        """Return the stored submission, or ``None`` if absent or unreadable."""
        try:
            raw = self.backend.get(self.key)
            if raw is None:
                return None
            return Submission.model_validate_json(raw)
        except Exception as exc:
            log.warning("handoff_load_failed", key=self.key, error=str(exc))
            return None

    def clear(self) -> None:
        try:
            self.backend.pop(self.key, None)
        except Exception as exc:
            log.warning("handoff_clear_failed", key=self.key, error=str(exc))

    def exists(self) -> bool:
        try:
            return self.key in self.backend
        except Exception as exc:
            log.warning("handoff_exists_failed", key=self.key, error=str(exc))
            return False
