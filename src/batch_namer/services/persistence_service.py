from __future__ import annotations

import logging

from batch_namer.domain.models import SessionState
from batch_namer.domain.session_codec import decode_state, encode_state
from batch_namer.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)


class PersistenceService:
    """
    Mirrors the working list and its history into one storage slot.

    Only metadata is kept: restored items carry zero-byte placeholder sources
    and must be re-attached before their content can be exported. Storage and
    payload errors are logged and read as "no saved state".
    """

    def __init__(self, storage: StoragePort, state_key: str) -> None:
        self._storage = storage
        self._state_key = state_key

    def load(self) -> SessionState:
        try:
            payload = self._storage.read_slot(self._state_key)
        except RuntimeError:
            logger.exception("Could not read saved session %s", self._state_key)
            return SessionState()
        if not payload:
            return SessionState()
        try:
            state = decode_state(payload)
        except (ValueError, TypeError, KeyError, RecursionError) as exc:
            logger.warning("Ignoring corrupt saved session %s: %s", self._state_key, exc)
            return SessionState()
        logger.info(
            "Restored session %s: %d files, %d undo, %d redo",
            self._state_key,
            len(state.files),
            len(state.history),
            len(state.redo_stack),
        )
        return state

    def save(self, state: SessionState) -> bool:
        try:
            payload = encode_state(state)
            self._storage.write_slot(self._state_key, payload)
        except (RuntimeError, TypeError, ValueError, KeyError):
            logger.exception("Could not save session %s", self._state_key)
            return False
        return True

    def clear(self) -> bool:
        try:
            self._storage.delete_slot(self._state_key)
        except RuntimeError:
            logger.exception("Could not clear saved session %s", self._state_key)
            return False
        return True
