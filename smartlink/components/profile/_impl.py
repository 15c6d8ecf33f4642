"""
ProfileStore - Owner of the profile document.

Holds the live Profile in memory and mediates every read/write through the
key-value adapter.

Key behaviors:
- First load with nothing stored writes the default profile
- Corrupt stored data is logged and replaced with the default
- An unreadable store leaves the last known (or default) profile in memory
  and is re-read before any change is written
- Persistence failures never raise; they come back as PersistResult
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from smartlink.core.documents import SAVED, DocumentSlot, PersistResult
from smartlink.core.ports.storage import (
    CorruptDataError,
    KeyValueStorePort,
    PersistenceError,
    ReadFailedError,
)
from smartlink.domain.entities import Profile, default_profile

from .models import SaveProfileInput

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_KEY = "smartlink_data"


def apply_profile_edits(profile: Profile, edits: SaveProfileInput) -> Profile:
    """Merge a partial identity edit into ``profile``."""
    profile.username = edits.username or profile.username
    profile.display_name = edits.display_name or profile.display_name
    profile.bio = edits.bio or profile.bio
    profile.avatar_url = edits.avatar_url or profile.avatar_url
    profile.banner_url = edits.banner_url or ""
    return profile


class ProfileStore:
    """
    Profile document store.

    Readers get deep copies; the only way to change the stored profile is
    ``update`` (or a wholesale ``save``).

    Until the stored document has been read successfully the in-memory
    profile is a fallback: ``get`` retries the read, and ``update`` keeps
    its change in memory without writing over the unread document.
    """

    def __init__(self, storage: KeyValueStorePort, key: str = DEFAULT_PROFILE_KEY) -> None:
        self._slot = DocumentSlot(storage, key, Profile)
        self._lock = threading.RLock()
        self._profile: Profile | None = None
        self._loaded = False
        self.last_error: PersistenceError | None = None

    @property
    def key(self) -> str:
        return self._slot.key

    @property
    def loaded(self) -> bool:
        """True once the in-memory profile reflects the stored document."""
        return self._loaded

    def _record(self, result: PersistResult) -> PersistResult:
        if result.error is not None:
            self.last_error = result.error
        return result

    def load_with_status(self) -> tuple[Profile, PersistResult]:
        """Re-read the stored profile, reporting any absorbed failure."""
        with self._lock:
            try:
                stored = self._slot.read()
            except ReadFailedError as e:
                logger.error("Loading error: %s", e)
                self.last_error = e
                if self._profile is None:
                    self._profile = default_profile()
                return self._profile.model_copy(deep=True), PersistResult(False, e)
            except CorruptDataError as e:
                logger.warning("Stored profile is corrupt, replacing with defaults: %s", e)
                self.last_error = e
                stored = None

            result = SAVED
            if stored is None:
                stored = default_profile()
                result = self._record(self._slot.write(stored))

            self._profile = stored
            self._loaded = True
            return stored.model_copy(deep=True), result

    def load(self) -> Profile:
        profile, _ = self.load_with_status()
        return profile

    def get(self) -> Profile:
        with self._lock:
            if not self._loaded:
                return self.load()
            assert self._profile is not None
            return self._profile.model_copy(deep=True)

    def save(self, profile: Profile) -> PersistResult:
        """Replace the whole stored profile (import, reset)."""
        with self._lock:
            self._profile = profile.model_copy(deep=True)
            self._loaded = True
            return self._record(self._slot.write(self._profile))

    def update(self, fn: Callable[[Profile], Profile]) -> tuple[Profile, PersistResult]:
        """
        Apply fn to a mutable copy of the profile, store and persist the result.

        The in-memory profile changes even when the write fails, so the
        running session keeps the edit; ``saved`` tells the caller it is not
        durable. Nothing is written while the stored profile is unreadable.
        """
        with self._lock:
            draft = self.get()
            updated = fn(draft)
            if not self._loaded:
                self._profile = updated.model_copy(deep=True)
                logger.error("Profile change kept in memory only: stored profile unreadable")
                return updated, PersistResult(saved=False, error=self.last_error)
            result = self.save(updated)
            assert self._profile is not None
            return self._profile.model_copy(deep=True), result
