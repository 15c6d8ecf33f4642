"""
Document slots - typed JSON documents stored under one key each.

Shared by the profile store and the stats tracker. A slot parses what the
key-value adapter returns into a pydantic model and serializes it back.

Key behaviors:
- Missing key reads as None (caller decides the default)
- Unparseable text raises CorruptDataError, never a pydantic error
- Writes never raise: failures come back as PersistResult(saved=False)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from smartlink.core.ports.storage import (
    CorruptDataError,
    KeyValueStorePort,
    PersistenceError,
)
from smartlink.domain.entities import Document, dump_document

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT", bound=Document)


@dataclass(frozen=True)
class PersistResult:
    """Whether a change reached durable storage."""

    saved: bool
    error: PersistenceError | None = None

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None


SAVED = PersistResult(saved=True)


class DocumentSlot(Generic[DocT]):
    """One JSON document of type ``model`` under ``key``."""

    def __init__(self, storage: KeyValueStorePort, key: str, model: type[DocT]) -> None:
        self._storage = storage
        self.key = key
        self._model = model

    def parse(self, text: str) -> DocT:
        try:
            return self._model.model_validate_json(text)
        except PydanticValidationError as e:
            raise CorruptDataError(self.key, f"{e.error_count()} validation error(s)") from e

    def read(self) -> DocT | None:
        """
        Read and parse the stored document.

        Raises:
            ReadFailedError: If the adapter cannot read
            CorruptDataError: If the stored text is not a valid document
        """
        text = self._storage.read(self.key)
        if text is None:
            return None
        return self.parse(text)

    def write(self, doc: DocT) -> PersistResult:
        text = json.dumps(dump_document(doc))
        try:
            self._storage.write(self.key, text)
        except PersistenceError as e:
            logger.error("Save error for %s: %s", self.key, e)
            return PersistResult(saved=False, error=e)
        return SAVED
