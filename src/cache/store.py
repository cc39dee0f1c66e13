"""Durable cache of documents waiting to be sent with a question.

The full collection is serialized as a JSON array of `{name, content}` under
one key of a `KeyValueStore` and rewritten after every mutation.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.cache.codec import decode, encode
from src.cache.storage import KeyValueStore
from src.errors import CacheError, CodecError
from src.models.schemas import CachedDocument

logger = logging.getLogger(__name__)

DEFAULT_CACHE_KEY = "rag-document-cache"

_documents_adapter = TypeAdapter(list[CachedDocument])


class CacheStore:
    """Ordered, persisted collection of cached documents."""

    def __init__(self, storage: KeyValueStore, key: str = DEFAULT_CACHE_KEY) -> None:
        """Initialize an empty cache. Call `load()` to restore persisted state.

        Args:
            storage: Backing key-value store.
            key: Key under which the snapshot is kept.
        """
        self._storage = storage
        self._key = key
        self._documents: list[CachedDocument] = []

    def load(self) -> list[CachedDocument]:
        """Restore the collection from storage.

        Missing, unreadable or corrupt data loads as an empty cache. Entries
        that do not validate or decode are dropped.

        Returns:
            The restored collection.
        """
        self._documents = self._read_snapshot()
        logger.info(f"Loaded {len(self._documents)} cached document(s)")
        return self.list()

    def _read_snapshot(self) -> list[CachedDocument]:
        try:
            raw = self._storage.get(self._key)
        except CacheError as e:
            logger.warning(f"Cache storage unreadable, starting empty: {e}")
            return []

        if raw is None:
            return []

        try:
            entries = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Cache snapshot is not valid JSON, starting empty: {e}")
            return []

        if not isinstance(entries, list):
            logger.warning("Cache snapshot is not a list, starting empty")
            return []

        documents: list[CachedDocument] = []
        for i, entry in enumerate(entries):
            try:
                document = CachedDocument.model_validate(entry)
                decode(document.content)
            except (PydanticValidationError, CodecError) as e:
                logger.warning(f"Dropping corrupt cache entry {i}: {e}")
                continue
            documents.append(document)

        return documents

    def _persist(self, documents: list[CachedDocument]) -> None:
        payload = _documents_adapter.dump_json(documents).decode("utf-8")
        self._storage.set(self._key, payload)
        self._documents = documents

    def add(self, document: CachedDocument) -> CachedDocument:
        """Append a document and persist the updated collection.

        Raises:
            CacheError: If the snapshot could not be written. The in-memory
                collection is left unchanged.
        """
        self._persist([*self._documents, document])
        logger.info(f"Cached document: {document.name}")
        return document

    def add_file(self, name: str, data: bytes) -> CachedDocument:
        """Encode raw bytes and add them under the given name."""
        return self.add(CachedDocument(name=name, content=encode(data)))

    def add_path(self, path: Path | str) -> CachedDocument:
        """Read a local file and add it under its file name.

        Raises:
            CacheError: If the file cannot be read or the snapshot written.
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise CacheError(f"Failed to read {path}: {e}") from e
        return self.add_file(path.name, data)

    def remove(self, index: int) -> CachedDocument | None:
        """Remove the document at `index` and persist.

        Out-of-range (including negative) indices are ignored.

        Returns:
            The removed document, or None if nothing was removed.
        """
        if not 0 <= index < len(self._documents):
            return None

        removed = self._documents[index]
        self._persist(self._documents[:index] + self._documents[index + 1 :])
        logger.info(f"Removed cached document: {removed.name}")
        return removed

    def clear(self) -> None:
        """Drop every cached document and persist the empty collection."""
        self._persist([])
        logger.info("Cleared document cache")

    def list(self) -> list[CachedDocument]:
        """Return a snapshot of the current collection in order."""
        return list(self._documents)

    def is_empty(self) -> bool:
        return not self._documents

    def __len__(self) -> int:
        return len(self._documents)
