"""Local document cache.

Keeps user-selected files across restarts until they are sent with a question.

Responsibilities:
    - Lossless base64 codec between file bytes and persistable text
    - Pluggable key-value persistence (JSON file or in-memory)
    - Ordered add/remove/clear with a snapshot rewritten after each change
"""

from src.cache.codec import decode, encode
from src.cache.storage import InMemoryStore, JsonFileStore, KeyValueStore
from src.cache.store import DEFAULT_CACHE_KEY, CacheStore

__all__ = [
    "DEFAULT_CACHE_KEY",
    "CacheStore",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "decode",
    "encode",
]
