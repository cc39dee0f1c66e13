"""Pydantic models shared by the cache, client and pipeline.

Provides type safety and validation for everything that crosses a boundary:
persisted cache entries, transcript messages and answering responses.

Models:
    - CachedDocument: Named, base64-encoded document in the local cache
    - Message: Immutable transcript entry with optional sources
    - AnswerResponse: Parsed answering endpoint body
    - UploadResult: Outcome of an upload pass
    - Role, Language, SubmitOutcome: Closed value sets
"""

from src.models.schemas import (
    AnswerResponse,
    CachedDocument,
    Language,
    Message,
    Role,
    SubmitOutcome,
    UploadResult,
)

__all__ = [
    "AnswerResponse",
    "CachedDocument",
    "Language",
    "Message",
    "Role",
    "SubmitOutcome",
    "UploadResult",
]
