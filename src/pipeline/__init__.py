"""Upload-then-query orchestration.

Responsibilities:
    - Sequential, fail-fast upload of cached documents
    - Question construction with a response-language instruction
    - Append-only transcript of the exchange
    - Busy flag as the single re-entrancy guard

Holds no persistent state; the cache lives in src.cache.
"""

from src.pipeline.query import (
    DEFAULT_QUESTION,
    NO_ANSWER_MESSAGE,
    PLACEHOLDER_QUERY,
    QUERY_FAILED_MESSAGE,
    QueryPipeline,
    SessionState,
    build_question,
)
from src.pipeline.service import close_pipeline, create_pipeline, get_pipeline
from src.pipeline.transcript import TranscriptStore
from src.pipeline.uploader import UploadCoordinator

__all__ = [
    "DEFAULT_QUESTION",
    "NO_ANSWER_MESSAGE",
    "PLACEHOLDER_QUERY",
    "QUERY_FAILED_MESSAGE",
    "QueryPipeline",
    "SessionState",
    "TranscriptStore",
    "UploadCoordinator",
    "build_question",
    "close_pipeline",
    "create_pipeline",
    "get_pipeline",
]
