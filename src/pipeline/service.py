"""Process-wide query pipeline over the file-backed document cache.

Every page shares one pipeline, so there is one cache writer and one HTTP
connection pool per process.
"""

import logging
from pathlib import Path

from src.cache.storage import JsonFileStore
from src.cache.store import CacheStore
from src.client.config import ClientConfig, get_client_config
from src.client.rag_client import RagApiClient
from src.pipeline.query import QueryPipeline

logger = logging.getLogger(__name__)


def create_pipeline(config: ClientConfig | None = None) -> QueryPipeline:
    """Build a pipeline over the file-backed cache described by `config`.

    Args:
        config: Optional client configuration.
                Loads from environment if not provided.

    Returns:
        A pipeline whose cache has already been loaded.
    """
    config = config or get_client_config()
    cache = CacheStore(JsonFileStore(Path(config.cache_file)), key=config.cache_key)
    cache.load()
    return QueryPipeline(cache=cache, client=RagApiClient(config))


# Module-level singleton instance
_pipeline: QueryPipeline | None = None


def get_pipeline() -> QueryPipeline:
    """Get or create the global pipeline.

    Returns:
        The shared QueryPipeline instance.
    """
    global _pipeline
    if _pipeline is None:
        _pipeline = create_pipeline()
    return _pipeline


async def close_pipeline() -> None:
    """Release the shared pipeline's HTTP client, if one was created."""
    global _pipeline
    if _pipeline is not None:
        await _pipeline.aclose()
        _pipeline = None
        logger.info("Closed query pipeline")
