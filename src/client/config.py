"""Client configuration with environment variable loading.

Pydantic-based configuration for the remote retrieval service and the local
document cache. Endpoint paths are configuration, not code.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ClientConfig(BaseModel):
    """Configuration for the RAG API client and document cache.

    Attributes:
        base_url: Root URL of the retrieval service.
        ingest_path: Path of the document ingestion endpoint.
        query_path: Path of the answering endpoint.
        timeout: HTTP timeout in seconds for each request.
        cache_file: JSON file holding the persisted document cache.
        cache_key: Key of the cache snapshot inside the file.
    """

    model_config = ConfigDict(validate_default=True)

    base_url: str = Field(
        default_factory=lambda: os.getenv("RAG_API_BASE_URL", "http://localhost:8000"),
        description="Root URL of the retrieval service",
    )
    ingest_path: str = Field(
        default_factory=lambda: os.getenv("RAG_INGEST_PATH", "/ingest-pdf"),
        description="Document ingestion endpoint path",
    )
    query_path: str = Field(
        default_factory=lambda: os.getenv("RAG_QUERY_PATH", "/query"),
        description="Answering endpoint path",
    )
    timeout: float = Field(
        default_factory=lambda: os.getenv("RAG_TIMEOUT", "120.0"),
        gt=0.0,
        description="Per-request HTTP timeout in seconds",
    )
    cache_file: str = Field(
        default_factory=lambda: os.getenv("RAG_CACHE_FILE", "data/document_cache.json"),
        description="Location of the persisted document cache",
    )
    cache_key: str = Field(
        default_factory=lambda: os.getenv("RAG_CACHE_KEY", "rag-document-cache"),
        min_length=1,
        description="Key of the cache snapshot",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require a base URL and drop any trailing slash."""
        v = v.strip()
        if not v:
            raise ValueError("RAG_API_BASE_URL is required")
        return v.rstrip("/")

    @field_validator("ingest_path", "query_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Endpoint paths must be absolute."""
        v = v.strip()
        if not v.startswith("/"):
            raise ValueError(f"Endpoint path must start with '/': {v!r}")
        return v

    @property
    def ingest_url(self) -> str:
        return f"{self.base_url}{self.ingest_path}"

    @property
    def query_url(self) -> str:
        return f"{self.base_url}{self.query_path}"


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return ClientConfig()
