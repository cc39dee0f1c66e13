"""Unit tests for ClientConfig.

Tests defaults, environment overrides and validation.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.client.config import ClientConfig, get_client_config

RAG_ENV_VARS = [
    "RAG_API_BASE_URL",
    "RAG_INGEST_PATH",
    "RAG_QUERY_PATH",
    "RAG_TIMEOUT",
    "RAG_CACHE_FILE",
    "RAG_CACHE_KEY",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove RAG_* variables that a local .env may have set."""
    for name in RAG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_defaults(self, clean_env: None) -> None:
        """Config uses sensible defaults when nothing is set."""
        config = ClientConfig()

        assert config.base_url == "http://localhost:8000"
        assert config.ingest_path == "/ingest-pdf"
        assert config.query_path == "/query"
        assert config.timeout == 120.0
        assert config.cache_file == "data/document_cache.json"
        assert config.cache_key == "rag-document-cache"

    def test_urls_join_base_and_paths(self) -> None:
        config = ClientConfig(base_url="https://rag.example.com/", query_path="/ask")

        assert config.base_url == "https://rag.example.com"
        assert config.query_url == "https://rag.example.com/ask"
        assert config.ingest_url == "https://rag.example.com/ingest-pdf"

    def test_environment_overrides(self, clean_env: None) -> None:
        """Config reads endpoint settings from environment."""
        env = {
            "RAG_API_BASE_URL": "https://api.example.com",
            "RAG_INGEST_PATH": "/docs",
            "RAG_TIMEOUT": "30",
        }
        with patch.dict("os.environ", env):
            config = get_client_config()

        assert config.base_url == "https://api.example.com"
        assert config.ingest_path == "/docs"
        assert config.timeout == 30.0

    def test_fails_with_blank_base_url(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(base_url="   ")

        assert "RAG_API_BASE_URL is required" in str(exc_info.value)

    def test_fails_with_relative_path(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(query_path="query")

        assert "must start with '/'" in str(exc_info.value)

    def test_fails_with_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(timeout=0)

        assert "timeout" in str(exc_info.value).lower()

    def test_fails_with_unparseable_timeout_env(self, clean_env: None) -> None:
        """A non-numeric RAG_TIMEOUT surfaces as a validation error."""
        with (
            patch.dict("os.environ", {"RAG_TIMEOUT": "soon"}),
            pytest.raises(ValidationError),
        ):
            get_client_config()
