"""Remote retrieval service access.

Talks to the ingestion and answering endpoints over httpx, with base URL,
paths and timeout taken from environment-driven configuration.
"""

from src.client.config import ClientConfig, get_client_config
from src.client.rag_client import RagApiClient

__all__ = ["ClientConfig", "RagApiClient", "get_client_config"]
