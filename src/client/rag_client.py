"""HTTP client for the remote retrieval service.

Wraps the two endpoints the pipeline depends on:
    - ingestion: multipart `file` upload of one document
    - answering: JSON `{"question": ...}` returning `{"answer", "sources"}`

httpx errors and malformed bodies are translated into `UploadError` and
`QueryError` here, so callers never see transport-level exceptions.
"""

import logging
from types import TracebackType

import httpx
from pydantic import ValidationError as PydanticValidationError

from src.client.config import ClientConfig, get_client_config
from src.errors import QueryError, UploadError
from src.models.schemas import AnswerResponse

logger = logging.getLogger(__name__)


class RagApiClient:
    """Async client for the ingestion and answering endpoints."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            http_client: Optional pre-built httpx client (e.g. with a test
                    transport). Its lifecycle stays with the caller.
        """
        self._config = config or get_client_config()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self._config.timeout)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> "RagApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def ingest(self, name: str, data: bytes) -> None:
        """Submit one document to the ingestion endpoint.

        Args:
            name: Filename sent with the multipart part.
            data: Raw document bytes.

        Raises:
            UploadError: On transport error, non-2xx status or non-JSON body.
        """
        try:
            response = await self._http.post(
                self._config.ingest_url,
                files={"file": (name, data, "application/octet-stream")},
            )
            response.raise_for_status()
            response.json()
        except httpx.HTTPStatusError as e:
            raise UploadError(name, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise UploadError(name, f"Connection failed: {e}") from e
        except ValueError as e:
            raise UploadError(name, "Response was not JSON") from e

        logger.info(f"Ingested document: {name} ({len(data)} bytes)")

    async def ask(self, question: str) -> AnswerResponse:
        """Send a question to the answering endpoint.

        Args:
            question: Fully constructed question, including language prefix.

        Returns:
            Parsed answer body.

        Raises:
            QueryError: On transport error, non-2xx status or malformed body.
        """
        try:
            response = await self._http.post(
                self._config.query_url,
                json={"question": question},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise QueryError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise QueryError(f"Connection failed: {e}") from e
        except ValueError as e:
            raise QueryError("Response was not JSON") from e

        if not isinstance(payload, dict):
            raise QueryError("Response body is not a JSON object")

        try:
            return AnswerResponse.model_validate(payload)
        except PydanticValidationError as e:
            raise QueryError(f"Malformed answer body: {e}") from e
