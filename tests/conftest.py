"""Pytest fixtures and shared test configuration.

Provides a fake retrieval backend and a pipeline wired to it.

Fixtures:
    - backend: In-process FastAPI app recording ingestions and questions
    - client_config: ClientConfig pointing at the fake backend
    - async_client: HTTPX client routed to the backend via ASGITransport
    - rag_client: RagApiClient over async_client
    - cache: CacheStore backed by an in-memory store
    - pipeline: QueryPipeline over cache and rag_client
"""

import asyncio
from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastapi import FastAPI, HTTPException, Request, UploadFile
from httpx import ASGITransport, AsyncClient

from src.cache.storage import InMemoryStore
from src.cache.store import CacheStore
from src.client.config import ClientConfig
from src.client.rag_client import RagApiClient
from src.pipeline.query import QueryPipeline


class FakeRagBackend:
    """Stand-in for the remote ingestion and answering service."""

    def __init__(self) -> None:
        self.ingested: list[tuple[str, bytes]] = []
        self.query_bodies: list[dict[str, Any]] = []
        self.fail_ingest_for: set[str] = set()
        self.answer_status: int = 200
        self.answer_payload: Any = {"answer": "Default answer"}
        self.query_started = asyncio.Event()
        self.query_gate: asyncio.Event | None = None
        self.app = self._create_app()

    @property
    def questions(self) -> list[str]:
        return [body["question"] for body in self.query_bodies]

    def _create_app(self) -> FastAPI:
        app = FastAPI()

        @app.post("/ingest-pdf")
        async def ingest(file: UploadFile) -> dict[str, str]:
            content = await file.read()
            self.ingested.append((file.filename or "", content))
            if file.filename in self.fail_ingest_for:
                raise HTTPException(status_code=500, detail="Ingestion failed")
            return {"status": "ok", "filename": file.filename or ""}

        @app.post("/query", response_model=None)
        async def query(request: Request) -> Any:
            self.query_bodies.append(await request.json())
            self.query_started.set()
            if self.query_gate is not None:
                await self.query_gate.wait()
            if self.answer_status != 200:
                raise HTTPException(status_code=self.answer_status, detail="Query failed")
            return self.answer_payload

        return app


@pytest.fixture
def backend() -> FakeRagBackend:
    return FakeRagBackend()


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        base_url="http://test",
        ingest_path="/ingest-pdf",
        query_path="/query",
        timeout=5.0,
        cache_file="unused.json",
        cache_key="test-cache",
    )


@pytest.fixture
async def async_client(backend: FakeRagBackend) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client routed to the fake backend.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=backend.app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def rag_client(client_config: ClientConfig, async_client: AsyncClient) -> RagApiClient:
    return RagApiClient(config=client_config, http_client=async_client)


@pytest.fixture
def storage() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def cache(storage: InMemoryStore) -> CacheStore:
    store = CacheStore(storage, key="test-cache")
    store.load()
    return store


@pytest.fixture
def pipeline(cache: CacheStore, rag_client: RagApiClient) -> QueryPipeline:
    return QueryPipeline(cache=cache, client=rag_client)
