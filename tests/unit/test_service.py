"""Unit tests for the shared pipeline factory."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import pytest_check as check

import src.pipeline.service as service_module
from src.cache.storage import JsonFileStore
from src.cache.store import CacheStore
from src.client.config import ClientConfig


@pytest.fixture(autouse=True)
def reset_singleton() -> Iterator[None]:
    service_module._pipeline = None
    yield
    service_module._pipeline = None


class TestCreatePipeline:
    async def test_loads_persisted_cache(self, tmp_path: Path) -> None:
        """A new pipeline starts with documents cached in an earlier run."""
        cache_file = tmp_path / "cache.json"
        earlier = CacheStore(JsonFileStore(cache_file), key="k")
        earlier.add_file("a.pdf", b"a")

        pipeline = service_module.create_pipeline(
            ClientConfig(cache_file=str(cache_file), cache_key="k")
        )

        check.equal([d.name for d in pipeline.cache.list()], ["a.pdf"])
        await pipeline.aclose()


class TestGetPipeline:
    """Tests for the get_pipeline singleton function."""

    def test_singleton_returns_same_instance(self) -> None:
        """get_pipeline builds one pipeline and reuses it."""
        with patch.object(service_module, "create_pipeline") as mock_create:
            first = service_module.get_pipeline()
            second = service_module.get_pipeline()

            assert first is second
            mock_create.assert_called_once()

    async def test_close_releases_client_and_resets(self) -> None:
        with patch.object(service_module, "create_pipeline") as mock_create:
            mock_create.return_value.aclose = AsyncMock()
            pipeline = service_module.get_pipeline()

            await service_module.close_pipeline()

            pipeline.aclose.assert_awaited_once()
            check.is_none(service_module._pipeline)

    async def test_close_without_pipeline_is_noop(self) -> None:
        await service_module.close_pipeline()

        assert service_module._pipeline is None
