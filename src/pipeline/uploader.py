"""Sequential upload of cached documents to the ingestion endpoint."""

import logging
from collections.abc import Sequence

from src.cache.codec import decode
from src.client.rag_client import RagApiClient
from src.errors import CodecError, UploadError
from src.models.schemas import CachedDocument, UploadResult

logger = logging.getLogger(__name__)


class UploadCoordinator:
    """Submits documents one at a time and stops at the first failure.

    Every pass re-sends every document; the ingestion service is expected
    to tolerate repeats.
    """

    def __init__(self, client: RagApiClient) -> None:
        self._client = client

    async def upload_all(self, documents: Sequence[CachedDocument]) -> UploadResult:
        """Upload documents in order.

        Args:
            documents: Documents to submit. A snapshot is taken up front.

        Returns:
            UploadResult naming the failed document if the pass stopped early.
        """
        pending = list(documents)
        logger.info(f"Uploading {len(pending)} cached document(s)")

        for uploaded, document in enumerate(pending):
            try:
                await self._client.ingest(document.name, decode(document.content))
            except (CodecError, UploadError) as e:
                logger.warning(f"Upload pass stopped at {document.name}: {e}")
                return UploadResult(
                    success=False,
                    uploaded=uploaded,
                    failed_document=document.name,
                    error=str(e),
                )

        return UploadResult(success=True, uploaded=len(pending))
