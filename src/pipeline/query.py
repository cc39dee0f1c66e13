"""Query pipeline: validate, upload cached documents, ask, record.

One `submit` call walks Idle -> Validating -> Uploading -> Querying -> Idle.
Failures at any step end the cycle with a transcript message (or silently,
for an empty submission) and always return the session to idle.
"""

import logging

from src.cache.store import CacheStore
from src.client.rag_client import RagApiClient
from src.errors import QueryError, ValidationError
from src.models.schemas import Language, Role, SubmitOutcome
from src.pipeline.transcript import TranscriptStore
from src.pipeline.uploader import UploadCoordinator

logger = logging.getLogger(__name__)

PLACEHOLDER_QUERY = "Ask something about the uploaded PDF"
DEFAULT_QUESTION = "Summarize the uploaded PDF"
NO_ANSWER_MESSAGE = "No response from API"
QUERY_FAILED_MESSAGE = "Something went wrong while fetching response."


def build_question(query: str, language: Language) -> str:
    """Prefix the query with an instruction naming the response language."""
    return f"Respond in {language.value}: {query or DEFAULT_QUESTION}"


def upload_failed_message(document_name: str) -> str:
    """Assistant message naming the document that stopped the upload pass."""
    return f"File upload failed for {document_name}."


class SessionState:
    """Transient per-session state. Never persisted."""

    def __init__(self, language: Language = Language.ENGLISH) -> None:
        self.draft_query: str = ""
        self.language: Language = language
        self.busy: bool = False


class QueryPipeline:
    """Drives one question at a time from draft to transcript.

    `session.busy` is the re-entrancy guard: a submit while busy is ignored.
    The pipeline reads the cache but never modifies it.
    """

    def __init__(
        self,
        cache: CacheStore,
        client: RagApiClient,
        transcript: TranscriptStore | None = None,
        session: SessionState | None = None,
    ) -> None:
        self.cache = cache
        self.transcript = transcript or TranscriptStore()
        self.session = session or SessionState()
        self._client = client
        self._uploader = UploadCoordinator(client)

    async def aclose(self) -> None:
        """Close the API client."""
        await self._client.aclose()

    def _validate(self, draft_query: str) -> str:
        query = draft_query.strip()
        if not query and self.cache.is_empty():
            raise ValidationError("Please type a question or upload a PDF")
        return query

    async def submit(
        self,
        draft_query: str | None = None,
        language: Language | None = None,
    ) -> SubmitOutcome:
        """Run one upload-then-query cycle.

        Args:
            draft_query: Question text. Defaults to the session draft.
            language: Response language. Defaults to the session selection.

        Returns:
            How the cycle terminated.
        """
        if self.session.busy:
            logger.info("Ignoring submit while a query is in flight")
            return SubmitOutcome.REJECTED_BUSY

        if draft_query is None:
            draft_query = self.session.draft_query
        language = Language(language or self.session.language)

        try:
            query = self._validate(draft_query)
        except ValidationError as e:
            logger.info(f"Submit rejected: {e}")
            return SubmitOutcome.REJECTED_EMPTY

        # No await before busy is set, so the check above cannot race.
        self.transcript.append(Role.USER, query or PLACEHOLDER_QUERY)
        self.session.draft_query = ""
        self.session.busy = True

        try:
            documents = self.cache.list()
            if documents:
                result = await self._uploader.upload_all(documents)
                if not result.success:
                    self.transcript.append(
                        Role.ASSISTANT, upload_failed_message(result.failed_document)
                    )
                    return SubmitOutcome.UPLOAD_FAILED

            question = build_question(query, language)
            try:
                answer = await self._client.ask(question)
            except QueryError as e:
                logger.warning(f"Query failed: {e}")
                self.transcript.append(Role.ASSISTANT, QUERY_FAILED_MESSAGE)
                return SubmitOutcome.QUERY_FAILED

            self.transcript.append(
                Role.ASSISTANT, answer.answer or NO_ANSWER_MESSAGE, answer.sources
            )
            logger.info(f"Answer received ({len(answer.sources)} source(s))")
            return SubmitOutcome.ANSWERED
        finally:
            self.session.busy = False
