"""Error taxonomy for the document cache and query pipeline.

Low-level failures (httpx, JSON decoding, file I/O) are translated into these
at the module boundary where they occur. The query pipeline catches them and
turns them into transcript messages or silent no-ops.
"""


class RagClientError(Exception):
    """Base class for all errors raised by this package."""

    pass


class ValidationError(RagClientError):
    """Raised when a submission has neither a question nor cached documents."""

    pass


class CodecError(RagClientError):
    """Raised when encoded document content cannot be decoded."""

    pass


class CacheError(RagClientError):
    """Raised when the persistence layer cannot be read or written."""

    pass


class UploadError(RagClientError):
    """Raised when the ingestion endpoint rejects a single document.

    Attributes:
        document_name: Name of the document that failed.
        reason: Short description of the failure.
    """

    def __init__(self, document_name: str, reason: str) -> None:
        super().__init__(f"Upload failed for {document_name}: {reason}")
        self.document_name = document_name
        self.reason = reason


class QueryError(RagClientError):
    """Raised when the answering endpoint fails or returns a malformed body."""

    pass
