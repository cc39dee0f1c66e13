from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Speaker of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class Language(str, Enum):
    """Response languages the answering service is asked to use.

    The value is embedded verbatim in the instruction prefix.
    """

    ENGLISH = "english"
    HINDI = "hindi"
    MALAYALAM = "malayalam"
    TAMIL = "tamil"
    FRENCH = "french"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SubmitOutcome(str, Enum):
    """How a single submit call terminated."""

    REJECTED_BUSY = "rejected_busy"
    REJECTED_EMPTY = "rejected_empty"
    UPLOAD_FAILED = "upload_failed"
    QUERY_FAILED = "query_failed"
    ANSWERED = "answered"


class CachedDocument(BaseModel):
    """A document held in the local cache.

    Attributes:
        name: Display name, usually the original filename. Not unique.
        content: Base64 text form of the file bytes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    content: str


class Message(BaseModel):
    """A single transcript entry.

    Attributes:
        role: Who produced the message.
        content: The message text.
        sources: Documents the answer was drawn from, in service order.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    sources: tuple[str, ...] = ()


class AnswerResponse(BaseModel):
    """Body returned by the answering endpoint.

    Attributes:
        answer: Generated answer text, may be missing.
        sources: Optional source identifiers.
    """

    answer: str | None = None
    sources: list[str] = Field(default_factory=list)

    @field_validator("sources", mode="before")
    @classmethod
    def none_sources_to_empty(cls, v: object) -> object:
        """Treat an explicit null as no sources."""
        if v is None:
            return []
        return v


class UploadResult(BaseModel):
    """Outcome of one upload pass over the cache.

    Attributes:
        success: Whether every document was accepted.
        uploaded: Number of documents accepted before stopping.
        failed_document: Name of the document that stopped the pass.
        error: Failure description if the pass stopped.
    """

    success: bool
    uploaded: int = Field(default=0, ge=0)
    failed_document: str | None = None
    error: str | None = None
