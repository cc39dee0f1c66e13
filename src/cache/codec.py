"""Binary codec for cached documents.

Converts raw file bytes to base64 text that can sit inside a JSON snapshot,
and back to bytes for upload.
"""

import base64
import binascii

from src.errors import CodecError


def encode(data: bytes) -> str:
    """Encode raw bytes as base64 text.

    Args:
        data: File content.

    Returns:
        ASCII base64 representation.
    """
    return base64.b64encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """Decode base64 text produced by `encode`.

    Args:
        text: Base64 text.

    Returns:
        The original bytes.

    Raises:
        CodecError: If the text is not valid base64.
    """
    if not isinstance(text, str):
        raise CodecError(f"Expected str, got {type(text).__name__}")

    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except UnicodeEncodeError as e:
        raise CodecError("Encoded content contains non-ASCII characters") from e
    except binascii.Error as e:
        raise CodecError(f"Malformed base64 content: {e}") from e
