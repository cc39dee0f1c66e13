"""Test package for the RAG chat client.

Structure:
    - unit/: Codec, storage, cache store, config, transcript and HTTP client
    - integration/: Upload coordinator and query pipeline against a fake
      FastAPI retrieval backend reached through httpx's ASGITransport

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
