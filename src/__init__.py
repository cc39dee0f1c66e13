"""RAG Chat Client - local document cache and query orchestrator.

Keeps user documents in a persisted local cache, uploads them to a remote
retrieval-augmented answering service before each question, and records the
exchange in a transcript. Uses httpx for the service, Pydantic for data and
configuration, and NiceGUI for the chat page.

Components:
    - cache: Base64 codec, key-value persistence and the document cache
    - client: Configuration and HTTP access to ingestion/answering endpoints
    - pipeline: Upload coordinator, query pipeline and transcript
    - models: Pydantic data model
    - ui: Web interface for chat interactions
"""

__version__ = "0.1.0"
