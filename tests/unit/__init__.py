"""Unit tests for individual components in isolation.

Coverage:
    - cache/: Codec round-trips, persistence backends, cache store lifecycle
    - client/: Configuration validation and HTTP error translation
    - pipeline/: Transcript ordering and immutability

HTTP calls use httpx.MockTransport. Leverages pytest-check for multiple
assertions per test.
"""
