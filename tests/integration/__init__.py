"""Integration tests for the cache, client and pipeline working together.

Every HTTP call goes to an in-process FastAPI app that records ingested
documents and questions and can be told to fail or stall.
"""
