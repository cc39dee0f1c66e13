"""NiceGUI interface - thin presentation layer over the query pipeline.

Responsibilities:
    - Language selection and question input
    - File upload into the local document cache, with delete
    - Transcript display with sources and a busy indicator

Contains no business logic. All state lives in the cache and pipeline.
"""
