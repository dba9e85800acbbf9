"""Integration tests for passage loading and sync.

These tests run the complete pipeline (walker, builder, formatter, store,
dispatcher and CLI) over notes folders written to a temporary directory.
The document store is replaced by in-memory doubles, so no network access
or credentials are required.
"""
