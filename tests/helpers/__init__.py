"""Test helper modules for passage sync tests.

- fake_document_store: In-memory DocumentStore recording every call
- notes_tree: Writers for notes folders with front-matter files
"""

from .fake_document_store import FakeDocumentStore
from .notes_tree import FROZEN_NOW, write_note

__all__ = [
    'FakeDocumentStore',
    'FROZEN_NOW',
    'write_note',
]
