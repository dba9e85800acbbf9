"""Pytest configuration and fixtures for integration tests.

Provides a realistic notes folder on disk and a requests session double so
the full load-and-sync pipeline can run without a live document store.
"""

import threading
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from tests.helpers import write_note


@pytest.fixture
def notes_tree(notes_dir: Path) -> Path:
    """Notes folder mixing valid passages, skipped names and a broken file.

    Layout:
        notes/readme.md               -> permalink "home"
        notes/01.first-post.md        -> permalink "first-post"
        notes/02.second-post.md       -> permalink "second-post"
        notes/03.topics/readme.md     -> permalink "topics"
        notes/03.topics/01.python.md  -> permalink "python"
        notes/04.draft.md             (no permalink, skipped)
        notes/scratch.md              (name not matching, ignored)
        notes/notes.txt               (not markdown, ignored)
    """
    write_note(notes_dir, "readme.md", permalink="home", title="Home", date="2020-01-01")
    write_note(notes_dir, "01.first-post.md", permalink="first-post", title="First", date="2021-06-01")
    write_note(
        notes_dir,
        "02.second-post.md",
        permalink="second-post",
        date="2022-06-01 12:30:00",
        body="Second\n======\n\n* one\n* two\n",
    )
    write_note(notes_dir, "03.topics/readme.md", permalink="topics", date="2023-06-01")
    write_note(notes_dir, "03.topics/01.python.md", permalink="python", title="Python", date="2024-06-01")
    write_note(notes_dir, "04.draft.md", title="Draft without permalink")
    write_note(notes_dir, "scratch.md", permalink="scratch")
    (notes_dir / "notes.txt").write_text("plain text", encoding="utf-8")
    return notes_dir


class RecordingSession:
    """requests.Session double backed by an in-memory collection."""

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None):
        self.headers: Dict[str, str] = {}
        self.records: Dict[str, Dict[str, Any]] = {str(r['id']): dict(r) for r in records or []}
        self.requests: List[tuple] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def request(self, method: str, url: str, timeout: Optional[float] = None, **kwargs: Any) -> MagicMock:
        with self._lock:
            return self._handle(method, url, **kwargs)

    def _handle(self, method: str, url: str, **kwargs: Any) -> MagicMock:
        self.requests.append((method, url, kwargs))
        if method == 'GET':
            field, value = next(iter(kwargs['params'].items()))
            return self._response([r for r in self.records.values() if r.get(field) == value])
        if method == 'POST':
            record = dict(kwargs['json'], id=str(self._next_id))
            self._next_id += 1
            self.records[record['id']] = record
            return self._response(record)
        if method == 'PATCH':
            record_id = url.rsplit('/', 1)[-1]
            self.records[record_id].update(kwargs['json'])
            return self._response(self.records[record_id])
        raise AssertionError(f"Unexpected method {method}")

    @staticmethod
    def _response(payload: Any) -> MagicMock:
        response = MagicMock()
        response.status_code = 200
        response.content = b'payload'
        response.json.return_value = payload
        return response


@pytest.fixture
def recording_session() -> RecordingSession:
    return RecordingSession()
