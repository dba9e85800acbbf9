"""Unit tests for cli.query_command module."""

from unittest.mock import MagicMock, call

import pytest

from src.cli.models import ConfigOverrides, ExitCode
from src.cli.query_command import QueryCommand
from tests.helpers import write_note


@pytest.fixture
def output():
    return MagicMock()


@pytest.fixture
def notes(notes_dir):
    write_note(notes_dir, "01.a.md", permalink="a", date="2021-01-01")
    write_note(notes_dir, "02.b.md", permalink="b", date="2022-01-01")
    write_note(notes_dir, "03.c.md", permalink="c", date="2023-01-01")
    return notes_dir


@pytest.fixture
def command(tmp_path, notes, output):
    return QueryCommand(
        config_path=str(tmp_path / "config.yaml"),
        overrides=ConfigOverrides(notes_dir=str(notes)),
        output_handler=output,
    )


class TestListPage:
    """Test cases for QueryCommand.list_page()."""

    def test_first_page_newest_first(self, command, output):
        assert command.list_page(limit=2, page=1) == ExitCode.SUCCESS

        passages = output.print_passages.call_args.args[0]
        assert [p.permalink for p in passages] == ["c", "b"]
        assert "2 of 3" in output.print_passages.call_args.kwargs["title"]

    def test_ascending(self, command, output):
        command.list_page(limit=2, page=1, ascending=True)

        passages = output.print_passages.call_args.args[0]
        assert [p.permalink for p in passages] == ["a", "b"]

    def test_page_out_of_range_is_empty(self, command, output):
        assert command.list_page(limit=2, page=5) == ExitCode.SUCCESS

        assert output.print_passages.call_args.args[0] == []


class TestGet:
    """Test cases for QueryCommand.get()."""

    def test_found(self, command, output):
        assert command.get("b") == ExitCode.SUCCESS

        assert output.print_passage.call_args.args[0].permalink == "b"

    def test_not_found(self, command, output):
        assert command.get("zzz") == ExitCode.NOT_FOUND

        output.error.assert_called_once_with("No passage with permalink 'zzz'")
        output.print_passage.assert_not_called()


class TestCountAndIds:
    """Test cases for QueryCommand.count() and ids()."""

    def test_count(self, command, output):
        assert command.count() == ExitCode.SUCCESS

        output.print.assert_called_once_with("3")

    def test_ids_default_order(self, command, output):
        assert command.ids() == ExitCode.SUCCESS

        assert output.print.call_args_list == [call("c"), call("b"), call("a")]

    def test_ids_ascending(self, command, output):
        command.ids(ascending=True)

        assert output.print.call_args_list == [call("a"), call("b"), call("c")]


class TestErrors:
    """Test cases for error handling in queries."""

    def test_missing_notes_dir(self, tmp_path, output):
        command = QueryCommand(
            config_path=str(tmp_path / "config.yaml"),
            overrides=ConfigOverrides(notes_dir=str(tmp_path / "missing")),
            output_handler=output,
        )

        assert command.count() == ExitCode.GENERAL_ERROR
        assert "Configuration error" in output.error.call_args.args[0]

    def test_queries_never_touch_remote_store(self, command, output, monkeypatch):
        monkeypatch.delenv("PASSAGE_STORE_URL", raising=False)
        monkeypatch.delenv("PASSAGE_STORE_TOKEN", raising=False)

        assert command.count() == ExitCode.SUCCESS
