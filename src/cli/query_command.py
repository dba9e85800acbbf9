"""Read-only queries over a fresh local load.

Each query loads the notes folder (without uploading) and answers from the
in-memory PassageStore: one page of passages, a single passage by
permalink, the count, or all permalinks.
"""

import logging
from typing import Callable, Optional

from src.passages.config_loader import ConfigLoader
from src.passages.errors import ConfigError, FilesystemError
from src.passages.passage_store import PassageStore

from .errors import CLIError
from .load_command import build_store, resolve_config
from .models import ConfigOverrides, ExitCode
from .output import OutputHandler

logger = logging.getLogger(__name__)


class QueryCommand:
    """Answers list/get/count/ids queries against the notes folder.

    Example:
        >>> QueryCommand(output_handler=OutputHandler()).list_page(limit=10, page=1)
    """

    def __init__(
        self,
        config_path: str = ConfigLoader.DEFAULT_CONFIG_PATH,
        overrides: Optional[ConfigOverrides] = None,
        output_handler: Optional[OutputHandler] = None,
    ):
        self.config_path = config_path
        self.overrides = overrides
        self.output_handler = output_handler or OutputHandler()

    def list_page(self, limit: int, page: int, ascending: Optional[bool] = None) -> ExitCode:
        """Print one page of passages."""
        def _query(store: PassageStore) -> ExitCode:
            passages = store.get_page(limit, page)
            self.output_handler.print_passages(
                passages,
                title=f"Passages (page {page}, {len(passages)} of {store.count()})",
            )
            return ExitCode.SUCCESS

        return self._run(_query, ascending)

    def get(self, permalink: str) -> ExitCode:
        """Print the passage with the given permalink."""
        def _query(store: PassageStore) -> ExitCode:
            passage = store.get_by_id(permalink)
            if passage is None:
                self.output_handler.error(f"No passage with permalink '{permalink}'")
                return ExitCode.NOT_FOUND
            self.output_handler.print_passage(passage)
            return ExitCode.SUCCESS

        return self._run(_query)

    def count(self) -> ExitCode:
        """Print the number of passages."""
        def _query(store: PassageStore) -> ExitCode:
            self.output_handler.print(str(store.count()))
            return ExitCode.SUCCESS

        return self._run(_query)

    def ids(self, ascending: Optional[bool] = None) -> ExitCode:
        """Print all permalinks, one per line."""
        def _query(store: PassageStore) -> ExitCode:
            for permalink in store.all_ids():
                self.output_handler.print(permalink)
            return ExitCode.SUCCESS

        return self._run(_query, ascending)

    def _run(self, query: Callable[[PassageStore], ExitCode], ascending: Optional[bool] = None) -> ExitCode:
        try:
            config = resolve_config(self.config_path, self.overrides)
            store = build_store(config)
            store.load(ascending=config.ascending if ascending is None else ascending)
            return query(store)

        except (ConfigError, FilesystemError) as e:
            logger.error(f"Configuration error: {e}")
            self.output_handler.error(f"Configuration error: {e}")
            return ExitCode.GENERAL_ERROR

        except CLIError as e:
            logger.error(f"CLI error: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during query")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR
