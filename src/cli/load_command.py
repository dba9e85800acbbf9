"""Load command: scan the notes folder and upload passages.

LoadCommand resolves configuration (config.yaml plus command-line
overrides), assembles the loading pipeline and the sync dispatcher, runs a
load and translates failures to exit codes.
"""

import logging
from typing import Optional

from src.document_store.api_wrapper import DocumentStoreClient
from src.document_store.auth import Authenticator
from src.document_store.base import DocumentStore
from src.document_store.errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
)
from src.passages.config_loader import ConfigLoader
from src.passages.date_normalizer import DateNormalizer
from src.passages.directory_walker import DirectoryWalker
from src.passages.errors import ConfigError, FilesystemError
from src.passages.models import LoaderConfig
from src.passages.passage_builder import PassageBuilder
from src.passages.passage_store import PassageStore
from src.sync.bounded_pool import BoundedTaskPool
from src.sync.models import SyncResult
from src.sync.sync_dispatcher import SyncDispatcher

from .errors import CLIError, InvalidOptionError
from .models import ConfigOverrides, ExitCode
from .output import OutputHandler

logger = logging.getLogger(__name__)


def resolve_config(config_path: str, overrides: Optional[ConfigOverrides] = None) -> LoaderConfig:
    """Load config.yaml and apply command-line overrides.

    Raises:
        ConfigError: If the configuration file is invalid
        InvalidOptionError: If an override has an unusable value
    """
    config = ConfigLoader.load(config_path)
    if overrides is None:
        return config

    if overrides.notes_dir is not None:
        config.notes_dir = overrides.notes_dir
    if overrides.collection is not None:
        if not overrides.collection.strip():
            raise InvalidOptionError("--collection", "must not be empty")
        config.collection = overrides.collection.strip()
    if overrides.concurrency is not None:
        if overrides.concurrency < 1:
            raise InvalidOptionError("--concurrency", "must be a positive integer")
        config.concurrency = overrides.concurrency
    if overrides.strict_dates is not None:
        config.strict_dates = overrides.strict_dates
    return config


def build_store(config: LoaderConfig) -> PassageStore:
    """Assemble walker, builder and date policy into a PassageStore."""
    builder = PassageBuilder(date_normalizer=DateNormalizer(strict=config.strict_dates))
    return PassageStore(DirectoryWalker(config.notes_dir, builder))


class LoadCommand:
    """Runs a full load of the notes folder followed by an upload.

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> exit_code = LoadCommand(output_handler=output).run(ascending=False)
    """

    def __init__(
        self,
        config_path: str = ConfigLoader.DEFAULT_CONFIG_PATH,
        overrides: Optional[ConfigOverrides] = None,
        output_handler: Optional[OutputHandler] = None,
        authenticator: Optional[Authenticator] = None,
        document_store: Optional[DocumentStore] = None,
    ):
        """Initialize load command with dependencies.

        Args:
            config_path: Path to configuration YAML file
            overrides: Command-line values taking precedence over the file
            output_handler: OutputHandler for terminal output (optional)
            authenticator: Authenticator for the document store (optional)
            document_store: Store receiving the upserts (optional, REST client by default)
        """
        self.config_path = config_path
        self.overrides = overrides
        self.output_handler = output_handler or OutputHandler()
        self.authenticator = authenticator
        self.document_store = document_store

    def run(self, ascending: Optional[bool] = None, sync: bool = True) -> ExitCode:
        """Load passages and upload them to the document store.

        Args:
            ascending: Sort direction; None uses the configured default
            sync: Upload after loading (False only loads and reports)

        Returns:
            ExitCode indicating success or specific failure type
        """
        try:
            config = resolve_config(self.config_path, self.overrides)
            logger.info(
                f"Configuration: notes_dir={config.notes_dir} collection={config.collection} "
                f"concurrency={config.concurrency} strict_dates={config.strict_dates}"
            )
            if ascending is None:
                ascending = config.ascending

            store = build_store(config)

            sync_results = []
            if sync:
                dispatcher = SyncDispatcher(
                    self._get_document_store(config),
                    BoundedTaskPool(config.concurrency),
                )
                store.add_listener(lambda passages: sync_results.append(dispatcher.sync(passages)))

            with self.output_handler.spinner("Loading passages..."):
                passages = store.load(ascending=ascending)

            if not sync:
                self.output_handler.success(f"Loaded {len(passages)} passage(s) from {config.notes_dir}")
                return ExitCode.SUCCESS

            result = sync_results[0] if sync_results else SyncResult()
            self.output_handler.print_sync_summary(len(passages), result)
            if result.errors:
                return ExitCode.SYNC_ERRORS
            return ExitCode.SUCCESS

        except InvalidCredentialsError as e:
            logger.error(f"Authentication failed: {e}")
            self.output_handler.error(f"Authentication failed: {e}")
            self.output_handler.info(
                "Check PASSAGE_STORE_URL and PASSAGE_STORE_TOKEN environment variables"
            )
            return ExitCode.AUTH_ERROR

        except (APIUnreachableError, APIAccessError) as e:
            logger.error(f"Document store error: {e}")
            self.output_handler.error(f"Document store error: {e}")
            return ExitCode.NETWORK_ERROR

        except (ConfigError, FilesystemError) as e:
            logger.error(f"Configuration error: {e}")
            self.output_handler.error(f"Configuration error: {e}")
            return ExitCode.GENERAL_ERROR

        except CLIError as e:
            logger.error(f"CLI error: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during load")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def _get_document_store(self, config: LoaderConfig) -> DocumentStore:
        if self.document_store is None:
            if self.authenticator is None:
                self.authenticator = Authenticator()
            # Fail before scanning when credentials are missing
            self.authenticator.get_credentials()
            self.document_store = DocumentStoreClient(self.authenticator, config.collection)
        return self.document_store
