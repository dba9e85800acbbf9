"""Find-or-create synchronization of passages to the remote store.

After a load, every passage is upserted by permalink: the store is queried
for a record with the same permalink, which is updated in place if found and
created otherwise. Upserts run concurrently through a BoundedTaskPool.

The dispatcher runs one batch per instance. A second trigger only logs a
notice; remote records are never deleted.
"""

import logging
from typing import List, Optional

from src.document_store.base import DocumentStore, record_id
from src.document_store.errors import APIAccessError
from src.passages.models import Passage

from .bounded_pool import MAX_WORKERS, BoundedTaskPool
from .models import SyncResult

logger = logging.getLogger(__name__)

CREATED = 'created'
UPDATED = 'updated'


class SyncDispatcher:
    """Pushes loaded passages to a DocumentStore, once.

    Attributes:
        has_run_once: Set when the first batch starts; never reset

    Example:
        >>> dispatcher = SyncDispatcher(DocumentStoreClient(auth, "passages"))
        >>> store.add_listener(dispatcher.sync)
    """

    def __init__(self, document_store: DocumentStore, pool: Optional[BoundedTaskPool] = None):
        """Initialize the dispatcher.

        Args:
            document_store: Remote store receiving the upserts
            pool: Concurrency limiter (10 workers by default)
        """
        self.document_store = document_store
        self.pool = pool or BoundedTaskPool(MAX_WORKERS)
        self.has_run_once = False

    def sync(self, passages: List[Passage]) -> SyncResult:
        """Upsert every passage into the document store.

        Individual failures are logged and recorded in the result; they never
        abort the rest of the batch.

        Args:
            passages: Passages of a completed load

        Returns:
            SyncResult with created/updated counts and per-item errors
        """
        if self.has_run_once:
            logger.info("Passages have already been uploaded, skipping repeated sync")
            return SyncResult(skipped=True)
        self.has_run_once = True

        logger.info(f"Uploading {len(passages)} passage(s) (max {self.pool.max_workers} concurrent)")

        result = SyncResult()
        for outcome in self.pool.run(self._upsert, passages):
            passage = outcome.item
            if not outcome.ok:
                result.errors.append((passage.permalink, str(outcome.error)))
                logger.error(f"  ✗ Upload failed for {passage.permalink} ({passage.filepath}): {outcome.error}")
            elif outcome.result == CREATED:
                result.created_count += 1
            else:
                result.updated_count += 1

        logger.info(
            f"Upload complete: {result.created_count} created, "
            f"{result.updated_count} updated, {len(result.errors)} failed"
        )
        return result

    def _upsert(self, passage: Passage) -> str:
        """Find-or-create one passage by permalink.

        Returns:
            CREATED or UPDATED

        Raises:
            DocumentStoreError: If any store call fails
        """
        document = passage.to_document()
        existing = self.document_store.find_by_field('permalink', passage.permalink)

        if existing:
            existing_id = record_id(existing[0])
            if existing_id is None:
                raise APIAccessError(f"Stored record for {passage.permalink} has no id")
            self.document_store.update_by_id(existing_id, document)
            logger.info(f"  ✓ Updated {passage.permalink}")
            return UPDATED

        self.document_store.add(document)
        logger.info(f"  ✓ Created {passage.permalink}")
        return CREATED
