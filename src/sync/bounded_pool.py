"""Bounded-concurrency task pool.

Runs one task per item with at most ``max_workers`` in flight and waits for
all of them. A failing task never cancels the others; its exception is
captured in the returned TaskOutcome.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, Iterable, List, TypeVar

from .models import TaskOutcome

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Default cap on concurrent tasks
MAX_WORKERS = 10


class BoundedTaskPool:
    """Thread pool with a fixed concurrency cap.

    Example:
        >>> pool = BoundedTaskPool(max_workers=10)
        >>> outcomes = pool.run(upsert, passages)
        >>> failed = [o for o in outcomes if not o.ok]
    """

    def __init__(self, max_workers: int = MAX_WORKERS):
        """Initialize the pool.

        Args:
            max_workers: Maximum number of tasks in flight

        Raises:
            ValueError: If max_workers is not positive
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self.max_workers = max_workers

    def run(self, task: Callable[[T], object], items: Iterable[T]) -> List[TaskOutcome[T]]:
        """Run ``task`` for every item and wait for all to finish.

        Args:
            task: Callable applied to each item
            items: Inputs, one task each

        Returns:
            One TaskOutcome per item, in input order
        """
        items = list(items)
        if not items:
            return []

        logger.debug(f"Running {len(items)} task(s), at most {self.max_workers} in flight")
        outcomes: Dict[int, TaskOutcome[T]] = {}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(task, item): index
                for index, item in enumerate(items)
            }

            for future in as_completed(futures):
                index = futures[future]
                try:
                    outcomes[index] = TaskOutcome(item=items[index], result=future.result())
                except Exception as e:
                    outcomes[index] = TaskOutcome(item=items[index], error=e)

        return [outcomes[index] for index in range(len(items))]
