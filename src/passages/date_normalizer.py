"""Normalization of front-matter dates into fixed-width timestamps.

Front-matter dates arrive in whatever shape YAML produced: a datetime, a
bare date, a string in some ISO-ish layout, or nothing at all. Every passage
stores the result as ``YYYY-MM-DD HH:MM:SS`` plus the calendar day.

Unparseable dates are handled by policy:
    lenient (default): log a warning and use the current time
    strict: raise InvalidDateError so the file is skipped
"""

import logging
from datetime import date, datetime
from typing import Any, Callable, Optional

from .errors import InvalidDateError

logger = logging.getLogger(__name__)

TIME_FORMAT = '%Y-%m-%d %H:%M:%S'

# Layouts tried after datetime.fromisoformat()
FALLBACK_FORMATS = (
    '%Y/%m/%d %H:%M:%S',
    '%Y/%m/%d %H:%M',
    '%Y/%m/%d',
)


class DateNormalizer:
    """Converts raw front-matter dates into canonical timestamp strings.

    Example:
        >>> DateNormalizer().normalize("2021-03-04T05:06:07")
        '2021-03-04 05:06:07'
    """

    def __init__(self, strict: bool = False, clock: Optional[Callable[[], datetime]] = None):
        """Initialize the normalizer.

        Args:
            strict: Raise InvalidDateError instead of falling back to now
            clock: Callable returning the current time (injectable for tests)
        """
        self.strict = strict
        self._clock = clock or datetime.now

    def now(self) -> str:
        """Current wall-clock time, formatted."""
        return self.format(self._clock())

    def normalize(self, value: Any, file_path: str = '<unknown>') -> str:
        """Format a raw date value as YYYY-MM-DD HH:MM:SS.

        Args:
            value: Raw front-matter value (None, datetime, date or string)
            file_path: Source file, for logs and errors

        Returns:
            Fixed-width timestamp string

        Raises:
            InvalidDateError: In strict mode, if the value cannot be parsed
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return self.now()

        parsed = self._parse(value)
        if parsed is not None:
            return self.format(parsed)

        if self.strict:
            raise InvalidDateError(file_path, value)

        logger.warning(f"Invalid date {value!r} in {file_path}, using current time")
        return self.now()

    @staticmethod
    def format(value: datetime) -> str:
        """Render a datetime as TIME_FORMAT, always 19 characters wide."""
        # strftime does not zero-pad years below 1000 on every platform
        return (
            f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
            f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        )

    @staticmethod
    def calendar_day(mtime: str) -> str:
        """Calendar day of a normalized timestamp."""
        return mtime[:10]

    def _parse(self, value: Any) -> Optional[datetime]:
        # datetime is a subclass of date, check it first
        if isinstance(value, datetime):
            return self._to_local(value)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if not isinstance(value, str):
            return None

        text = value.strip()
        try:
            return self._to_local(datetime.fromisoformat(text))
        except ValueError:
            pass

        for fmt in FALLBACK_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        return None

    @staticmethod
    def _to_local(value: datetime) -> datetime:
        if value.tzinfo is None:
            return value
        return value.astimezone().replace(tzinfo=None)
