"""Process-wide cache of the built-in mapping table."""

import threading
from collections.abc import Mapping
from typing import Any

from src.logging import get_logger

from . import loader
from .exceptions import TableLoadError
from .table import FrozenTable, freeze_table

logger = get_logger(__name__)


class BuiltInTable:
    """
    Compute-once holder for the built-in mapping table.

    The table is loaded on the first call to ``get()`` and shared, read-only,
    by every ``MimeTypes`` created without an explicit table. Concurrent first
    calls load it once and all observe the same object. A failed load is
    remembered and raised again without calling the loader a second time.
    """

    _table: FrozenTable | None = None
    _error: TableLoadError | None = None
    _lock = threading.Lock()

    @classmethod
    def get(cls) -> FrozenTable:
        """
        Get the built-in table, loading it on first use.

        Returns:
            The cached read-only table

        Raises:
            TableLoadError: If the built-in data source is missing or malformed
        """
        table = cls._table
        if table is not None:
            return table

        with cls._lock:
            if cls._table is None:
                if cls._error is None:
                    cls._load()
                if cls._error is not None:
                    raise cls._error
            return cls._table

    @classmethod
    def _load(cls) -> None:
        logger.debug("Loading built-in mapping table")
        try:
            cls._table = freeze_table(loader.load_default_table())
        except TableLoadError as e:
            logger.error("Built-in mapping table unavailable: %s", e)
            cls._error = e

    @classmethod
    def set(cls, table: Mapping[str, Any]) -> None:
        """Replace the cached table with a read-only copy of ``table``."""
        frozen = freeze_table(table)
        with cls._lock:
            cls._table = frozen
            cls._error = None

    @classmethod
    def reset(cls) -> None:
        """Drop the cached table or error so the next ``get()`` loads again."""
        with cls._lock:
            cls._table = None
            cls._error = None
