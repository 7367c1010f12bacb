"""Extension <-> MIME type lookups over an immutable mapping table."""

from collections.abc import Mapping
from typing import Any

from .base import BaseMimeTypes
from .builtin import BuiltInTable
from .table import MappingTable, freeze_table


class MimeTypes(BaseMimeTypes):
    """
    Convert MIME types to file extensions and vice versa.

    The table holds two independent lists per key:
    ``mimes`` maps an extension to its MIME types and ``extensions`` maps a
    MIME type to its extensions. The first entry of each list is the
    preferred one. Lookup keys are lowercased and trimmed on every call, so
    tables do not need to be normalized up front.

    Example table::

        {
            "extensions": {
                "application/json": ["json"],
                "image/jpeg": ["jpeg", "jpg"],
            },
            "mimes": {
                "json": ["application/json"],
                "jpeg": ["image/jpeg"],
                "jpg": ["image/jpeg"],
            },
        }
    """

    def __init__(self, mapping: Mapping[str, Any] | MappingTable | None = None):
        """
        Initialize the lookup.

        Args:
            mapping: Table with "extensions" and "mimes" entries. The
                built-in table is used when omitted. A read-only copy is
                kept, so later changes to it are not seen.
        """
        if mapping is None:
            self._mapping = BuiltInTable.get()
        else:
            self._mapping = freeze_table(mapping)

    def get_mime_type(self, extension: str) -> str | None:
        """Get the primary MIME type for an extension."""
        mime_types = self._lookup("mimes", extension)
        return mime_types[0] if mime_types else None

    def get_extension(self, mime_type: str) -> str | None:
        """Get the primary extension for a MIME type."""
        extensions = self._lookup("extensions", mime_type)
        return extensions[0] if extensions else None

    def get_all_mime_types(self, extension: str) -> list[str]:
        """Get all MIME types for an extension."""
        return list(self._lookup("mimes", extension))

    def get_all_extensions(self, mime_type: str) -> list[str]:
        """Get all extensions for a MIME type."""
        return list(self._lookup("extensions", mime_type))

    def _lookup(self, table: str, key: str) -> tuple[str, ...]:
        return self._mapping[table].get(_clean_input(key), ())


def _clean_input(value: str) -> str:
    """Normalize a lookup key using trim/lowercase."""
    return value.strip().lower()
