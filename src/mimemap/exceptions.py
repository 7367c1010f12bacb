"""Exception classes for mimemap."""

from typing import Any, Literal

# Source formats a mapping table can be loaded from
TableFormat = Literal["mime.types", "json"]


class MimeMapError(Exception):
    """Base exception for mimemap errors."""

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def __str__(self) -> str:
        if self.data:
            return f"{self.message}: {self.data}"
        return self.message


class TableLoadError(MimeMapError):
    """
    A mapping table source is missing, unreadable or malformed.

    Attributes:
        source: Path or resource name of the table source, if known.
        table_format: Format the source was read as, if known.
    """

    def __init__(
        self,
        message: str,
        source: str | None = None,
        data: dict[str, Any] | None = None,
        *,
        table_format: TableFormat | None = None,
    ):
        super().__init__(message, data)
        self.source = source
        self.table_format = table_format
        if source is not None:
            self.data["source"] = source
        if table_format is not None:
            self.data["format"] = table_format

