"""Mapping table shape shared by the loaders and the generator."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict

# {"extensions": {mime: [ext, ...]}, "mimes": {ext: [mime, ...]}}
RawTable = dict[str, dict[str, list[str]]]

# Read-only snapshot of a RawTable, as held by lookups
FrozenTable = Mapping[str, Mapping[str, tuple[str, ...]]]

TABLE_SECTIONS = ("extensions", "mimes")


class MappingTable(BaseModel):
    """Schema for an extension <-> MIME type mapping table.

    Attributes:
        extensions: MIME type to ordered extensions, first one preferred.
        mimes: Extension to ordered MIME types, first one preferred.
    """

    model_config = ConfigDict(frozen=True)

    extensions: dict[str, list[str]] = {}
    mimes: dict[str, list[str]] = {}

    def to_raw(self) -> RawTable:
        """Convert to the plain dict shape consumed by MimeTypes."""
        return self.model_dump()

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON, None indent for compact output."""
        return self.model_dump_json(indent=indent)

    @classmethod
    def from_raw(cls, data: Any) -> "MappingTable":
        """Validate a plain dict against the table schema."""
        return cls.model_validate(data)


def freeze_table(mapping: Mapping[str, Any] | MappingTable) -> FrozenTable:
    """
    Take a read-only snapshot of a table.

    Sections and entries that are not of the expected shape are dropped, so
    lookups against them find nothing.

    Args:
        mapping: Table with "extensions" and "mimes" entries

    Returns:
        Nested read-only mappings with tuple values
    """
    if isinstance(mapping, MappingTable):
        mapping = mapping.to_raw()
    if not isinstance(mapping, Mapping):
        mapping = {}

    return MappingProxyType({name: _freeze_section(mapping.get(name)) for name in TABLE_SECTIONS})


def _freeze_section(section: Any) -> Mapping[str, tuple[str, ...]]:
    if not isinstance(section, Mapping):
        return MappingProxyType({})
    return MappingProxyType(
        {key: tuple(values) for key, values in section.items() if isinstance(values, (list, tuple))}
    )
