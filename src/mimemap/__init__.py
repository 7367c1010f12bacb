"""
mimemap - Convert MIME types to file extensions and vice versa.
"""

from .base import BaseMimeTypes
from .builtin import BuiltInTable
from .exceptions import MimeMapError, TableLoadError
from .generator import MimeMappingGenerator
from .loader import (
    generate_table,
    load_default_table,
    load_json_table,
    load_mime_types_file,
    read_default_data,
    read_mime_types_file,
)
from .mime_types import MimeTypes
from .table import FrozenTable, MappingTable, RawTable, freeze_table

__version__ = "0.1.0"
__all__ = [
    # Lookup
    "BaseMimeTypes",
    "MimeTypes",
    "BuiltInTable",
    # Tables
    "MappingTable",
    "RawTable",
    "FrozenTable",
    "freeze_table",
    "MimeMappingGenerator",
    "generate_table",
    "load_default_table",
    "load_json_table",
    "load_mime_types_file",
    "read_default_data",
    "read_mime_types_file",
    # Exceptions
    "MimeMapError",
    "TableLoadError",
]
