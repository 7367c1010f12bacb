"""Generate mapping tables from Apache ``mime.types`` data."""

from .table import MappingTable


class MimeMappingGenerator:
    """
    Build a mapping table from ``mime.types`` text.

    Each line holds a MIME type followed by its extensions, separated by
    whitespace. ``#`` starts a comment. Lines without extensions are ignored.

    Extensions keep the order they are listed in on their line. MIME types
    for an extension keep the order the lines appear in the file.
    """

    def __init__(self, mime_types_text: str):
        """
        Initialize the generator.

        Args:
            mime_types_text: Contents of a ``mime.types`` file
        """
        self._text = mime_types_text

    def generate_mapping(self) -> MappingTable:
        """
        Parse the text into a mapping table.

        Returns:
            The generated table
        """
        extensions: dict[str, list[str]] = {}
        mimes: dict[str, list[str]] = {}

        for line in self._text.splitlines():
            line = line.split("#", 1)[0].strip()
            if not line:
                continue

            parts = line.split()
            if len(parts) < 2:
                continue

            mime_type = parts[0].lower()
            for extension in (part.lower() for part in parts[1:]):
                _append_unique(extensions.setdefault(mime_type, []), extension)
                _append_unique(mimes.setdefault(extension, []), mime_type)

        return MappingTable(extensions=extensions, mimes=mimes)


def _append_unique(values: list[str], value: str) -> None:
    if value not in values:
        values.append(value)
