"""Base lookup interface."""

from abc import ABC, abstractmethod


class BaseMimeTypes(ABC):
    """Abstract base class for extension <-> MIME type lookups."""

    @abstractmethod
    def get_mime_type(self, extension: str) -> str | None:
        """
        Get the primary MIME type for an extension.

        Args:
            extension: The file extension, without leading dot

        Returns:
            The first MIME type listed for the extension or None if not found
        """
        pass

    @abstractmethod
    def get_extension(self, mime_type: str) -> str | None:
        """
        Get the primary extension for a MIME type.

        Args:
            mime_type: The MIME type

        Returns:
            The first extension listed for the MIME type or None if not found
        """
        pass

    @abstractmethod
    def get_all_mime_types(self, extension: str) -> list[str]:
        """
        Get all MIME types for an extension.

        Args:
            extension: The file extension, without leading dot

        Returns:
            The MIME types in table order, empty if not found
        """
        pass

    @abstractmethod
    def get_all_extensions(self, mime_type: str) -> list[str]:
        """
        Get all extensions for a MIME type.

        Args:
            mime_type: The MIME type

        Returns:
            The extensions in table order, empty if not found
        """
        pass
