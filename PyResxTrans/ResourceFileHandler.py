from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, TextIO

if TYPE_CHECKING:
    from PyResxTrans.ResourceTable import ResourceEntry

class ResourceFileHandler(ABC):
    """
    Abstract interface for reading and writing resource files.
    Implementations handle format-specific operations while the merge logic
    only sees ordered tables of entries.
    """

    @abstractmethod
    def parse_file(self, file_obj: TextIO) -> Iterator[ResourceEntry]:
        """
        Parse resource file content and yield ResourceEntry objects.

        Args:
            file_obj: Open file object to read from

        Yields:
            ResourceEntry: Parsed entries in file order

        Raises:
            ResourceParseError: If file cannot be parsed
        """
        pass

    @abstractmethod
    def parse_string(self, content: str) -> Iterator[ResourceEntry]:
        """
        Parse resource content from a string and yield ResourceEntry objects.

        Raises:
            ResourceParseError: If content cannot be parsed
        """
        pass

    @abstractmethod
    def compose_entries(self, entries: list[ResourceEntry]) -> str:
        """
        Compose entries into the file format.

        Args:
            entries: Entries to write, in output order

        Returns:
            str: Formatted file content
        """
        pass

    @abstractmethod
    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler (e.g. ['.resx'])
        """
        pass

    @property
    def format_name(self) -> str:
        return self.get_file_extensions()[0].lstrip('.')
