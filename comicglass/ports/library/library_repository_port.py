"""
Library repository port interface defining the contract for browsing the library.
"""

from abc import ABC, abstractmethod

from comicglass.entities.entry import Entry
from comicglass.entities.library import Library

ENTRY_DIR = "dir"
ENTRY_FILE = "file"
ENTRY_OTHER = "other"


class LibraryRepositoryPort(ABC):
    """Port interface for read-only library operations."""

    @property
    @abstractmethod
    def library(self) -> Library:
        """The library this repository is confined to."""
        pass

    @abstractmethod
    def resolve(self, requested: str) -> str:
        """
        Resolve a client-supplied path to an absolute path inside the library root.

        Args:
            requested: Relative path as sent by the client

        Returns:
            Absolute path guaranteed to be within the root

        Raises:
            PathNotExistError: If the path escapes the root
        """
        pass

    @abstractmethod
    def entry_type(self, absolute_path: str) -> str:
        """
        Report what lives at an absolute path.

        Args:
            absolute_path: Path previously returned by resolve()

        Returns:
            One of ENTRY_DIR, ENTRY_FILE or ENTRY_OTHER; symlinks and paths
            whose real location is outside the root are ENTRY_OTHER

        Raises:
            PathNotExistError: If nothing exists at the path
            FilesystemError: On any other filesystem failure
        """
        pass

    @abstractmethod
    def list_entries(self, absolute_dir: str) -> list[Entry]:
        """
        List the immediate children of a directory, filtered and sorted.

        Args:
            absolute_dir: Directory previously returned by resolve()

        Returns:
            Entries with directories first, then files, by case-folded name

        Raises:
            PathNotExistError: If the directory does not exist
            FilesystemError: On any other filesystem failure
        """
        pass
