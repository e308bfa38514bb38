"""
Use case for browsing a directory of the library.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from comicglass.entities.entry import Entry
from comicglass.exceptions import BaseAppError, FilesystemError, PathNotExistError
from comicglass.ports.library.library_repository_port import (
    ENTRY_DIR,
    LibraryRepositoryPort,
)
from comicglass.utils.paths import CURRENT_DIR, display_label, normalize_requested


@dataclass(frozen=True)
class DirectoryListing:
    """Result of browsing one directory."""

    label: str
    path: str
    entries: list[Entry]


class BrowseDirectoryUseCase:
    """Use case for listing one directory of the library."""

    def __init__(
        self,
        library_repository: LibraryRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            library_repository: Repository for library operations
            logger: Logger instance to use for logging
        """
        self._library_repository = library_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: Optional[str] = None) -> DirectoryListing:
        """
        List a directory of the library.

        Args:
            path: Directory relative to the library root; empty means the root

        Returns:
            DirectoryListing with its label and sorted entries

        Raises:
            PathNotExistError: If the path escapes the root, is missing or is not a directory
            FilesystemError: If reading the directory fails
        """
        requested = (path or "").strip() or CURRENT_DIR
        try:
            self._logger.info(f"Browsing directory: {requested}")
            absolute = self._library_repository.resolve(requested)
            if self._library_repository.entry_type(absolute) != ENTRY_DIR:
                raise PathNotExistError()

            entries = self._library_repository.list_entries(absolute)
            self._logger.info(f"Found {len(entries)} entries")
            return DirectoryListing(
                label=display_label(requested),
                path=normalize_requested(requested),
                entries=entries,
            )
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error browsing directory: {e}")
            raise FilesystemError(f"Failed to browse {requested}: {str(e)}")
