"""
Use case for opening a library file to stream it to a client.
"""

import logging
import os
from typing import Optional

from comicglass.exceptions import BaseAppError, FilesystemError, PathNotExistError
from comicglass.ports.library.library_repository_port import (
    ENTRY_FILE,
    LibraryRepositoryPort,
)


class OpenFileUseCase:
    """Use case for locating a single file of the library."""

    def __init__(
        self,
        library_repository: LibraryRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._library_repository = library_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Resolve a request path to a servable file.

        Args:
            path: URL path of the file, relative to the library root

        Returns:
            Absolute path of the file

        Raises:
            PathNotExistError: If the path is blank, escapes the root, is missing,
                is not a regular file or has an extension outside the allow-list
        """
        requested = (path or "").lstrip("/")
        if not requested.strip():
            raise PathNotExistError()

        try:
            self._logger.info(f"Opening file: {requested}")
            absolute = self._library_repository.resolve(requested)
            if self._library_repository.entry_type(absolute) != ENTRY_FILE:
                raise PathNotExistError()
            if not self._library_repository.library.allows(os.path.basename(absolute)):
                raise PathNotExistError()
            return absolute
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error opening file: {e}")
            raise FilesystemError(f"Failed to open {requested}: {str(e)}")
