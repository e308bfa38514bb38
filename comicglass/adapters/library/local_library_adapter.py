"""
Local file system adapter implementation for library browsing.
"""

import logging
import os
import stat

from typing_extensions import override

from comicglass.entities.entry import Entry, sort_entries
from comicglass.entities.library import Library
from comicglass.exceptions import FilesystemError, PathNotExistError
from comicglass.ports.library.library_repository_port import (
    ENTRY_DIR,
    ENTRY_FILE,
    ENTRY_OTHER,
    LibraryRepositoryPort,
)
from comicglass.utils.paths import (
    is_within_root,
    relative_to_root,
    resolve_within_root,
)


class LocalLibraryAdapter(LibraryRepositoryPort):
    """Local file system implementation of the library repository port."""

    def __init__(self, library: Library, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            library: Immutable library configuration (absolute root and allow-list)
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._library = library
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @property
    @override
    def library(self) -> Library:
        return self._library

    @override
    def resolve(self, requested: str) -> str:
        return resolve_within_root(self._library.root, requested)

    @override
    def entry_type(self, absolute_path: str) -> str:
        root = self._library.root
        try:
            # The root may itself be a link; anything below it may not
            st = os.stat(absolute_path) if absolute_path == root else os.lstat(absolute_path)
        except (FileNotFoundError, NotADirectoryError, ValueError):
            raise PathNotExistError()
        except OSError as e:
            self._logger.error(f"Cannot stat {absolute_path}: {e}")
            raise FilesystemError(f"Failed to stat {absolute_path}: {e}") from e

        if stat.S_ISLNK(st.st_mode):
            return ENTRY_OTHER
        if absolute_path != root and not is_within_root(
            os.path.realpath(root), os.path.realpath(absolute_path)
        ):
            # A linked parent directory points outside the library
            return ENTRY_OTHER

        if stat.S_ISDIR(st.st_mode):
            return ENTRY_DIR
        if stat.S_ISREG(st.st_mode):
            return ENTRY_FILE
        return ENTRY_OTHER

    def _create_entry(self, dir_entry: os.DirEntry) -> Entry | None:
        """
        Build an Entry from a directory child, or None if it must be skipped.

        Symlinks are not followed, so links, sockets and devices are skipped
        along with files outside the allow-list.
        """
        st = dir_entry.stat(follow_symlinks=False)
        relative = relative_to_root(self._library.root, dir_entry.path)

        if stat.S_ISDIR(st.st_mode):
            return Entry.directory(dir_entry.name, relative, int(st.st_mtime))

        if not stat.S_ISREG(st.st_mode):
            return None

        if not self._library.allows(dir_entry.name):
            return None

        return Entry.file(dir_entry.name, relative, int(st.st_mtime), st.st_size)

    @override
    def list_entries(self, absolute_dir: str) -> list[Entry]:
        entries: list[Entry] = []
        try:
            with os.scandir(absolute_dir) as it:
                for dir_entry in it:
                    try:
                        entry = self._create_entry(dir_entry)
                    except FileNotFoundError:
                        # Removed between readdir and stat
                        self._logger.warning(
                            f"Entry vanished while listing: {dir_entry.path}"
                        )
                        continue
                    if entry is not None:
                        entries.append(entry)
        except (FileNotFoundError, NotADirectoryError):
            raise PathNotExistError()
        except OSError as e:
            self._logger.error(f"Failed to list {absolute_dir}: {e}")
            raise FilesystemError(f"Failed to list {absolute_dir}: {e}") from e

        return sort_entries(entries)
