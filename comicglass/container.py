"""
Dependency injection container for managing application dependencies.
"""

import logging

from comicglass.adapters.library.local_library_adapter import LocalLibraryAdapter
from comicglass.config.settings import Settings
from comicglass.ports.library.library_repository_port import LibraryRepositoryPort
from comicglass.use_cases.library.browse_directory import BrowseDirectoryUseCase
from comicglass.use_cases.library.open_file import OpenFileUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings, read from the environment on first use.

        Returns:
            Settings instance
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_library_repository(self) -> LibraryRepositoryPort:
        """
        Get library repository adapter instance.

        Returns:
            LibraryRepositoryPort implementation
        """
        if "library_repository" not in self._instances:
            library = self.get_settings().library()
            self._instances["library_repository"] = LocalLibraryAdapter(
                library, self._logger
            )
        return self._instances["library_repository"]

    def get_browse_directory_use_case(self) -> BrowseDirectoryUseCase:
        """
        Get browse directory use case with injected dependencies.

        Returns:
            Configured BrowseDirectoryUseCase
        """
        if "browse_directory_use_case" not in self._instances:
            repository = self.get_library_repository()
            self._instances["browse_directory_use_case"] = BrowseDirectoryUseCase(
                repository, self._logger
            )
        return self._instances["browse_directory_use_case"]

    def get_open_file_use_case(self) -> OpenFileUseCase:
        """
        Get open file use case with injected dependencies.

        Returns:
            Configured OpenFileUseCase
        """
        if "open_file_use_case" not in self._instances:
            repository = self.get_library_repository()
            self._instances["open_file_use_case"] = OpenFileUseCase(
                repository, self._logger
            )
        return self._instances["open_file_use_case"]

    def reset(self, settings: Settings | None = None):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
        self._settings = settings


# Global container instance
container = DependencyContainer()
