"""
Tests for the dependency container.
"""

from comicglass.adapters.library.local_library_adapter import LocalLibraryAdapter
from comicglass.config.settings import Settings
from comicglass.use_cases.library.browse_directory import BrowseDirectoryUseCase
from comicglass.use_cases.library.open_file import OpenFileUseCase


class TestDependencyContainer:
    """Test cases for DependencyContainer."""

    def test_library_repository_uses_settings(self, dependency_container, library_root):
        repository = dependency_container.get_library_repository()

        assert isinstance(repository, LocalLibraryAdapter)
        assert repository.library.root == library_root

    def test_instances_are_shared(self, dependency_container):
        browse = dependency_container.get_browse_directory_use_case()
        open_file = dependency_container.get_open_file_use_case()

        assert isinstance(browse, BrowseDirectoryUseCase)
        assert isinstance(open_file, OpenFileUseCase)
        assert browse is dependency_container.get_browse_directory_use_case()
        assert (
            browse._library_repository
            is open_file._library_repository
            is dependency_container.get_library_repository()
        )

    def test_browse_through_container(self, dependency_container):
        result = dependency_container.get_browse_directory_use_case().execute("")

        assert [e.name for e in result.entries] == ["SubDir", "Vol 1 #2?", "zzz.png"]

    def test_reset(self, dependency_container, tmp_path):
        first = dependency_container.get_library_repository()

        dependency_container.reset(Settings(library_root=str(tmp_path)))
        second = dependency_container.get_library_repository()

        assert first is not second
        assert second.library.root == str(tmp_path)
