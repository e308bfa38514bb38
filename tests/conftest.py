"""
Pytest configuration and shared fixtures.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from comicglass.adapters.library.local_library_adapter import LocalLibraryAdapter
from comicglass.config.settings import Settings
from comicglass.container import DependencyContainer
from comicglass.entities.library import Library
from comicglass.use_cases.library.browse_directory import BrowseDirectoryUseCase
from comicglass.use_cases.library.open_file import OpenFileUseCase

MTIME = 1_600_000_000


def _write(path, content: bytes = b"data"):
    with open(path, "wb") as f:
        f.write(content)
    os.utime(path, (MTIME, MTIME))


@pytest.fixture
def library_root(tmp_path):
    """
    Create a small library tree for testing.

    Layout:
        B.txt, a.txt, zzz.png, SubDir/{cover.PNG, notes.md, Deep/},
        "Vol 1 #2?"/"page 01#?.jpg"

    Returns:
        Absolute path of the library root
    """
    root = tmp_path / "books"
    root.mkdir()
    _write(root / "B.txt")
    _write(root / "a.txt")
    _write(root / "zzz.png", b"\x89PNG")

    sub = root / "SubDir"
    sub.mkdir()
    _write(sub / "cover.PNG", b"cover")
    _write(sub / "notes.md")
    (sub / "Deep").mkdir()
    os.utime(sub, (MTIME, MTIME))

    odd = root / "Vol 1 #2?"
    odd.mkdir()
    _write(odd / "page 01#?.jpg", b"jpeg")

    # A sibling outside the root, reachable only by escaping it
    _write(tmp_path / "secret.png", b"secret")

    yield str(root)


@pytest.fixture
def library(library_root):
    return Library(root=library_root)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def adapter(library, mock_logger):
    return LocalLibraryAdapter(library, mock_logger)


@pytest.fixture
def dependency_container(library_root, mock_logger):
    """
    Create a dependency container pointed at the test library.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(Settings(library_root=library_root))
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def wired_routes(adapter, mock_logger):
    """Patch the router's use case lookups to use the test library."""
    browse = BrowseDirectoryUseCase(adapter, mock_logger)
    open_file = OpenFileUseCase(adapter, mock_logger)
    with (
        patch("comicglass.api.routers.get_browse_directory_uc", return_value=browse),
        patch("comicglass.api.routers.get_open_file_uc", return_value=open_file),
    ):
        yield


@pytest.fixture
def undecodable_names(library_root):
    """
    Add entries whose names are not valid UTF-8 (legacy Shift-JIS style).

    Layout:
        b"bad\\xff.png", b"Vol\\xfe"/"p1.png"
    """
    root = os.fsencode(library_root)
    try:
        _write(os.path.join(root, b"bad\xff.png"), b"legacy")
        os.mkdir(os.path.join(root, b"Vol\xfe"))
        _write(os.path.join(root, b"Vol\xfe", b"p1.png"), b"page")
    except (OSError, UnicodeError):
        pytest.skip("filesystem rejects non UTF-8 names")
    return library_root


@pytest.fixture
def outside_links(library_root):
    """Symlinks inside the library that point at the sibling outside it."""
    outside = os.path.dirname(library_root)
    try:
        os.symlink(
            os.path.join(outside, "secret.png"), os.path.join(library_root, "out.png")
        )
        os.symlink(outside, os.path.join(library_root, "OutDir"))
    except (OSError, NotImplementedError, AttributeError):
        pytest.skip("cannot create symlinks")
    return library_root
