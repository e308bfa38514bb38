"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from comicglass.container import container
from comicglass.use_cases.library.browse_directory import BrowseDirectoryUseCase
from comicglass.use_cases.library.open_file import OpenFileUseCase


def get_browse_directory_uc() -> BrowseDirectoryUseCase:
    """
    Get the browse directory use case from the container.

    Returns:
        BrowseDirectoryUseCase: The browse directory use case instance
    """
    return container.get_browse_directory_use_case()


def get_open_file_uc() -> OpenFileUseCase:
    """
    Get the open file use case from the container.

    Returns:
        OpenFileUseCase: The open file use case instance
    """
    return container.get_open_file_use_case()
