"""comicglass package: a small HTTP library browser for ComicGlass readers.

Submodules are imported directly; keep __all__ empty.
"""

__all__: list[str] = []
