"""
Library domain entity: the confined root and the extension allow-list.
"""

from dataclasses import dataclass, field

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    "gif",
    "png",
    "jpg",
    "jpeg",
    "tif",
    "tiff",
    "zip",
    "rar",
    "cbz",
    "cbr",
    "bmp",
    "pdf",
    "cgt",
)


def default_allowed_extensions() -> frozenset[str]:
    """Build the allow-list from the built-in extensions."""
    return frozenset(ext.lower() for ext in DEFAULT_EXTENSIONS)


def extension_of(name: str) -> str:
    """Return the lower-cased text after the last dot of ``name``, or ''."""
    _, dot, ext = name.rpartition(".")
    return ext.lower() if dot else ""


def is_allowed_extension(name: str, allowed: frozenset[str]) -> bool:
    """
    Check whether a file name carries an allowed extension.

    Args:
        name: File base name
        allowed: Lower-cased extensions without the leading dot

    Returns:
        True if the extension is in the allow-list, False otherwise
    """
    ext = extension_of(name)
    if not ext:
        return False
    return ext in allowed


@dataclass(frozen=True)
class Library:
    """Immutable library configuration shared by every request."""

    root: str
    allowed_extensions: frozenset[str] = field(
        default_factory=default_allowed_extensions
    )

    def allows(self, name: str) -> bool:
        return is_allowed_extension(name, self.allowed_extensions)
