"""Path confinement helpers for the library root.

Every function here is pure path arithmetic: nothing touches the
filesystem and nothing depends on the process working directory once the
root is absolute.
"""

from __future__ import annotations

import os
import posixpath

from comicglass.exceptions import PathNotExistError

CURRENT_DIR = "."


def normalize_requested(requested: str) -> str:
    """Lexically clean a client path into slash form; '' and '.' become '.'."""
    s = str(requested or "").replace(os.sep, "/")
    cleaned = posixpath.normpath(s) if s else CURRENT_DIR
    # posixpath keeps a leading '//' intact
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def strip_anchor(cleaned: str) -> str:
    """Drop drive letters and leading separators so the path joins under root."""
    _, tail = os.path.splitdrive(cleaned)
    return tail.lstrip("/")


def is_within_root(root: str, target: str) -> bool:
    """Return True if absolute ``target`` is ``root`` itself or below it."""
    try:
        rel = os.path.relpath(os.path.abspath(target), root)
    except ValueError:
        # different drives on Windows
        return False
    if rel == CURRENT_DIR:
        return True
    first = rel.split(os.sep, 1)[0]
    return first != os.pardir


def resolve_within_root(root: str, requested: str) -> str:
    """
    Resolve a client-supplied path to an absolute path confined to root.

    Args:
        root: Absolute library root
        requested: Client path, possibly holding '..', empty segments or
            absolute-looking prefixes

    Returns:
        Absolute path inside root

    Raises:
        PathNotExistError: If the path would escape root
    """
    cleaned = normalize_requested(requested)
    if cleaned == CURRENT_DIR:
        return root

    tail = strip_anchor(cleaned)
    if not tail or tail == CURRENT_DIR:
        return root

    candidate = os.path.abspath(os.path.join(root, *tail.split("/")))
    if not is_within_root(root, candidate):
        raise PathNotExistError()
    return candidate


def relative_to_root(root: str, abs_path: str) -> str:
    """Slash-separated path of ``abs_path`` relative to root."""
    rel = os.path.relpath(abs_path, root)
    return rel.replace(os.sep, "/")


def display_label(requested: str) -> str:
    """Label shown for a listing: './' for the root, else the cleaned path."""
    cleaned = normalize_requested(requested.strip() if requested else "")
    if cleaned == CURRENT_DIR:
        return "./"
    return cleaned
