"""
Link targets for listing entries.
"""

from urllib.parse import quote, quote_plus

from comicglass.entities.entry import Entry


def build_directory_href(relative_path: str) -> str:
    """Self-referencing listing link carrying the path as a query value."""
    return "?path=" + quote_plus(relative_path, safe="", errors="surrogateescape")


def build_file_href(relative_path: str) -> str:
    """Direct link with every path segment percent-encoded on its own."""
    clean = relative_path.replace("\\", "/")
    if clean.startswith("./"):
        clean = clean[2:]
    if clean in ("", "."):
        return "/"

    parts = [quote(part, safe="", errors="surrogateescape") for part in clean.split("/")]
    return "/" + "/".join(parts)


def build_entry_href(entry: Entry) -> str:
    if entry.is_dir:
        return build_directory_href(entry.relative_path)
    return build_file_href(entry.relative_path)


def display_name(name: str) -> str:
    """Printable form of a file name; undecodable bytes become U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
