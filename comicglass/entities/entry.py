"""
Entry domain entity and its ordering.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Iterable


@dataclass(frozen=True)
class Entry:
    """
    One child of a library directory, either a file or a subdirectory.

    ``size`` is only meaningful for files and is always 0 for directories.
    """

    name: str
    relative_path: str
    modify_time: int
    size: int = 0
    is_dir: bool = False

    @classmethod
    def directory(cls, name: str, relative_path: str, modify_time: int) -> "Entry":
        return cls(name, relative_path, modify_time, 0, True)

    @classmethod
    def file(
        cls, name: str, relative_path: str, modify_time: int, size: int
    ) -> "Entry":
        return cls(name, relative_path, modify_time, size, False)

    def get_details(self) -> dict[str, Any]:
        """
        Get entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "name": self.name,
            "relative_path": self.relative_path,
            "modify_time": self.modify_time,
            "size": None if self.is_dir else self.size,
            "type": "directory" if self.is_dir else "file",
        }

    def __str__(self) -> str:
        kind = "dir" if self.is_dir else "file"
        return f"[{kind}] {self.relative_path}"


def compare_entries(left: Entry, right: Entry) -> int:
    """
    Total order for listings: directories first, then case-folded name.

    Names equal after case folding fall back to the raw name so that the
    result never depends on filesystem iteration order.
    """
    if left.is_dir != right.is_dir:
        return -1 if left.is_dir else 1

    left_key = (left.name.casefold(), left.name)
    right_key = (right.name.casefold(), right.name)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    return sorted(entries, key=cmp_to_key(compare_entries))
