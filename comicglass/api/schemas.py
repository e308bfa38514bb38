"""
Pydantic models for API responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from comicglass.api.views import build_entry_href, display_name


class EntryView(BaseModel):
    """Schema for one listing entry as shown to clients."""

    name: str = Field(..., description="Entry name")
    is_dir: bool = Field(..., description="Whether the entry is a directory")
    href: str = Field(..., description="Link to browse the directory or fetch the file")
    modify_time: int = Field(..., description="Last modification time (Unix seconds)")
    size: Optional[int] = Field(None, description="File size in bytes (files only)")

    @classmethod
    def from_entity(cls, entry):
        """Create an EntryView schema from an Entry entity."""
        return cls(
            name=display_name(entry.name),
            is_dir=entry.is_dir,
            href=build_entry_href(entry),
            modify_time=entry.modify_time,
            size=None if entry.is_dir else entry.size,
        )


class ListingResponse(BaseModel):
    """Schema for a directory listing response."""

    label: str = Field(..., description="Display label, './' for the library root")
    path: str = Field(..., description="Normalized requested path")
    entries: List[EntryView] = Field(..., description="Directories first, then files")

    @classmethod
    def from_listing(cls, listing):
        return cls(
            label=display_name(listing.label),
            path=display_name(listing.path),
            entries=[EntryView.from_entity(e) for e in listing.entries],
        )


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
