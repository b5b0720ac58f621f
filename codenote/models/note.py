"""
Note model.

A note holds free-text content plus the title and summary derived from it,
hashtag-like metadata and attached photos.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from codenote.utils.id_generator import generate_note_id

PREVIEW_LENGTH = 100


class Priority(str, Enum):
    """Note priority hashtag."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Status(str, Enum):
    """Note progress hashtag."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class NoteType(str, Enum):
    """Note kind hashtag."""

    FEATURE = "Feature"
    BUG = "Bug"
    IMPROVEMENT = "Improvement"


# Camel-case labels written by older clients
_LEGACY_STATUS_LABELS = {
    "notstart": Status.NOT_STARTED,
    "notstarted": Status.NOT_STARTED,
    "inprogress": Status.IN_PROGRESS,
    "done": Status.DONE,
}


class Note(BaseModel):
    """
    Single note.

    `title` and `summary` are derived from `content` by the title/summary
    generator; `NoteService.update_content` keeps them in sync.
    """

    # Photos are raw image data; JSON carries them base64-encoded
    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    id: str = Field(default_factory=generate_note_id, description="Unique note ID (note_xxx)")
    folder_id: str | None = Field(default=None, description="Owning folder ID")

    title: str = Field(default="", description="Derived (or user-set) title")
    content: str = Field(default="", description="Raw note text")
    summary: str = Field(default="", description="Derived summary, empty for short notes")

    priority: Priority = Field(default=Priority.LOW)
    status: Status = Field(default=Status.NOT_STARTED)
    type: NoteType = Field(default=NoteType.FEATURE)

    photos: list[bytes] = Field(default_factory=list, description="Attached photo data")

    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")
    modified_at: datetime = Field(
        default_factory=datetime.now, description="Last modification timestamp"
    )

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value):
        if isinstance(value, str) and not isinstance(value, Status):
            key = value.replace(" ", "").replace("_", "").lower()
            return _LEGACY_STATUS_LABELS.get(key, value)
        return value

    def touch(self) -> None:
        """Mark the note as modified now."""
        self.modified_at = datetime.now()

    def add_photo(self, photo_data: bytes) -> None:
        """Attach a photo."""
        self.photos.append(photo_data)
        self.touch()

    def remove_photo(self, index: int) -> None:
        """Remove the photo at index; out-of-range indexes are ignored."""
        if not 0 <= index < len(self.photos):
            return
        del self.photos[index]
        self.touch()

    @property
    def preview(self) -> str:
        """
        Short excerpt of the content for list rows.

        Returns:
            Content if at most 100 characters, otherwise its first 100
            characters followed by "..."
        """
        if len(self.content) <= PREVIEW_LENGTH:
            return self.content
        return self.content[:PREVIEW_LENGTH] + "..."
