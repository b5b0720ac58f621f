"""
Folder model. A folder owns its notes.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from codenote.models.note import Note
from codenote.utils.exceptions import NotFoundError
from codenote.utils.id_generator import generate_folder_id


class Folder(BaseModel):
    """Named collection of notes."""

    id: str = Field(default_factory=generate_folder_id, description="Unique folder ID")
    name: str = Field(..., description="Folder name")
    notes: list[Note] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def note_count(self) -> int:
        return len(self.notes)

    def add_note(self, note: Note) -> None:
        """Attach a note to this folder."""
        note.folder_id = self.id
        self.notes.append(note)

    def remove_note(self, note_id: str) -> Note:
        """
        Detach a note from this folder.

        Raises:
            NotFoundError: If the note is not in this folder
        """
        for index, note in enumerate(self.notes):
            if note.id == note_id:
                del self.notes[index]
                note.folder_id = None
                return note
        raise NotFoundError(
            f"Note {note_id} not found in folder {self.id}",
            context={"note_id": note_id, "folder_id": self.id},
        )
