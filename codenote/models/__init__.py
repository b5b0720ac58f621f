"""
Data models for CodeNote.

Core models:
- Note: note content with derived title/summary, hashtags and photos
- Folder: named collection owning notes
- Priority, Status, NoteType: hashtag enums
- DerivationResult, DerivationSource: output of the title/summary generator
"""

from codenote.models.derivation import DerivationResult, DerivationSource
from codenote.models.folder import Folder
from codenote.models.note import Note, NoteType, Priority, Status

__all__ = [
    "Note",
    "Folder",
    "Priority",
    "Status",
    "NoteType",
    "DerivationResult",
    "DerivationSource",
]
