"""
Services for CodeNote.

- TitleSummaryGenerator: model-backed derivation with heuristic fallback
- NoteService: content updates that keep derived fields in sync
"""

from codenote.services.generator import TitleSummaryGenerator
from codenote.services.note_service import NoteService

__all__ = [
    "TitleSummaryGenerator",
    "NoteService",
]
