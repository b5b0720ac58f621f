"""
ID generation utilities for CodeNote.

Provides consistent ID generation for entity types:
- Notes: note_xxx
- Folders: folder_xxx
"""

from uuid import uuid4


def generate_note_id() -> str:
    """
    Generate unique Note ID.

    Returns:
        ID in format "note_xxx" where xxx is 12 hex characters
    """
    return f"note_{uuid4().hex[:12]}"


def generate_folder_id() -> str:
    """
    Generate unique Folder ID.

    Returns:
        ID in format "folder_xxx" where xxx is 12 hex characters
    """
    return f"folder_{uuid4().hex[:12]}"
