"""
Note editing operations that keep derived fields in sync with content.
"""

import asyncio

from codenote.models.folder import Folder
from codenote.models.note import Note
from codenote.services.generator import TitleSummaryGenerator
from codenote.utils.logger import get_logger

logger = get_logger(__name__)


class NoteService:
    """
    Applies content changes to notes and schedules title/summary derivation.

    Derivation runs in the background; every scheduling call returns the
    asyncio.Task so the caller can await it (for example before closing an
    editor) or ignore it. Derivations for the same note are not coordinated:
    callers serialize them.

    Usage:
        service = NoteService(generator)
        task = service.update_content(note, "Buy milk and call the plumber")
        await task  # note.title / note.summary are now set
    """

    def __init__(self, generator: TitleSummaryGenerator):
        """
        Initialize note service.

        Args:
            generator: Title/summary generator used for derivation
        """
        self.generator = generator
        self._pending: set[asyncio.Task] = set()

    def create_note(self, folder: Folder | None = None, content: str = "") -> Note:
        """
        Create a note with the placeholder title.

        Args:
            folder: Optional folder to attach the note to
            content: Initial content (derivation is not triggered)

        Returns:
            New note
        """
        note = Note(title=self.generator.placeholder_title, content=content)
        if folder is not None:
            folder.add_note(note)
        return note

    def update_content(self, note: Note, new_content: str) -> "asyncio.Task[Note]":
        """
        Replace a note's content and re-derive title and summary.

        Must be called from within a running event loop.

        Args:
            note: Note to update
            new_content: New raw content

        Returns:
            Task resolving to the note once title and summary are assigned
        """
        note.content = new_content
        note.touch()
        if not new_content:
            note.title = self.generator.placeholder_title

        logger.debug(f"Content of {note.id} updated ({len(new_content)} chars)")
        return self._schedule(self._derive_all(note, new_content))

    def regenerate_summary(self, note: Note) -> "asyncio.Task[Note]":
        """
        Re-derive only the summary from the note's current content.

        Returns:
            Task resolving to the note once the summary is assigned
        """
        logger.debug(f"Regenerating summary of {note.id}")
        return self._schedule(self._derive_summary(note, note.content))

    async def drain(self) -> None:
        """Wait for all scheduled derivations, including ones scheduled meanwhile."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def _schedule(self, coro) -> "asyncio.Task[Note]":
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _derive_all(self, note: Note, content: str) -> Note:
        result = await self.generator.derive(content)
        note.title = result.title
        note.summary = result.summary
        logger.info(
            f"Derived fields of {note.id}: title from {result.title_source.value}, "
            f"summary from {result.summary_source.value}"
        )
        return note

    async def _derive_summary(self, note: Note, content: str) -> Note:
        note.summary = await self.generator.derive_summary(content)
        return note
