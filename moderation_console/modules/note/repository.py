"""Repository for note data access."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moderation_console.modules.note.models import Note


class NoteRepository:
    """Repository for Note create and search operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, note: Note) -> Note:
        """Create a new note."""
        self.session.add(note)
        await self.session.flush()
        return note

    async def search(self, query: str, limit: int = 100) -> list[Note]:
        """Find notes whose content contains ``query``, ignoring case.

        An empty query matches every note.
        """
        stmt = select(Note).order_by(Note.created_at.desc()).limit(limit)
        if query:
            escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            stmt = stmt.where(Note.content.ilike(f"%{escaped}%", escape="\\"))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
