"""Note service.

Stores notes against the configured video and records each one in the
audit trail.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from moderation_console.modules.audit.models import AuditAction
from moderation_console.modules.audit.service import AuditLogger
from moderation_console.modules.note.models import Note
from moderation_console.modules.note.repository import NoteRepository


class NoteService:
    """Service for creating and searching notes."""

    def __init__(
        self,
        session: AsyncSession,
        audit: AuditLogger,
        video_id: Optional[str] = None,
    ):
        self.session = session
        self.repo = NoteRepository(session)
        self.audit = audit
        self.video_id = video_id

    async def add_note(self, content: str, tags: list[str]) -> Note:
        """Persist a note and record ADD_NOTE once it is committed."""
        note = Note(
            id=uuid.uuid4(),
            video_id=self.video_id,
            content=content,
            tags=tags,
            created_at=datetime.now(timezone.utc),
        )
        await self.repo.create(note)
        await self.session.commit()

        await self.audit.record(AuditAction.ADD_NOTE, {"content": content, "tags": tags})
        return note

    async def search(self, query: str) -> list[Note]:
        return await self.repo.search(query)
