"""API router for notes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from moderation_console.core.config import settings
from moderation_console.core.database import get_session
from moderation_console.modules.audit.service import AuditLogger
from moderation_console.modules.moderation.dependencies import get_audit_logger
from moderation_console.modules.note.schemas import NoteCreate, NoteResponse
from moderation_console.modules.note.service import NoteService

router = APIRouter(prefix="/note", tags=["notes"])


def get_note_service(
    session: AsyncSession = Depends(get_session),
    audit: AuditLogger = Depends(get_audit_logger),
) -> NoteService:
    return NoteService(session, audit, video_id=settings.VIDEO_ID)


@router.post("", response_model=NoteResponse)
async def add_note(
    body: NoteCreate,
    service: NoteService = Depends(get_note_service),
):
    """Add a note about the configured video."""
    note = await service.add_note(body.content, body.tags)
    return NoteResponse.model_validate(note)


@router.get("/search", response_model=list[NoteResponse])
async def search_notes(
    q: str = Query("", description="Case-insensitive text to look for in note content"),
    service: NoteService = Depends(get_note_service),
):
    """Search notes by content."""
    notes = await service.search(q)
    return [NoteResponse.model_validate(note) for note in notes]
