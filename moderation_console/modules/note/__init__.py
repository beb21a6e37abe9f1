"""Notes module.

Free-form annotations about the configured video.
"""

from moderation_console.modules.note.models import Note
from moderation_console.modules.note.repository import NoteRepository
from moderation_console.modules.note.service import NoteService

__all__ = [
    "Note",
    "NoteRepository",
    "NoteService",
]
