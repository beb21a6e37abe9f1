"""Tests for note storage and search."""

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from moderation_console.core.database import init_models
from moderation_console.modules.audit.models import AuditAction
from moderation_console.modules.audit.service import AuditLogger
from moderation_console.modules.note.schemas import NoteCreate
from moderation_console.modules.note.service import NoteService


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}"


class TestNoteService:

    @pytest.mark.asyncio
    async def test_add_note_persists_and_audits(self, db_url):
        engine = create_async_engine(db_url, poolclass=NullPool)
        await init_models(engine)
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        audit = AuditLogger(session_factory)

        async with session_factory() as session:
            service = NoteService(session, audit, video_id="vid123")
            note = await service.add_note("Pin the giveaway comment", ["todo", "pinned"])

        assert note.video_id == "vid123"
        assert note.tags == ["todo", "pinned"]

        entries = await audit.list_entries(action=AuditAction.ADD_NOTE)
        assert [e.meta for e in entries] == [
            {"content": "Pin the giveaway comment", "tags": ["todo", "pinned"]}
        ]
        await engine.dispose()

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, db_url):
        engine = create_async_engine(db_url, poolclass=NullPool)
        await init_models(engine)
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        audit = AuditLogger(session_factory)

        async with session_factory() as session:
            service = NoteService(session, audit, video_id="vid123")
            await service.add_note("Spam wave from new accounts", [])
            await service.add_note("Reply to sponsor question", ["sponsor"])
            await service.add_note("100% of replies were positive", [])

            spam = await service.search("SPAM")
            reply = await service.search("repl")
            percent = await service.search("100%")
            everything = await service.search("")

        assert [n.content for n in spam] == ["Spam wave from new accounts"]
        assert {n.content for n in reply} == {
            "Reply to sponsor question",
            "100% of replies were positive",
        }
        assert [n.content for n in percent] == ["100% of replies were positive"]
        assert len(everything) == 3
        await engine.dispose()


class TestNoteSchema:

    def test_blank_content_rejected(self):
        with pytest.raises(ValueError):
            NoteCreate(content="   ")

    def test_tags_are_stripped(self):
        note = NoteCreate(content="ok", tags=[" a ", "", "b"])
        assert note.tags == ["a", "b"]
