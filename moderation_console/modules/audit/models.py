"""Audit trail models.

Every action taken against the YouTube video is recorded as one row in
``audit_logs``. Rows are only ever inserted.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from sqlalchemy import JSON, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from moderation_console.core.database import Base


class AuditAction(str, Enum):
    """Types of auditable actions."""

    FETCH_VIDEO_DETAILS = "FETCH_VIDEO_DETAILS"
    UPDATE_VIDEO_DETAILS = "UPDATE_VIDEO_DETAILS"
    FETCH_COMMENTS_PAGE = "FETCH_COMMENTS_PAGE"
    FETCH_COMMENTS_ALL = "FETCH_COMMENTS_ALL"
    POST_COMMENT = "POST_COMMENT"
    DELETE_COMMENT = "DELETE_COMMENT"
    DELETE_COMMENTTHREAD = "DELETE_COMMENTTHREAD"
    ADD_NOTE = "ADD_NOTE"


class AuditLog(Base):
    """Audit log row."""

    __tablename__ = "audit_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    action: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    meta: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )


class AuditEntry(BaseModel):
    """Pydantic model for audit log entries."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    action: str
    meta: dict[str, Any]
    created_at: datetime
