"""Audit logger for actions taken against the upstream video.

Entries are written only after the upstream call succeeded. A failed write
is logged but never fails the operation it describes.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from moderation_console.core.logging import log_error
from moderation_console.modules.audit.models import AuditAction, AuditEntry, AuditLog

logger = logging.getLogger(__name__)


class AuditLogger:
    """Append-only audit trail backed by the ``audit_logs`` table.

    Each call to :meth:`record` runs in its own session and transaction, so
    concurrent requests never contend over a shared row.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize audit logger.

        Args:
            session_factory: Factory producing database sessions
        """
        self.session_factory = session_factory

    async def record(
        self,
        action: AuditAction,
        meta: Optional[dict[str, Any]] = None,
    ) -> Optional[AuditEntry]:
        """Append an audit entry.

        Args:
            action: Type of action being logged
            meta: Action-specific details

        Returns:
            AuditEntry: The stored entry, or None if it could not be persisted
        """
        row = AuditLog(
            id=uuid.uuid4(),
            action=action.value,
            meta=dict(meta or {}),
            created_at=datetime.now(timezone.utc),
        )
        try:
            async with self.session_factory() as session:
                session.add(row)
                await session.commit()
        except Exception as e:
            # The upstream action already happened; losing the entry must not undo it
            log_error(
                logger,
                "Failed to write audit entry",
                exception=e,
                action=action.value,
                meta=row.meta,
            )
            return None

        return AuditEntry.model_validate(row)

    async def list_entries(
        self,
        action: Optional[AuditAction] = None,
        limit: int = 100,
    ) -> list[AuditEntry]:
        """Get audit entries, most recent first.

        Args:
            action: Filter by action type
            limit: Maximum number of entries to return

        Returns:
            list[AuditEntry]: Matching entries
        """
        query = select(AuditLog).order_by(AuditLog.created_at.desc()).limit(limit)
        if action is not None:
            query = query.where(AuditLog.action == action.value)

        async with self.session_factory() as session:
            result = await session.execute(query)
            return [AuditEntry.model_validate(row) for row in result.scalars().all()]
