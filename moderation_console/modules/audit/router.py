"""API router for reading the audit trail."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from moderation_console.modules.audit.models import AuditAction, AuditEntry
from moderation_console.modules.audit.service import AuditLogger
from moderation_console.modules.moderation.dependencies import get_audit_logger

router = APIRouter(prefix="/logs", tags=["audit"])


@router.get("", response_model=list[AuditEntry])
async def list_audit_entries(
    action: Optional[AuditAction] = None,
    limit: int = Query(100, ge=1, le=1000),
    audit: AuditLogger = Depends(get_audit_logger),
):
    """List audit entries, most recent first."""
    return await audit.list_entries(action=action, limit=limit)
