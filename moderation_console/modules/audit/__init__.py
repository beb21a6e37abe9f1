"""Audit trail module.

Records every action taken against the configured video.
"""

from moderation_console.modules.audit.models import AuditAction, AuditEntry, AuditLog
from moderation_console.modules.audit.service import AuditLogger

__all__ = [
    "AuditAction",
    "AuditEntry",
    "AuditLog",
    "AuditLogger",
]
