"""
Account Recovery Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import TokenPurpose

# Export all entities
from .user import User
from .session import Session
from .recovery_token import RecoveryToken
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "TokenPurpose",
    # Entities
    "User",
    "Session",
    "RecoveryToken",
    "AuditEvent",
]
