"""
User Use Cases

Read-only user checks.
"""

from .check_email_verified_use_case import CheckEmailVerifiedUseCase, EmailVerifiedResponse

__all__ = [
    "CheckEmailVerifiedUseCase",
    "EmailVerifiedResponse",
]
