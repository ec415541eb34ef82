"""
Account Recovery Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TokenPurpose(str, Enum):
    """Which flow a recovery token belongs to"""

    password_reset = "password_reset"
    email_verification = "email_verification"
