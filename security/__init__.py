"""
Security Module
Password hashing
"""

from .passwords import PasswordHasher, MAX_PASSWORD_BYTES, password_too_long

__all__ = ["PasswordHasher", "MAX_PASSWORD_BYTES", "password_too_long"]
