"""Auth — вход пользователя перед открытием заметок."""

from .login import (
    PBKDF2_ITERATIONS_DEFAULT,
    CredentialPolicy,
    LoginResult,
    UserDirectory,
    hash_password,
)

__all__ = [
    "PBKDF2_ITERATIONS_DEFAULT",
    "CredentialPolicy",
    "LoginResult",
    "UserDirectory",
    "hash_password",
]
