"""
Domain models and value objects.

Contains tokens, evaluation outcomes, notes and users.
"""

from src.core.domain.note import (
    EQUATION_MAX_LENGTH,
    NOTES_SCHEMA_VERSION,
    TITLE_MAX_LENGTH,
    Note,
    NotesDocument,
)
from src.core.domain.outcome import (
    ERROR_MESSAGES,
    ErrorKind,
    EvalOutcome,
    Failure,
    Success,
    failure,
)
from src.core.domain.tokens import (
    Number,
    Operator,
    OperatorKind,
    Paren,
    ParenKind,
    Token,
)
from src.core.domain.user import User, UserRecord

__all__ = [
    # Tokens
    "Number",
    "Operator",
    "OperatorKind",
    "Paren",
    "ParenKind",
    "Token",
    # Outcomes
    "ERROR_MESSAGES",
    "ErrorKind",
    "EvalOutcome",
    "Failure",
    "Success",
    "failure",
    # Notes
    "EQUATION_MAX_LENGTH",
    "NOTES_SCHEMA_VERSION",
    "TITLE_MAX_LENGTH",
    "Note",
    "NotesDocument",
    # Users
    "User",
    "UserRecord",
]
