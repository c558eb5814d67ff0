"""
Contract Validation Module

Модуль для валидации JSON контрактов сохраняемых данных.
"""

from .validators import (
    ContractValidator,
    NotesDocumentValidator,
    SchemaLoader,
    validate_notes_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NotesDocumentValidator",
    # Functions
    "validate_notes_document",
]
