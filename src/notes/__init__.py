"""Notes — хранение и вычисление заметок пользователя.

- Форма новой заметки (validation)
- Сессия заметок с вычислением уравнений (session)
- Файловое хранилище с явными open/close (store)
"""

from .session import NotesSession, render_outcome
from .store import (
    NotesState,
    NotesStorageError,
    NotesStore,
    StorageConfig,
    derive_storage_key,
)
from .validation import NoteLimits, NoteValidationResult, NoteValidator

__all__ = [
    "NoteLimits",
    "NoteValidationResult",
    "NoteValidator",
    "NotesSession",
    "NotesState",
    "NotesStorageError",
    "NotesStore",
    "StorageConfig",
    "derive_storage_key",
    "render_outcome",
]
