"""
Note — Модель заметки с уравнением

Immutable Pydantic модели:
- Note: пара title/text, text хранит уравнение без изменений
- NotesDocument: сохраняемый документ со всеми заметками пользователя
  (совместим с contracts/schema/notes_document.json)
"""

from typing import Final, Literal

from pydantic import BaseModel, Field


# Версия формата сохраняемого документа
NOTES_SCHEMA_VERSION: Final[str] = "1"

TITLE_MAX_LENGTH: Final[int] = 50
EQUATION_MAX_LENGTH: Final[int] = 200


class Note(BaseModel):
    """
    Заметка: заголовок и уравнение.

    Ограничения длины совпадают с формой ввода; набор символов проверяется
    в src.notes.validation, а не здесь.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Заголовок")
    text: str = Field(
        ..., min_length=1, max_length=EQUATION_MAX_LENGTH, description="Текст уравнения"
    )

    model_config = {"frozen": True}


class NotesDocument(BaseModel):
    """
    Документ заметок одного пользователя.

    storage_key — ключ хранилища, под которым документ записан.
    """

    schema_version: Literal["1"] = Field(NOTES_SCHEMA_VERSION, description="Версия формата")
    storage_key: str = Field(..., min_length=1, description="Ключ хранилища")
    notes: tuple[Note, ...] = Field(default_factory=tuple, description="Заметки по порядку")

    model_config = {"frozen": True}
