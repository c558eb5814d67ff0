"""
Notes Session — открытые заметки пользователя

Добавление заметок через форму и вычисление их уравнений.
Текст уравнения передается в pipeline без изменений.
"""

import math
from typing import TYPE_CHECKING, Optional

from src.core.domain.note import Note
from src.core.domain.outcome import EvalOutcome, Success
from src.core.expression.pipeline import evaluate_expression
from src.notes.validation import NoteValidationResult, NoteValidator

if TYPE_CHECKING:
    from src.notes.store import NotesState

# Выше этого порога целые значения печатаются через repr ("1e+16")
_INTEGER_DISPLAY_LIMIT = 1e16


class NotesSession:
    """Изменяемая обертка над неизменяемым снапшотом NotesState."""

    def __init__(self, state: "NotesState", validator: Optional[NoteValidator] = None):
        self._state = state
        self.validator = validator or NoteValidator()

    @property
    def state(self) -> "NotesState":
        """Текущий снапшот (NotesState) для записи."""
        return self._state

    @property
    def notes(self) -> tuple[Note, ...]:
        return self._state.notes

    def add_note(self, title: str, equation: str) -> NoteValidationResult:
        """Проверка формы и добавление заметки при успехе."""
        result = self.validator.validate(title, equation)
        if result.accepted:
            self._state = self._state.with_note(result.note)
        return result

    def evaluate_note(self, index: int) -> EvalOutcome:
        """Вычисление уравнения заметки.

        Raises:
            IndexError: нет заметки с таким индексом (отрицательные индексы не допускаются)
        """
        if index < 0 or index >= len(self._state.notes):
            raise IndexError(f"note index out of range: {index}")
        return evaluate_expression(self._state.notes[index].text)


def render_outcome(outcome: EvalOutcome) -> str:
    """
    Текст для показа пользователю.

    Целые конечные значения печатаются без дробной части ("Result: 5"),
    остальные через repr ("Result: 0.5", "Result: inf").
    """
    if isinstance(outcome, Success):
        value = outcome.value
        if math.isfinite(value) and value.is_integer() and abs(value) < _INTEGER_DISPLAY_LIMIT:
            return f"Result: {int(value)}"
        return f"Result: {value!r}"
    return f"Result: {outcome.detail}"
