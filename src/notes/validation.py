"""Note Validation — проверка формы новой заметки

Порядок проверок:
1. Title: не пустой → длина → набор символов
2. Equation: не пустое → набор символов → длина

Первая проваленная проверка определяет reject_reason и сообщение.
Принятая заметка сохраняется с обрезанными пробелами по краям.

Это проверка формы ввода: evaluator на нее не полагается и очищает
текст уравнения самостоятельно.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from src.core.domain.note import EQUATION_MAX_LENGTH, TITLE_MAX_LENGTH, Note


@dataclass(frozen=True)
class NoteLimits:
    """Ограничения формы новой заметки."""

    title_max_length: int = TITLE_MAX_LENGTH
    equation_max_length: int = EQUATION_MAX_LENGTH
    title_pattern: str = r"^[a-zA-Z0-9\s.,!?()'-]*$"
    equation_pattern: str = r"^[0-9+\-*/().\s]+$"

    def __post_init__(self):
        # Лимиты формы не могут превышать ограничения модели Note
        if not 0 < self.title_max_length <= TITLE_MAX_LENGTH:
            raise ValueError(
                f"title_max_length must be in (0, {TITLE_MAX_LENGTH}], got {self.title_max_length}"
            )
        if not 0 < self.equation_max_length <= EQUATION_MAX_LENGTH:
            raise ValueError(
                f"equation_max_length must be in (0, {EQUATION_MAX_LENGTH}], "
                f"got {self.equation_max_length}"
            )


@dataclass(frozen=True)
class NoteValidationResult:
    """Результат проверки формы."""

    accepted: bool
    reject_reason: str
    message: str

    # Заметка для сохранения (только при accepted)
    note: Optional[Note] = field(default=None)


class NoteValidator:
    """Проверка title/equation новой заметки."""

    def __init__(self, limits: Optional[NoteLimits] = None):
        self.limits = limits or NoteLimits()
        self._title_re = re.compile(self.limits.title_pattern)
        self._equation_re = re.compile(self.limits.equation_pattern)

    def validate(self, title: str, equation: str) -> NoteValidationResult:
        """Проверка формы.

        Args:
            title: заголовок как введен
            equation: уравнение как введено

        Returns:
            NoteValidationResult; при accepted содержит Note
        """
        limits = self.limits

        # 1. Title
        if title.strip() == "":
            return self._reject("title_empty", "Note title cannot be empty.")

        if len(title) > limits.title_max_length:
            return self._reject(
                "title_too_long",
                f"Note title is too long. Max {limits.title_max_length} characters.",
            )

        if not self._title_re.fullmatch(title):
            return self._reject("title_invalid_chars", "Note title contains invalid characters.")

        # 2. Equation
        if equation.strip() == "":
            return self._reject("equation_empty", "Equation cannot be empty.")

        if not self._equation_re.fullmatch(equation):
            return self._reject(
                "equation_invalid_chars",
                "Equation contains invalid characters. "
                "Only numbers, +, -, *, /, (, ), . are allowed.",
            )

        if len(equation) > limits.equation_max_length:
            return self._reject(
                "equation_too_long",
                f"Equation is too long. Max {limits.equation_max_length} characters.",
            )

        return NoteValidationResult(
            accepted=True,
            reject_reason="",
            message="Note added.",
            note=Note(title=title.strip(), text=equation.strip()),
        )

    def _reject(self, reason: str, message: str) -> NoteValidationResult:
        return NoteValidationResult(accepted=False, reject_reason=reason, message=message)
