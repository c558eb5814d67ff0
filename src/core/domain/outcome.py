"""
EvalOutcome — результат вычисления выражения

Tagged result вместо "число или строка":
- Success(value) — успешное вычисление
- Failure(kind, detail) — типизированная ошибка из закрытого набора ErrorKind

Ожидаемые ошибки возвращаются как значения, а не исключения, чтобы вызывающий
код мог сопоставить kind и показать стабильное сообщение.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Mapping, Optional, Union


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Классификация ошибок вычисления (закрытый набор)"""

    EMPTY_EXPRESSION = "EMPTY_EXPRESSION"
    CONSECUTIVE_NUMBERS = "CONSECUTIVE_NUMBERS"
    OPERATOR_MISPLACED = "OPERATOR_MISPLACED"
    UNSUPPORTED_TOKEN = "UNSUPPORTED_TOKEN"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    INCOMPLETE_EXPRESSION = "INCOMPLETE_EXPRESSION"
    INTERNAL_FAULT = "INTERNAL_FAULT"


# Пользовательские сообщения по умолчанию.
# INTERNAL_FAULT намеренно общий: текст исходного исключения наружу не попадает.
ERROR_MESSAGES: Final[Mapping[ErrorKind, str]] = {
    ErrorKind.EMPTY_EXPRESSION: "Invalid expression structure.",
    ErrorKind.CONSECUTIVE_NUMBERS: "Malformed expression (consecutive numbers or missing operator).",
    ErrorKind.OPERATOR_MISPLACED: "Malformed expression (operator error).",
    ErrorKind.UNSUPPORTED_TOKEN: "Invalid or unsupported character detected.",
    ErrorKind.DIVISION_BY_ZERO: "Division by zero is not allowed.",
    ErrorKind.INCOMPLETE_EXPRESSION: "Incomplete or malformed expression.",
    ErrorKind.INTERNAL_FAULT: "Error evaluating expression. Check your math.",
}


# =============================================================================
# OUTCOMES
# =============================================================================


@dataclass(frozen=True)
class Success:
    """Успешное вычисление."""

    value: float

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Неуспешное вычисление.

    token_index — индекс токена, на котором fold остановился (только для диагностики);
    None для пустого выражения, конца последовательности и исключений внутри fold'а;
    для NaN (INTERNAL_FAULT) указывает на токен, давший NaN.
    """

    kind: ErrorKind
    detail: str
    token_index: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return False


EvalOutcome = Union[Success, Failure]


def failure(kind: ErrorKind, token_index: Optional[int] = None) -> Failure:
    """Failure со стандартным сообщением для kind."""
    return Failure(kind=kind, detail=ERROR_MESSAGES[kind], token_index=token_index)
