"""
Tokens — лексические единицы арифметического выражения

Immutable tagged values, которые производит tokenizer и потребляет evaluator:
- Number: число (float)
- Operator: один из + - * /
- Paren: ( или )

Порядок токенов соответствует порядку сканирования слева направо.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


# =============================================================================
# ENUMS
# =============================================================================


class OperatorKind(str, Enum):
    """Бинарный арифметический оператор"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class ParenKind(str, Enum):
    """Скобка"""

    OPEN = "("
    CLOSE = ")"


# =============================================================================
# TOKENS
# =============================================================================


@dataclass(frozen=True)
class Number:
    """Числовой литерал: максимальная последовательность цифр с не более чем одной точкой."""

    value: float

    @property
    def symbol(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Operator:
    """Оператор + - * /."""

    kind: OperatorKind

    @property
    def symbol(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Paren:
    """Скобка. Распознается tokenizer'ом, но evaluator её не поддерживает."""

    kind: ParenKind

    @property
    def symbol(self) -> str:
        return self.kind.value


Token = Union[Number, Operator, Paren]
