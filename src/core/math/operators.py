"""
Operators — арифметические примитивы evaluator'а

Применение бинарного оператора к двум float со стандартной семантикой IEEE 754.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль (включая -0.0) никогда не выполняется: DivisionByZeroViolation
2. Переполнение не маскируется: inf/nan возвращаются как есть
3. Операции детерминированы и без побочных эффектов
"""

import operator
from typing import Callable, Final, Mapping

from src.core.domain.tokens import OperatorKind


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroViolation(ArithmeticError):
    """
    Деление на ноль при применении оператора "/".

    Evaluator переводит его в Failure(DIVISION_BY_ZERO) и прекращает fold.
    """
    pass


# =============================================================================
# OPERATOR TABLE
# =============================================================================


_OPERATIONS: Final[Mapping[OperatorKind, Callable[[float, float], float]]] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUB: operator.sub,
    OperatorKind.MUL: operator.mul,
    OperatorKind.DIV: operator.truediv,
}


def apply_operator(kind: OperatorKind, left: float, right: float) -> float:
    """
    Применение бинарного оператора.

    Args:
        kind: Оператор (+ - * /)
        left: Левый операнд (аккумулятор)
        right: Правый операнд

    Returns:
        Результат операции

    Raises:
        DivisionByZeroViolation: если kind == DIV и right == 0

    Examples:
        >>> apply_operator(OperatorKind.ADD, 2.0, 3.0)
        5.0
        >>> apply_operator(OperatorKind.DIV, 1.0, 4.0)
        0.25
    """
    if kind == OperatorKind.DIV and right == 0.0:
        raise DivisionByZeroViolation(f"Division by zero: {left} / {right}")

    return _OPERATIONS[kind](left, right)
