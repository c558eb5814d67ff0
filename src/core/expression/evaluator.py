"""
Expression Evaluator — вычисление последовательности токенов

Один проход слева направо (fold) с двумя переменными состояния:
- accumulator: результат на текущий момент
- pending_operator: оператор, ожидающий правый операнд

Нет приоритета операторов и нет группировки скобками: "2+3*4" == 20.
Любая скобка дает UNSUPPORTED_TOKEN (сохраняемое ограничение).

States:
- START: accumulator не задан
- HAVE_NUMBER: accumulator задан, оператора нет
- HAVE_NUMBER_PENDING_OP: accumulator задан, оператор ожидает операнд
- FAILED / SUCCEEDED: терминальные
"""

import logging
import math
from enum import Enum
from typing import Iterable, Optional

from src.core.domain.outcome import (
    ERROR_MESSAGES,
    ErrorKind,
    EvalOutcome,
    Failure,
    Success,
    failure,
)
from src.core.domain.tokens import Number, Operator, OperatorKind, Token
from src.core.math.operators import DivisionByZeroViolation, apply_operator

logger = logging.getLogger(__name__)


class EvaluatorState(str, Enum):
    """Состояние fold'а evaluator'а."""

    START = "START"
    HAVE_NUMBER = "HAVE_NUMBER"
    HAVE_NUMBER_PENDING_OP = "HAVE_NUMBER_PENDING_OP"
    FAILED = "FAILED"
    SUCCEEDED = "SUCCEEDED"


def fold_state(
    accumulator: Optional[float], pending_operator: Optional[OperatorKind]
) -> EvaluatorState:
    """Нетерминальное состояние по переменным fold'а."""
    if accumulator is None:
        return EvaluatorState.START
    if pending_operator is None:
        return EvaluatorState.HAVE_NUMBER
    return EvaluatorState.HAVE_NUMBER_PENDING_OP


def outcome_state(outcome: EvalOutcome) -> EvaluatorState:
    """Терминальное состояние по результату."""
    return EvaluatorState.SUCCEEDED if outcome.is_success else EvaluatorState.FAILED


class ExpressionEvaluator:
    """Evaluator последовательности токенов.

    Stateless: все состояние fold'а живет в локальных переменных одного вызова,
    поэтому один экземпляр безопасно использовать из нескольких потоков.
    """

    def evaluate(self, tokens: Iterable[Token]) -> EvalOutcome:
        """Вычисление токенов.

        Args:
            tokens: результат tokenize() или любой iterable токенов

        Returns:
            Success с значением accumulator'а или Failure с ErrorKind
        """
        try:
            outcome = self._fold(tuple(tokens))
        except Exception:
            # Наружу уходит только общее сообщение, детали остаются в логе
            logger.exception("Unexpected fault while evaluating expression")
            return Failure(
                kind=ErrorKind.INTERNAL_FAULT,
                detail=ERROR_MESSAGES[ErrorKind.INTERNAL_FAULT],
            )

        if not outcome.is_success:
            logger.debug(
                "Evaluation failed: kind=%s token_index=%s", outcome.kind.value, outcome.token_index
            )
        return outcome

    def _fold(self, tokens: tuple[Token, ...]) -> EvalOutcome:
        if len(tokens) == 0:
            return failure(ErrorKind.EMPTY_EXPRESSION)

        accumulator: Optional[float] = None
        pending_operator: Optional[OperatorKind] = None

        for index, token in enumerate(tokens):
            state = fold_state(accumulator, pending_operator)

            if isinstance(token, Number):
                if math.isnan(token.value):
                    return failure(ErrorKind.INTERNAL_FAULT, index)

                if state == EvaluatorState.START:
                    accumulator = token.value
                elif state == EvaluatorState.HAVE_NUMBER_PENDING_OP:
                    try:
                        accumulator = apply_operator(pending_operator, accumulator, token.value)
                    except DivisionByZeroViolation:
                        return failure(ErrorKind.DIVISION_BY_ZERO, index)
                    pending_operator = None
                    # inf - inf, inf * 0: ошибка domain, не Success(nan)
                    if math.isnan(accumulator):
                        return failure(ErrorKind.INTERNAL_FAULT, index)
                else:
                    return failure(ErrorKind.CONSECUTIVE_NUMBERS, index)

            elif isinstance(token, Operator):
                if state == EvaluatorState.START and token.kind == OperatorKind.SUB:
                    # Унарный минус: "-5" вычисляется как 0 - 5
                    accumulator = 0.0
                    pending_operator = OperatorKind.SUB
                elif state == EvaluatorState.HAVE_NUMBER:
                    pending_operator = token.kind
                else:
                    return failure(ErrorKind.OPERATOR_MISPLACED, index)

            else:
                return failure(ErrorKind.UNSUPPORTED_TOKEN, index)

        if fold_state(accumulator, pending_operator) == EvaluatorState.HAVE_NUMBER:
            return Success(value=accumulator)

        return failure(ErrorKind.INCOMPLETE_EXPRESSION)


_DEFAULT_EVALUATOR = ExpressionEvaluator()


def evaluate(tokens: Iterable[Token]) -> EvalOutcome:
    """Вычисление токенов evaluator'ом по умолчанию."""
    return _DEFAULT_EVALUATOR.evaluate(tokens)
