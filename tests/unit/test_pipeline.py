"""
Тесты для pipeline sanitize → tokenize → evaluate

Проверяет свойства вычисления текста уравнения:
1. Чистота (детерминированность)
2. Вычисление слева направо без приоритета
3. Каждый ErrorKind на уровне текста
4. Defense in depth: мусор и попытки выполнения кода
"""

import pytest

from src.core.domain.outcome import ERROR_MESSAGES, ErrorKind, Success
from src.core.expression import (
    evaluate,
    evaluate_expression,
    sanitize,
    tokenize,
)


class TestArithmetic:
    """Базовая арифметика"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("2+3", 5.0),
            ("10-4", 6.0),
            ("3*3", 9.0),
            ("9/2", 4.5),
            ("2+3*4", 20.0),
            ("-5+2", -3.0),
            ("1.5*2", 3.0),
            ("42", 42.0),
            (" 2 + 3 ", 5.0),
            ("100/4/5", 5.0),
        ],
    )
    def test_success(self, raw: str, expected: float) -> None:
        assert evaluate_expression(raw) == Success(expected)

    def test_left_to_right_not_precedence(self) -> None:
        """2+3*4 == 20, а не 14"""
        assert evaluate_expression("2+3*4").value == 20.0
        assert evaluate_expression("2+3*4").value != 14.0


class TestErrorKinds:
    """Типизированные ошибки на уровне текста"""

    @pytest.mark.parametrize(
        "raw,kind",
        [
            ("", ErrorKind.EMPTY_EXPRESSION),
            ("   ", ErrorKind.EMPTY_EXPRESSION),
            ("abc", ErrorKind.EMPTY_EXPRESSION),
            ("2 3", ErrorKind.CONSECUTIVE_NUMBERS),
            ("1.2.3", ErrorKind.CONSECUTIVE_NUMBERS),
            ("2++3", ErrorKind.OPERATOR_MISPLACED),
            ("*3", ErrorKind.OPERATOR_MISPLACED),
            ("(1+2)", ErrorKind.UNSUPPORTED_TOKEN),
            ("1+(2)", ErrorKind.UNSUPPORTED_TOKEN),
            ("10/0", ErrorKind.DIVISION_BY_ZERO),
            ("5/0.0", ErrorKind.DIVISION_BY_ZERO),
            ("2+", ErrorKind.INCOMPLETE_EXPRESSION),
            ("-", ErrorKind.INCOMPLETE_EXPRESSION),
        ],
    )
    def test_failure_kind(self, raw: str, kind: ErrorKind) -> None:
        outcome = evaluate_expression(raw)
        assert not outcome.is_success
        assert outcome.kind == kind

    def test_only_points_is_empty(self) -> None:
        """Точки без цифр не дают токенов"""
        assert evaluate_expression("...").kind == ErrorKind.EMPTY_EXPRESSION


class TestDefenseInDepth:
    """Вход не считается предварительно проверенным"""

    def test_code_payload_is_never_executed(self) -> None:
        """Payload сводится к скобкам и отклоняется"""
        outcome = evaluate_expression("__import__('os').system('echo pwned')")
        assert outcome.kind == ErrorKind.UNSUPPORTED_TOKEN

    def test_letters_between_numbers_split_them(self) -> None:
        assert evaluate_expression("1e5").kind == ErrorKind.CONSECUTIVE_NUMBERS

    def test_long_input_not_rejected_by_core(self) -> None:
        """Ограничение длины — забота формы, не evaluator'а"""
        raw = "+".join(["1"] * 500)
        assert evaluate_expression(raw) == Success(500.0)

    def test_huge_literals_overflow_to_inf(self) -> None:
        assert evaluate_expression("9" * 400) == Success(float("inf"))

    def test_inf_minus_inf_is_internal_fault(self) -> None:
        """Литералы переполняются в inf; inf - inf не становится Success(nan)"""
        raw = "9" * 400 + "-" + "9" * 400
        outcome = evaluate_expression(raw)
        assert outcome.kind == ErrorKind.INTERNAL_FAULT
        assert outcome.detail == ERROR_MESSAGES[ErrorKind.INTERNAL_FAULT]
        assert evaluate_expression(raw) == outcome


class TestPurity:
    """Детерминированность"""

    @pytest.mark.parametrize("raw", ["2+3*4", "10/0", "(1)", "", "2 3", "-5+2"])
    def test_repeated_calls_identical(self, raw: str) -> None:
        first = evaluate_expression(raw)
        assert all(evaluate_expression(raw) == first for _ in range(5))

    @pytest.mark.parametrize("raw", ["2+3*4", "10/0", "(1)", "", "-5+2", "2++3"])
    def test_direct_composition_deterministic(self, raw: str) -> None:
        """evaluate(tokenize(sanitize(s))) детерминирован"""
        first = evaluate(tokenize(sanitize(raw)))
        assert evaluate(tokenize(sanitize(raw))) == first

    def test_direct_composition_joins_across_whitespace(self) -> None:
        """Без фрагментов пробел просто исчезает: '2 3' → '23'"""
        assert evaluate(tokenize(sanitize("2 3"))) == Success(23.0)
