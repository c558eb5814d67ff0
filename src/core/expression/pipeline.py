"""
Pipeline — sanitize → tokenize → evaluate для одного запроса

Чистая функция: одинаковый вход всегда дает одинаковый EvalOutcome.
Вход очищается независимо от валидации формы (defense in depth).
"""

from src.core.domain.outcome import EvalOutcome
from src.core.expression.evaluator import evaluate
from src.core.expression.sanitizer import sanitize_fragments
from src.core.expression.tokenizer import tokenize_fragments


def evaluate_expression(raw: str) -> EvalOutcome:
    """
    Вычисление текста уравнения.

    Удаленный символ (например, пробел) завершает число: "2 3" — это два числа,
    а не 23.

    Args:
        raw: Текст уравнения заметки

    Returns:
        EvalOutcome

    Examples:
        >>> evaluate_expression("2+3*4")
        Success(value=20.0)
        >>> evaluate_expression("10/0").kind
        <ErrorKind.DIVISION_BY_ZERO: 'DIVISION_BY_ZERO'>
    """
    return evaluate(tokenize_fragments(sanitize_fragments(raw)))
