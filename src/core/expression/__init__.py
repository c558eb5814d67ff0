"""
Expression modules — безопасное вычисление арифметических выражений

sanitize → tokenize → evaluate без динамического выполнения кода.
"""

from src.core.expression.evaluator import (
    EvaluatorState,
    ExpressionEvaluator,
    evaluate,
    fold_state,
    outcome_state,
)
from src.core.expression.pipeline import evaluate_expression
from src.core.expression.sanitizer import (
    ALLOWED_CHARACTERS,
    sanitize,
    sanitize_fragments,
)
from src.core.expression.tokenizer import tokenize, tokenize_fragments

__all__ = [
    # Sanitizer
    "ALLOWED_CHARACTERS",
    "sanitize",
    "sanitize_fragments",
    # Tokenizer
    "tokenize",
    "tokenize_fragments",
    # Evaluator
    "EvaluatorState",
    "ExpressionEvaluator",
    "evaluate",
    "fold_state",
    "outcome_state",
    # Pipeline
    "evaluate_expression",
]
