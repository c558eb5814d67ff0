"""
Tokenizer — сканирование очищенной строки в последовательность токенов

Жадное сканирование слева направо:
- число: одна или более цифр, затем необязательная точка и цифры ("5." == 5.0)
- ровно один символ из + - * / ( )

Точка, с которой не может начаться число (".5", вторая точка в "1.2.3"),
пропускается. Tokenizer не отклоняет вход и может вернуть пустой список.
"""

import re
from typing import Final, Iterable, List

from src.core.domain.tokens import (
    Number,
    Operator,
    OperatorKind,
    Paren,
    ParenKind,
    Token,
)

_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"([0-9]+\.?[0-9]*)|([+\-*/])|([()])")


def tokenize(sanitized: str) -> List[Token]:
    """
    Сканирование строки в токены.

    Args:
        sanitized: Результат sanitize() (только допустимые символы)

    Returns:
        Токены в порядке сканирования

    Examples:
        >>> tokenize("2+3")
        [Number(value=2.0), Operator(kind=<OperatorKind.ADD: '+'>), Number(value=3.0)]
    """
    tokens: List[Token] = []

    for match in _TOKEN_RE.finditer(sanitized):
        number, op, paren = match.groups()
        if number is not None:
            tokens.append(Number(float(number)))
        elif op is not None:
            tokens.append(Operator(OperatorKind(op)))
        else:
            tokens.append(Paren(ParenKind(paren)))

    return tokens


def tokenize_fragments(fragments: Iterable[str]) -> List[Token]:
    """Токены всех фрагментов подряд; число не продолжается через границу фрагмента."""
    tokens: List[Token] = []
    for fragment in fragments:
        tokens.extend(tokenize(fragment))
    return tokens
