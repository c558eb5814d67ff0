"""
Sanitizer — ограничение входного текста допустимым набором символов

Допустимые символы: 0-9 . + - * / ( )
Все прочие символы удаляются (не заменяются), порядок оставшихся сохраняется.
"""

import re
from typing import Final

# Только ASCII цифры: str.isdigit() и \d пропускают, например, арабско-индийские цифры
ALLOWED_CHARACTERS: Final[str] = "0123456789.+-*/()"

_DISALLOWED_RE: Final[re.Pattern[str]] = re.compile(r"[^0-9.+\-*/()]+")


def sanitize(raw: str) -> str:
    """
    Удаление всех символов вне допустимого набора.

    Тотальная функция: никогда не бросает исключений, идемпотентна
    (sanitize(sanitize(s)) == sanitize(s)).

    Args:
        raw: Произвольная строка (в том числе пустая)

    Returns:
        Строка только из ALLOWED_CHARACTERS

    Examples:
        >>> sanitize("2 + 3")
        '2+3'
        >>> sanitize("abc")
        ''
    """
    return _DISALLOWED_RE.sub("", raw)


def sanitize_fragments(raw: str) -> tuple[str, ...]:
    """
    Разбиение на фрагменты допустимых символов.

    Фрагменты разделены удаленными символами, пустые отбрасываются.
    "".join(sanitize_fragments(s)) == sanitize(s).

    Examples:
        >>> sanitize_fragments("2 3")
        ('2', '3')
        >>> sanitize_fragments("  1+x2 ")
        ('1+', '2')
    """
    return tuple(fragment for fragment in _DISALLOWED_RE.split(raw) if fragment)
