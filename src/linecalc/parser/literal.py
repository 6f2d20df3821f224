"""
Literal — разбор числовых литералов

Грамматика литерала: беззнаковое десятичное число с необязательной дробной
частью. Знака нет (отрицание — только через операцию NEG).

Автомат с двумя состояниями:
- INTEGER: цифры до точки, value = value * 10 + digit
- FRACTION: цифры после точки, weight /= 10; value += digit * weight

Переходы:
- INTEGER --'.'--> FRACTION
- FRACTION --'.'--> ошибка (вторая точка)
- любой другой символ --> ошибка разбора на этой позиции

Разбор останавливается после MAX_DECIMAL_DIGITS значащих цифр (точка не
считается). Оставшиеся символы — "unparsed suffix", решение о нём принимает
вызывающий код.
"""

from enum import Enum
from typing import Final, NamedTuple


# =============================================================================
# CONSTANTS
# =============================================================================

# Максимальное количество значащих цифр литерала
MAX_DECIMAL_DIGITS: Final[int] = 10

DECIMAL_POINT: Final[str] = "."

DIGITS: Final[str] = "0123456789"


# =============================================================================
# STATE MACHINE
# =============================================================================


class LiteralState(str, Enum):
    """Состояние автомата разбора литерала"""

    INTEGER = "INTEGER"
    FRACTION = "FRACTION"


class LiteralScan(NamedTuple):
    """
    Результат сканирования литерала.

    Attributes:
        value: Накопленное значение (частичное при ошибке)
        start: Позиция начала сканирования
        end: Позиция, на которой сканирование остановилось
        good: False если встречен недопустимый символ
        digits: Количество прочитанных значащих цифр
    """

    value: float
    start: int
    end: int
    good: bool
    digits: int

    @property
    def consumed(self) -> int:
        """Количество поглощённых символов."""
        return self.end - self.start


def describe_parse_error(text: str, position: int) -> str:
    """Диагностика ошибки разбора: позиция и остаток строки."""
    return f"Argument parsing error at {position}: '{text[position:]}'"


class LiteralParseError(ValueError):
    """Недопустимый символ при разборе литерала."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(describe_parse_error(text, position))


def scan_literal(
    text: str,
    start: int = 0,
    max_digits: int = MAX_DECIMAL_DIGITS,
) -> LiteralScan:
    """
    Сканирование литерала начиная с позиции start.

    Args:
        text: Строка ввода
        start: Позиция начала литерала
        max_digits: Лимит значащих цифр (default: MAX_DECIMAL_DIGITS)

    Returns:
        LiteralScan; при good=False поле end указывает на недопустимый символ

    Examples:
        >>> scan_literal("12.5").value
        12.5
        >>> scan_literal("+ 3", 2).end
        3
        >>> scan_literal("12345678901").end  # 11-я цифра не читается
        10
        >>> scan_literal("1x").good
        False
    """
    value = 0.0
    weight = 1.0
    digits = 0
    state = LiteralState.INTEGER
    i = start

    while i < len(text) and digits < max_digits:
        char = text[i]

        if char in DIGITS:
            digit = ord(char) - ord("0")
            if state is LiteralState.INTEGER:
                value = value * 10 + digit
            else:
                weight /= 10
                value += digit * weight
            digits += 1
        elif char == DECIMAL_POINT and state is LiteralState.INTEGER:
            state = LiteralState.FRACTION
        else:
            return LiteralScan(value, start, i, False, digits)

        i += 1

    return LiteralScan(value, start, i, True, digits)


def parse_literal(text: str, max_digits: int = MAX_DECIMAL_DIGITS) -> tuple[float, str]:
    """
    Разбор отдельного токена как литерала.

    Args:
        text: Токен (без пробелов)
        max_digits: Лимит значащих цифр

    Returns:
        (value, suffix) — suffix непустой если токен длиннее лимита цифр

    Raises:
        LiteralParseError: Если в токене встречен недопустимый символ
    """
    scan = scan_literal(text, 0, max_digits)
    if not scan.good:
        raise LiteralParseError(text, scan.end)
    return scan.value, text[scan.end:]


# =============================================================================
# CURSOR HELPERS
# =============================================================================


def skip_whitespace(text: str, i: int) -> int:
    """Позиция первого непробельного символа начиная с i."""
    while i < len(text) and text[i].isspace():
        i += 1
    return i


def token_end(text: str, i: int) -> int:
    """Позиция конца токена (до первого пробельного символа) начиная с i."""
    while i < len(text) and not text[i].isspace():
        i += 1
    return i


def split_tokens(text: str, i: int = 0) -> list[tuple[int, str]]:
    """
    Разбиение остатка строки на токены, разделённые пробелами.

    Returns:
        Список (позиция, токен) в порядке следования

    Examples:
        >>> split_tokens("(+) 1  2", 3)
        [(4, '1'), (7, '2')]
    """
    tokens = []
    i = skip_whitespace(text, i)
    while i < len(text):
        end = token_end(text, i)
        tokens.append((i, text[i:end]))
        i = skip_whitespace(text, end)
    return tokens
