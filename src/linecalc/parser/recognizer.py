"""
Recognizer — распознавание операции в начале строки

Правила:
- Первая цифра → SET, курсор НЕ сдвигается (цифра принадлежит аргументу)
- Односимвольные операторы: + - * / % _ ^
- Ключевые слова SQRT (и SET) сопоставляются посимвольно; частичное
  совпадение — ошибка с откатом курсора к началу токена
- Любой другой символ (или конец строки) — нераспознанная операция

Скобочные формы:
- "(X)" на позициях 0, 1, 2 — заголовок left-fold (detect_fold)
- любая другая открывающая скобка на plain пути — нераспознанная
  операция: "(SET) 5" не меняет аккумулятор
"""

from typing import Final, NamedTuple

from linecalc.core.domain.diagnostics import DiagnosticReporter, EvaluationError
from linecalc.core.domain.operation import (
    OPERATOR_SYMBOLS,
    SET_KEYWORD,
    SQRT_KEYWORD,
    Operation,
)
from linecalc.parser.literal import DIGITS


# =============================================================================
# CONSTANTS
# =============================================================================

FOLD_OPEN: Final[str] = "("
FOLD_CLOSE: Final[str] = ")"

# Длина заголовка left-fold: открывающая скобка, оператор, закрывающая скобка
FOLD_HEADER_LENGTH: Final[int] = 3


# =============================================================================
# RESULT
# =============================================================================


class RecognizedOperation(NamedTuple):
    """
    Результат распознавания операции.

    Attributes:
        operation: Операция (ERROR при неудаче)
        cursor: Позиция после токена операции (при неудаче — откат к началу)
        error: Категория ошибки или None
    """

    operation: Operation
    cursor: int
    error: EvaluationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FoldHeader(NamedTuple):
    """Заголовок left-fold: символ оператора и позиция после скобки."""

    symbol: str
    cursor: int


# =============================================================================
# OPERATION RECOGNITION
# =============================================================================


def _match_keyword(line: str, start: int, keyword: str) -> int:
    """Количество символов keyword, совпавших с line начиная с start."""
    matched = 0
    while (
        matched < len(keyword)
        and start + matched < len(line)
        and line[start + matched] == keyword[matched]
    ):
        matched += 1
    return matched


def recognize_operation(
    line: str,
    cursor: int,
    reporter: DiagnosticReporter,
    allow_set_keyword: bool = True,
) -> RecognizedOperation:
    """
    Распознавание операции на позиции cursor.

    Args:
        line: Строка ввода
        cursor: Позиция первого непоглощённого символа
        reporter: Приёмник диагностики
        allow_set_keyword: Распознавать ли ключевое слово SET

    Returns:
        RecognizedOperation; при ошибке operation=ERROR, cursor не сдвинут
        и в reporter отправлено "Unknown operation <line>"

    Examples:
        >>> from linecalc.core.domain.diagnostics import NullReporter
        >>> recognize_operation("+ 3", 0, NullReporter())
        RecognizedOperation(operation=<Operation.ADD: 'ADD'>, cursor=1, error=None)
        >>> recognize_operation("42", 0, NullReporter()).cursor
        0
    """
    if cursor >= len(line):
        return _rollback(line, cursor, EvaluationError.UNRECOGNIZED_OPERATION, reporter)

    char = line[cursor]

    if char in DIGITS:
        # первая цифра — часть аргумента SET
        return RecognizedOperation(Operation.SET, cursor)

    if char in OPERATOR_SYMBOLS:
        return RecognizedOperation(OPERATOR_SYMBOLS[char], cursor + 1)

    if char == SQRT_KEYWORD[0]:
        return _recognize_keyword(line, cursor, reporter, allow_set_keyword)

    return _rollback(line, cursor, EvaluationError.UNRECOGNIZED_OPERATION, reporter)


def _recognize_keyword(
    line: str,
    cursor: int,
    reporter: DiagnosticReporter,
    allow_set_keyword: bool,
) -> RecognizedOperation:
    """Посимвольное сопоставление SQRT / SET (оба начинаются с 'S')."""
    keywords = [SQRT_KEYWORD]
    if allow_set_keyword:
        keywords.append(SET_KEYWORD)

    for keyword, operation in zip(keywords, (Operation.SQRT, Operation.SET)):
        matched = _match_keyword(line, cursor, keyword)
        if matched == len(keyword):
            return RecognizedOperation(operation, cursor + matched)

    return _rollback(line, cursor, EvaluationError.MALFORMED_KEYWORD, reporter)


def _rollback(
    line: str,
    token_start: int,
    error: EvaluationError,
    reporter: DiagnosticReporter,
) -> RecognizedOperation:
    reporter.report(f"Unknown operation {line}")
    return RecognizedOperation(Operation.ERROR, token_start, error)


def recognize_fold_operation(line: str, reporter: DiagnosticReporter) -> Operation:
    """
    Распознавание оператора заголовка left-fold (позиция 1).

    В заголовке помещается ровно один символ, поэтому ключевые слова
    невозможны: "(S)" — ошибка, цифра даёт SET.
    """
    return recognize_operation(line, 1, reporter, allow_set_keyword=False).operation


# =============================================================================
# BRACKETS
# =============================================================================


def detect_fold(
    line: str,
    open_char: str = FOLD_OPEN,
    close_char: str = FOLD_CLOSE,
) -> FoldHeader | None:
    """
    Проверка заголовка left-fold: позиции 0, 1, 2 = open, оператор, close.

    Args:
        line: Строка ввода
        open_char: Открывающая скобка
        close_char: Закрывающая скобка

    Returns:
        FoldHeader или None, если строка не является left-fold

    Examples:
        >>> detect_fold("(+) 1 2 3")
        FoldHeader(symbol='+', cursor=3)
        >>> detect_fold("(SQRT) 1") is None
        True
    """
    if (
        len(line) >= FOLD_HEADER_LENGTH
        and line[0] == open_char
        and line[2] == close_char
    ):
        return FoldHeader(line[1], FOLD_HEADER_LENGTH)
    return None
