"""Line Evaluator — вычисление нового значения аккумулятора по строке.

Единый компонент с двумя явными путями разбора:
- plain: "<op> <literal>", "<digits>", "_", "SQRT"
- left-fold: "(+) 1 2 3" — бинарная операция сворачивается по всем токенам

Выбор пути — по результату detect_fold (позиции 0, 1, 2 = "(", op, ")").

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любая ошибка → возвращается аккумулятор, переданный на вход
2. Left-fold — всё или ничего: частично свёрнутое значение не возвращается
3. Unparsed suffix фатален на plain пути и информативен на fold пути
   (токен усекается до лимита цифр)
4. Исключения не выходят за пределы evaluate() ни для какой строки
"""

import logging
from dataclasses import dataclass

from linecalc.config import CalculatorConfig
from linecalc.core.domain.diagnostics import (
    DiagnosticReporter,
    EvaluationError,
    LoggingReporter,
)
from linecalc.core.domain.operation import Operation
from linecalc.core.math.arithmetic import (
    ArithmeticDomainViolation,
    apply_binary,
    apply_unary,
)
from linecalc.parser.literal import (
    LiteralParseError,
    describe_parse_error,
    parse_literal,
    scan_literal,
    skip_whitespace,
    split_tokens,
)
from linecalc.parser.recognizer import (
    FoldHeader,
    detect_fold,
    recognize_fold_operation,
    recognize_operation,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат обработки одной строки."""

    value: float
    applied: bool
    operation: Operation
    error: EvaluationError | None

    # Детали разбора
    fold: bool
    operands: tuple[float, ...]

    details: str

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# EVALUATOR
# =============================================================================


class LineEvaluator:
    """Разбор строки и вычисление нового значения аккумулятора.

    Порядок обработки:
    1. detect_fold → путь left-fold или plain
    2. plain: распознавание операции, разбор аргумента
       по арности, применение операции
    3. fold: проверка оператора заголовка, разбор токенов по одному,
       свёртка с откатом при любой ошибке
    """

    def __init__(
        self,
        config: CalculatorConfig | None = None,
        reporter: DiagnosticReporter | None = None,
    ):
        """
        Args:
            config: параметры разбора (default: CalculatorConfig())
            reporter: приёмник диагностики (default: LoggingReporter())
        """
        self.config = config if config is not None else CalculatorConfig()
        self.reporter = reporter if reporter is not None else LoggingReporter()

    def evaluate(self, current: float, line: str) -> EvaluationResult:
        """Обработка строки.

        Args:
            current: текущее значение аккумулятора
            line: строка ввода без завершающего перевода строки

        Returns:
            EvaluationResult с новым (или неизменённым) значением
        """
        current = float(current)
        header = detect_fold(line, self.config.fold_open, self.config.fold_close)

        if header is not None:
            result = self._evaluate_fold(current, line, header)
        else:
            result = self._evaluate_plain(current, line)

        logger.debug(
            "line=%r operation=%s fold=%s error=%s value=%r",
            line,
            result.operation.value,
            result.fold,
            result.error.value if result.error else None,
            result.value,
        )
        return result

    # -------------------------------------------------------------------------
    # plain path
    # -------------------------------------------------------------------------

    def _evaluate_plain(self, current: float, line: str) -> EvaluationResult:
        recognized = recognize_operation(
            line, 0, self.reporter, self.config.allow_set_keyword
        )
        if not recognized.ok:
            return self._unchanged(
                current,
                Operation.ERROR,
                recognized.error,
                details=f"unknown operation at {recognized.cursor}",
            )

        operation = recognized.operation
        if operation.is_unary:
            return self._evaluate_unary(current, line, operation, recognized.cursor)
        return self._evaluate_binary(current, line, operation, recognized.cursor)

    def _evaluate_unary(
        self, current: float, line: str, operation: Operation, cursor: int
    ) -> EvaluationResult:
        suffix = line[cursor:]
        if suffix.strip():
            self.reporter.report(f"Unexpected suffix for a unary operation: '{suffix}'")
            return self._unchanged(
                current,
                operation,
                EvaluationError.UNEXPECTED_SUFFIX,
                details=f"suffix {suffix!r}",
            )

        outcome = apply_unary(operation, current)
        if not outcome.applied:
            self.reporter.report(outcome.message)
            return self._unchanged(
                current, operation, EvaluationError.DOMAIN_ERROR, details=outcome.message
            )

        return self._applied(outcome.value, operation)

    def _evaluate_binary(
        self, current: float, line: str, operation: Operation, cursor: int
    ) -> EvaluationResult:
        start = skip_whitespace(line, cursor)
        scan = scan_literal(line, start, self.config.max_decimal_digits)

        if not scan.good:
            self.reporter.report(describe_parse_error(line, scan.end))
        elif scan.end < len(line):
            self.reporter.report(
                f"Argument isn't fully parsed, suffix left: '{line[scan.end:]}'"
            )

        if scan.consumed == 0:
            self.reporter.report("No argument for a binary operation")
            return self._unchanged(
                current, operation, EvaluationError.MISSING_ARGUMENT, details="no argument"
            )

        if not scan.good:
            return self._unchanged(
                current,
                operation,
                EvaluationError.ARGUMENT_PARSE_ERROR,
                details=f"parse error at {scan.end}",
            )

        if scan.end < len(line):
            return self._unchanged(
                current,
                operation,
                EvaluationError.UNPARSED_SUFFIX,
                details=f"suffix {line[scan.end:]!r}",
            )

        try:
            value = apply_binary(operation, current, scan.value)
        except ArithmeticDomainViolation as e:
            self.reporter.report(str(e))
            return self._unchanged(
                current, operation, EvaluationError.DOMAIN_ERROR, details=str(e)
            )

        return self._applied(value, operation, operands=(scan.value,))

    # -------------------------------------------------------------------------
    # left-fold path
    # -------------------------------------------------------------------------

    def _evaluate_fold(
        self, current: float, line: str, header: FoldHeader
    ) -> EvaluationResult:
        operation = recognize_fold_operation(line, self.reporter)
        if not operation.foldable:
            self.reporter.report("Left fold works only with binary operations")
            return self._unchanged(
                current,
                operation,
                EvaluationError.FOLD_OPERATION,
                fold=True,
                details=f"operator {header.symbol!r} is not foldable",
            )

        tokens = split_tokens(line, header.cursor)
        if not tokens:
            self.reporter.report("No arguments")
            return self._unchanged(
                current,
                operation,
                EvaluationError.FOLD_NO_ARGUMENTS,
                fold=True,
                details="no arguments",
            )

        value = current
        operands: list[float] = []
        for position, token in tokens:
            try:
                operand, suffix = parse_literal(token, self.config.max_decimal_digits)
            except LiteralParseError as e:
                self.reporter.report(str(e))
                self.reporter.report("Wrong arguments")
                return self._unchanged(
                    current,
                    operation,
                    EvaluationError.FOLD_BAD_ARGUMENT,
                    fold=True,
                    details=f"bad token {token!r} at {position}",
                )

            if suffix:
                # токен длиннее лимита цифр: используется усечённое значение
                self.reporter.report(f"Argument isn't fully parsed, suffix left: '{suffix}'")

            try:
                value = apply_binary(operation, value, operand)
            except ArithmeticDomainViolation as e:
                self.reporter.report(str(e))
                return self._unchanged(
                    current,
                    operation,
                    EvaluationError.DOMAIN_ERROR,
                    fold=True,
                    details=f"{e} (token at {position})",
                )
            operands.append(operand)

        return self._applied(value, operation, fold=True, operands=tuple(operands))

    # -------------------------------------------------------------------------
    # results
    # -------------------------------------------------------------------------

    @staticmethod
    def _applied(
        value: float,
        operation: Operation,
        fold: bool = False,
        operands: tuple[float, ...] = (),
    ) -> EvaluationResult:
        return EvaluationResult(
            value=value,
            applied=True,
            operation=operation,
            error=None,
            fold=fold,
            operands=operands,
            details="ok",
        )

    @staticmethod
    def _unchanged(
        current: float,
        operation: Operation,
        error: EvaluationError,
        fold: bool = False,
        details: str = "",
    ) -> EvaluationResult:
        return EvaluationResult(
            value=current,
            applied=False,
            operation=operation,
            error=error,
            fold=fold,
            operands=(),
            details=details,
        )


# =============================================================================
# ENTRY POINT
# =============================================================================


def process_line(
    current: float,
    line: str,
    reporter: DiagnosticReporter | None = None,
    config: CalculatorConfig | None = None,
) -> float:
    """
    Обработка одной строки: новое значение аккумулятора.

    Args:
        current: Текущее значение аккумулятора
        line: Строка ввода
        reporter: Приёмник диагностики (default: logging)
        config: Параметры разбора (default: CalculatorConfig())

    Returns:
        Новое значение или current, если строка некорректна

    Examples:
        >>> process_line(2.0, "+ 3")
        5.0
        >>> process_line(0.0, "(+) 1 2 3")
        6.0
    """
    return LineEvaluator(config, reporter).evaluate(current, line).value
