"""Parser — распознавание операций и разбор литералов строки ввода."""

from .literal import (
    MAX_DECIMAL_DIGITS,
    LiteralParseError,
    LiteralScan,
    LiteralState,
    describe_parse_error,
    parse_literal,
    scan_literal,
    skip_whitespace,
    split_tokens,
    token_end,
)
from .recognizer import (
    FOLD_CLOSE,
    FOLD_OPEN,
    FoldHeader,
    RecognizedOperation,
    detect_fold,
    recognize_fold_operation,
    recognize_operation,
)

__all__ = [
    # Literal
    "MAX_DECIMAL_DIGITS",
    "LiteralParseError",
    "LiteralScan",
    "LiteralState",
    "describe_parse_error",
    "parse_literal",
    "scan_literal",
    "skip_whitespace",
    "split_tokens",
    "token_end",
    # Recognizer
    "FOLD_CLOSE",
    "FOLD_OPEN",
    "FoldHeader",
    "RecognizedOperation",
    "detect_fold",
    "recognize_fold_operation",
    "recognize_operation",
]
