"""
CLI — read-eval-print цикл калькулятора

Читает строки из stdin (или интерактивно), применяет каждую к аккумулятору
и печатает новое значение. Диагностика уходит в stderr через logging.

Usage:
    linecalc [--initial 0] [--config calc.json] [--log-level WARNING]
    python -m linecalc
"""

import argparse
import json
import sys
from typing import Optional, Sequence, TextIO

from jsonschema import ValidationError as ContractViolation
from pydantic import ValidationError

from linecalc.config import CalculatorConfig, from_env, load_config
from linecalc.core.contracts import describe_violation
from linecalc.core.math.arithmetic import format_number
from linecalc.logging_config import get_logger, setup_logging
from linecalc.session import CalculatorSession

logger = get_logger("cli")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2

QUIT_COMMANDS = ("quit", "exit")

PROMPT = "> "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linecalc",
        description="Stateful line-oriented calculator with a single accumulator",
    )
    parser.add_argument(
        "--initial",
        type=float,
        default=0.0,
        help="Initial accumulator value (default: 0)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON config file (calculator_config contract)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics (default: WARNING)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit diagnostics as JSON lines",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the interactive prompt",
    )
    return parser


def resolve_config(path: Optional[str]) -> CalculatorConfig:
    """Конфигурация из файла, если он указан, иначе из окружения."""
    if path:
        return load_config(path)
    return from_env()


def run(
    session: CalculatorSession,
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = "",
) -> float:
    """
    Цикл чтения строк: одна строка на входе, одно значение на выходе.

    Пустые строки пропускаются, quit/exit завершают цикл.
    """
    while True:
        if prompt:
            stdout.write(prompt)
            stdout.flush()

        raw = stdin.readline()
        if not raw:
            break

        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        if line.strip().lower() in QUIT_COMMANDS:
            break

        result = session.apply(line)
        stdout.write(format_number(result.value) + "\n")
        stdout.flush()

    return session.value


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, json_format=args.json_logs)

    try:
        config = resolve_config(args.config)
    except ContractViolation as e:
        print(f"linecalc: invalid config: {describe_violation(e)}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"linecalc: invalid config: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    session = CalculatorSession(initial=args.initial, config=config)
    prompt = "" if args.quiet or not sys.stdin.isatty() else PROMPT

    try:
        final = run(session, sys.stdin, sys.stdout, prompt)
    except KeyboardInterrupt:
        final = session.value
        print(file=sys.stdout)

    logger.info("session finished with %s", format_number(final))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
