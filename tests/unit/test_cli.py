"""Тесты для CLI (read-eval-print цикл).

Coverage:
- Одна строка на входе — одно значение на выходе
- Пропуск пустых строк, quit/exit
- Ошибочная конфигурация → exit code 2
"""

import io
import json

import pytest

from linecalc import CalculatorSession, CollectingReporter
from linecalc import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """CLI не должен перенастраивать logging тестового процесса."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


class TestRun:
    """Тесты цикла run()."""

    def test_one_value_per_line(self):
        session = CalculatorSession(reporter=CollectingReporter())
        stdout = io.StringIO()
        final = cli.run(session, io.StringIO("5\n+ 3\n/ 0\n(+) 1 2\n"), stdout)
        assert final == 11.0
        assert stdout.getvalue() == "5\n8\n8\n11\n"

    def test_blank_lines_skipped(self):
        session = CalculatorSession(reporter=CollectingReporter())
        stdout = io.StringIO()
        cli.run(session, io.StringIO("\n   \n2\n"), stdout)
        assert stdout.getvalue() == "2\n"

    @pytest.mark.parametrize("command", ["quit", "exit", "QUIT"])
    def test_quit(self, command):
        session = CalculatorSession(reporter=CollectingReporter())
        stdout = io.StringIO()
        final = cli.run(session, io.StringIO(f"1\n{command}\n+ 5\n"), stdout)
        assert final == 1.0
        assert stdout.getvalue() == "1\n"

    def test_crlf_stripped(self):
        session = CalculatorSession(reporter=CollectingReporter())
        stdout = io.StringIO()
        cli.run(session, io.StringIO("4\r\nSQRT\r\n"), stdout)
        assert stdout.getvalue() == "4\n2\n"

    def test_prompt(self):
        session = CalculatorSession(reporter=CollectingReporter())
        stdout = io.StringIO()
        cli.run(session, io.StringIO("1\n"), stdout, prompt="> ")
        assert stdout.getvalue() == "> 1\n> "


class TestMain:
    """Тесты точки входа main()."""

    def test_main_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("+ 3\n_\n"))
        assert cli.main(["--initial", "2"]) == cli.EXIT_OK
        assert capsys.readouterr().out == "5\n-5\n"

    def test_main_with_config(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "calc.json"
        path.write_text(json.dumps({"schema_version": "1", "max_decimal_digits": 2}))
        monkeypatch.setattr("sys.stdin", io.StringIO("12\n123\n"))
        assert cli.main(["--config", str(path)]) == cli.EXIT_OK
        assert capsys.readouterr().out == "12\n12\n"

    def test_main_bad_config(self, capsys, tmp_path):
        path = tmp_path / "calc.json"
        path.write_text(json.dumps({"max_decimal_digits": 2}))
        assert cli.main(["--config", str(path)]) == cli.EXIT_CONFIG_ERROR
        err = capsys.readouterr().err
        assert "invalid config" in err
        assert "<root>: 'schema_version' is a required property" in err

    def test_main_missing_config(self, capsys, tmp_path):
        assert cli.main(["--config", str(tmp_path / "nope.json")]) == cli.EXIT_CONFIG_ERROR

    def test_parser_defaults(self):
        args = cli.build_parser().parse_args([])
        assert args.initial == 0.0
        assert args.config is None
        assert args.log_level == "WARNING"
        assert not args.json_logs
