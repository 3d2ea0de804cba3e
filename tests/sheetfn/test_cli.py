"""Tests for the sheetfn command-line interface."""

import pytest

from sheetfn import SheetFnBoolean, SheetFnNumber, SheetFnString, SHEETFN_BLANK, SHEETFN_NA
from sheetfn.__main__ import main, parse_cell_literal


class TestParseCellLiteral:
    """Test how command-line arguments become cell values."""

    @pytest.mark.parametrize("text,expected", [
        ("", SHEETFN_BLANK),
        ("TRUE", SheetFnBoolean(True)),
        ("false", SheetFnBoolean(False)),
        ("#N/A", SHEETFN_NA),
        ("-2.5", SheetFnNumber(-2.5)),
        ("j", SheetFnString("j")),
        ("abc", SheetFnString("abc")),
    ])
    def test_literals(self, text, expected):
        """Test literal recognition."""
        assert parse_cell_literal(text) == expected


class TestMain:
    """Test running the CLI."""

    def test_success(self, capsys):
        """Test a successful evaluation prints the result and exits 0."""
        assert main(["COMPLEX", "3", "4", "j"]) == 0
        assert capsys.readouterr().out == "3+4j\n"

    def test_error_result(self, capsys):
        """Test an error result is printed and exits 1."""
        assert main(["complex", "3", "4", "I"]) == 1
        assert capsys.readouterr().out == "#VALUE!\n"

    def test_forwarded_error(self, capsys):
        """Test an error literal is forwarded."""
        assert main(["COMPLEX", "#N/A", "4"]) == 1
        assert capsys.readouterr().out == "#N/A\n"

    def test_blank_suffix(self, capsys):
        """Test an empty suffix argument defaults to i."""
        assert main(["COMPLEX", "0", "-1", ""]) == 0
        assert capsys.readouterr().out == "i\n"

    def test_unknown_function(self, capsys):
        """Test an unknown function name gives #NAME?."""
        assert main(["IMSUM", "1"]) == 1
        assert capsys.readouterr().out == "#NAME?\n"

    @pytest.mark.parametrize("args,expected", [
        (["COMPLEX", "1", "-1e3"], "1-1000i\n"),
        (["COMPLEX", "1", "-5."], "1-5i\n"),
        (["COMPLEX", "-.5", "-4"], "-0.5-4i\n"),
        (["--row", "3", "COMPLEX", "-2E1", "1", "j"], "-20+j\n"),
    ])
    def test_negative_number_arguments(self, capsys, args, expected):
        """Test that arguments starting with "-" are read as numbers, not options."""
        assert main(args) == 0
        assert capsys.readouterr().out == expected

    def test_usage_error(self):
        """Test that a missing function name is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
