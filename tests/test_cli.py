"""
Command line tests for main.py and generate.py.

Calls main() directly with an argument list; output is captured with capsys.
"""

from __future__ import annotations

import io

import pytest

import generate
import main
from numero.models import NamingSystem


class TestConvertCommand:
    def test_default_naming_system(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-o", "bare", "1,000"]) == 0
        assert "one thousand" in capsys.readouterr().out

    def test_naming_system_type_accepts_enum(self):
        assert main.naming_system(NamingSystem.SHORT_SCALE) is NamingSystem.SHORT_SCALE
        assert main.naming_system("LS") is NamingSystem.LONG_SCALE

    def test_descriptive_by_default(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["1,000,000,000"]) == 0
        out = capsys.readouterr().out
        assert "Number:" in out
        assert "one billion" in out
        assert "(short scale)" in out

    def test_bare_output(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-o", "bare", "twenty-one"]) == 0
        assert "21" in capsys.readouterr().out

    def test_input_option_and_positionals_combine(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-o", "a", "5", "-i", "six", "7"]) == 0
        out = capsys.readouterr().out
        assert "five" in out
        assert "6" in out
        assert "seven" in out

    def test_exit_status_counts_failures(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-o", "suppress", "gazillion", "@x", "5"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_errors_go_to_stderr(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-o", "bare", "four million thousand"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_long_scale(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-s", "LS", "-o", "bare", "one milliard"]) == 0
        assert "1,000,000,000" in capsys.readouterr().out

    def test_german_separators(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-T", ".", "-o", "bare", "1.000,5"]) == 0
        assert "one thousand point five" in capsys.readouterr().out

    def test_without_thousands_separators(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-t", "false", "-o", "bare", "one million"]) == 0
        assert "1000000" in capsys.readouterr().out

    def test_without_leading_zero(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-z", "off", "-o", "bare", "0.5"]) == 0
        out = capsys.readouterr().out
        assert "point five" in out
        assert "zero" not in out

    def test_conflicting_separators(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-T", ".", "-D", ".", "5"]) == 1
        assert "different" in capsys.readouterr().err

    def test_reserved_separator_symbol(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-T", "1", "5"]) == 1
        assert "separator symbol" in capsys.readouterr().err

    def test_out_of_range_exponent(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["-o", "bare", "1e99999999999999999999"]) == 1
        assert "out of range" in capsys.readouterr().err

    def test_invalid_naming_system(self):
        with pytest.raises(SystemExit):
            main.main(["-s", "medium", "5"])

    def test_timing(self, capsys: pytest.CaptureFixture[str]):
        assert main.main(["--timing-mode", "all", "-o", "bare", "5", "6"]) == 0
        out = capsys.readouterr().out
        assert "took" in out
        assert "absolute total" in out


class TestStdinInput:
    def test_reads_until_blank_line(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
        monkeypatch.setattr("sys.stdin", io.StringIO("5\ntwenty-one\n\nignored\n"))
        assert main.main([]) == 0
        out = capsys.readouterr().out
        assert "five" in out
        assert "21" in out
        assert "ignored" not in out
        assert " = " in out

    def test_no_input_prints_help(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main.main([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_read_stdin_inputs(self):
        assert main.read_stdin_inputs(io.StringIO("a\r\nb\n")) == ["a", "b"]


class TestGenerateCommand:
    def test_default_naming_system(self, capsys: pytest.CaptureFixture[str]):
        assert generate.main(["-c", "2", "--seed", "1"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_prints_count_lines(self, capsys: pytest.CaptureFixture[str]):
        assert generate.main(["-c", "3", "--seed", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert all(line.isdigit() for line in lines)

    def test_numerals(self, capsys: pytest.CaptureFixture[str]):
        assert generate.main(["-c", "2", "-g", "numerals", "-m", "4", "-M", "4", "--seed", "9"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert all("thousand" in line for line in lines)

    def test_invalid_count(self, capsys: pytest.CaptureFixture[str]):
        assert generate.main(["-c", "0"]) == 1
        assert "count" in capsys.readouterr().err

    def test_too_many_places_for_short_scale(self, capsys: pytest.CaptureFixture[str]):
        assert generate.main(["-c", "1", "-M", "600"]) == 1
        assert generate.main(["-c", "1", "-s", "long", "-M", "600", "-m", "600"]) == 0
