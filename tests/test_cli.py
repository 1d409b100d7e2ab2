"""Tests for formcheck.cli — CLI entrypoint and argument parsing."""

import pytest

from formcheck.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_check_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--help"])
        assert exc_info.value.code == 0

    def test_methods_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["methods", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_check_missing_files(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check"])
        assert exc_info.value.code == 2

    def test_check_missing_rules(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "input.json"])
        assert exc_info.value.code == 2

    def test_unknown_command(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "formcheck" in captured.out


class TestCLIMethods:
    def test_lists_builtins(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["methods"])
        lines = capsys.readouterr().out.splitlines()
        assert "required\tbuilt-in" in lines
        assert "equalTo\tbuilt-in" in lines
        assert len(lines) == 15
