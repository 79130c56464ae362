"""
Tests for the command-line interface.

Flag handling is left to right: value flags consume the next token, `-l`
uses the database path in effect at its position, and the first terminal
command (help or lookup) wins.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from canonical import UsageError
from orchestrator import (
    COMMAND_FILTER,
    COMMAND_HELP,
    COMMAND_LOOKUP,
    HELP_MESSAGE,
    Command,
    RunSettings,
    execute,
)
from orchestrator.cli import main, parse_command


ACME_ROW = "123456789,Acme Bank,1 Main St,Suite 2,90210,CA"


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory holding the default database and input files."""
    write_lines(tmp_path / "data.csv", [ACME_ROW, "211274450,Pine Tree Savings,12 Harbor Rd,Floor 3,04101,ME"])
    write_lines(tmp_path / "target.txt", ["123456789", "999999999", "211274450"])
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParseCommand:
    """Tests for turning tokens into a Command."""

    def test_no_arguments_uses_defaults(self) -> None:
        """With no flags the filter runs on the default settings."""
        command = parse_command([])
        assert command.kind == COMMAND_FILTER
        assert command.settings == RunSettings()

    def test_value_flags(self) -> None:
        """Each value flag sets its setting."""
        command = parse_command(["-f", "report.txt", "-i", "list.txt", "-s", "NH", "-d", "banks.csv"])
        assert command.settings == RunSettings(
            output_path="report.txt",
            input_path="list.txt",
            state="NH",
            database_path="banks.csv",
        )

    def test_later_flag_overrides_earlier(self) -> None:
        """Repeated flags resolve to the last value."""
        assert parse_command(["-s", "NH", "-s", "VT"]).settings.state == "VT"

    def test_unrecognised_tokens_ignored(self) -> None:
        """Tokens that are not flags are ignored."""
        command = parse_command(["extra", "-x", "-s", "NH", "--verbose"])
        assert command.kind == COMMAND_FILTER
        assert command.settings.state == "NH"

    def test_help_word_and_flag(self) -> None:
        """Both `help` and `-h` select help."""
        assert parse_command(["help"]).kind == COMMAND_HELP
        assert parse_command(["-s", "NH", "-h"]).kind == COMMAND_HELP

    def test_help_as_flag_value(self) -> None:
        """`help` consumed by a flag is a value, not a command."""
        command = parse_command(["-f", "help"])
        assert command.kind == COMMAND_FILTER
        assert command.settings.output_path == "help"

    def test_value_may_start_with_dash(self) -> None:
        """A flag takes the next token as its value even when it looks like a flag."""
        assert parse_command(["-f", "-report.txt"]).settings.output_path == "-report.txt"
        command = parse_command(["-i", "-h", "-s", "NH"])
        assert command.kind == COMMAND_FILTER
        assert command.settings.input_path == "-h"
        assert command.settings.state == "NH"

    @pytest.mark.parametrize("token", ["-sNH", "-s=NH", "-hx", "--", "-f=out2.txt"])
    def test_attached_values_ignored(self, token: str) -> None:
        """A flag with its value glued on is not a flag and is ignored."""
        command = parse_command([token])
        assert command.kind == COMMAND_FILTER
        assert command.settings == RunSettings()

    def test_lookup_uses_database_in_effect(self) -> None:
        """`-d` before `-l` applies to the lookup."""
        command = parse_command(["-d", "banks.csv", "-l", "123456789"])
        assert command.kind == COMMAND_LOOKUP
        assert command.routing_number == "123456789"
        assert command.lookup_database_path == "banks.csv"

    def test_database_after_lookup_has_no_effect(self) -> None:
        """`-d` after `-l` does not change the lookup database."""
        command = parse_command(["-l", "123456789", "-d", "banks.csv"])
        assert command.lookup_database_path == "data.csv"

    def test_first_terminal_command_wins(self) -> None:
        """Whichever of help and lookup comes first is the command."""
        assert parse_command(["-l", "123456789", "help"]).kind == COMMAND_LOOKUP
        assert parse_command(["help", "-l", "123456789"]).kind == COMMAND_HELP

    def test_tokens_after_lookup_are_not_checked(self) -> None:
        """A dangling flag after `-l` is never reached."""
        command = parse_command(["-l", "123456789", "-f"])
        assert command.kind == COMMAND_LOOKUP

    @pytest.mark.parametrize(
        "flag, message",
        [
            ("-f", "Please supply path of output file after -f flag."),
            ("-i", "Please supply path of input file after -i flag."),
            ("-s", "Please supply the state to filter by after the -s flag."),
            ("-d", "Please supply path of database file after -d flag."),
            ("-l", "Please supply the routing number to look up after the -l flag."),
            ("-c", "Please supply path of settings file after -c flag."),
        ],
    )
    def test_missing_argument(self, flag: str, message: str) -> None:
        """A flag at the end of the command line is a usage error."""
        with pytest.raises(UsageError) as exc_info:
            parse_command(["-s", "NH", flag])
        assert exc_info.value.flag == flag
        assert str(exc_info.value) == message

    def test_settings_file_position(self, tmp_path: Path) -> None:
        """A settings file overrides earlier flags and is overridden by later ones."""
        config = tmp_path / "torat.json"
        config.write_text(json.dumps({"state": "VT", "input_file": "from-config.txt"}), encoding="utf-8")

        before = parse_command(["-s", "NH", "-c", str(config)])
        assert before.settings.state == "VT"

        after = parse_command(["-c", str(config), "-s", "NH"])
        assert after.settings.state == "NH"
        assert after.settings.input_path == "from-config.txt"


class TestExecute:
    """Tests for running a parsed Command."""

    def test_help_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A help command prints the menu."""
        assert execute(Command(kind=COMMAND_HELP, settings=RunSettings())) == 0
        assert capsys.readouterr().out == HELP_MESSAGE + "\n"

    def test_unsupported_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An unknown command kind is reported, not raised."""
        assert execute(Command(kind="merge", settings=RunSettings())) == 0
        assert "Unsupported command: merge" in capsys.readouterr().err


class TestMain:
    """End-to-end tests through main()."""

    def test_help(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Help prints the menu and runs nothing."""
        assert main(["help"]) == 0
        assert capsys.readouterr().out == HELP_MESSAGE + "\n"
        assert not (workdir / "out.txt").exists()

    def test_default_filter_run(self, workdir: Path) -> None:
        """With defaults the filter reads data.csv and target.txt and writes out.txt."""
        assert main([]) == 0
        assert (workdir / "out.txt").read_text(encoding="utf-8") == (
            "123456789:Acme Bank(CA)\n"
            "999999999: unknown (not in database.)\n"
        )

    def test_filter_with_flags(self, workdir: Path) -> None:
        """Flags redirect input, output and the target state."""
        write_lines(workdir / "list.txt", ["211274450", "123456789"])
        assert main(["-i", "list.txt", "-f", "report.txt", "-s", "CA"]) == 0
        assert (workdir / "report.txt").read_text(encoding="utf-8") == "211274450:Pine Tree Savings(ME)\n"

    def test_lookup_found(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Lookup prints the summary line and writes no report."""
        assert main(["-l", "123456789"]) == 0
        assert capsys.readouterr().out == "123456789: Acme Bank, 1 Main St Suite 2 90210 CA\n"
        assert not (workdir / "out.txt").exists()

    def test_lookup_not_found(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Lookup of an unknown routing number prints the not-found message."""
        main(["-l", "000000000"])
        assert capsys.readouterr().out == "Unable to locate routing number (000000000) in database.\n"

    def test_usage_error_has_no_side_effects(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing flag argument is reported and nothing runs."""
        assert main(["-f"]) == 0
        assert capsys.readouterr().out == "Please supply path of output file after -f flag.\n"
        assert not (workdir / "out.txt").exists()

    def test_missing_database_reported(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing database is reported on stderr and no report is written."""
        assert main(["-d", "missing.csv"]) == 0
        captured = capsys.readouterr()
        assert "Unable to open the database file missing.csv." in captured.err
        assert not (workdir / "out.txt").exists()

    def test_missing_input_reported(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing input file is reported on stderr and no report is written."""
        assert main(["-i", "missing.txt"]) == 0
        assert "Unable to open input file missing.txt." in capsys.readouterr().err
        assert not (workdir / "out.txt").exists()

    def test_malformed_database_reported(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A malformed database row is reported and aborts the run."""
        write_lines(workdir / "bad.csv", [ACME_ROW, "211274450,Pine Tree Savings"])
        assert main(["-d", "bad.csv"]) == 0
        assert "Malformed record on line 2 of bad.csv" in capsys.readouterr().err
        assert not (workdir / "out.txt").exists()

    def test_missing_settings_file_reported(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing settings file is reported and nothing runs."""
        assert main(["-c", "missing.json"]) == 0
        assert "Unable to open the config file missing.json." in capsys.readouterr().err
        assert not (workdir / "out.txt").exists()

    def test_undecodable_input_reported(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A bad byte in the input list is reported on stderr and no report is written."""
        (workdir / "target.txt").write_bytes(b"123456789\n\xff\xfe\n")
        assert main([]) == 0
        assert "Unable to read input file target.txt at line 2." in capsys.readouterr().err
        assert not (workdir / "out.txt").exists()

    def test_dash_output_path(self, workdir: Path) -> None:
        """An output path starting with a dash is used as given."""
        assert main(["-f", "-report.txt"]) == 0
        assert (workdir / "-report.txt").read_text(encoding="utf-8").startswith("123456789:Acme Bank(CA)\n")
