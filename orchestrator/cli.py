"""
Command-line interface for TORAT.

Flags are applied strictly left to right. Each value flag consumes exactly the
token that follows it, whatever that token looks like. `-l` looks up against
the database path in effect at its position and ends the run; `help` / `-h`
prints the help menu and ends the run. Any other token is ignored.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence

from canonical import ToratError, UsageError
from orchestrator.orchestrator import (
    COMMAND_FILTER,
    COMMAND_HELP,
    COMMAND_LOOKUP,
    Command,
    execute,
)
from orchestrator.settings import RunSettings, load_settings_file


_MISSING_ARGUMENT_MESSAGES: dict[str, str] = {
    "-f": "Please supply path of output file after -f flag.",
    "-i": "Please supply path of input file after -i flag.",
    "-s": "Please supply the state to filter by after the -s flag.",
    "-d": "Please supply path of database file after -d flag.",
    "-l": "Please supply the routing number to look up after the -l flag.",
    "-c": "Please supply path of settings file after -c flag.",
}

# Flags that consume the next token as their value
_VALUE_FLAGS = frozenset(_MISSING_ARGUMENT_MESSAGES)


class _ToratArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError("", message)


class _FlagAction(argparse.Action):
    """Base for the value flags: ignores everything after a terminal command."""

    def __init__(self, option_strings: list[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs="?", default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        if namespace.command is not None:
            return
        if values is None:
            raise UsageError(option_string, _MISSING_ARGUMENT_MESSAGES[option_string])
        self.apply(namespace, values)

    def apply(self, namespace: argparse.Namespace, value: str) -> None:
        raise NotImplementedError


class _SettingAction(_FlagAction):
    _FIELDS = {"-f": "output_path", "-i": "input_path", "-s": "state", "-d": "database_path"}

    def apply(self, namespace: argparse.Namespace, value: str) -> None:
        field_name = self._FIELDS[self.option_strings[0]]
        namespace.settings = namespace.settings.with_overrides(**{field_name: value})


class _ConfigAction(_FlagAction):
    def apply(self, namespace: argparse.Namespace, value: str) -> None:
        namespace.settings = load_settings_file(value, namespace.settings)


class _LookupAction(_FlagAction):
    def apply(self, namespace: argparse.Namespace, value: str) -> None:
        namespace.command = COMMAND_LOOKUP
        namespace.routing_number = value
        namespace.lookup_database_path = namespace.settings.database_path


class _HelpAction(argparse.Action):
    def __init__(self, option_strings: list[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        if namespace.command is None:
            namespace.command = COMMAND_HELP


def build_parser() -> argparse.ArgumentParser:
    parser = _ToratArgumentParser(prog="torat", add_help=False, allow_abbrev=False)
    parser.add_argument("-h", action=_HelpAction)
    parser.add_argument("-f", action=_SettingAction, metavar="PATH")
    parser.add_argument("-i", action=_SettingAction, metavar="PATH")
    parser.add_argument("-s", action=_SettingAction, metavar="STATE")
    parser.add_argument("-d", action=_SettingAction, metavar="PATH")
    parser.add_argument("-c", action=_ConfigAction, metavar="PATH")
    parser.add_argument("-l", action=_LookupAction, metavar="ROUTING_NUMBER")
    return parser


def _normalize_tokens(argv: Sequence[str]) -> list[str]:
    """
    Rewrite the command line so argparse sees only exact flags.

    A value flag and the token after it become one `flag=value` token, so the
    value is taken verbatim even when it starts with `-`. A bare `help` becomes
    `-h`. Every other token in flag position, including forms such as `-sNH`
    or `-s=NH`, is dropped.
    """
    tokens: list[str] = []
    pending_flag: Optional[str] = None
    for token in argv:
        if pending_flag is not None:
            tokens.append(f"{pending_flag}={token}")
            pending_flag = None
        elif token in _VALUE_FLAGS:
            pending_flag = token
        elif token in ("help", "-h"):
            tokens.append("-h")
    if pending_flag is not None:
        tokens.append(pending_flag)
    return tokens


def parse_command(argv: Sequence[str], base: Optional[RunSettings] = None) -> Command:
    """
    Parse command-line tokens into a Command.

    Raises:
        UsageError: A flag is missing its argument.
        FileAccessError, ConfigError: A `-c` settings file cannot be loaded.
    """
    namespace = argparse.Namespace(
        settings=base or RunSettings(),
        command=None,
        routing_number=None,
        lookup_database_path=None,
    )
    namespace = build_parser().parse_args(_normalize_tokens(argv), namespace)
    return Command(
        kind=namespace.command or COMMAND_FILTER,
        settings=namespace.settings,
        routing_number=namespace.routing_number,
        lookup_database_path=namespace.lookup_database_path,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the `torat` console script."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        command = parse_command(args)
    except UsageError as e:
        print(e)
        return 0
    except ToratError as e:
        print(e, file=sys.stderr)
        return 0
    return execute(command)


if __name__ == "__main__":
    sys.exit(main())
