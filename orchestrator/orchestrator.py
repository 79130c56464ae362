from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from canonical import FileAccessError, ToratError
from lookup import run_state_filter, single_lookup
from orchestrator.settings import (
    DEFAULT_DATABASE_PATH,
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_STATE,
    RunSettings,
)


COMMAND_FILTER = "filter"
COMMAND_LOOKUP = "lookup"
COMMAND_HELP = "help"

HELP_MESSAGE = f"""
TORAT (Treasury Office Routing number Analysis Tool) Help Menu:

Commands/Flags:
help \tDisplay this help message.
-h \tDisplay this help message.
-f \tChange the output file.
-i \tChange the input file.
-s \tChange the state that we are filtering by.
-d \tChange the database file we are referencing.
-l \tSingle lookup mode.
-c \tLoad settings from a JSON file.

Examples:
torat -h
torat -f out.txt -i target.txt
torat -s NH -d data.csv
torat -d data.csv -l #########
torat -c torat.json -s NH

Default input file: {DEFAULT_INPUT_PATH}.
Default output file: {DEFAULT_OUTPUT_PATH}.
Default State: {DEFAULT_STATE}.
Default database file: {DEFAULT_DATABASE_PATH}."""


@dataclass(frozen=True, slots=True)
class Command:
    """
    One parsed invocation.

    `lookup_database_path` is the database path that was in effect when `-l`
    was read; later `-d` flags do not change it.
    """

    kind: str
    settings: RunSettings
    routing_number: Optional[str] = None
    lookup_database_path: Optional[str] = None


def print_help_message() -> None:
    print(HELP_MESSAGE)


def execute(command: Command) -> int:
    """
    Run a help, filter or lookup command to completion.

    Every failure is terminal for the run: the message goes to the console and
    nothing is retried. The return value is always 0.
    """
    try:
        if command.kind == COMMAND_HELP:
            print_help_message()
        elif command.kind == COMMAND_LOOKUP:
            single_lookup(
                command.routing_number or "",
                command.lookup_database_path or command.settings.database_path,
            )
        elif command.kind == COMMAND_FILTER:
            settings = command.settings
            run_state_filter(
                settings.input_path,
                settings.output_path,
                settings.state,
                settings.database_path,
            )
        else:
            print(f"[Orchestrator] ERROR: Unsupported command: {command.kind}", file=sys.stderr)
    except FileAccessError as e:
        print(e, file=sys.stderr)
    except ToratError as e:
        print(f"[Orchestrator] ERROR: {e}", file=sys.stderr)
    return 0
