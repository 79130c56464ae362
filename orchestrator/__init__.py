from .orchestrator import COMMAND_FILTER, COMMAND_HELP, COMMAND_LOOKUP, HELP_MESSAGE, Command, execute
from .settings import RunSettings, load_settings_file

__all__ = [
    "COMMAND_FILTER",
    "COMMAND_HELP",
    "COMMAND_LOOKUP",
    "HELP_MESSAGE",
    "Command",
    "RunSettings",
    "execute",
    "load_settings_file",
]
