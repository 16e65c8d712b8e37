"""Shared constants for yakuake-session."""

from enum import IntEnum

APP_NAME = "yakuake-session"
DIALOG_TITLE = "Yakuake Session"

# Shell text used where nothing needs to run.
NOOP_COMMAND = "true"

SCRIPT_PREFIX = "yakuake-session."


class ExitCode(IntEnum):
    """Process exit statuses."""

    OK = 0
    USAGE = 1
    NO_WORKDIR = 2
    ADD_SESSION_FAILED = 4
    RUN_COMMAND_FAILED = 7
    APP_NOT_INSTALLED = 20
    HELPER_NOT_INSTALLED = 21
    NO_TRANSPORT = 22
    CANCELLED = 120
    LAUNCH_FAILED = 126
