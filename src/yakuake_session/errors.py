"""Error type carrying the exit status for the CLI."""

from yakuake_session.constants import ExitCode


class YakuakeSessionError(Exception):
    """A fatal condition that ends the run with a specific exit status."""

    def __init__(self, message: str, exit_code: ExitCode) -> None:
        super().__init__(message)
        self.exit_code = exit_code
