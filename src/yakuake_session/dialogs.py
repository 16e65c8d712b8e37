"""User-visible messages: kdialog when available, stderr otherwise."""

import logging
import os
import shutil
import subprocess
import sys
from typing import TextIO

from yakuake_session.constants import DIALOG_TITLE

log = logging.getLogger(__name__)

KDIALOG = "kdialog"
DIALOG_TIMEOUT_SECONDS = 600


def _has_display() -> bool:
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


class Dialogs:
    """Report errors and warnings, and ask for confirmation."""

    def __init__(
        self,
        enabled: bool = True,
        stream: TextIO | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._input = input_stream if input_stream is not None else sys.stdin
        self._window_id = os.environ.get("WINDOWID", "").strip() or None
        self._kdialog = shutil.which(KDIALOG) if enabled and _has_display() else None

    def _run_kdialog(self, *args: str) -> int | None:
        argv = [self._kdialog, "--title", DIALOG_TITLE, *args]
        if self._window_id:
            argv += ["--attach", self._window_id]
        try:
            result = subprocess.run(argv, timeout=DIALOG_TIMEOUT_SECONDS)
        except (subprocess.TimeoutExpired, OSError) as e:
            log.debug("kdialog failed: %s", e)
            return None
        return result.returncode

    def _print(self, text: str) -> None:
        print(text, file=self._stream)

    def error(self, message: str) -> None:
        log.debug("error: %s", message)
        if self._kdialog and self._run_kdialog("--error", message) is not None:
            return
        self._print(f"Error: {message}")

    def warning(self, message: str) -> None:
        log.debug("warning: %s", message)
        if self._kdialog and self._run_kdialog("--sorry", message) is not None:
            return
        self._print(f"Warning: {message}")

    def confirm(self, message: str) -> bool:
        """Show message and return whether the user chose to continue."""
        if self._kdialog:
            returncode = self._run_kdialog("--warningcontinuecancel", message)
            if returncode is not None:
                return returncode == 0

        self._print(message)
        if not self._input.isatty():
            return True
        self._stream.write("Continue? [Y/n] ")
        self._stream.flush()
        answer = self._input.readline().strip().lower()
        return answer in {"", "y", "yes"}
