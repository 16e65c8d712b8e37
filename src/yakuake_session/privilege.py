"""Hand the run over to the logged-in user when started as root.

Yakuake runs in the desktop user's session, so talking to it from a root
process reaches the wrong (or no) session bus.
"""

import logging
import os
import shutil
import sys

log = logging.getLogger(__name__)


def login_user() -> str | None:
    """Return the name of the user logged in on the controlling terminal."""
    try:
        return os.getlogin()
    except OSError:
        return os.environ.get("SUDO_USER") or None


def delegate_command(user: str, argv: list[str], sudo: str) -> list[str]:
    """Return the argv that re-runs this program as user."""
    return [sudo, "-u", user, "-H", "--", sys.executable, "-m", "yakuake_session", *argv]


def delegate_if_superuser(argv: list[str]) -> None:
    """Re-exec as the login user when running with root privileges.

    Returns normally when no hand-over is needed or possible.
    """
    if os.geteuid() != 0:
        return
    user = login_user()
    if not user or user == "root":
        log.debug("running as root with no other login user")
        return
    sudo = shutil.which("sudo")
    if sudo is None:
        log.warning("running as root but sudo is not installed; staying root")
        return
    command = delegate_command(user, argv, sudo)
    log.debug("re-running as %s: %s", user, command)
    os.execv(sudo, command)
