"""Compose and write the script sourced by the new session's shell.

The script runs inside the freshly created Yakuake tab. It clears the
screen, deletes itself, applies any profile properties and finally changes
into the working directory and runs the requested command:

    clear
    rm -f /tmp/yakuake-session.k2j4x 2>/dev/null
    konsoleprofile 'ColorScheme=Solarized;TerminalColumns=120'
    cd /home/user/src && exec make test

fish does not understand ``&&`` in older releases, so the last line is
joined with ``; and`` when the session shell is fish.
"""

import logging
import shlex
import tempfile
from collections.abc import Sequence

from yakuake_session.constants import NOOP_COMMAND, SCRIPT_PREFIX
from yakuake_session.models import SessionConfig, SessionOptions

log = logging.getLogger(__name__)

POSIX_AND = "&&"
FISH_AND = "; and"


def quote(text: str, fish: bool = False) -> str:
    """Quote text as a single word for the session shell."""
    if not fish:
        return shlex.quote(text)
    # fish honours \\ and \' inside single quotes, unlike POSIX shells.
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"


def chain_operator(fish: bool) -> str:
    """Return the operator that runs the right side only if the left succeeded."""
    return FISH_AND if fish else POSIX_AND


def build_command(command: Sequence[str] | None, hold: bool) -> str:
    """Return the shell text for the user command.

    Without ``hold`` the shell replaces itself with the command, so the tab
    closes when the command exits.
    """
    if not command:
        return NOOP_COMMAND
    text = " ".join(command)
    if hold:
        return text
    return f"exec {text}"


def build_profile_command(
    properties: Sequence[str],
    helper: str,
    separator: str,
    fish: bool = False,
) -> str:
    """Return the profile helper invocation, or a no-op without properties."""
    if not properties:
        return NOOP_COMMAND
    return f"{helper} {quote(separator.join(properties), fish)}"


def compose_script(script_path: str, options: SessionOptions, config: SessionConfig) -> str:
    """Return the full text of the session script."""
    fish = options.fish
    command = build_command(options.command, options.hold)
    profile = build_profile_command(
        options.properties,
        config.profile_helper,
        config.profile_separator,
        fish,
    )
    workdir = quote(str(options.effective_workdir), fish)
    lines = [
        "clear",
        f"rm -f {quote(script_path, fish)} 2>/dev/null",
        profile,
        f"cd {workdir} {chain_operator(fish)} {command}",
    ]
    return "\n".join(lines) + "\n"


def source_directive(script_path: str, fish: bool = False) -> str:
    """Return the line typed into the session to run the script.

    The leading space keeps the line out of the shell history.
    """
    return f" source {quote(script_path, fish)}"


def write_session_script(options: SessionOptions, config: SessionConfig) -> str:
    """Write the session script to a fresh temporary file and return its path."""
    script = tempfile.NamedTemporaryFile(
        mode="w", prefix=SCRIPT_PREFIX, suffix=".sh", delete=False, encoding="utf-8"
    )
    with script:
        text = compose_script(script.name, options, config)
        script.write(text)
    log.debug("wrote session script %s:\n%s", script.name, text)
    return script.name
