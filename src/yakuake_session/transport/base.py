"""Common interface for the ways of remote-controlling Yakuake."""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger(__name__)

DEFAULT_CALL_TIMEOUT = 10.0


class TransportKind(str, Enum):
    DBUS = "dbus"
    DCOP = "dcop"
    NONE = "none"


class TitleResult(Enum):
    SET = "set"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


@dataclass(frozen=True)
class Session:
    """Handle for a session created by ``Transport.add_session``.

    ``id`` is None when the transport cannot report one; calls then address
    whichever session Yakuake has active.
    """

    id: int | None = None


def call_tool(argv: list[str], timeout: float) -> subprocess.CompletedProcess | None:
    """Run a helper tool and return its result, or None if it could not run."""
    try:
        result = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, PermissionError) as e:
        log.debug("%s failed: %s", argv[0], e)
        return None
    log.debug("%s returned %d: %r", " ".join(argv), result.returncode, result.stdout.strip())
    return result


class Transport(ABC):
    """Four remote operations against a running Yakuake."""

    kind: TransportKind

    def __init__(self, tool: str, timeout: float = DEFAULT_CALL_TIMEOUT) -> None:
        self.tool = tool
        self.timeout = timeout

    def _call(self, *args: str) -> subprocess.CompletedProcess | None:
        """Run the transport tool; return the result only if it succeeded."""
        result = call_tool([self.tool, *args], self.timeout)
        if result is None or result.returncode != 0:
            return None
        return result

    @abstractmethod
    def add_session(self) -> Session | None:
        """Create a new session; return its handle, or None on failure."""

    @abstractmethod
    def run_command(self, session: Session, text: str) -> bool:
        """Type a line of shell text into the session."""

    @abstractmethod
    def set_title(self, session: Session, text: str) -> TitleResult:
        """Rename the session's tab."""

    @abstractmethod
    def show_window(self) -> bool:
        """Raise the Yakuake window unless it is already visible."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tool={self.tool!r})"
