"""Yakuake control over KDE 3 DCOP through the dcop command-line tool."""

import logging
import shutil

from yakuake_session.transport.base import (
    DEFAULT_CALL_TIMEOUT,
    Session,
    TitleResult,
    Transport,
    TransportKind,
    call_tool,
)

log = logging.getLogger(__name__)

APPLICATION = "yakuake"
INTERFACE = "DCOPInterface"
WINDOW_NAME = "Yakuake"
WINDOW_QUERY_TOOL = "xwininfo"


def probe(tool: str, timeout: float = DEFAULT_CALL_TIMEOUT) -> bool:
    """Return whether Yakuake is registered with the DCOP server."""
    result = call_tool([tool, APPLICATION], timeout)
    return result is not None and result.returncode == 0


def window_is_viewable(timeout: float = DEFAULT_CALL_TIMEOUT) -> bool | None:
    """Ask the X server whether the Yakuake window is mapped.

    Returns None when the query tool is missing or fails.
    """
    tool = shutil.which(WINDOW_QUERY_TOOL)
    if tool is None:
        log.debug("%s not installed, cannot query window state", WINDOW_QUERY_TOOL)
        return None
    result = call_tool([tool, "-name", WINDOW_NAME], timeout)
    if result is None or result.returncode != 0:
        return None
    for line in result.stdout.splitlines():
        key, _, value = line.strip().partition(":")
        if key == "Map State":
            return value.strip() == "IsViewable"
    return None


class DCOPTransport(Transport):
    kind = TransportKind.DCOP

    def _dcop(self, method: str, *args: str) -> bool:
        return self._call(APPLICATION, INTERFACE, method, *args) is not None

    def add_session(self) -> Session | None:
        if not self._dcop("slotAddSession"):
            return None
        # DCOP gives no id back; later calls go to the active session.
        return Session()

    def run_command(self, session: Session, text: str) -> bool:
        return self._dcop("slotRunCommand", text)

    def set_title(self, session: Session, text: str) -> TitleResult:
        return TitleResult.UNSUPPORTED

    def show_window(self) -> bool:
        if window_is_viewable(self.timeout):
            log.debug("Yakuake window already visible")
            return True
        return self._dcop("slotToggleState")
