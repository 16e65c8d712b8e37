"""Yakuake control over D-Bus through the qdbus command-line tool."""

import logging

from yakuake_session.transport.base import (
    DEFAULT_CALL_TIMEOUT,
    Session,
    TitleResult,
    Transport,
    TransportKind,
    call_tool,
)

log = logging.getLogger(__name__)

SERVICE = "org.kde.yakuake"
SESSIONS_PATH = "/yakuake/sessions"
TABS_PATH = "/yakuake/tabs"
WINDOW_PATH = "/yakuake/window"
MAIN_WINDOW_PATH = "/yakuake/MainWindow_1"


def probe(tool: str, timeout: float = DEFAULT_CALL_TIMEOUT) -> bool:
    """Return whether Yakuake is registered on the session bus."""
    result = call_tool([tool, SERVICE], timeout)
    return result is not None and result.returncode == 0


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class DBusTransport(Transport):
    kind = TransportKind.DBUS

    def _qdbus(self, path: str, method: str, *args: str) -> str | None:
        result = self._call(SERVICE, path, method, *args)
        if result is None:
            return None
        return result.stdout.strip()

    def add_session(self) -> Session | None:
        output = self._qdbus(SESSIONS_PATH, "addSession")
        if output is None:
            return None
        session_id = _parse_int(output)
        if session_id is None:
            # Older Yakuake releases return nothing from addSession.
            log.debug("addSession returned no id (%r), using active session", output)
        return Session(id=session_id)

    def _first_terminal(self, session_id: int) -> int | None:
        output = self._qdbus(SESSIONS_PATH, "terminalIdsForSessionId", str(session_id))
        if not output:
            return None
        return _parse_int(output.split(",")[0])

    def run_command(self, session: Session, text: str) -> bool:
        if session.id is not None:
            terminal_id = self._first_terminal(session.id)
            if terminal_id is not None:
                output = self._qdbus(
                    SESSIONS_PATH, "runCommandInTerminal", str(terminal_id), text
                )
                return output is not None
            log.debug("no terminal found for session %d, using active session", session.id)
        return self._qdbus(SESSIONS_PATH, "runCommand", text) is not None

    def set_title(self, session: Session, text: str) -> TitleResult:
        session_id = session.id
        if session_id is None:
            output = self._qdbus(SESSIONS_PATH, "activeSessionId")
            session_id = _parse_int(output) if output else None
        if session_id is None:
            return TitleResult.FAILED
        output = self._qdbus(TABS_PATH, "setTabTitle", str(session_id), text)
        return TitleResult.SET if output is not None else TitleResult.FAILED

    def is_visible(self) -> bool:
        output = self._qdbus(MAIN_WINDOW_PATH, "Get", "", "visible")
        return output == "true"

    def show_window(self) -> bool:
        if self.is_visible():
            log.debug("Yakuake window already visible")
            return True
        return self._qdbus(WINDOW_PATH, "toggleWindowState") is not None
