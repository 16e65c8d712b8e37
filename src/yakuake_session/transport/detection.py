"""Find a reachable transport to Yakuake, launching it if needed."""

import logging
import shutil
import subprocess
import time
from collections.abc import Iterable

from yakuake_session.constants import ExitCode
from yakuake_session.errors import YakuakeSessionError
from yakuake_session.models import SessionConfig
from yakuake_session.transport import dbus, dcop
from yakuake_session.transport.base import Transport, TransportKind
from yakuake_session.transport.dbus import DBusTransport
from yakuake_session.transport.dcop import DCOPTransport

log = logging.getLogger(__name__)

DCOP_TOOL = "dcop"


def find_tool(candidates: Iterable[str]) -> str | None:
    """Return the path of the first candidate found on PATH."""
    for candidate in candidates:
        path = shutil.which(candidate)
        if path:
            return path
    return None


def probe_transport(qdbus: str | None, dcop_tool: str | None, timeout: float) -> TransportKind:
    """Probe D-Bus first, then DCOP."""
    if qdbus and dbus.probe(qdbus, timeout):
        return TransportKind.DBUS
    if dcop_tool and dcop.probe(dcop_tool, timeout):
        return TransportKind.DCOP
    return TransportKind.NONE


def bind_transport(
    kind: TransportKind,
    qdbus: str | None,
    dcop_tool: str | None,
    timeout: float,
) -> Transport:
    """Build the binding for a probed transport kind."""
    if kind is TransportKind.DBUS and qdbus:
        return DBusTransport(qdbus, timeout)
    if kind is TransportKind.DCOP and dcop_tool:
        return DCOPTransport(dcop_tool, timeout)
    raise ValueError(f"no binding for transport {kind.value!r}")


def launch_application(config: SessionConfig) -> None:
    """Start Yakuake in the background and give it time to register."""
    executable = shutil.which(config.application)
    if executable is None:
        raise YakuakeSessionError(
            f"{config.application} is not installed",
            ExitCode.APP_NOT_INSTALLED,
        )
    log.debug("launching %s", executable)
    try:
        process = subprocess.Popen(
            [executable],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise YakuakeSessionError(
            f"Failed to launch {config.application}: {e}",
            ExitCode.LAUNCH_FAILED,
        ) from e

    time.sleep(config.launch_wait)
    returncode = process.poll()
    if returncode is not None and returncode != 0:
        raise YakuakeSessionError(
            f"{config.application} exited with status {returncode} on startup",
            ExitCode.LAUNCH_FAILED,
        )


def detect_transport(config: SessionConfig) -> Transport:
    """Return a binding for the first reachable transport.

    Each transport is probed at most twice: once up front and once more
    after launching Yakuake.
    """
    qdbus = find_tool(config.qdbus_tools)
    dcop_tool = shutil.which(DCOP_TOOL)
    if qdbus is None and dcop_tool is None:
        tools = ", ".join([*config.qdbus_tools, DCOP_TOOL])
        raise YakuakeSessionError(
            f"No Yakuake control tool installed (looked for {tools})",
            ExitCode.HELPER_NOT_INSTALLED,
        )
    log.debug("qdbus=%s dcop=%s", qdbus, dcop_tool)

    kind = probe_transport(qdbus, dcop_tool, config.call_timeout)
    if kind is TransportKind.NONE:
        log.debug("Yakuake not reachable, starting it")
        launch_application(config)
        kind = probe_transport(qdbus, dcop_tool, config.call_timeout)
    if kind is TransportKind.NONE:
        raise YakuakeSessionError("Cannot connect to Yakuake", ExitCode.NO_TRANSPORT)

    log.debug("using %s transport", kind.value)
    return bind_transport(kind, qdbus, dcop_tool, config.call_timeout)
