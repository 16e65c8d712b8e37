"""Open and set up a new Yakuake session."""

import logging
import os
from collections.abc import Callable

from yakuake_session.constants import ExitCode
from yakuake_session.dialogs import Dialogs
from yakuake_session.errors import YakuakeSessionError
from yakuake_session.models import SessionConfig, SessionOptions
from yakuake_session.script import source_directive, write_session_script
from yakuake_session.transport import Session, TitleResult, Transport, detect_transport

log = logging.getLogger(__name__)


def validate_workdir(options: SessionOptions) -> None:
    """Raise unless an explicitly requested working directory exists."""
    if options.workdir is None:
        return
    if not options.workdir.is_dir():
        raise YakuakeSessionError(
            f"Working directory does not exist: {options.workdir}",
            ExitCode.NO_WORKDIR,
        )


def _remove_script(path: str) -> None:
    try:
        os.unlink(path)
    except OSError as e:
        log.debug("could not remove %s: %s", path, e)


def _describe(options: SessionOptions, script_path: str) -> str:
    with open(script_path, encoding="utf-8") as f:
        script = f.read()
    return (
        f"Working directory: {options.effective_workdir}\n"
        f"Title: {options.title or '(unchanged)'}\n"
        f"Script {script_path}:\n\n{script}"
    )


def _inject(transport: Transport, options: SessionOptions, script_path: str) -> Session:
    session = transport.add_session()
    if session is None:
        raise YakuakeSessionError(
            "Failed to create a new Yakuake session",
            ExitCode.ADD_SESSION_FAILED,
        )
    log.debug("created session %s", session)

    if not transport.run_command(session, source_directive(script_path, options.fish)):
        raise YakuakeSessionError(
            "Failed to run the command in the new session",
            ExitCode.RUN_COMMAND_FAILED,
        )
    return session


def open_session(
    options: SessionOptions,
    config: SessionConfig,
    dialogs: Dialogs,
    transport_factory: Callable[[SessionConfig], Transport] | None = None,
) -> None:
    """Create a session, run the script in it, then title and show it."""
    validate_workdir(options)

    try:
        script_path = write_session_script(options, config)
    except OSError as e:
        raise YakuakeSessionError(
            f"Failed to write the session script: {e}",
            ExitCode.RUN_COMMAND_FAILED,
        ) from e
    try:
        if options.debug and not dialogs.confirm(_describe(options, script_path)):
            raise YakuakeSessionError("Cancelled", ExitCode.CANCELLED)
        transport = (transport_factory or detect_transport)(config)
        session = _inject(transport, options, script_path)
    except YakuakeSessionError:
        # No shell will source the script now, so it cannot delete itself.
        _remove_script(script_path)
        raise

    if options.title is not None:
        result = transport.set_title(session, options.title)
        if result is TitleResult.UNSUPPORTED:
            dialogs.warning(f"Setting the tab title is not supported over {transport.kind.value}")
        elif result is TitleResult.FAILED:
            dialogs.warning(f"Failed to set the tab title to {options.title!r}")

    if options.show and not transport.show_window():
        log.warning("could not raise the Yakuake window")
