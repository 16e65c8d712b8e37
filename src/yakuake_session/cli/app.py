"""Top-level CLI: pre-flight, option parsing and the session run."""

import logging
import sys

from yakuake_session.cli.options import parse_options
from yakuake_session.config import default_fish, load_config
from yakuake_session.dialogs import Dialogs
from yakuake_session.errors import YakuakeSessionError
from yakuake_session.privilege import delegate_if_superuser
from yakuake_session.session import open_session

log = logging.getLogger("yakuake_session")


def main(argv: list[str] | None = None) -> int:
    """Open a Yakuake session as described by argv and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    delegate_if_superuser(args)

    logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s: %(message)s")
    config = load_config()
    options = parse_options(args, default_fish=default_fish(config), default_show=config.show)
    if options.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    log.debug("options=%r", options)

    dialogs = Dialogs(enabled=config.dialogs)
    try:
        open_session(options, config, dialogs)
    except YakuakeSessionError as e:
        dialogs.error(str(e))
        return e.exit_code
    return 0


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
