"""Command-line option parsing."""

import argparse
import os
import sys
from pathlib import Path

from yakuake_session import __version__
from yakuake_session.constants import APP_NAME, ExitCode
from yakuake_session.models import SessionOptions

# Options whose value is the next token, which may itself look like -e.
VALUE_OPTIONS = frozenset({"-w", "-p", "-t", "--title"})
WORKDIR_PREFIX = "--workdir="


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(ExitCode.USAGE, f"{self.prog}: error: {message}\n")


def profile_property(value: str) -> str:
    """Validate a PROPERTY=VALUE argument."""
    key, sep, _ = value.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected PROPERTY=VALUE, got {value!r}")
    return value


def build_parser(default_fish: bool = False, default_show: bool = True) -> OptionParser:
    """Build the parser; dialect and show defaults come from user config."""
    parser = OptionParser(
        prog=APP_NAME,
        description="Open a new Yakuake session and run a command in it",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-h",
        "--homedir",
        dest="workdir",
        action="store_const",
        const=os.path.expanduser("~"),
        help="Open the session in the home directory",
    )
    parser.add_argument(
        "-w",
        dest="workdir",
        metavar="DIR",
        help="Open the session in DIR",
    )
    parser.add_argument(
        "--workdir",
        dest="workdir",
        action="store_const",
        const=os.getcwd(),
        help="Open the session in the current directory, or in DIR given as --workdir=DIR",
    )
    parser.add_argument(
        "-p",
        dest="properties",
        action="append",
        type=profile_property,
        default=[],
        metavar="PROPERTY=VALUE",
        help="Change a profile property of the new session (repeatable)",
    )
    parser.add_argument("-t", "--title", metavar="TITLE", help="Set the tab title")
    parser.add_argument(
        "-q",
        dest="show",
        action="store_false",
        help="Do not raise the Yakuake window",
    )
    parser.add_argument(
        "--hold",
        "--noclose",
        dest="hold",
        action="store_true",
        help="Keep the session open after the command exits",
    )
    parser.add_argument(
        "--fish",
        dest="fish",
        action="store_true",
        help="The session shell is fish",
    )
    parser.add_argument(
        "--nofish",
        dest="fish",
        action="store_false",
        help="The session shell is a POSIX-like shell",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument(
        "-e",
        dest="command",
        nargs=argparse.REMAINDER,
        metavar="CMD",
        help="Run CMD and its arguments in the new session; must be the last option",
    )
    parser.set_defaults(fish=default_fish, show=default_show)
    return parser


def split_argv(argv: list[str]) -> tuple[list[str], list[str] | None]:
    """Split argv at the first -e into options and the command after it.

    The command is returned untouched, so tokens such as ``--`` reach the
    session as typed. ``--workdir=DIR`` is rewritten to ``-w DIR``.
    """
    options: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "-e":
            return options, list(tokens)
        if token.startswith(WORKDIR_PREFIX):
            options += ["-w", token[len(WORKDIR_PREFIX):]]
            continue
        options.append(token)
        if token in VALUE_OPTIONS:
            value = next(tokens, None)
            if value is not None:
                options.append(value)
    return options, None


def parse_options(
    argv: list[str],
    default_fish: bool = False,
    default_show: bool = True,
) -> SessionOptions:
    """Parse argv into SessionOptions. Usage errors exit with status 1."""
    parser = build_parser(default_fish=default_fish, default_show=default_show)
    option_args, command = split_argv(argv)
    args = parser.parse_args(option_args)
    if args.command is not None:
        # -e inside a bundle of short flags, e.g. -qe
        command = args.command

    if command is not None and not command:
        parser.error("argument -e: expected a command")

    return SessionOptions(
        workdir=Path(args.workdir) if args.workdir is not None else None,
        title=args.title,
        command=tuple(command) if command else None,
        hold=args.hold,
        show=args.show,
        fish=args.fish,
        properties=tuple(args.properties),
        debug=args.debug,
    )
