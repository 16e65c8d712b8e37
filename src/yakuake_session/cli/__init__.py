"""Command-line interface for yakuake-session."""

from yakuake_session.cli.app import entrypoint, main

__all__ = [
    "entrypoint",
    "main",
]
