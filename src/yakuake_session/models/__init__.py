"""Model package for yakuake-session."""

from yakuake_session.models.session_options import SessionOptions
from yakuake_session.models.user_config import DEFAULT_QDBUS_TOOLS, SessionConfig

__all__ = [
    "DEFAULT_QDBUS_TOOLS",
    "SessionConfig",
    "SessionOptions",
]
