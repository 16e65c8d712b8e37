"""User configuration model for yakuake-session."""

from pydantic import BaseModel, Field

DEFAULT_QDBUS_TOOLS = ["qdbus", "qdbus6", "qdbus-qt6", "qdbus-qt5"]


class SessionConfig(BaseModel):
    """Settings read from the optional config file."""

    application: str = "yakuake"
    qdbus_tools: list[str] = Field(default_factory=lambda: list(DEFAULT_QDBUS_TOOLS))
    profile_helper: str = "konsoleprofile"
    profile_separator: str = ";"
    launch_wait: float = Field(default=2.0, ge=0)
    call_timeout: float = Field(default=10.0, gt=0)
    fish: bool | None = None
    show: bool = True
    dialogs: bool = True
