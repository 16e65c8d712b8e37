"""Per-invocation options model."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SessionOptions(BaseModel):
    """Everything the command line asked for, fixed once parsed."""

    model_config = ConfigDict(frozen=True)

    workdir: Path | None = None
    title: str | None = None
    command: tuple[str, ...] | None = None
    hold: bool = False
    show: bool = True
    fish: bool = False
    properties: tuple[str, ...] = ()
    debug: bool = False

    @property
    def effective_workdir(self) -> Path:
        """Return the requested directory, or the current one when unset."""
        if self.workdir is None:
            return Path(os.getcwd())
        return self.workdir
