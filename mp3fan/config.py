from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

PROGRAM_NAME = "mp3fan"
VERSION = "1.0.0"

HEADING_WIDTH = 36
DEFAULT_INSPECT_DEPTH = 10

_TRUTHY = {"1", "true", "yes"}


class Settings(BaseModel):
    """Runtime settings, read from the environment"""
    progress: bool = False
    color: bool = True
    inspect_depth: int = Field(default=DEFAULT_INSPECT_DEPTH, ge=1)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        color = True
        if "NO_COLOR" in env or env.get("MP3FAN_COLOR", "").lower() in {"0", "false", "no"}:
            color = False

        return cls(
            progress=env.get("MP3FAN_PROGRESS", "").lower() in _TRUTHY,
            color=color,
            inspect_depth=env.get("MP3FAN_INSPECT_DEPTH", DEFAULT_INSPECT_DEPTH),
        )
