"""Pydantic schema for ~/.fileaccess/config.yaml

Only tunables live here. Fixed names and spellings are in conventions.py.
"""

import io
from typing import Literal

from pydantic import BaseModel, Field

from .conventions import LINE_TERMINATORS


class FileAccessConfig(BaseModel):
    # buffering=1 means line buffering, which binary handles reject
    buffer_size: int = Field(default=io.DEFAULT_BUFFER_SIZE, gt=1)
    newline: Literal["platform", "lf", "crlf"] = "platform"

    @property
    def line_terminator(self) -> str:
        """The terminator append() writes after each line."""
        return LINE_TERMINATORS[self.newline]
