"""reqtrack configuration.

Typed configuration for a single run. Built once at startup from the
environment and the command line, then passed to the parts that need it;
the parser and matcher only ever receive plain arguments.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from reqtrack.parser.extractor import DEFAULT_MARKER
from reqtrack.parser.models import normalize_brackets

ENV_REQUIREMENTS_FILE = "REQUIREMENTS_FILE"
DEFAULT_NEW_NAME = "TODO"


class Config(BaseModel):
    """Settings for one reqtrack invocation.

    Attributes:
        requirements_file: Path to the markdown requirements file, or ``None``
            when it has not been configured.
        show_all: List every pending requirement regardless of repo/branch.
        new: Append a new requirement template instead of listing.
        name: Name for the new requirement (see :meth:`entry_name`).
        marker: Heading line that starts the active requirements region.
    """

    requirements_file: Optional[Path] = Field(default=None)
    show_all: bool = Field(default=False)
    new: bool = Field(default=False)
    name: str = Field(default="")
    marker: str = Field(default=DEFAULT_MARKER, min_length=1)

    @field_validator("requirements_file", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def entry_name(self) -> str:
        """Name used for a new entry; ``TODO`` when none was given.

        Line breaks are collapsed to single spaces and full-width brackets are
        normalised, so the appended title parses back to exactly this name.
        """
        parts = normalize_brackets(self.name).splitlines()
        name = " ".join(part.strip() for part in parts if part.strip())
        return name or DEFAULT_NEW_NAME

    @classmethod
    def from_env(cls, **overrides: object) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables:
            REQUIREMENTS_FILE -- path to the requirements markdown file.

        Keyword arguments override the corresponding fields.
        """
        values: dict[str, object] = {
            "requirements_file": os.environ.get(ENV_REQUIREMENTS_FILE, ""),
        }
        values.update(overrides)
        return cls(**values)
