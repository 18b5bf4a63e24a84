"""reqtrack requirements parser.

Parses a markdown requirements checklist into structured records.

Usage::

    from reqtrack.parser import parse, Requirement

    requirements = parse(Path("requirements.md").read_text("utf-8"))
    for req in requirements:
        print(req.name, req.repos, req.branches)
"""

from reqtrack.parser.models import (
    Requirement,
    Section,
)
from reqtrack.parser.extractor import (
    DEFAULT_MARKER,
    SECTION_LABELS,
    FormatError,
    parse,
    parse_file,
)

__all__ = [
    "parse",
    "parse_file",
    "FormatError",
    "Requirement",
    "Section",
    "DEFAULT_MARKER",
    "SECTION_LABELS",
]
