"""Markdown requirements parser for reqtrack.

Turns the flat lines of a requirements checklist into an ordered list of
:class:`Requirement` records. Uses pure regex line classification; every
line is matched against the patterns below, top to bottom.
"""

from __future__ import annotations

import re
from pathlib import Path

from .models import Requirement, Section


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_MARKER = "## Active Requirements"
CODE_FENCE = "```"

SECTION_LABELS: dict[Section, tuple[str, ...]] = {
    Section.DOCS: (
        "文档", "需求", "doc", "docs", "documents", "documentation", "documentations",
    ),
    Section.REPOS: (
        "服务", "代码仓库", "服务列表", "service", "services",
        "repo", "repos", "repository", "repositories",
    ),
    Section.BRANCHES: ("分支", "branch", "branches"),
    Section.TODOS: ("待办", "todo", "todos"),
}

_TITLE_PATTERN = re.compile(r"^- \[([* Xx]*)\] *(.*)$")
_BULLET_PATTERN = re.compile(r"^ {4}- *(.*)$")


def _section_pattern(labels: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(label) for label in labels)
    return re.compile(rf"^ {{2}}- (?:{alternatives}):\s*", re.IGNORECASE)


_SECTION_PATTERNS: list[tuple[Section, re.Pattern[str]]] = [
    (section, _section_pattern(labels)) for section, labels in SECTION_LABELS.items()
]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class FormatError(ValueError):
    """Raised when a nested line appears before any requirement title."""

    def __init__(self, message: str, line: str = "", line_number: int = 0) -> None:
        self.line = line
        self.line_number = line_number
        super().__init__(message)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _split_lines(text: str) -> list[str]:
    r"""Split on ``\n`` only, dropping one trailing ``\r`` per line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def _strip_preamble(text: str, marker: str) -> tuple[str, int]:
    """Return the text after the first line equal to *marker*.

    The whole text is returned when no such line exists. The second element
    is the number of lines removed.
    """
    lines = text.split("\n")
    for index, line in enumerate(lines):
        if line.rstrip() == marker:
            return "\n".join(lines[index + 1:]), index + 1
    return text, 0


def _find_closing_fence(lines: list[str], start: int) -> int:
    """Index of the first fence line after *start*, or -1 if unterminated."""
    for index in range(start + 1, len(lines)):
        if lines[index].startswith(CODE_FENCE):
            return index
    return -1


def _match_section(line: str) -> Section | None:
    for section, pattern in _SECTION_PATTERNS:
        if pattern.match(line):
            return section
    return None


def _require_current(
    requirements: list[Requirement], line: str, line_number: int
) -> Requirement:
    if not requirements:
        raise FormatError(
            f"Illegal format at line {line_number}: {line!r} appears before any requirement",
            line=line,
            line_number=line_number,
        )
    return requirements[-1]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse(text: str, marker: str = DEFAULT_MARKER) -> list[Requirement]:
    """Parse requirements markdown into an ordered list of requirements.

    Only the region after the *marker* heading is considered (or the whole
    text when the marker is absent). Headings and blank lines are skipped,
    fenced code blocks attach to the current requirement, and unrecognised
    indented lines are ignored.

    Args:
        text: The markdown document.
        marker: Heading line that starts the active requirements region.

    Returns:
        Requirements in document order, completed ones included.

    Raises:
        FormatError: If content other than a title, heading or unterminated
            fence appears before the first title line.
    """
    body_text, offset = _strip_preamble(text, marker)
    lines = _split_lines(body_text)
    requirements: list[Requirement] = []

    index = 0
    while index < len(lines):
        start = index
        line = lines[index]
        line_number = offset + index + 1
        index += 1

        if not line.strip() or line.startswith("#"):
            continue

        if line.startswith(CODE_FENCE):
            closing = _find_closing_fence(lines, start)
            if closing < 0:
                # Unterminated; the following lines are parsed normally.
                continue
            current = _require_current(requirements, line, line_number)
            body = lines[start + 1:closing]
            if body:
                current.add_code_block(body)
            index = closing + 1
            continue

        title = _TITLE_PATTERN.match(line)
        if title:
            requirements.append(Requirement.from_title(title.group(2), title.group(1)))
            continue

        current = _require_current(requirements, line, line_number)

        section = _match_section(line)
        if section is not None:
            current.section = section
            continue

        bullet = _BULLET_PATTERN.match(line)
        if bullet and bullet.group(1).strip():
            current.add_entry(bullet.group(1))

    return requirements


def parse_file(path: str | Path, marker: str = DEFAULT_MARKER) -> list[Requirement]:
    """Read a UTF-8 requirements file and parse it.

    Raises:
        FileNotFoundError: If the file does not exist.
        FormatError: If the document is malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Requirements file not found: {path}")
    return parse(file_path.read_text(encoding="utf-8"), marker=marker)
