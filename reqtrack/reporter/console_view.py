"""Rich rendering of requirements.

Each requirement is rendered as its name followed by the non-empty
``Docs``, ``Repos``, ``Branches``, ``Todos`` and ``Code Blocks`` blocks.
Text wrapped in ``~~`` is dimmed with the markers removed, checked todos are
dimmed, and the branch matching the working context is highlighted.
"""

from __future__ import annotations

import re
from typing import Optional

from rich.console import Console
from rich.text import Text

from reqtrack.parser.models import Requirement
from reqtrack.utils import console as default_console

NAME_STYLE = "bold green"
DIM_STYLE = "dim"
CODE_STYLE = "bold cyan"
MATCH_STYLE = "bold blink red"
COUNT_STYLE = "bold red"

INDENT = "    "

_STRIKE_PATTERN = re.compile(r"~~(.*)~~")
_CHECKED_TODO = re.compile(r"^\[[xX]\]")


def render_strikethrough(value: str) -> Text:
    """Dim the ``~~...~~`` span of *value*, dropping the markers."""
    text = Text()
    position = 0
    for match in _STRIKE_PATTERN.finditer(value):
        text.append(value[position:match.start()])
        text.append(match.group(1), style=DIM_STYLE)
        position = match.end()
    text.append(value[position:])
    return text


def _render_todo(value: str) -> Text:
    if _CHECKED_TODO.match(value):
        return Text(value, style=DIM_STYLE)
    return render_strikethrough(value)


def _render_branch(req: Requirement, index: int, value: str) -> Text:
    if req.repo_matched > -1 and index == req.branch_matched:
        return Text(value, style=MATCH_STYLE)
    return render_strikethrough(value)


def _append_block(text: Text, title: str, entries: list[Text]) -> None:
    if not entries:
        return
    text.append(f" {title}: \n")
    for entry in entries:
        text.append(INDENT)
        text.append_text(entry)
        text.append("\n")


def render_requirement(req: Requirement) -> Text:
    """Render one requirement as styled text."""
    text = Text()
    text.append(req.name, style=NAME_STYLE)
    text.append("\n")

    _append_block(text, "Docs", [render_strikethrough(v) for v in req.docs])
    _append_block(text, "Repos", [render_strikethrough(v) for v in req.repos])
    _append_block(
        text,
        "Branches",
        [_render_branch(req, i, v) for i, v in enumerate(req.branches)],
    )
    _append_block(text, "Todos", [_render_todo(v) for v in req.todos])

    if req.code_blocks:
        text.append(" Code Blocks: \n\n")
        for i, block in enumerate(req.code_blocks):
            if i:
                text.append("\n\n")
            text.append(block, style=CODE_STYLE)
        text.append("\n")
    return text


def summary_line(found: int, matched: Optional[int] = None) -> Text:
    """``Found N Requirements`` with an optional ``Matched M`` suffix."""
    text = Text("Found ")
    text.append(str(found), style=COUNT_STYLE)
    text.append(" Requirements")
    if matched is not None:
        text.append(", Matched ")
        text.append(str(matched), style=COUNT_STYLE)
        text.append(" Requirements")
    return text


def print_requirements(
    requirements: list[Requirement],
    found: int,
    matched: bool,
    console: Console | None = None,
) -> None:
    """Print the summary line followed by every requirement.

    Args:
        requirements: Requirements to display, already filtered.
        found: Number of pending requirements before repo matching.
        matched: Whether repo matching was applied (adds the ``Matched`` count).
        console: Console to print to; defaults to the shared one.
    """
    out = console or default_console
    out.print(summary_line(found, len(requirements) if matched else None), soft_wrap=True)
    out.print()
    for req in requirements:
        out.print(render_requirement(req), soft_wrap=True)
