"""Jinja2 rendering of the new-requirement template.

The rendered block uses the same title, section-header and bullet layout the
parser reads, so an appended entry parses back into one requirement.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from jinja2 import Environment, StrictUndefined

from reqtrack.git_context import RepoContext

NEW_ENTRY_TEMPLATE = """
- [ ] {{ name }}
  - 文档:
    - 记录时间: {{ today }}
    - 需求地址:
    - 技术文档:
    - 需求文档:
    - 发布单:
    - UI:
  - 服务:
    - {{ repo }}
  - 分支:
    - {{ branch }}
  - 待办:
    - [ ]
"""

_env = Environment(
    autoescape=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def render_entry(name: str, context: RepoContext, today: Optional[date] = None) -> str:
    """Render the template for a new requirement called *name*."""
    template = _env.from_string(NEW_ENTRY_TEMPLATE)
    return template.render(
        name=name,
        today=(today or date.today()).isoformat(),
        repo=context.repo,
        branch=context.branch,
    )


def append_entry(
    path: str | Path,
    name: str,
    context: RepoContext,
    today: Optional[date] = None,
) -> str:
    """Append a rendered entry to the requirements file at *path*.

    The file is created if it does not exist.

    Returns:
        The text that was written.
    """
    entry = render_entry(name, context, today=today)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(entry)
    return entry
