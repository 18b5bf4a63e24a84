"""Pydantic v2 models for the reqtrack requirements parser.

Defines the record produced for every checklist item found in the
requirements file, together with the section state used while its nested
metadata is being read.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Section(str, Enum):
    """Nested metadata category that subsequent bullet lines belong to."""
    NONE = "none"
    DOCS = "docs"
    REPOS = "repos"
    BRANCHES = "branches"
    TODOS = "todos"


_BRACKETS = {"【": "[", "】": "] "}


def normalize_brackets(text: str) -> str:
    """Replace full-width brackets with their ASCII equivalents.

    Examples:
        '【feat】Login' -> '[feat] Login'
    """
    return "".join(_BRACKETS.get(ch, ch) for ch in text)


# ---------------------------------------------------------------------------
# Requirement Model
# ---------------------------------------------------------------------------

class Requirement(BaseModel):
    """One checklist item and the metadata nested beneath it."""
    done: bool = Field(default=False, description="Whether the checkbox is ticked")
    name: str = Field(..., description="Requirement title")
    docs: list[str] = Field(default_factory=list, description="Document links and notes")
    repos: list[str] = Field(default_factory=list, description="Repositories involved")
    branches: list[str] = Field(default_factory=list, description="Working branches")
    todos: list[str] = Field(default_factory=list, description="Todo items")
    code_blocks: list[str] = Field(
        default_factory=list, description="De-fenced code blocks, indented by two spaces"
    )

    # Parse state; only meaningful while this is the current requirement.
    section: Section = Field(default=Section.NONE, exclude=True)

    # Match annotations, set by the matcher (-1 means no match).
    repo_matched: int = Field(default=-1, exclude=True)
    branch_matched: int = Field(default=-1, exclude=True)

    @classmethod
    def from_title(cls, name: str, checkbox: str = "") -> "Requirement":
        """Create a requirement from the captured parts of a title line."""
        return cls(name=normalize_brackets(name), done=checkbox.strip() != "")

    def add_entry(self, text: str) -> bool:
        """Route a nested bullet's text into the active section.

        Docs entries without a value after the first ``:`` are dropped.

        Returns:
            ``True`` if the entry was stored.
        """
        if self.section is Section.DOCS:
            _, sep, value = text.partition(":")
            if not sep or not value.replace(":", "").strip():
                return False
            self.docs.append(text)
        elif self.section is Section.REPOS:
            self.repos.append(text)
        elif self.section is Section.BRANCHES:
            self.branches.append(text)
        elif self.section is Section.TODOS:
            self.todos.append(text)
        else:
            return False
        return True

    def add_code_block(self, body_lines: list[str]) -> None:
        """Store the lines found between a pair of fences, indented by two spaces."""
        self.code_blocks.append("\n".join("  " + line for line in body_lines))
