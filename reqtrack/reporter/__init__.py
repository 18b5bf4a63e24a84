"""Terminal presentation for reqtrack.

Renders requirements as Rich ``Text`` and prints the summary listing.
"""

from reqtrack.reporter.console_view import (
    print_requirements,
    render_requirement,
    render_strikethrough,
    summary_line,
)

__all__ = [
    "print_requirements",
    "render_requirement",
    "render_strikethrough",
    "summary_line",
]
