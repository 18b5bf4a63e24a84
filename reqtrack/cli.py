"""reqtrack command-line entry point.

Usage::

    REQUIREMENTS_FILE=~/notes/requirements.md reqtrack
    reqtrack --all
    reqtrack --new --name "Fix login bug"
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from reqtrack.config import ENV_REQUIREMENTS_FILE, Config
from reqtrack.git_context import RepoContext, detect_repo_context
from reqtrack.matcher import pending, select
from reqtrack.parser import FormatError, parse_file
from reqtrack.reporter import print_requirements
from reqtrack.template import append_entry
from reqtrack.utils import print_error, print_success, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reqtrack",
        description="Show the pending requirements for the current repository and branch",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"The requirements file is read from ${ENV_REQUIREMENTS_FILE}.\n\n"
            "Examples:\n"
            "  reqtrack\n"
            "  reqtrack --all\n"
            "  reqtrack --new --name 'Fix login bug'\n"
        ),
    )
    parser.add_argument(
        "--all",
        dest="show_all",
        action="store_true",
        help="Show all active requirements",
    )
    parser.add_argument(
        "--new",
        action="store_true",
        help="Add new requirement",
    )
    parser.add_argument(
        "--name",
        default="",
        help="New requirement name (default: TODO)",
    )
    return parser


def run(config: Config, context: RepoContext) -> int:
    """Execute one invocation and return the process exit code."""
    if config.requirements_file is None:
        print_warning(f"Where is the requirement file? Set ${ENV_REQUIREMENTS_FILE}.")
        return 0

    if config.new:
        append_entry(config.requirements_file, config.entry_name, context)
        print_success(f"Added requirement '{config.entry_name}' to {config.requirements_file}")
        return 0

    try:
        requirements = parse_file(config.requirements_file, marker=config.marker)
    except FormatError as exc:
        print_error(f"Error: {exc}")
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print_error(f"Error: cannot read {config.requirements_file}: {exc}")
        return 1

    matching = bool(context.branch) and not config.show_all
    selected = select(
        requirements,
        repo=context.repo,
        branch=context.branch,
        show_all=config.show_all,
    )
    print_requirements(selected, found=len(pending(requirements)), matched=matching)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``reqtrack`` and ``python -m reqtrack``."""
    args = build_parser().parse_args(argv)
    config = Config.from_env(show_all=args.show_all, new=args.new, name=args.name)
    context = detect_repo_context()
    sys.exit(run(config, context))


if __name__ == "__main__":
    main()
