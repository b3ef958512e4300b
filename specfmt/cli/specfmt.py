#!/usr/bin/env python3
"""
specfmt: Formats Bikeshed and Wattsi specifications using WHATWG conventions.

Usage:
    specfmt [filename] [--wrap N] [--force] [--full-spec] [--base-branch B] [--verbose]
    python -m specfmt.cli.specfmt ...

By default only the lines changed on the current branch (relative to main or
master) are rewrapped; --full-spec rewraps everything.
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from specfmt.adapters.git import GitError, diff_against_base, has_uncommitted_changes, is_git_repository
from specfmt.adapters.spec_file import (
    SpecDiscoveryError,
    SpecFileError,
    read_spec,
    resolve_spec_path,
    write_spec,
)
from specfmt.core.config import ConfigError, load_settings
from specfmt.core.rewrapper import format_document

logger = logging.getLogger("specfmt")

LOG_FORMAT = "[specfmt] %(levelname)s %(message)s"


def _fail(msg: str) -> int:
    print(f"[specfmt] Error: {msg}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="specfmt",
        description="Formats Bikeshed and Wattsi specifications using WHATWG conventions.",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        help="The specification to reformat. Defaults to \"source\" or the unique .bs file in the current directory.",
    )
    parser.add_argument("--wrap", type=int, default=None, help="Number of columns to wrap to (default 100).")
    parser.add_argument("-f", "--force", action="store_true", default=None,
                        help="Force-reformat the spec even if it has uncommitted changes.")
    parser.add_argument("--full-spec", action="store_true", default=None,
                        help="Reformat the entire spec, not scoped to the changes of the current branch.")
    parser.add_argument("--base-branch", default=None, help="Base branch to compare the current branch with.")
    parser.add_argument("--config", default=None, help="Settings file (default: .specfmt.yml next to the spec).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose debugging output.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    try:
        path = resolve_spec_path(args.filename)
        settings = load_settings(
            spec_path=path,
            config_path=Path(args.config) if args.config else None,
            cli_overrides={
                "wrap": args.wrap,
                "force": args.force,
                "full_spec": args.full_spec,
                "base_branch": args.base_branch,
            },
        )

        # A full-spec run also works on a spec outside any repository
        check_changes = not settings.force and (not settings.full_spec or is_git_repository(path.parent))
        if check_changes and has_uncommitted_changes(path):
            return _fail("Spec has uncommitted changes. Please commit your changes and try again.")

        diff = None
        if not settings.full_spec:
            diff = diff_against_base(path, settings.base_branch)

        document = read_spec(path)
        logger.debug(f"Formatting {path} ({len(document.lines)} lines, wrap={settings.wrap})")
        rewrapped = format_document(document.lines, diff=diff, column_length=settings.wrap)
        write_spec(document, rewrapped)
    except (SpecDiscoveryError, SpecFileError, GitError, ConfigError) as e:
        return _fail(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
