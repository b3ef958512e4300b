from __future__ import annotations
# -*- coding: utf-8 -*-

"""
git.py – The git calls specfmt needs.

Every command runs as `git -C <directory of the spec>` so specfmt can be
started from anywhere.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

# Highest priority first
BASE_BRANCH_CANDIDATES = ["origin/main", "main", "origin/master", "master"]


class GitError(Exception):
    pass


def _run_git(directory: Path, args: List[str]) -> str:
    cmd = ["git", "-C", str(directory)] + args
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        raise GitError(f"Failed to run `{' '.join(cmd)}`: {e}")

    if result.returncode != 0:
        raise GitError(f"`{' '.join(cmd)}` failed ({result.returncode}): {result.stderr.strip()}")
    return result.stdout


def is_git_repository(directory: Path) -> bool:
    try:
        return _run_git(directory, ["rev-parse", "--is-inside-work-tree"]).strip() == "true"
    except GitError as e:
        logger.debug(f"{directory} is not inside a git work tree: {e}")
        return False


def has_uncommitted_changes(path: Path) -> bool:
    out = _run_git(path.parent, ["status", "--porcelain", "--", path.name])
    return out.strip() != ""


def current_branch(directory: Path) -> str:
    return _run_git(directory, ["branch", "--show-current"]).strip()


def detect_base_branch(directory: Path) -> str:
    """
    Picks the branch to diff against: a "main" flavour over a "master" one,
    and the origin copy over the local one.
    """
    refs = _run_git(directory, ["for-each-ref", "--format=%(refname:short)"]).split("\n")
    available = {ref.strip() for ref in refs if ref.strip()}

    for candidate in BASE_BRANCH_CANDIDATES:
        if candidate in available:
            return candidate

    raise GitError(
        f"Cannot find a 'master' or 'main' base branch with which to compare "
        f"the current branch '{current_branch(directory)}' of the spec"
    )


def diff_against_base(path: Path, base_branch: Optional[str] = None) -> str:
    """
    Zero-context diff of the spec between the base branch and the current one.
    """
    directory = path.parent
    branch = current_branch(directory)
    base = base_branch or detect_base_branch(directory)
    logger.info(f"Found '{base}' as the base branch to compute diff")

    diff = _run_git(directory, ["diff", "-U0", f"{base}...{branch}", "--", path.name])
    logger.debug(f"git diff produced {len(diff.splitlines())} line(s)")
    return diff
