import shutil
import subprocess
from pathlib import Path

import pytest

from specfmt.core.document import Line
from specfmt.core.markers import LineClassifier

TESTCASES_DIR = Path(__file__).parent / "testcases"


@pytest.fixture
def classifier():
    return LineClassifier()


def make_lines(contents, should_format=True):
    """Lines with one flag for all, or a per-line list of flags."""
    if isinstance(should_format, bool):
        should_format = [should_format] * len(contents)
    return [Line(text, flag) for text, flag in zip(contents, should_format)]


def contents_of(lines):
    return [line.contents for line in lines]


def _git(repo: Path, *args: str) -> str:
    return subprocess.check_output(["git", "-C", str(repo)] + list(args), text=True)


@pytest.fixture
def git_repo(tmp_path):
    """
    A repository with a committed spec on `main` and a checked out `feature`
    branch. Yields (repo_path, spec_path, git_helper).
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "spec"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "editor@example.com")
    _git(repo, "config", "user.name", "Spec Editor")
    _git(repo, "config", "commit.gpgsign", "false")
    _git(repo, "checkout", "-q", "-b", "main")

    spec = repo / "index.bs"
    spec.write_text("<p>\nOriginal text.\n</p>\n", encoding="utf-8")
    _git(repo, "add", "index.bs")
    _git(repo, "commit", "-q", "-m", "Initial spec")
    _git(repo, "checkout", "-q", "-b", "feature")

    def git(*args: str) -> str:
        return _git(repo, *args)

    yield repo, spec, git
