"""Git repository helpers and rankban configuration."""

import asyncio
from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from rankban.constants import BRANCH_NAME, TRAJECTORY_SEPARATOR

CONFIG_SECTION = "rankban"

RANKBAN_DEFAULTS = {
    "long-press-ms": 500,
    "drag-threshold": 10,
    "trajectory-separator": TRAJECTORY_SEPARATOR,
}


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def _git_key(python_key: str) -> str:
    """Convert Python-style key (underscored) to git-style (hyphenated)."""
    return python_key.replace("_", "-")


def _coerce(git_key: str, raw: str) -> Any:
    """Coerce a raw config string to the type of its default."""
    default = RANKBAN_DEFAULTS.get(git_key)
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            return default
    return raw


def read_config(repo_path: str | Path) -> dict[str, Any]:
    """Read the [rankban] config section merged over the defaults.

    Keys come back underscored: {"long_press_ms": 500, ...}.
    """
    config = {_python_key(k): v for k, v in RANKBAN_DEFAULTS.items()}
    reader = Repo(repo_path).config_reader()
    if reader.has_section(CONFIG_SECTION):
        for git_k, raw in reader.items(CONFIG_SECTION):
            config[_python_key(git_k)] = _coerce(git_k, str(raw))
    return config


def write_config_key(repo_path: str | Path, key: str, value) -> None:
    """Write one [rankban] key to the repository config."""
    writer = Repo(repo_path).config_writer("repository")
    try:
        writer.set_value(CONFIG_SECTION, _git_key(key), str(value))
    finally:
        writer.release()


def is_git_repo(path: str | Path) -> bool:
    """Check if path is inside a git repository."""
    try:
        Repo(path)
        return True
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False


def init_repo(path: str | Path) -> Repo:
    """Initialize a new git repository at path."""
    return Repo.init(path)


def branch_exists(repo_path: str | Path, branch: str = BRANCH_NAME) -> bool:
    """Check if a local branch exists."""
    return branch in [h.name for h in Repo(repo_path).heads]


async def has_branch(repo_path: str | Path, branch: str = BRANCH_NAME) -> bool:
    """Async variant of branch_exists for the TUI."""
    return await asyncio.to_thread(branch_exists, repo_path, branch)
