"""Resolve which list file is active.

Lists are registered in `<config dir>/.todo_notes/config.toml`, one
`NAME=PATH` line per list. Inside a git repository the list is named after
the repository root directory (upper-cased); elsewhere the DEFAULT list is
used. Everything here takes cwd and the environment as explicit arguments.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, Mapping, Optional

from .models import (
    CONFIG_FILENAME,
    DEFAULT_LIST,
    LIST_ENV_VAR,
    NOTES_DIRNAME,
    ConfigError,
    ListIdentity,
)
from .storage import ensure_file_exists, read_text, write_text_atomic

logger = logging.getLogger(__name__)


def user_config_dir(env: Mapping[str, str]) -> Path:
    """$XDG_CONFIG_HOME, or ~/.config."""
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()
    home = env.get("HOME")
    return (Path(home) if home else Path.home()) / ".config"


def notes_dir(env: Mapping[str, str]) -> Path:
    return user_config_dir(env) / NOTES_DIRNAME


def list_file_for(directory: Path, name: str) -> Path:
    return directory / f"{name.lower()}.txt"


def read_config(config_path: Path) -> Dict[str, Path]:
    """Parse the NAME=PATH lines of a config file."""
    lists: Dict[str, Path] = {}
    if not config_path.exists():
        return lists
    for lineno, raw in enumerate(read_text(config_path).splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        name, sep, value = line.partition("=")
        if not sep or not name.strip() or not value.strip():
            raise ConfigError(f"{config_path}:{lineno}: expected NAME=PATH, got {raw!r}")
        # relative paths are relative to the config directory, not the cwd
        lists[name.strip()] = config_path.parent / Path(value.strip()).expanduser()
    return lists


def register_list(directory: Path, name: str) -> Path:
    """Add NAME to the config file and create its empty list file."""
    config_path = directory / CONFIG_FILENAME
    path = list_file_for(directory, name)
    existing = read_text(config_path) if config_path.exists() else ""
    entry = f"{name}={path}"
    text = f"{existing}\n{entry}" if existing.strip() else entry
    write_text_atomic(config_path, text)
    ensure_file_exists(path)
    return path


def git_environment(env: Mapping[str, str]) -> Dict[str, str]:
    """Process environment for git with GIT_* variables taken only from env."""
    git_env = {k: v for k, v in os.environ.items() if not k.startswith("GIT_")}
    git_env.update({k: v for k, v in env.items() if k.startswith("GIT_")})
    return git_env


def find_repo_root(cwd: Path, env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Top level of the git work tree containing cwd, if any."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            env=git_environment(env or {}),
            capture_output=True,
            text=True,
        )
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("git is not available")
        return None
    if result.returncode != 0:
        return None
    root = result.stdout.strip()
    return Path(root) if root else None


def list_name_for(cwd: Path, env: Optional[Mapping[str, str]] = None) -> str:
    """Upper-cased repository name, or DEFAULT outside a repository."""
    root = find_repo_root(cwd, env)
    if root is None or not root.name:
        logger.info("No git repository found. Using default task list")
        return DEFAULT_LIST
    name = root.name.upper()
    logger.info("Found git repository. Using todo list: %s", root.name)
    return name


def resolve_active_list(
    cwd: Path, env: Mapping[str, str], override: Optional[str] = None
) -> ListIdentity:
    """Pick the active list and make sure its file exists.

    Precedence: override, $TODO_NOTES_LIST, git repository name, DEFAULT.
    """
    directory = notes_dir(env)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"cannot create {directory}: {e}") from e

    config_path = directory / CONFIG_FILENAME
    if not config_path.exists():
        logger.info("Creating config file: %s", config_path)
        register_list(directory, DEFAULT_LIST)

    name = override or env.get(LIST_ENV_VAR) or list_name_for(Path(cwd), env)
    name = name.strip().upper()
    if not name or "=" in name or "/" in name or os.sep in name:
        raise ConfigError(f"invalid list name: {name!r}")

    lists = read_config(config_path)
    path = lists.get(name)
    if path is None:
        path = register_list(directory, name)
    else:
        ensure_file_exists(path)
    return ListIdentity(name=name, path=path)
