import shutil
import subprocess

import pytest

from todo_notes.storage import ListStore


@pytest.fixture
def list_file(tmp_path):
    """An empty, registered list file."""
    path = tmp_path / "default.txt"
    path.write_text("")
    return path


@pytest.fixture
def store(list_file):
    return ListStore(list_file)


@pytest.fixture
def filled_store(list_file):
    """A list with five items a..e."""
    list_file.write_text("01. a\n02. b\n03. c\n04. d\n05. e")
    return ListStore(list_file)


@pytest.fixture
def env(tmp_path):
    """Environment pointing the config dir into tmp_path."""
    return {"XDG_CONFIG_HOME": str(tmp_path / "config"), "HOME": str(tmp_path)}


@pytest.fixture
def git_repo(tmp_path):
    """A git work tree named `myproject`, with a nested subdirectory."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    repo_dir = tmp_path / "myproject"
    (repo_dir / "src" / "pkg").mkdir(parents=True)
    subprocess.run(["git", "init"], cwd=repo_dir, capture_output=True, check=True)
    return repo_dir


@pytest.fixture
def plain_dir(tmp_path):
    """A directory outside any git repository."""
    d = tmp_path / "plain"
    d.mkdir()
    return d
