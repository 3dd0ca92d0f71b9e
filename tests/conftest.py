"""Test configuration and fixtures."""

from pathlib import Path
from typing import Generator

import pytest
from git import Actor, Repo


class FakeSource:
    """In-memory stand-in for git or hub output."""

    def __init__(self, lines: list[str], name: str = "fake") -> None:
        self.name = name
        self._lines = lines
        self.calls = 0

    def lines(self) -> list[str]:
        self.calls += 1
        return list(self._lines)


class FailingSource:
    """Source whose command cannot be launched."""

    def __init__(self, name: str = "broken") -> None:
        self.name = name

    def lines(self) -> list[str]:
        from landed.git import SourceError

        raise SourceError(f"Failed to launch {self.name}", self.name)


@pytest.fixture
def fake_source() -> type[FakeSource]:
    return FakeSource


@pytest.fixture
def failing_source() -> type[FailingSource]:
    return FailingSource


@pytest.fixture
def test_repo(tmp_path: Path) -> Generator[Repo, None, None]:
    """Create a repository with a main branch and two feature branches."""
    repo_path = tmp_path / "local"
    repo_path.mkdir()
    repo = Repo.init(repo_path)

    author = Actor("Test User", "test@example.com")
    repo.config_writer().set_value("user", "name", author.name).release()
    repo.config_writer().set_value("user", "email", author.email).release()

    readme = repo_path / "README.md"
    readme.write_text("# Test Repository")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit", author=author, committer=author)
    repo.git.branch("-M", "main")

    def create_branch(name: str) -> None:
        """Create a branch off main with one commit of its own."""
        repo.heads.main.checkout()
        branch = repo.create_head(name)
        branch.checkout()
        test_file = repo_path / f"{name.replace('/', '_')}.txt"
        test_file.write_text(f"{name} content")
        repo.index.add([test_file.name])
        repo.index.commit(f"Add {name}", author=author, committer=author)

    create_branch("feature/landed")
    create_branch("feature/wip")
    repo.heads.main.checkout()

    yield repo
