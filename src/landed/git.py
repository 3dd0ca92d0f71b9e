"""External branch sources backed by git and hub."""

from pathlib import Path
from typing import Optional

from git import GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError, Repo

LOCAL_BRANCH_FORMAT = "%(refname:short) %(objectname)"
CHANGE_REQUEST_FORMAT = "%S %i %H %sH%n"
DEFAULT_LIMIT = 20


class SourceError(Exception):
    """A branch source could not produce its listing."""

    def __init__(self, message: str, source: str = "") -> None:
        """Initialize error.

        Args:
            message: Error message
            source: Name of the command that failed
        """
        super().__init__(message)
        self.source = source


def open_repo(path: Path, source: str) -> Repo:
    """Open the repository at ``path`` or raise SourceError."""
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as err:
        raise SourceError(f"Failed to open repository: {err}", source) from err
    if repo.bare:
        raise SourceError("Cannot operate on bare repository", source)
    return repo


def output_lines(result: tuple[int, str, str], source: str, timeout: Optional[float]) -> list[str]:
    """Split command output into lines.

    A non-zero exit still yields whatever the command printed; only a
    command killed for running past ``timeout`` is an error.
    """
    _status, stdout, stderr = result
    if timeout is not None and stderr.startswith("Timeout:"):
        raise SourceError(f"Timed out after {timeout}s waiting for {source}", source)
    return stdout.splitlines()


class GitBranchSource:
    """Local branches and their tip commits, one ``<name> <commit>`` line each."""

    name = "git"

    def __init__(self, path: Path, timeout: Optional[float] = None) -> None:
        self.path = path
        self.timeout = timeout

    def lines(self) -> list[str]:
        """Run ``git branch`` and return its output lines."""
        repo = open_repo(self.path, self.name)
        try:
            result = repo.git.branch(
                "--format",
                LOCAL_BRANCH_FORMAT,
                with_extended_output=True,
                with_exceptions=False,
                kill_after_timeout=self.timeout,
            )
        except (GitCommandNotFound, OSError) as err:
            raise SourceError(f"Failed to list local branches: {err}", self.name) from err
        return output_lines(result, self.name, self.timeout)


class HubChangeRequestSource:
    """Pull requests in every state, one ``<state> <number> <branch> <commit>`` line each."""

    name = "hub"

    def __init__(self, path: Path, limit: int = DEFAULT_LIMIT, timeout: Optional[float] = None) -> None:
        self.path = path
        self.limit = limit
        self.timeout = timeout

    def command(self) -> list[str]:
        """Build the hub invocation."""
        return [
            "hub",
            "pr",
            "list",
            "-s",
            "all",
            "-f",
            CHANGE_REQUEST_FORMAT,
            "--limit",
            str(self.limit),
        ]

    def lines(self) -> list[str]:
        """Run ``hub pr list`` in the repository and return its output lines."""
        repo = open_repo(self.path, self.name)
        try:
            result = repo.git.execute(
                self.command(),
                with_extended_output=True,
                with_exceptions=False,
                kill_after_timeout=self.timeout,
            )
        except (GitCommandNotFound, OSError) as err:
            raise SourceError(f"Failed to list pull requests: {err}", self.name) from err
        return output_lines(result, self.name, self.timeout)
