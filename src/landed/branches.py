"""Branch and pull request records."""

from dataclasses import dataclass
from typing import Optional

OPEN_STATE = "open"


@dataclass(frozen=True)
class Branch:
    """A branch name and the commit it points at."""

    name: str
    commit: str

    def __str__(self) -> str:
        return f"{self.name} {self.commit}"


@dataclass(frozen=True)
class ChangeRequest:
    """A pull request as listed by hub."""

    state: str
    number: str
    branch: str
    commit: str

    @property
    def is_open(self) -> bool:
        """Whether the request is still open."""
        return self.state == OPEN_STATE

    def to_branch(self) -> Branch:
        """Project the request onto its head branch."""
        return Branch(name=self.branch, commit=self.commit)


def parse_branch(line: str) -> Optional[Branch]:
    """Parse a ``<name> <commit>`` line.

    Returns None unless the line splits into exactly two tokens.
    """
    parts = line.split(" ")
    if len(parts) != 2:
        return None
    name, commit = parts
    return Branch(name=name, commit=commit)


def parse_change_request(line: str) -> Optional[ChangeRequest]:
    """Parse a ``<state> <number> <branch> <commit>`` line.

    Returns None unless the line splits into exactly four tokens.
    """
    parts = line.split(" ")
    if len(parts) != 4:
        return None
    state, number, branch, commit = parts
    return ChangeRequest(state=state, number=number, branch=branch, commit=commit)
