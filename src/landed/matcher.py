"""Match local branches against remote branches by commit."""

from collections.abc import Iterable, Iterator
from typing import Optional

from landed.branches import Branch


def index_by_commit(branches: Iterable[Branch]) -> dict[str, Branch]:
    """Index branches by commit; a later branch replaces an earlier one with the same commit."""
    index: dict[str, Branch] = {}
    for branch in branches:
        index[branch.commit] = branch
    return index


def lookup(index: dict[str, Branch], branch: Branch) -> Optional[Branch]:
    """Find the indexed branch sharing ``branch``'s commit, if any."""
    return index.get(branch.commit)


def match_branches(
    local: Iterable[Branch], remote: Iterable[Branch]
) -> Iterator[tuple[Branch, Optional[Branch]]]:
    """Pair each local branch with the remote branch at the same commit."""
    index = index_by_commit(remote)
    for branch in local:
        yield branch, lookup(index, branch)
