"""Output for matched and unmatched branches."""

from collections.abc import Iterable
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from landed.branches import Branch


class Reporter:
    """Print matches to stdout and diagnostics to stderr.

    Diagnostics are only written when ``verbose`` is set; matched branch
    names are always printed so they can be piped into other commands.
    """

    def __init__(self, verbose: bool = False, console: Optional[Console] = None) -> None:
        self.verbose = verbose
        self.console = console or Console(stderr=True)

    def log(self, message: str, style: str = "dim") -> None:
        """Write a diagnostic line in verbose mode."""
        if not self.verbose:
            return
        self.console.print(f"[{style}]{escape(message)}[/{style}]", highlight=False, emoji=False, soft_wrap=True)

    def found(self, branch: Branch) -> None:
        typer.echo(branch.name)

    def missing(self, branch: Branch) -> None:
        self.log(f"Can't find {branch.name} ({branch.commit})")

    def report(self, matches: Iterable[tuple[Branch, Optional[Branch]]]) -> int:
        """Report every local branch in order.

        Returns:
            Number of local branches that matched a remote branch
        """
        count = 0
        for local, remote in matches:
            if remote is None:
                self.missing(local)
            else:
                self.found(local)
                count += 1
        return count
