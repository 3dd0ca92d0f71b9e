"""Command line interface for landed."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from landed import __version__
from landed.collect import fetch_branches
from landed.git import DEFAULT_LIMIT, GitBranchSource, HubChangeRequestSource, SourceError
from landed.matcher import match_branches
from landed.report import Reporter

app = typer.Typer(help="List local branches that already landed through a closed or merged pull request")
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"landed {__version__}")
        raise typer.Exit()


@app.command()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", help="Show progress and unmatched branches on stderr")] = False,
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    limit: Annotated[int, typer.Option(min=1, help="Number of pull requests to ask hub for")] = DEFAULT_LIMIT,
    timeout: Annotated[
        Optional[float],
        typer.Option(min=0, help="Seconds to wait for both sources; a source still running is killed (default: no limit)"),
    ] = None,
    version: Annotated[
        Optional[bool], typer.Option("--version", callback=version_callback, is_eager=True, help="Show version")
    ] = None,
) -> None:
    """Print local branches whose tip commit matches a closed or merged pull request."""
    reporter = Reporter(verbose=verbose, console=err_console)

    try:
        local, remote = fetch_branches(
            GitBranchSource(path, timeout=timeout),
            HubChangeRequestSource(path, limit=limit, timeout=timeout),
            reporter,
            timeout=timeout,
        )
    except SourceError as err:
        err_console.print(f"[red]Error:[/red] {escape(str(err))}", highlight=False, emoji=False, soft_wrap=True)
        raise typer.Exit(code=1) from err

    reporter.report(match_branches(local, remote))


if __name__ == "__main__":
    app()
