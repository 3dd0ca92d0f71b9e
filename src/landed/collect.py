"""Collect local and remote branches concurrently."""

import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import NamedTuple, Optional, Protocol

from landed.branches import Branch, parse_branch, parse_change_request
from landed.git import SourceError
from landed.report import Reporter


class LineSource(Protocol):
    """Anything that lists records as text lines."""

    name: str

    def lines(self) -> list[str]: ...


class FetchResult(NamedTuple):
    """Branches gathered from both sources."""

    local: list[Branch]
    remote: list[Branch]


def collect_local_branches(source: LineSource, reporter: Reporter) -> list[Branch]:
    """Parse local branches, skipping malformed lines."""
    reporter.log("> Collecting local branches from git...")
    branches = [branch for branch in map(parse_branch, source.lines()) if branch is not None]
    reporter.log("> Done collecting local branches from git!", style="green")
    return branches


def collect_remote_branches(source: LineSource, reporter: Reporter) -> list[Branch]:
    """Parse pull requests and keep the head branches of those that are not open."""
    reporter.log("> Collecting remote branches from GitHub...")
    branches = []
    for line in source.lines():
        request = parse_change_request(line)
        # Anything other than "open" (closed, merged, ...) counts as landed
        if request is None or request.is_open:
            continue
        branches.append(request.to_branch())
    reporter.log("> Done collecting remote branches from GitHub!", style="green")
    return branches


def fetch_branches(
    local_source: LineSource,
    remote_source: LineSource,
    reporter: Reporter,
    timeout: Optional[float] = None,
) -> FetchResult:
    """Run both collectors in parallel and wait for both.

    Args:
        local_source: Source of ``<name> <commit>`` lines
        remote_source: Source of ``<state> <number> <branch> <commit>`` lines
        reporter: Receives progress diagnostics from both workers
        timeout: Seconds to wait for both collectors together, or None to wait forever

    Raises:
        SourceError: If either source fails or both do not finish in time
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="landed")
    try:
        local_future = executor.submit(collect_local_branches, local_source, reporter)
        remote_future = executor.submit(collect_remote_branches, remote_source, reporter)
        try:
            local = local_future.result(timeout=remaining(deadline))
            remote = remote_future.result(timeout=remaining(deadline))
        except FuturesTimeoutError as err:
            pending = local_source if not local_future.done() else remote_source
            raise SourceError(f"Timed out after {timeout}s waiting for {pending.name}", pending.name) from err
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
    return FetchResult(local=local, remote=remote)


def remaining(deadline: Optional[float]) -> Optional[float]:
    if deadline is None:
        return None
    return max(0.0, deadline - time.monotonic())
