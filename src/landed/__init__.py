"""Find local git branches that have already landed.

Features:
- Collect local branches and their tip commits from git
- Collect closed and merged pull requests from hub
- Print every local branch whose tip matches a non-open pull request
- Verbose mode for progress and unmatched-branch diagnostics
"""

__version__ = "0.1.0"
