"""Shell and git utilities.

Provides simple wrappers around subprocess calls for running shell commands
and git operations, plus output formatting helpers.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def git(*args: str, cwd: Path | None = None, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "status", "--short").
        cwd: Directory to run git in. Defaults to the current directory.
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail (e.g., tag lookup).

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=check
    )
    return result.stdout.strip()


def run(
    *args: str, cwd: Path | None = None, quiet: bool = False, check: bool = True
) -> subprocess.CompletedProcess[str]:
    """Run an arbitrary shell command.

    Unlike git(), output streams directly to the terminal so users can see
    install and publish progress. Pass quiet=True to capture it instead.

    Args:
        *args: Command and arguments (e.g., "npm", "install").
        cwd: Directory to run the command in.
        quiet: Capture output instead of streaming it.
        check: If True (default), raise on non-zero exit.

    Returns:
        CompletedProcess with returncode for checking success.
    """
    return subprocess.run(
        args, cwd=cwd, capture_output=quiet, text=True, check=check
    )


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate per-package operations in terminal output.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def info(msg: str) -> None:
    """Print an indented progress line."""
    print(f"  {msg}")


def warn(msg: str) -> None:
    """Print an indented diagnostic line to stderr."""
    print(f"  {msg}", file=sys.stderr)
