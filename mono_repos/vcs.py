"""Git client used by the release pipeline.

Every method runs one git command in the workspace root and raises
VersionControlError if it fails.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from .errors import VersionControlError
from .shell import git


class Git:
    """Thin wrapper around the git CLI for a single repository.

    Args:
        root: Repository root. All paths passed to methods may be absolute
              or relative to it.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def _git(self, *args: str) -> str:
        try:
            return git(*args, cwd=self.root)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            raise VersionControlError(
                f"git {' '.join(args)} failed: {detail or exc}"
            ) from exc
        except OSError as exc:
            raise VersionControlError(f"Cannot run git: {exc}") from exc

    def stage(self, path: Path) -> None:
        """Stage every change under path."""
        self._git("add", "--", str(path))

    def commit(self, message: str, path: Path) -> None:
        """Commit staged changes, limited to path."""
        self._git("commit", "-m", message, "--", str(path))

    def tag(self, name: str, message: str) -> None:
        """Create an annotated tag on HEAD."""
        self._git("tag", "-a", name, "-m", message)

    def push(self, remote: str, branch: str) -> None:
        self._git("push", remote, branch)

    def push_tags(self, remote: str) -> None:
        self._git("push", remote, "--tags")

    def current_branch(self) -> str:
        return self._git("rev-parse", "--abbrev-ref", "HEAD")

    def is_behind(self, remote: str, branch: str) -> bool:
        """Fetch the remote and report whether it has commits we lack."""
        self._git("fetch", remote, branch)
        count = self._git("rev-list", "--count", f"HEAD..{remote}/{branch}")
        return int(count or "0") > 0
