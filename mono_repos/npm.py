"""npm client used for installing, linking, testing and publishing.

Each method runs one npm command inside a package directory and raises
PackageManagerError if it fails.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from .errors import PackageManagerError
from .shell import run


class Npm:
    """Thin wrapper around the npm CLI for a single package.

    Args:
        root: Package directory to run commands in.
        silent: Capture command output instead of streaming it.
        executable: npm binary to invoke.
    """

    def __init__(self, root: Path, silent: bool = False, executable: str = "npm") -> None:
        self.root = root
        self.silent = silent
        self.executable = executable

    def _npm(self, *args: str) -> None:
        try:
            run(self.executable, *args, cwd=self.root, quiet=self.silent)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip()
            raise PackageManagerError(
                f"{self.executable} {' '.join(args)} exited with "
                f"{exc.returncode}" + (f": {detail}" if detail else "")
            ) from exc
        except OSError as exc:
            raise PackageManagerError(f"Cannot run {self.executable}: {exc}") from exc

    def install(self) -> None:
        self._npm("install")

    def link(self, name: str | None = None) -> None:
        """Link a registered package into this one.

        Without a name, registers this package as a link target instead.
        """
        if name is None:
            self._npm("link")
        else:
            self._npm("link", name)

    def run_script(self, name: str) -> None:
        self._npm("run-script", name)

    def publish(self) -> None:
        self._npm("publish")
