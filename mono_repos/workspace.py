"""The monorepo root and bulk operations over its packages.

Packages live in immediate subdirectories of <root>/packages. Bulk
operations visit them one at a time, in sorted directory order, and stop
at the first package that reports failure.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from .errors import MonoError, WorkspaceError
from .package import Package
from .shell import step, warn
from .vcs import Git

PACKAGES_DIR = "packages"


class Operation(str, Enum):
    """Named per-package operations that each() can broadcast."""

    INSTALL = "install"
    UNINSTALL = "uninstall"
    TEST = "test"
    LINK = "link"
    PUBLISH = "publish"


Iteratee = Callable[[Package], Any] | Operation | str


class Workspace:
    """Root of a monorepo.

    Args:
        root: Location of the monorepo root.
        options: Default configuration for every package operation.
    """

    def __init__(self, root: Path | str, options: Mapping[str, Any] | None = None) -> None:
        self.root = Path(root).resolve()
        self.packages_path = self.root / PACKAGES_DIR
        self.options: dict[str, Any] = dict(options or {})
        self.git = Git(self.root)

    def __repr__(self) -> str:
        return f"Workspace({str(self.root)!r})"

    def repo(self, name: str) -> Package:
        """Get a package instance for a directory name."""
        return Package(self, name)

    def resolve(self, name: str) -> Path:
        """Location of a package directory. Not checked for existence."""
        return self.packages_path / name

    def folders(self) -> list[str]:
        """Names of all package directories, sorted.

        Plain files and symlinks in packages/ are ignored.

        Raises:
            WorkspaceError: If packages/ does not exist or cannot be listed.
        """
        try:
            entries = sorted(self.packages_path.iterdir())
        except OSError as exc:
            raise WorkspaceError(
                f"Cannot list packages in {self.packages_path}: {exc}"
            ) from exc
        return [p.name for p in entries if p.is_dir() and not p.is_symlink()]

    def each(self, iterate: Iteratee, *args: Any, **kwargs: Any) -> bool:
        """Run an operation on every package, stopping at the first failure.

        Args:
            iterate: Either a function taking the Package, or an Operation
                     (or its name) to call with *args and **kwargs.

        Returns:
            False if any package returned False, otherwise True. Results
            that are not booleans leave the outcome unchanged.
        """
        if not callable(iterate):
            iterate = Operation(iterate)

        success = True
        for folder in self.folders():
            package = Package(self, folder)

            if isinstance(iterate, Operation):
                step(f"{iterate.value} {folder}")
                result = getattr(package, iterate.value)(*args, **kwargs)
            else:
                result = iterate(package)

            if isinstance(result, bool):
                success = result
            if not success:
                break

        return success

    def packages(self) -> set[str]:
        """Manifest names of every package in the workspace.

        Manifests without a name are not counted.

        Raises:
            ManifestError: If any package.json is missing or unparsable.
        """
        names: set[str] = set()

        def collect(package: Package) -> None:
            name = package.read().get("name")
            if name:
                names.add(name)

        self.each(collect)
        return names

    def verify(self) -> bool:
        """Check that the local branch is not behind the remote.

        Returns:
            False (with a warning) if a pull is needed or the check failed.
        """
        remote = self.options.get("remote", "origin")
        try:
            branch = self.options.get("branch") or self.git.current_branch()
            behind = self.git.is_behind(remote, branch)
        except MonoError as exc:
            warn(f"Cannot compare with {remote}: {exc}")
            return False

        if behind:
            warn("You need to pull from the remote before continuing")
            warn("")
            warn(f"Run 'git pull {remote} {branch}'")
            return False
        return True

    def install(self, *args: Any, **kwargs: Any) -> bool:
        """Install the dependencies of all packages."""
        return self.each(Operation.INSTALL, *args, **kwargs)

    def uninstall(self, *args: Any, **kwargs: Any) -> bool:
        """Remove the installed dependencies of all packages."""
        return self.each(Operation.UNINSTALL, *args, **kwargs)

    def test(self, *args: Any, **kwargs: Any) -> bool:
        """Run the test suites of all packages."""
        return self.each(Operation.TEST, *args, **kwargs)

    def link(self, *args: Any, **kwargs: Any) -> bool:
        """Link all packages together."""
        return self.each(Operation.LINK, *args, **kwargs)

    def publish(self, *args: Any, **kwargs: Any) -> bool:
        """Publish a new version of all packages."""
        return self.each(Operation.PUBLISH, *args, **kwargs)
