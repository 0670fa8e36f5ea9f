"""A single package inside the workspace.

Package objects are cheap and short-lived: the workspace creates a fresh one
for every operation. All durable state lives in the package's manifest and
in the git repository, never on the object itself.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import FilesystemError, MonoError, VersionFormatError
from .manifest import MANIFEST_FILE, get_dependency_names, load_manifest, save_manifest
from .models import ReleaseOptions, VersionBump
from .npm import Npm
from .shell import info, warn
from .versions import bump

if TYPE_CHECKING:
    from .workspace import Workspace

# Directories holding installed dependencies, removed by uninstall()
DEPENDENCY_DIRS = ("node_modules",)


class Package:
    """Representation of one member of the workspace.

    Args:
        workspace: The owning workspace. Only used for path resolution and
                   for looking up sibling package names.
        name: Directory name of the package under packages/.
    """

    def __init__(self, workspace: Workspace, name: str) -> None:
        self.workspace = workspace
        self.name = name
        self.root = workspace.resolve(name)
        self.manifest = self.root / MANIFEST_FILE

        options = self.configure()
        self.git = workspace.git
        self.npm = Npm(
            self.root,
            silent=bool(options.get("silent", False)),
            executable=options.get("npm", "npm"),
        )

    def __repr__(self) -> str:
        return f"Package({self.name!r})"

    def configure(self, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Merge supplied options over the workspace defaults.

        Supplied keys win on collision. A new dict is returned every time.
        """
        return {**self.workspace.options, **(options or {})}

    def read(self) -> dict[str, Any]:
        """Read the package.json of the package.

        Raises:
            ManifestError: If the manifest is missing or unparsable.
        """
        return load_manifest(self.manifest)

    def _attempt(self, label: str, action: Callable[..., Any], *args: Any) -> bool:
        """Run one collaborator call, reporting failure instead of raising."""
        try:
            action(*args)
        except MonoError as exc:
            warn(f"{self.name}: {label} failed: {exc}")
            return False
        return True

    def install(self) -> bool:
        """Install dependencies and register the package for linking.

        If installation succeeds but registration fails, the package stays
        installed.
        """
        if not self._attempt("install", self.npm.install):
            return False
        # Registering makes this package a target for `npm link <name>`
        # from its siblings.
        return self._attempt("link registration", self.npm.link)

    def uninstall(self) -> bool:
        """Remove installed dependencies.

        Every directory is attempted even if an earlier removal failed.
        """
        success = True
        for dirname in DEPENDENCY_DIRS:
            target = self.root / dirname
            if not (target.is_symlink() or target.exists()):
                continue
            try:
                if target.is_symlink():
                    target.unlink()
                else:
                    shutil.rmtree(target)
            except OSError as exc:
                err = FilesystemError(f"Cannot remove {target}: {exc}")
                warn(f"{self.name}: uninstall failed: {err}")
                success = False
            else:
                info(f"{self.name}: removed {dirname}")
        return success

    def test(self) -> bool:
        """Run the package's test script."""
        return self._attempt("test", self.npm.run_script, "test")

    def link(self) -> bool:
        """Link every dependency that is also a workspace package.

        A failed link does not stop the remaining ones; the result is True
        only if all of them succeeded.
        """
        wanted = get_dependency_names(self.read())
        members = self.workspace.packages()
        success = True

        for name in sorted(n for n in wanted if n in members):
            if self._attempt(f"link {name}", self.npm.link, name):
                info(f"{self.name}: linked {name}")
            else:
                success = False

        return success

    def publish(self, options: Mapping[str, Any] | None = None) -> bool:
        """Cut a new release of the package.

        Steps run in order and the first failure aborts the rest. Nothing
        already done is undone, so a failed commit leaves the rewritten
        manifest on disk.
        """
        try:
            opts = ReleaseOptions.model_validate(self.configure(options))
        except ValidationError as exc:
            warn(f"{self.name}: invalid release options: {exc}")
            return False
        pkg = self.read()
        name = pkg.get("name", self.name)
        current = pkg.get("version", "")

        # Step 1: Work out the new version.
        try:
            version = opts.version or bump(current, opts.release)
        except VersionFormatError as exc:
            warn(f"{self.name}: cannot bump version: {exc}")
            return False
        change = VersionBump(old=str(current), new=version)

        # Step 2: Update the package.json to the new version.
        pkg["version"] = change.new
        try:
            save_manifest(self.manifest, pkg)
        except OSError as exc:
            warn(f"{self.name}: cannot write {self.manifest}: {exc}")
            return False
        info(f"{name}: {change.old} → {change.new}")

        # Step 3: Commit only this package's directory.
        tag = f"{name}@{change.new}"
        message = f"[dist] Release {tag} {(opts.message or '').strip()}".strip()
        if not self._attempt("stage", self.git.stage, self.root):
            return False
        if not self._attempt("commit", self.git.commit, message, self.root):
            return False

        # Step 4: Tag the release.
        if not self._attempt("tag", self.git.tag, tag, message):
            return False

        # Step 5: Push the release to the server.
        if not self._attempt("push", self._push, opts.remote, opts.branch):
            return False

        # Step 6: Publish the bundle to the registry.
        if not self._attempt("publish", self.npm.publish):
            return False

        info(f"{name}: released {tag}")
        return True

    def _push(self, remote: str, branch: str | None) -> None:
        self.git.push(remote, branch or self.git.current_branch())
        self.git.push_tags(remote)

    def bump(self, version: str, release: str | None = "") -> str:
        """Bump a version string. See versions.bump()."""
        return bump(version, release)
