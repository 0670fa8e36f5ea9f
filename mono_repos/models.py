"""Data models for mono-repos.

These Pydantic models represent the options and records passed through
the release pipeline.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ReleaseOptions(BaseModel):
    """Options controlling a single package release.

    Workspace defaults are merged in before validation, so unrelated keys
    (silent, npm, ...) are allowed through untouched.

    Attributes:
        version: Explicit version to release. Skips the bump when set.
        release: Bump tier: "major", "minor" or "patch" (the default).
        message: Extra text appended to the release commit and tag message.
        remote: Remote to push the release to.
        branch: Branch to push. Defaults to the currently checked out one.
    """

    model_config = ConfigDict(extra="allow")

    version: str | None = None
    release: str | None = ""
    message: str | None = ""
    remote: str = "origin"
    branch: str | None = None


class VersionBump(BaseModel):
    """Records a version change for a package.

    Attributes:
        old: The version before bumping.
        new: The version after bumping.
    """

    old: str
    new: str


class WorkspaceOptions(ReleaseOptions):
    """Default options read from mono.toml.

    Attributes:
        silent: Capture npm output instead of streaming it.
        npm: Package manager executable.
    """

    silent: bool = False
    npm: str = "npm"
