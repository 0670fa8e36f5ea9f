"""Error types raised by mono-repos.

Package operations convert collaborator errors into a boolean result, so
most of these only surface in diagnostics. ManifestError and WorkspaceError
are the exceptions: they stop a whole batch.
"""

from __future__ import annotations


class MonoError(Exception):
    """Base class for all mono-repos errors."""


class ManifestError(MonoError):
    """A package.json is missing or cannot be parsed."""


class WorkspaceError(MonoError):
    """The workspace layout or its configuration file is unusable."""


class VersionControlError(MonoError):
    """A staging, commit, tag, push or fetch command failed."""


class PackageManagerError(MonoError):
    """An install, link, script or publish command failed."""


class FilesystemError(MonoError):
    """A directory could not be removed."""


class VersionFormatError(MonoError, ValueError):
    """A version string is not exactly MAJOR.MINOR.PATCH."""
