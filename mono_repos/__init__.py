"""Release and dependency-linking tools for monorepos."""

from .errors import (
    FilesystemError,
    ManifestError,
    MonoError,
    PackageManagerError,
    VersionControlError,
    VersionFormatError,
    WorkspaceError,
)
from .package import Package
from .versions import bump
from .workspace import Operation, Workspace

__all__ = [
    "FilesystemError",
    "ManifestError",
    "MonoError",
    "Operation",
    "Package",
    "PackageManagerError",
    "VersionControlError",
    "VersionFormatError",
    "Workspace",
    "WorkspaceError",
    "bump",
]
