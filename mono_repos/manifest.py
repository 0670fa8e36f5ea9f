"""package.json reading and writing utilities.

Manifests are plain JSON documents. They are re-read from disk on every
access so that edits made by a release are visible to the next reader
without any cache to invalidate.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import ManifestError

MANIFEST_FILE = "package.json"
DEPENDENCY_FIELDS = ("dependencies", "devDependencies")


def load_manifest(path: Path) -> dict[str, Any]:
    """Load and parse a package.json file.

    Raises:
        ManifestError: If the file is missing, unreadable, or not a JSON
            object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(f"Missing manifest: {path}") from exc
    except (OSError, ValueError) as exc:
        raise ManifestError(f"Cannot parse manifest {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} is not a JSON object")
    return data


def save_manifest(path: Path, data: dict[str, Any]) -> None:
    """Write a manifest back to disk with 2-space indentation.

    Key order is kept as given. A trailing newline is written only if the
    file being replaced ended with one.

    Raises:
        OSError: If the file cannot be written.
    """
    try:
        trailing = path.read_text(encoding="utf-8").endswith("\n")
    except OSError:
        trailing = False
    text = json.dumps(data, indent=2, ensure_ascii=False)
    path.write_text(text + ("\n" if trailing else ""), encoding="utf-8")


def get_dependency_names(data: dict[str, Any]) -> list[str]:
    """Collect dependency names from a manifest.

    Gathers the keys of both dependency maps:
    - dependencies (runtime deps)
    - devDependencies (development-only deps)

    Absent maps count as empty. Names are de-duplicated, keeping the order
    of first appearance.
    """
    names: dict[str, None] = {}
    for field in DEPENDENCY_FIELDS:
        for name in data.get(field) or {}:
            names[name] = None
    return list(names)
