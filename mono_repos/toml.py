"""Workspace configuration file support.

Default options for every package operation can live in a mono.toml file
at the workspace root. It is read with tomlkit so that the same document
can be edited by hand or by tools without losing comments.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError

from .errors import WorkspaceError
from .models import WorkspaceOptions

CONFIG_FILE = "mono.toml"


def load_config(path: Path) -> dict[str, Any]:
    """Load default options from a mono.toml file.

    Options may sit at the top level or under a [mono] table; the table
    wins on collision. A missing file yields an empty mapping.

    Raises:
        WorkspaceError: If the file exists but cannot be parsed, or an
            option has the wrong type.
    """
    if not path.exists():
        return {}

    try:
        doc = tomlkit.parse(path.read_text(encoding="utf-8"))
    except (OSError, TOMLKitError) as exc:
        raise WorkspaceError(f"Cannot parse {path}: {exc}") from exc

    # unwrap() turns tomlkit items into plain Python values
    data = doc.unwrap()
    table = data.pop("mono", {})
    if not isinstance(table, dict):
        raise WorkspaceError(f"[mono] in {path} must be a table")
    top_level = {k: v for k, v in data.items() if not isinstance(v, dict)}
    config = {**top_level, **table}

    try:
        WorkspaceOptions.model_validate(config)
    except ValidationError as exc:
        raise WorkspaceError(f"Invalid option in {path}: {exc}") from exc
    return config
