"""Config file discovery and loading.

Configuration lives either in a dedicated ``peashoot.toml`` or in the
``[tool.peashoot]`` table of a ``pyproject.toml``.  Discovery walks up
from the start directory, like git finding ``.git/``; in each directory
``peashoot.toml`` wins over ``pyproject.toml``, and a ``pyproject.toml``
without a ``[tool.peashoot]`` table is skipped.
The ``PEASHOOT_CONFIG`` env var short-circuits the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "peashoot.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "PEASHOOT_CONFIG"


def read_config_table(path: Path) -> dict[str, Any] | None:
    """Return the peashoot settings table stored in *path*.

    For a ``pyproject.toml`` that is ``[tool.peashoot]`` (None when absent);
    for any other file it is the whole document.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("peashoot")
        return table if isinstance(table, dict) else None
    return data


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config file.

    Returns the path to the config file, or None if not found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        dedicated = current / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file() and read_config_table(pyproject) is not None:
            return pyproject
        if current.parent == current:
            return None
        current = current.parent
