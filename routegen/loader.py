"""Load the method registry and the path specifications.

Reads routes/methods-list.json, specification/paths.json and
specification/extras/paths.json from the repository root.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

ROOT_DIR = Path(__file__).parent.parent

METHODS_LIST_PATH = ROOT_DIR / "routes" / "methods-list.json"
PATHS_SPEC_PATH = ROOT_DIR / "specification" / "paths.json"
PATHS_SPEC_EXTRAS_PATH = ROOT_DIR / "specification" / "extras" / "paths.json"


def _load_json(path: Path) -> dict[str, Any]:
    with open(path) as f:
        return json.load(f)


def load_methods_list(path: Path | None = None) -> dict[str, Any]:
    """Load the method registry: url -> http method -> namespace -> method name."""
    return _load_json(path or METHODS_LIST_PATH)


def load_paths_spec(path: Path | None = None) -> dict[str, Any]:
    """Load the base path specification."""
    return _load_json(path or PATHS_SPEC_PATH)


def load_paths_spec_extras(path: Path | None = None) -> dict[str, Any]:
    """Load the extras overlay. A missing file means no extras."""
    spec_file = path or PATHS_SPEC_EXTRAS_PATH
    if not spec_file.exists():
        return {}
    return _load_json(spec_file)
