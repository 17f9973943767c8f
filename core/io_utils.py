from __future__ import annotations
import json
import os
from datetime import datetime, timezone
from typing import Any

import yaml

TEMPLATE_EXTENSIONS = (".yaml", ".yml", ".json")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_template(path: str) -> Any:
    """
    Load a study definition from a YAML or JSON file.
    The extension picks the parser; anything else is rejected.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext not in TEMPLATE_EXTENSIONS:
        raise ValueError("Unsupported template file format. Use .yaml, .yml, or .json")

    content = read_text(path)
    if ext == ".json":
        return json.loads(content)
    return yaml.safe_load(content)
