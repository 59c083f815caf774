"""
JSON file persistence adapter.

The whole feedback collection lives in one pretty-printed JSON array. Every
save rewrites the file in full: the payload goes to a sibling temp file which
then replaces the target, so readers never observe a truncated document.
"""

from __future__ import annotations

from pathlib import Path
import json
import os


def load(path: Path) -> list:
    """Return the stored array, or [] when the file does not exist yet.

    Raises OSError when the file cannot be read and ValueError when it does not
    hold a JSON array.
    """
    if not path.exists():
        return []
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a JSON array")
    return data


def save(path: Path, items: list) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
    os.replace(tmp, path)
