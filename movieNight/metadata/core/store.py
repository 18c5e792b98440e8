"""
JSON-file key/value store.

Every value is a string (callers JSON-encode their own payloads), every call
is synchronous, and the whole file is rewritten on each write through a
temp-file swap so a crash never leaves half a store behind.
"""
from __future__ import annotations

import json
import os
from pathlib import Path

from movieNight.utils import log_debug


def load_json_dict(path: Path) -> dict:
    """
    Load a JSON file to a dict, return {} on a missing or unreadable file.
    Undecodable bytes are copied to `<name>.corrupt` before starting empty.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return {}
    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as exc:          # JSONDecodeError and UnicodeDecodeError
        backup = path.with_name(path.name + ".corrupt")
        backup.write_bytes(raw)
        log_debug(f"Store file {path.name} is not valid JSON ({exc}); backed up to {backup.name}, starting empty")
        return {}
    if not isinstance(data, dict):
        log_debug(f"Store file {path.name} does not hold an object; starting empty")
        return {}
    return data


def write_json_dict(path: Path, data: dict) -> None:
    """Write dict to JSON, pretty-printed, replacing the file in one step."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    os.replace(tmp, path)


class JsonStore:
    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: dict[str, str] = {
            str(k): v for k, v in load_json_dict(self.path).items() if isinstance(v, str)
        }

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value
        write_json_dict(self.path, self._data)

    def remove_item(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            write_json_dict(self.path, self._data)

    def keys(self) -> list[str]:
        return list(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
