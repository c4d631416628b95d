# File: colorcore/io/json_store.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4


@dataclass
class JsonStoreError(Exception):
    path: Path
    message: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        base = f"{self.message} (path={self.path})"
        if self.cause is not None:
            return f"{base}; cause={type(self.cause).__name__}: {self.cause}"
        return base


class JsonReadError(JsonStoreError):
    pass


class JsonWriteError(JsonStoreError):
    pass


def ensure_dir(dir_path: Path) -> None:
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise JsonWriteError(path=dir_path, message="Failed to create directory", cause=e) from e


def read_json(path: Path, *, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Read a JSON object.

    - missing or blank file -> copy of `default` (or {})
    - unreadable, invalid JSON, or non-object root -> JsonReadError
    """
    if default is None:
        default = {}

    if not path.exists():
        return dict(default)

    try:
        raw = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise JsonReadError(path=path, message="Failed to read settings file", cause=e) from e

    if raw == "":
        return dict(default)

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise JsonReadError(path=path, message="Invalid JSON", cause=e) from e

    if not isinstance(data, dict):
        raise JsonReadError(path=path, message="JSON root must be an object/dict")
    return data


def atomic_write_json(path: Path, data: Dict[str, Any], *, indent: int = 2) -> None:
    """
    Write to a temp file next to `path`, then os.replace() it into place,
    so a failed write leaves the previous file intact.
    """
    if not isinstance(data, dict):
        raise JsonWriteError(path=path, message="atomic_write_json expects `data` to be a dict")

    ensure_dir(path.parent)
    tmp_path = path.parent / f".{path.name}.{uuid4().hex}.tmp"

    try:
        payload = json.dumps(data, ensure_ascii=False, indent=indent, sort_keys=True)
        with open(tmp_path, "wb") as f:
            f.write(payload.encode("utf-8"))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except (OSError, TypeError, ValueError) as e:
        raise JsonWriteError(path=path, message="Failed to write JSON atomically", cause=e) from e
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
