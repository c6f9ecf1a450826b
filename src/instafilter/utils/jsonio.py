"""Helpers for JSON input/output with atomic writes."""

from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any

from ..errors import InstafilterError


def read_json(path: Path, *, error: type[InstafilterError] = InstafilterError) -> dict[str, Any]:
    """Read JSON from *path* and return a dictionary.

    Missing files and malformed payloads are reported as *error* so callers
    can surface a domain specific exception.
    """

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise error(f"JSON file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise error(f"Invalid JSON data in {path}") from exc
    if not isinstance(data, dict):
        raise error(f"Expected a JSON object in {path}")
    return data


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Atomically write *data* into *path*."""

    tmp_path = path.with_suffix(path.suffix + ".tmp")
    path.parent.mkdir(parents=True, exist_ok=True)
    with tmp_path.open("wb") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())
    # ``Path.replace`` can fail transiently on Windows while another process
    # (antivirus, indexers) holds either file open.  Retry with a short back-off
    # and never unlink the destination.
    for attempt in range(5):
        try:
            tmp_path.replace(path)
            return
        except PermissionError:
            if attempt == 4:
                tmp_path.unlink(missing_ok=True)
                raise
            time.sleep(0.05 * (attempt + 1))


def atomic_write_text(path: Path, data: str) -> None:
    """Atomically write the UTF-8 encoded *data* into *path*."""

    atomic_write_bytes(path, data.encode("utf-8"))


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Write *data* into *path* atomically."""

    payload = json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True)
    atomic_write_text(path, payload)
