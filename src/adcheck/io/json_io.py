"""JSON read/write helpers with atomic persistence."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from adcheck.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from adcheck.exceptions import ViolationInputError


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk, raising ``ViolationInputError`` on failure."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ViolationInputError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ViolationInputError(f"Invalid JSON in {path}: {exc}") from exc


def write_json_atomic(
    path: Path,
    payload: object,
    *,
    temp_prefix: str = REPORT_TEMP_PREFIX,
    temp_suffix: str = REPORT_TEMP_SUFFIX,
) -> None:
    """Write ``payload`` as sorted, indented JSON so readers never see a partial report.

    The temp file lives beside ``path`` so the final ``os.replace`` stays on
    one filesystem. It is removed if serialization or the rename fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
        os.replace(temp_path, path)
    except Exception:
        with suppress(FileNotFoundError):
            temp_path.unlink()
        raise
