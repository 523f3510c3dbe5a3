"""
On-disk mirror of the registry: one JSON document mapping seller id to
seller record. Always written whole; never patched in place.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    """The document exists but cannot be read or is not a JSON object."""


class SnapshotFile:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read(self) -> Optional[dict[str, Any]]:
        """Parsed document, or None when the file is missing or blank."""
        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotError(f"Cannot read {self.path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise SnapshotError(f"{self.path} is not valid UTF-8: {exc}") from exc
        if not text.strip():
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"Invalid JSON in {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SnapshotError(
                f"Expected a JSON object in {self.path}, got {type(data).__name__}"
            )
        return data

    def write(self, data: dict[str, Any]) -> None:
        """Atomically replace the document with ``data``."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except Exception:
            if tmp_path.exists():
                tmp_path.unlink()
            raise
        logger.debug("Saved %d sellers to %s", len(data), self.path)
