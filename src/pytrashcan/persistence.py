"""JSON snapshot persistence.

Snapshots are written with camelCase keys so they stay readable by other
consumers of the same state shape.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from pytrashcan.exceptions import TrashcanSnapshotError
from pytrashcan.models.state import AppState

_logger = logging.getLogger(__name__)


class SnapshotFile:
    """A snapshot stored at *path*. Writes are atomic (temp file + rename)."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def save(self, state: AppState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = state.model_dump_json(by_alias=True, indent=2)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        _logger.debug("Saved snapshot to %s", self.path)

    def load(self) -> AppState | None:
        """Read the snapshot; ``None`` when the file does not exist."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise TrashcanSnapshotError(f"cannot read snapshot: {exc}", path=str(self.path)) from exc

        try:
            state = AppState.model_validate_json(text)
        except ValidationError as exc:
            raise TrashcanSnapshotError(f"malformed snapshot: {exc}", path=str(self.path)) from exc
        _logger.debug("Loaded snapshot from %s", self.path)
        return state

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
