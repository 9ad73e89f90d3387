"""JSON file repository for history slots."""

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from health_calculator.domain.errors import HistoryReadError, HistoryWriteError
from health_calculator.services.history import HistoryRepository


@dataclass
class JsonFileHistoryRepository(HistoryRepository):
    """Stores each slot as a JSON array in ``<directory>/<slot>.json``."""

    directory: Path

    def read_slot(self, slot: str) -> list[dict[str, object]]:
        """Return the records stored for a slot."""
        path = self._path(slot)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            raise HistoryReadError(f"Cannot read {path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise HistoryReadError(f"Invalid JSON in {path}: {exc}") from exc
        if data is None:
            return []
        if not isinstance(data, list) or not all(
            isinstance(item, dict) for item in data
        ):
            raise HistoryReadError(f"Expected a list of records in {path}")
        return data

    def write_slot(self, slot: str, records: list[dict[str, object]]) -> None:
        """Atomically replace the file for a slot."""
        path = self._path(slot)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{slot}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(records, handle)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as exc:
            raise HistoryWriteError(f"Cannot write {path}: {exc}") from exc

    def delete_slot(self, slot: str) -> None:
        """Remove the file for a slot if it exists."""
        path = self._path(slot)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise HistoryWriteError(f"Cannot delete {path}: {exc}") from exc

    def _path(self, slot: str) -> Path:
        return Path(self.directory) / f"{slot}.json"
