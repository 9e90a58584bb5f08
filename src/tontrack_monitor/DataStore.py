import json
import logging
import os
from pathlib import Path
import tempfile
from typing import Optional

from tontrack_helper.exceptions import PersistenceFailed

from tontrack_monitor.dataclasses import AppData


class DataStore:
    """Keeps the code history and statistics in a JSON file."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def load(self) -> Optional[AppData]:
        if not self.path.exists():
            return None

        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)

            return AppData.from_dict(raw)

        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logging.error(f"Failed to load data from {self.path}: {e}")
            return None

    def save(self, data: AppData) -> None:
        payload = json.dumps(data.to_dict(), indent=2, ensure_ascii=False)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            # Temp file in the same directory so os.replace stays atomic
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_path, self.path)
            except OSError:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise

        except OSError as e:
            raise PersistenceFailed(f"Failed to save data to {self.path}: {e}") from e
