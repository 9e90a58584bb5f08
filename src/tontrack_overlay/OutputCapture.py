"""Drains the overlay's stdout/stderr into a rotating diagnostic log."""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import threading
from typing import IO, Optional

LOGGER_NAME = "tontrack.overlay.output"


class OutputCapture:
    def __init__(self, log_path: str, max_bytes: int = 1024 * 1024, backup_count: int = 3) -> None:
        self.log_path = Path(log_path)
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        self._handler: Optional[logging.Handler] = None

    def _ensure_handler(self) -> bool:
        if self._handler is not None:
            return True

        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                self.log_path,
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
                encoding="utf-8"
            )
        except OSError as e:
            logging.debug(f"Overlay output log unavailable: {e}")
            return False

        handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
        self.logger.addHandler(handler)
        self._handler = handler
        return True

    def attach(self, stream: IO[bytes], label: str) -> Optional[threading.Thread]:
        if not self._ensure_handler():
            return None

        thread = threading.Thread(
            target=self._drain,
            args=(stream, label),
            daemon=True,
            name=f"overlay-{label}"
        )
        thread.start()
        return thread

    def _drain(self, stream: IO[bytes], label: str) -> None:
        self.logger.info(f"[tontrack] log start ({label})")
        try:
            for raw in stream:
                line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                self.logger.info(f"[{label}] {line}")
        except (OSError, ValueError):
            pass
        self.logger.info(f"[tontrack] log end ({label})")

    def close(self) -> None:
        if self._handler is not None:
            self.logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None
