"""
Tails the newest VRChat log file and feeds every new line to the round state
machine and the clipboard notifier.

Each poll:
1. resolve the log directory and the most recently modified file in it
2. on a new file, start at its current end (existing content is history)
3. read everything past the stored offset and split it into lines
4. process the lines in order under the state lock
5. after releasing the lock: copy codes, persist, publish events and update
   the overlay with the combined result of all lines
6. while the overlay is enabled, check that its process is still alive
"""
import copy
import logging
import os
from pathlib import Path
import threading
from typing import List, Optional, Tuple

from tontrack_data import TerrorData
from tontrack_helper import default_log_dir
from tontrack_helper.exceptions import (
    ConfigUnavailable,
    IoTransient,
    PersistenceFailed,
    SidecarIoError,
    StateLockError,
)
from tontrack_overlay import Clear, OverlaySupervisor, UpdateTerrors

from tontrack_monitor.ClipboardNotifier import ClipboardNotifier
from tontrack_monitor.DataStore import DataStore
from tontrack_monitor.EventBus import (
    EventBus,
    ROUND_ENDED,
    ROUND_STARTED,
    STATE_UPDATED,
)
from tontrack_monitor.MonitorContext import MonitorContext
from tontrack_monitor.RoundStateMachine import RoundStateMachine
from tontrack_monitor.dataclasses import AppData, AppSnapshot, LineResult


def resolve_log_dir(log_dir: Optional[str]) -> Path:
    if log_dir:
        return Path(log_dir)

    default = default_log_dir()
    if default is None:
        raise ConfigUnavailable("No log directory configured and no platform default")

    return default


def find_latest_log_file(directory: Path) -> Optional[Path]:
    """Most recently modified regular file, ties go to the first by name."""
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError as e:
        raise IoTransient(f"Cannot list {directory}: {e}") from e

    latest: Optional[Tuple[Path, float]] = None
    for entry in entries:
        try:
            if not entry.is_file():
                continue
            modified = entry.stat().st_mtime
        except OSError:
            continue

        if latest is None or modified > latest[1]:
            latest = (Path(entry.path), modified)

    return latest[0] if latest else None


def split_lines(pending: bytes, data: bytes) -> Tuple[List[str], bytes]:
    """
    Split freshly read bytes into complete lines. The unterminated tail is
    returned separately and prepended to the next read.
    """
    parts = (pending + data).split(b"\n")
    remainder = parts.pop()
    lines = [part.decode("utf-8", errors="replace").rstrip("\r") for part in parts]
    return lines, remainder


class LogMonitor(threading.Thread):
    POLL_INTERVAL = 1.0
    FALLBACK_ROUND_TYPE = "Classic"

    def __init__(
        self,
        context: MonitorContext,
        state_machine: RoundStateMachine,
        notifier: ClipboardNotifier,
        store: DataStore,
        events: EventBus,
        terror_data: TerrorData,
        overlay: Optional[OverlaySupervisor] = None,
        interval: float = POLL_INTERVAL
    ) -> None:
        super().__init__(daemon=True, name="LogMonitor")

        self.context = context
        self.state_machine = state_machine
        self.notifier = notifier
        self.store = store
        self.events = events
        self.terror_data = terror_data
        self.overlay = overlay
        self.interval = interval

        self.running = threading.Event()
        self._wake = threading.Event()

    def start(self) -> None:
        self.running.set()
        super().start()

    def run(self) -> None:
        logging.info("Log monitor started")

        while self.running.is_set():
            self.tick()
            self._wake.wait(self.interval)

        logging.info("Log monitor stopped")

    def stop(self) -> None:
        self.running.clear()
        self._wake.set()

    def tick(self) -> LineResult:
        """One poll. Failures only cost this tick, the next one retries."""
        result = LineResult()

        try:
            result = self._poll()
        except ConfigUnavailable as e:
            logging.debug(f"Idle: {e}")
        except IoTransient as e:
            logging.debug(f"Log read skipped: {e}")
        except StateLockError as e:
            logging.error(f"Log poll skipped: {e}")

        try:
            self._check_overlay()
        except StateLockError as e:
            logging.error(f"Overlay check skipped: {e}")

        return result

    def _poll(self) -> LineResult:
        with self.context.locked() as state:
            log_dir = state.settings.get("log_dir")

        directory = resolve_log_dir(log_dir)
        latest = find_latest_log_file(directory)
        if latest is None:
            return LineResult()

        try:
            size: Optional[int] = latest.stat().st_size
        except OSError:
            size = None

        with self.context.locked() as state:
            runtime = state.runtime
            if runtime.last_log_path != latest:
                logging.info(f"Monitoring log file: {latest}")
                runtime.last_log_path = latest
                runtime.last_offset = size if size is not None else 0
                runtime.pending = b""
            elif size is not None and size < runtime.last_offset:
                logging.info(f"Log file truncated, rereading: {latest}")
                runtime.last_offset = 0
                runtime.pending = b""

            offset = runtime.last_offset

        data = self._read_from(latest, offset)
        if not data:
            return LineResult()

        return self._process(latest, offset, data)

    def _read_from(self, path: Path, offset: int) -> bytes:
        try:
            with path.open("rb") as f:
                f.seek(offset)
                return f.read()
        except OSError as e:
            raise IoTransient(f"Cannot read {path}: {e}") from e

    def _process(self, path: Path, offset: int, data: bytes) -> LineResult:
        result = LineResult()
        copies: List[str] = []
        snapshot: Optional[AppSnapshot] = None
        data_copy: Optional[AppData] = None

        with self.context.locked() as state:
            runtime = state.runtime
            if runtime.last_log_path != path or runtime.last_offset != offset:
                return result

            lines, runtime.pending = split_lines(runtime.pending, data)
            runtime.last_offset = offset + len(data)

            for line in lines:
                result = result | self.state_machine.process_line(line, state)

                code = self.notifier.check_line(line, state)
                if code is not None and (not copies or copies[-1] != code):
                    copies.append(code)

            if result.changed:
                snapshot = MonitorContext.snapshot_unlocked(state)
                data_copy = copy.deepcopy(state.data)

            auto_switch = bool(state.settings.get("auto_switch_tab", False))
            overlay_enabled = bool(state.settings.get("vr_overlay_enabled", False))
            killers = list(state.current_round.killers)
            round_type = state.current_round.round_type or self.FALLBACK_ROUND_TYPE

        for code in copies:
            if self.notifier.copy(code):
                with self.context.locked() as state:
                    self.notifier.mark_copied(code, state)

        if snapshot is None or data_copy is None:
            return result

        try:
            self.store.save(data_copy)
        except PersistenceFailed as e:
            logging.error(str(e))

        self.events.emit(STATE_UPDATED, snapshot)
        if auto_switch:
            if result.round_started:
                self.events.emit(ROUND_STARTED)
            if result.round_ended:
                self.events.emit(ROUND_ENDED)

        if overlay_enabled and self.overlay is not None:
            self._update_overlay(result, killers, round_type)

        return result

    def _update_overlay(self, result: LineResult, killers: List[int], round_type: str) -> None:
        try:
            if result.killers_changed and killers:
                terrors = self.terror_data.lookup_many(killers, round_type)
                self.overlay.send(UpdateTerrors.from_terror_info(terrors, round_type))

            if result.round_ended:
                self.overlay.send(Clear())
        except SidecarIoError as e:
            logging.error(str(e))

    def _check_overlay(self) -> None:
        if self.overlay is None:
            return

        with self.context.locked() as state:
            enabled = bool(state.settings.get("vr_overlay_enabled", False))

        if enabled:
            self.overlay.poll()
