"""Shared state for the log monitor and the foreground command handlers."""
from contextlib import contextmanager
import copy
from threading import Lock
from typing import Iterator, Optional

from tontrack_helper.exceptions import StateLockError

from tontrack_monitor.Settings import Settings
from tontrack_monitor.dataclasses import (
    AppData,
    AppSnapshot,
    CurrentRoundInfo,
    RuntimeState,
)


class MonitorState:
    """Everything guarded by the context lock."""

    def __init__(self, settings: Settings, data: Optional[AppData] = None) -> None:
        self.settings = settings
        self.data = data or AppData()
        self.current_round = CurrentRoundInfo()
        self.runtime = RuntimeState()


class MonitorContext:
    """
    Thread-safe access to the monitor state.

    The lock is held only to compute or mutate values. Callers copy out what
    they need and release the lock before doing any I/O.
    """
    LOCK_TIMEOUT = 5.0

    def __init__(self, settings: Settings, data: Optional[AppData] = None) -> None:
        self._lock = Lock()
        self._state = MonitorState(settings, data)

    @contextmanager
    def locked(self) -> Iterator[MonitorState]:
        if not self._lock.acquire(timeout=self.LOCK_TIMEOUT):
            raise StateLockError("state lock failed")

        try:
            yield self._state
        finally:
            self._lock.release()

    def snapshot(self) -> AppSnapshot:
        with self.locked() as state:
            return self.snapshot_unlocked(state)

    @staticmethod
    def snapshot_unlocked(state: MonitorState) -> AppSnapshot:
        """Copy out a snapshot, the caller must hold the lock."""
        history = list(state.data.history)
        return AppSnapshot(
            settings=state.settings.to_dict(),
            history=history,
            latest_code=history[-1] if history else None,
            stats=copy.deepcopy(state.data.stats),
            survivals=state.data.stats.survivals,
            current_round=copy.deepcopy(state.current_round),
        )
