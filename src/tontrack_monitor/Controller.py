"""Foreground commands: snapshot reads, settings changes and overlay control."""
import logging
from typing import Any, Dict, List, Optional

from tontrack_data import TerrorData, TerrorInfo
from tontrack_helper import OverlayPosition
from tontrack_helper.exceptions import PersistenceFailed

from tontrack_overlay import OverlaySupervisor, SetPosition, UpdateTerrors

from tontrack_monitor.MonitorContext import MonitorContext
from tontrack_monitor.dataclasses import AppSnapshot


class Controller:
    FALLBACK_ROUND_TYPE = "Classic"

    def __init__(
        self,
        context: MonitorContext,
        terror_data: TerrorData,
        overlay: Optional[OverlaySupervisor] = None
    ) -> None:
        self.context = context
        self.terror_data = terror_data
        self.overlay = overlay

    def get_state(self) -> AppSnapshot:
        return self.context.snapshot()

    def _update_setting(self, key: str, value: Any) -> Dict[str, Any]:
        with self.context.locked() as state:
            state.settings.set(key, value)
            settings = state.settings
            updated = settings.to_dict()

        # Writing the file happens outside the lock
        try:
            settings.save()
        except OSError as e:
            raise PersistenceFailed(f"Failed to save settings to {settings.path}: {e}") from e

        return updated

    def set_log_dir(self, log_dir: Optional[str]) -> Dict[str, Any]:
        logging.info(f"Log directory set to: {log_dir or 'default'}")
        return self._update_setting("log_dir", log_dir or None)

    def set_auto_switch_tab(self, enabled: bool) -> Dict[str, Any]:
        return self._update_setting("auto_switch_tab", enabled)

    def set_vr_overlay_enabled(self, enabled: bool) -> Dict[str, Any]:
        """
        Starts or stops the overlay. When starting, an active round with known
        killers is pushed right away. Start failures propagate to the caller.
        """
        updated = self._update_setting("vr_overlay_enabled", enabled)
        if self.overlay is None:
            return updated

        with self.context.locked() as state:
            position = state.settings.overlay_position
            current_round = state.current_round
            is_active = current_round.is_active
            killers = list(current_round.killers)
            round_type = current_round.round_type or self.FALLBACK_ROUND_TYPE

        if not enabled:
            self.overlay.stop()
            return updated

        self.overlay.start(position)
        if is_active and killers:
            terrors = self.terror_data.lookup_many(killers, round_type)
            self.overlay.send(UpdateTerrors.from_terror_info(terrors, round_type))

        return updated

    def set_vr_overlay_position(self, position: str) -> Dict[str, Any]:
        parsed = OverlayPosition.parse(position)
        updated = self._update_setting("vr_overlay_position", parsed.value)

        if updated.get("vr_overlay_enabled") and self.overlay is not None:
            self.overlay.send(SetPosition(parsed))

        return updated

    def get_terror_info(self, killer_id: int, round_type: str) -> TerrorInfo:
        return self.terror_data.lookup(killer_id, round_type)

    def get_terrors_info(self, killer_ids: List[int], round_type: str) -> List[TerrorInfo]:
        return self.terror_data.lookup_many(killer_ids, round_type)

    def start_overlay_if_enabled(self) -> None:
        """Startup hook, a missing overlay must not keep the monitor from running."""
        with self.context.locked() as state:
            enabled = bool(state.settings.get("vr_overlay_enabled", False))
            position = state.settings.overlay_position

        if not enabled or self.overlay is None:
            return

        try:
            self.overlay.start(position)
        except Exception as e:
            logging.error(f"Failed to start VR overlay: {e}")

    def shutdown(self) -> None:
        if self.overlay is not None:
            self.overlay.stop()
