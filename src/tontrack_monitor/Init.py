import logging
from typing import Optional

from tontrack_data import TerrorData

from tontrack_overlay import OutputCapture, OverlaySupervisor

from tontrack_monitor.DataStore import DataStore
from tontrack_monitor.MonitorContext import MonitorContext
from tontrack_monitor.Settings import Settings
from tontrack_monitor.dataclasses import AppData


class Init:
    """
    Factory to help with initialization of core components
    """

    @classmethod
    def settings(cls, path: str = "settings.toml") -> Settings:
        """
        Initialize settings from a file. Create settings file in case it does
        not exist.
        """
        settings = Settings(path)
        settings.save()

        return settings

    @classmethod
    def context(cls, settings: Settings, store: DataStore) -> MonitorContext:
        data = store.load()
        if data is None:
            logging.info("No saved data found, starting fresh")
            data = AppData()
        else:
            logging.info(f"Loaded {len(data.history)} codes from {store.path}")

        return MonitorContext(settings, data)

    @classmethod
    def terror_data(cls, settings: Settings) -> TerrorData:
        path: Optional[str] = settings.get("terror_info_path")
        return TerrorData(path)

    @classmethod
    def overlay(cls, settings: Settings) -> OverlaySupervisor:
        overlay_settings = settings.section("overlay")
        output = OutputCapture(
            overlay_settings.get("log_path", "logs/vr-overlay.log"),
            overlay_settings.get("log_max_bytes", 1024 * 1024),
            overlay_settings.get("log_backup_count", 3)
        )

        return OverlaySupervisor(
            output,
            executable=overlay_settings.get("executable"),
            grace_period=overlay_settings.get("grace_period", OverlaySupervisor.GRACE_PERIOD)
        )
