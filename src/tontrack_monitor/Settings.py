from typing import Dict, List, Any
from pathlib import Path
import copy

import tomllib
import tomli_w

from tontrack_helper import OverlayPosition


class Settings:
    DEFAULTS: Dict[str, Any] = {
        # None resolves to the platform default VRChat log directory
        "log_dir": None,
        "auto_switch_tab": False,
        "vr_overlay_enabled": False,
        "vr_overlay_position": OverlayPosition.RIGHT_HAND.value,
        "poll_interval": 1.0,
        "history_limit": 10,
        "data_path": "data.json",
        "terror_info_path": None,
        "overlay": {
            "executable": None,
            "log_path": "logs/vr-overlay.log",
            "log_max_bytes": 1024 * 1024,
            "log_backup_count": 3,
            "grace_period": 0.1,
        },
        "api": {
            "host": "127.0.0.1",
            "port": 5125,
        },
    }

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.settings = {}
        self.load()

    def load(self) -> None:
        if self.path.exists():
            with self.path.open("rb") as file:
                loaded = tomllib.load(file)
                self.settings = self._merge(copy.deepcopy(self.DEFAULTS), loaded)
        else:
            self.settings = copy.deepcopy(self.DEFAULTS)

    def save(self) -> None:
        serialized = self._remove_none(self.settings)
        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)

        with self.path.open("wb") as f:
            f.write(tomli_w.dumps(serialized).encode("utf-8"))

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def section(self, key: str) -> Dict[str, Any]:
        value = self.settings.get(key)
        if isinstance(value, dict):
            return value

        return {}

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.settings)

    @property
    def overlay_position(self) -> OverlayPosition:
        return OverlayPosition.parse(str(self.get("vr_overlay_position", "")))

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _remove_none(self, obj: object) -> Dict[str, Any] | List[Any] | object:
        # TOML has no null, unset keys fall back to DEFAULTS on load
        if isinstance(obj, dict):
            return {k: self._remove_none(v) for k, v in obj.items() if v is not None}
        elif isinstance(obj, list):
            return [self._remove_none(v) for v in obj if v is not None]
        else:
            return obj
