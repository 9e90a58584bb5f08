import os
import sys
from pathlib import Path
from typing import Optional


def default_log_dir() -> Optional[Path]:
    """
    VRChat writes its logs to LocalLow, which sits next to the LOCALAPPDATA
    directory. Elsewhere the game runs through Proton, so look inside the
    Steam compatdata prefix instead.
    """
    if os.name == "nt":
        local_app_data = os.environ.get("LOCALAPPDATA")
        if not local_app_data:
            return None

        return Path(local_app_data).parent / "LocalLow" / "VRChat" / "VRChat"

    return (
        Path.home() / ".steam" / "steam" / "steamapps" / "compatdata" /
        "438100" / "pfx" / "drive_c" / "users" / "steamuser" /
        "AppData" / "LocalLow" / "VRChat" / "VRChat"
    )


def application_path() -> Path:
    """Directory of the running executable, works for frozen builds too."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent

    return Path(sys.argv[0]).resolve().parent
