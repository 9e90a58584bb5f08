from tontrack_overlay.OverlayCommand import (
  OverlayCommand,
  UpdateTerrors,
  SetPosition,
  Clear,
  Quit,
  encode,
  decode,
)
from tontrack_overlay.OutputCapture import OutputCapture
from tontrack_overlay.OverlaySupervisor import OverlaySupervisor

__all__ = [
  "OverlayCommand",
  "UpdateTerrors",
  "SetPosition",
  "Clear",
  "Quit",
  "encode",
  "decode",
  "OutputCapture",
  "OverlaySupervisor",
]
