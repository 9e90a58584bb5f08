from tontrack_helper.helper import (
  default_log_dir,
  application_path,
)
from tontrack_helper.custom_types import (
  OverlayPosition,
)

__all__ = [
  "default_log_dir",
  "application_path",
  "OverlayPosition",
]
