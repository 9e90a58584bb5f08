from tontrack_data.TerrorData import (
  TerrorData,
  TerrorInfo,
  TerrorAbility,
  TerrorGroup,
  translate_round_type,
  group_for_round_type,
)

__all__ = [
  "TerrorData",
  "TerrorInfo",
  "TerrorAbility",
  "TerrorGroup",
  "translate_round_type",
  "group_for_round_type",
]
