from tontrack_monitor.Clipboard import Clipboard
from tontrack_monitor.ClipboardNotifier import ClipboardNotifier
from tontrack_monitor.Controller import Controller
from tontrack_monitor.DataStore import DataStore
from tontrack_monitor.EventBus import (
  EventBus,
  STATE_UPDATED,
  ROUND_STARTED,
  ROUND_ENDED,
)
from tontrack_monitor.Init import Init
from tontrack_monitor.LogMonitor import LogMonitor
from tontrack_monitor.LogPatterns import LogPatterns
from tontrack_monitor.MonitorContext import MonitorContext, MonitorState
from tontrack_monitor.RoundStateMachine import RoundStateMachine
from tontrack_monitor.Settings import Settings
from tontrack_monitor.StatsAggregator import StatsAggregator

__all__ = [
  "Clipboard",
  "ClipboardNotifier",
  "Controller",
  "DataStore",
  "EventBus",
  "STATE_UPDATED",
  "ROUND_STARTED",
  "ROUND_ENDED",
  "Init",
  "LogMonitor",
  "LogPatterns",
  "MonitorContext",
  "MonitorState",
  "RoundStateMachine",
  "Settings",
  "StatsAggregator",
]
