import logging
from typing import Optional

from tontrack_monitor.Clipboard import Clipboard
from tontrack_monitor.LogPatterns import LogPatterns
from tontrack_monitor.MonitorContext import MonitorState


class ClipboardNotifier:
    """
    Copies the latest save code whenever the world marker shows up in the
    log, once per distinct code.

    Deciding and recording happen under the state lock, the copy itself
    does not: check_line() picks the code, copy() writes it and
    mark_copied() records it only after the clipboard accepted it, so a
    failed copy is retried on the next marker line.
    """

    def __init__(self, clipboard: Clipboard, patterns: Optional[LogPatterns] = None) -> None:
        self.clipboard = clipboard
        self.patterns = patterns or LogPatterns()

    def check_line(self, line: str, state: MonitorState) -> Optional[str]:
        if not self.patterns.world_marker(line):
            return None

        if not state.data.history:
            return None

        code = state.data.history[-1].code
        if state.runtime.last_copied_code == code:
            return None

        return code

    def copy(self, code: str) -> bool:
        copied = self.clipboard.set_text(code)
        if copied:
            logging.info(f"Copied to clipboard: {code}")

        return copied

    def mark_copied(self, code: str, state: MonitorState) -> None:
        state.runtime.last_copied_code = code
