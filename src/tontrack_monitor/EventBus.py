from collections import defaultdict
import logging
from typing import Any, Callable, Dict, List

Handler = Callable[[Any], None]

STATE_UPDATED = "state_updated"
ROUND_STARTED = "round_started"
ROUND_ENDED = "round_ended"


class EventBus:
    """Fan-out of monitor events to the UI side."""

    def __init__(self) -> None:
        self.subscriptions: Dict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, event: str, handler: Handler) -> None:
        self.subscriptions[event].append(handler)

    def emit(self, event: str, payload: Any = None) -> None:
        for fn in list(self.subscriptions.get(event, [])):
            try:
                fn(payload)
            except Exception as e:
                logging.error(f"Handler for '{event}' failed: {e}", exc_info=True)
