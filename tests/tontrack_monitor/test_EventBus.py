from unittest.mock import Mock

from tontrack_monitor.EventBus import EventBus, ROUND_ENDED, STATE_UPDATED


class TestEventBus:
    def test_emit_calls_subscribers_in_order(self):
        bus = EventBus()
        calls = []
        bus.subscribe(STATE_UPDATED, lambda payload: calls.append(("a", payload)))
        bus.subscribe(STATE_UPDATED, lambda payload: calls.append(("b", payload)))

        bus.emit(STATE_UPDATED, 42)

        assert calls == [("a", 42), ("b", 42)]

    def test_emit_without_subscribers(self):
        EventBus().emit(ROUND_ENDED)

    def test_emit_only_reaches_matching_event(self):
        bus = EventBus()
        handler = Mock()
        bus.subscribe(STATE_UPDATED, handler)

        bus.emit(ROUND_ENDED)

        handler.assert_not_called()

    def test_failing_handler_does_not_stop_others(self, caplog):
        bus = EventBus()
        failing = Mock(side_effect=RuntimeError("boom"))
        handler = Mock()
        bus.subscribe(ROUND_ENDED, failing)
        bus.subscribe(ROUND_ENDED, handler)

        bus.emit(ROUND_ENDED)

        handler.assert_called_once_with(None)
        assert "Handler for 'round_ended' failed: boom" in caplog.text
