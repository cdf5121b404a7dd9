"""
Tests for the event bus.
"""

from common.side import Side
from game.events import EventBus, GameEvent, GameEventType


def test_typed_handlers_run_before_global_ones():
    bus = EventBus()
    order = []
    bus.subscribe_all(lambda e: order.append("global"))
    bus.subscribe(GameEventType.SHOT_SWISHED, lambda e: order.append("typed"))

    bus.emit(GameEvent(GameEventType.SHOT_SWISHED, side=Side.PLAYER, data={"points": 2}))
    bus.emit(GameEvent(GameEventType.BALL_BOUNCED))

    assert order == ["typed", "global", "global"]


def test_failing_handler_does_not_stop_delivery(caplog):
    bus = EventBus()
    seen = []

    def broken(event):
        raise RuntimeError("speaker unplugged")

    bus.subscribe(GameEventType.STEAL_SUCCEEDED, broken)
    bus.subscribe_all(seen.append)

    bus.emit(GameEvent(GameEventType.STEAL_SUCCEEDED))

    assert len(seen) == 1
    assert "steal_succeeded" in caplog.text


def test_unsubscribe_and_counts():
    bus = EventBus()

    def handler(event):
        pass

    bus.subscribe(GameEventType.DUNK_PERFORMED, handler)
    bus.subscribe_all(handler)
    assert bus.handler_count() == 2
    assert bus.handler_count(GameEventType.DUNK_PERFORMED) == 1

    bus.unsubscribe(GameEventType.DUNK_PERFORMED, handler)
    bus.unsubscribe(GameEventType.DUNK_PERFORMED, handler)
    bus.unsubscribe_all(handler)
    assert bus.handler_count() == 0

    bus.subscribe_all(handler)
    bus.clear()
    assert bus.handler_count() == 0
