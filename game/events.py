"""
Game Event Notifications

Fire-and-forget notifications for presentation collaborators (sound, effects,
HUD flashes). The simulation emits events without knowing who listens;
handlers never return anything to the simulation and never break a tick.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from common.side import Side

logger = logging.getLogger(__name__)


class GameEventType(Enum):
    """Kinds of notifications the simulation core emits"""
    BALL_BOUNCED = "ball_bounced"
    BALL_OUT_OF_BOUNDS = "ball_out_of_bounds"
    SHOT_RELEASED = "shot_released"
    SHOT_SWISHED = "shot_swished"
    STEAL_SUCCEEDED = "steal_succeeded"
    DUNK_PERFORMED = "dunk_performed"
    PERIOD_START_WHISTLE = "period_start_whistle"
    PERIOD_END_BUZZER = "period_end_buzzer"


@dataclass(frozen=True)
class GameEvent:
    """
    Snapshot of a noteworthy moment.

    Attributes:
        event_type: What happened
        timestamp: Match seconds elapsed when it happened
        side: Agent the event is about, if any
        data: Extra details (points, dunk flag, ...)
    """
    event_type: GameEventType
    timestamp: float = 0.0
    side: Optional[Side] = None
    data: dict = field(default_factory=dict)


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    Simple pub/sub event bus decoupling the simulation from audio/FX.

    Example:
        bus = EventBus()
        bus.subscribe(GameEventType.SHOT_SWISHED, lambda e: play("swish"))
        bus.emit(GameEvent(GameEventType.SHOT_SWISHED, side=Side.PLAYER))
    """

    def __init__(self) -> None:
        self._handlers: Dict[GameEventType, List[EventHandler]] = defaultdict(list)
        self._global_handlers: List[EventHandler] = []

    def subscribe(self, event_type: GameEventType, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        self._global_handlers.append(handler)

    def unsubscribe(self, event_type: GameEventType, handler: EventHandler) -> None:
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        if handler in self._global_handlers:
            self._global_handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """
        Deliver an event to type-specific handlers, then global handlers.

        A failing handler is logged and skipped; the remaining handlers still
        receive the event.
        """
        for handler in list(self._handlers[event.event_type]) + list(self._global_handlers):
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler failed for %s", event.event_type.value)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        self._global_handlers.clear()

    def handler_count(self, event_type: Optional[GameEventType] = None) -> int:
        """
        Get the number of registered handlers.

        Args:
            event_type: If provided, count handlers for this type only.
                        If None, count all handlers including global.
        """
        if event_type is None:
            total = sum(len(handlers) for handlers in self._handlers.values())
            return total + len(self._global_handlers)
        return len(self._handlers[event_type])
