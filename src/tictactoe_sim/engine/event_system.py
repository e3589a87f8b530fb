"""Event system for game state changes.

Listeners are plain callables taking an EventContext. They are invoked
synchronously, in subscription order, inside the call that raised the event.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from ..utils.logging_config import get_game_logger

if TYPE_CHECKING:
    from ..models.game.game_state import GameState
    from ..models.game.player import Player

logger = get_game_logger(__name__)


class GameEvent(Enum):
    """Types of game events that listeners can subscribe to."""
    MOVE_MADE = "move_made"
    WIN = "win"
    DRAW = "draw"

    # Session-level events
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"


@dataclass
class EventContext:
    """Context information for game events."""
    event_type: GameEvent
    row: Optional[int] = None
    col: Optional[int] = None
    player: Optional["Player"] = None
    game_state: Optional["GameState"] = None
    additional_data: Dict[str, Any] = field(default_factory=dict)


EventListener = Callable[[EventContext], None]


class GameEventManager:
    """Keeps per-event listener lists and dispatches events to them."""

    def __init__(self, game_state: Optional["GameState"] = None):
        self.game_state = game_state
        self._listeners: Dict[GameEvent, List[EventListener]] = {}
        self.last_event: Optional[EventContext] = None

    def subscribe(self, event: GameEvent, listener: EventListener) -> None:
        """Register a listener for an event type."""
        self._listeners.setdefault(event, []).append(listener)

    def unsubscribe(self, event: GameEvent, listener: EventListener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: GameEvent) -> int:
        return len(self._listeners.get(event, []))

    def clear(self) -> None:
        self._listeners.clear()

    def trigger_event(self, event_context: EventContext) -> None:
        """Deliver an event to every listener registered for its type."""
        if event_context.game_state is None:
            event_context.game_state = self.game_state
        self.last_event = event_context

        # Copy so listeners may unsubscribe while being notified
        listeners = list(self._listeners.get(event_context.event_type, []))
        logger.debug(
            f"Event {event_context.event_type.value} at [{event_context.row},{event_context.col}] "
            f"-> {len(listeners)} listener(s)"
        )
        for listener in listeners:
            listener(event_context)

    def emit(self, event: GameEvent, row: Optional[int] = None, col: Optional[int] = None,
             player: Optional["Player"] = None, **data) -> EventContext:
        """Build an EventContext and trigger it."""
        context = EventContext(
            event_type=event,
            row=row,
            col=col,
            player=player,
            game_state=self.game_state,
            additional_data=data,
        )
        self.trigger_event(context)
        return context
