"""
WebSocket event models and validation.
"""

import time
from enum import Enum
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, Field, ValidationError


class EventType(str, Enum):
    """Inbound event types."""
    START = "start"
    PLAY = "play"
    SELECT_SUIT = "select_suit"
    CANCEL_WILD = "cancel_wild"
    DRAW = "draw"
    RETURN_TO_SETUP = "return_to_setup"
    REQUEST_STATE = "request_state"


class OutboundEventType(str, Enum):
    """Outbound event types."""
    STATE_FULL = "state_full"
    STATS = "stats"
    EFFECT = "effect"
    ERROR = "error"


class ErrorCode(str, Enum):
    """Error codes for client events."""
    INVALID_EVENT = "INVALID_EVENT"
    INVALID_PLAYER_COUNT = "INVALID_PLAYER_COUNT"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    OWNERSHIP_MISMATCH = "OWNERSHIP_MISMATCH"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"
    SUIT_PENDING = "SUIT_PENDING"
    NO_PENDING_WILD = "NO_PENDING_WILD"
    INVALID_SUIT = "INVALID_SUIT"
    GAME_OVER = "GAME_OVER"
    ACTION_NOT_ALLOWED = "ACTION_NOT_ALLOWED"
    INTERNAL = "INTERNAL"


# Inbound event models
class BaseEvent(BaseModel):
    """Base event model."""
    type: EventType


class StartEvent(BaseEvent):
    """Start a new session."""
    type: EventType = EventType.START
    player_count: int = Field(default=2, ge=2, le=4)


class PlayEvent(BaseEvent):
    """Play a card from the human hand."""
    type: EventType = EventType.PLAY
    card_id: str = Field(..., min_length=1, max_length=20)


class SelectSuitEvent(BaseEvent):
    """Nominate the suit for a pending 8."""
    type: EventType = EventType.SELECT_SUIT
    suit: Literal['hearts', 'diamonds', 'clubs', 'spades']


class CancelWildEvent(BaseEvent):
    """Take back a pending 8."""
    type: EventType = EventType.CANCEL_WILD


class DrawEvent(BaseEvent):
    """Draw a card."""
    type: EventType = EventType.DRAW


class ReturnToSetupEvent(BaseEvent):
    """Leave the current game."""
    type: EventType = EventType.RETURN_TO_SETUP


class RequestStateEvent(BaseEvent):
    """Request full state event."""
    type: EventType = EventType.REQUEST_STATE


# Union type for all inbound events
InboundEvent = Union[
    StartEvent,
    PlayEvent,
    SelectSuitEvent,
    CancelWildEvent,
    DrawEvent,
    ReturnToSetupEvent,
    RequestStateEvent,
]


# Outbound event models
class StateFullEvent(BaseModel):
    """Full state event."""
    type: OutboundEventType = OutboundEventType.STATE_FULL
    state: Dict[str, Any]
    timestamp: float


class StatsEvent(BaseModel):
    """Aggregate win/loss stats."""
    type: OutboundEventType = OutboundEventType.STATS
    stats: Dict[str, int]
    timestamp: float


class EffectEvent(BaseModel):
    """Effect notification event."""
    type: OutboundEventType = OutboundEventType.EFFECT
    effect_type: str
    data: Dict[str, Any]
    timestamp: float


class ErrorEvent(BaseModel):
    """Error event."""
    type: OutboundEventType = OutboundEventType.ERROR
    code: ErrorCode
    message: str
    timestamp: float


def parse_inbound_event(data: Dict[str, Any]) -> InboundEvent:
    """
    Parse raw event data into appropriate event model.

    Args:
        data: Raw event data from WebSocket

    Returns:
        Parsed event model

    Raises:
        ValueError: If event type is invalid or data is malformed
    """
    if not isinstance(data, dict):
        raise ValueError("Event must be a JSON object")

    event_type = data.get("type")

    if not event_type:
        raise ValueError("Missing event type")

    try:
        event_type = EventType(event_type)
    except ValueError:
        raise ValueError(f"Invalid event type: {event_type}")

    event_map = {
        EventType.START: StartEvent,
        EventType.PLAY: PlayEvent,
        EventType.SELECT_SUIT: SelectSuitEvent,
        EventType.CANCEL_WILD: CancelWildEvent,
        EventType.DRAW: DrawEvent,
        EventType.RETURN_TO_SETUP: ReturnToSetupEvent,
        EventType.REQUEST_STATE: RequestStateEvent,
    }

    event_class = event_map[event_type]

    try:
        return event_class(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid event data: {str(e)}")


def create_error_event(code: ErrorCode, message: str) -> ErrorEvent:
    """Create an error event."""
    return ErrorEvent(
        code=code,
        message=message,
        timestamp=time.time()
    )


def create_state_full_event(state: Dict[str, Any]) -> StateFullEvent:
    """Create a full state event."""
    return StateFullEvent(
        state=state,
        timestamp=time.time()
    )


def create_stats_event(stats: Dict[str, int]) -> StatsEvent:
    """Create a stats event."""
    return StatsEvent(
        stats=stats,
        timestamp=time.time()
    )


def create_effect_event(effect_type: str, data: Dict[str, Any]) -> EffectEvent:
    """Create an effect event."""
    return EffectEvent(
        effect_type=effect_type,
        data=data,
        timestamp=time.time()
    )
