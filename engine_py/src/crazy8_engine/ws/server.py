"""
FastAPI WebSocket server for the Crazy Eights game.

Each WebSocket connection owns one GameSession. The client receives a
`state_full` event after every transition and sends action events back.
"""

import json
import logging
from typing import Dict, Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

from ..engine import ActionResult
from ..models import GameState
from ..rules import GameConfig, config_from_env
from ..serialization import sanitize_state, serialize_stats
from ..session import GameSession
from ..stats import StatsStore
from .events import (
    parse_inbound_event, create_error_event, create_effect_event,
    create_state_full_event, create_stats_event, ErrorCode,
    StartEvent, PlayEvent, SelectSuitEvent, CancelWildEvent, DrawEvent,
    ReturnToSetupEvent, RequestStateEvent,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _error_code(code: Optional[str]) -> ErrorCode:
    try:
        return ErrorCode(code)
    except ValueError:
        return ErrorCode.INTERNAL


class ConnectionHandler:
    """Binds one WebSocket to one game session."""

    def __init__(self, websocket: WebSocket, session: GameSession):
        self.websocket = websocket
        self.session = session
        session.add_state_listener(self.send_state)
        session.add_effect_listener(self.send_effect)

    async def send_state(self, state: GameState):
        event = create_state_full_event(sanitize_state(state))
        await self.websocket.send_text(event.model_dump_json())

    async def send_effect(self, effect_type: str, data: Dict):
        event = create_effect_event(effect_type, data)
        await self.websocket.send_text(event.model_dump_json())

    async def send_stats(self):
        event = create_stats_event(serialize_stats(self.session.stats.stats))
        await self.websocket.send_text(event.model_dump_json())

    async def send_error(self, code: ErrorCode, message: str):
        event = create_error_event(code, message)
        await self.websocket.send_text(event.model_dump_json())

    async def handle_event(self, event):
        """Handle an inbound event."""
        if isinstance(event, StartEvent):
            result = await self.session.start(event.player_count)
        elif isinstance(event, PlayEvent):
            result = await self.session.play(event.card_id)
        elif isinstance(event, SelectSuitEvent):
            result = await self.session.select_suit(event.suit)
        elif isinstance(event, CancelWildEvent):
            result = await self.session.cancel_wild()
        elif isinstance(event, DrawEvent):
            result = await self.session.draw()
        elif isinstance(event, ReturnToSetupEvent):
            result = await self.session.return_to_setup()
            if result.success:
                await self.send_stats()
        elif isinstance(event, RequestStateEvent):
            await self.send_state(self.session.state)
            return
        else:
            raise ValueError(f"Unhandled event type: {type(event)}")

        await self._report(result)

    async def _report(self, result: ActionResult):
        if not result.success:
            logger.info(f"Rejected action [{result.error_code}]: {result.error_message}")
            await self.send_error(_error_code(result.error_code), result.error_message)


def create_app(config: Optional[GameConfig] = None) -> FastAPI:
    """Build the FastAPI app around a shared stats store."""
    config = config or config_from_env()
    stats = StatsStore(config.stats_path, config.stats_namespace)

    app = FastAPI(title="Crazy Eights Game Engine", version="1.0.0")
    app.state.config = config
    app.state.stats = stats

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/stats")
    async def get_stats():
        """Aggregate win/loss counters."""
        return serialize_stats(stats.stats)

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        """Main WebSocket endpoint."""
        await websocket.accept()
        logger.info("WebSocket connection accepted")

        session = GameSession(config=config, stats=stats)
        handler = ConnectionHandler(websocket, session)

        try:
            await handler.send_stats()
            await handler.send_state(session.state)

            while True:
                raw_data = await websocket.receive_text()

                try:
                    data = json.loads(raw_data)
                    event = parse_inbound_event(data)
                    await handler.handle_event(event)
                except ValueError as e:
                    # Invalid event
                    await handler.send_error(ErrorCode.INVALID_EVENT, str(e))
                except Exception as e:
                    logger.error(f"Error handling event: {e}")
                    await handler.send_error(ErrorCode.INTERNAL, "Internal server error")

        except WebSocketDisconnect:
            logger.info("WebSocket disconnected")
        except Exception as e:
            logger.error(f"WebSocket error: {e}")
        finally:
            await session.close()

    return app


# FastAPI app
app = create_app()
