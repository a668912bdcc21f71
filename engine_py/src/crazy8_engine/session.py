"""
Game session controller.

Owns the current GameState, routes human events into the engine, runs the
AI players after a cancelable thinking delay and keeps the win/loss stats.
"""

import asyncio
import logging
import random
from typing import Awaitable, Callable, Dict, List, Optional

from .bots import GreedyBot, apply_bot_action
from .constants import DEFEAT_REMARKS
from .engine import (
    ActionResult, cancel_wild, create_game, draw_card, initial_state, play_card,
    return_to_setup, select_suit,
)
from .errors import ACTION_NOT_ALLOWED, NOT_YOUR_TURN
from .models import GameState, Suit, STATUS_PLAYING, STATUS_WON
from .rules import GameConfig, default_config
from .serialization import serialize_stats
from .stats import StatsStore

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], Awaitable[None]]
EffectListener = Callable[[str, Dict], Awaitable[None]]

EFFECT_VICTORY = "victory"
EFFECT_DEFEAT = "defeat"


class GameSession:
    """One human against AI players, driven from a single event loop."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        stats: Optional[StatsStore] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or default_config
        self.stats = stats or StatsStore(self.config.stats_path, self.config.stats_namespace)
        self.rng = rng or random.Random()
        self.state: GameState = initial_state()
        self.generation = 0
        self._ai_task: Optional[asyncio.Task] = None
        self._state_listeners: List[StateListener] = []
        self._effect_listeners: List[EffectListener] = []

    def add_state_listener(self, listener: StateListener):
        self._state_listeners.append(listener)

    def add_effect_listener(self, listener: EffectListener):
        self._effect_listeners.append(listener)

    @property
    def ai_pending(self) -> bool:
        return self._ai_task is not None and not self._ai_task.done()

    # Human-facing actions

    async def start(self, player_count: int = 2) -> ActionResult:
        """Throw away the current session and deal a new one."""
        result = create_game(player_count, self.config, rng=self.rng)
        if result.success:
            self.cancel_ai_turn()
            self.generation += 1
            await self._commit(result.state)
        return result

    async def play(self, card_id: str) -> ActionResult:
        error = self._human_turn_error()
        if error:
            return error
        return await self._apply(play_card(self.state, self.state.current_turn_index, card_id))

    async def select_suit(self, suit: Suit) -> ActionResult:
        return await self._apply(select_suit(self.state, suit))

    async def cancel_wild(self) -> ActionResult:
        return await self._apply(cancel_wild(self.state))

    async def draw(self) -> ActionResult:
        error = self._human_turn_error()
        if error:
            return error
        return await self._apply(draw_card(self.state, self.state.current_turn_index))

    async def return_to_setup(self) -> ActionResult:
        self.cancel_ai_turn()
        return await self._apply(return_to_setup(self.state))

    def _human_turn_error(self) -> Optional[ActionResult]:
        player = self.state.current_player
        if player is None:
            return ActionResult.rejected(self.state, ACTION_NOT_ALLOWED, "No game in progress")
        if not player.is_human:
            return ActionResult.rejected(self.state, NOT_YOUR_TURN, f"It is {player.name}'s turn")
        return None

    # Transition plumbing

    async def _apply(self, result: ActionResult) -> ActionResult:
        if result.success:
            await self._commit(result.state)
        return result

    async def _commit(self, new_state: GameState):
        previous = self.state
        self.state = new_state

        for listener in list(self._state_listeners):
            await listener(new_state)

        if new_state.is_over and not previous.is_over:
            await self._finish(new_state)

        self.schedule_ai_turn()

    async def _finish(self, state: GameState):
        human_won = state.status == STATUS_WON
        stats = self.stats.record(human_won)
        winner = state.players[state.winner_id]

        data = {
            "winner_id": winner.id,
            "winner_name": winner.name,
            "stats": serialize_stats(stats),
        }
        if human_won:
            effect = EFFECT_VICTORY
        else:
            effect = EFFECT_DEFEAT
            data["remark"] = self.rng.choice(DEFEAT_REMARKS)

        logger.info(f"Game over: {winner.name} wins")
        for listener in list(self._effect_listeners):
            await listener(effect, data)

    # AI scheduling

    def schedule_ai_turn(self):
        """Schedule exactly one AI decision if an AI player is up."""
        self.cancel_ai_turn()

        player = self.state.current_player
        if self.state.status != STATUS_PLAYING or player is None or player.is_human:
            return

        self._ai_task = asyncio.create_task(
            self._run_ai_turn(self.generation, self.state.version)
        )

    def cancel_ai_turn(self):
        if self._ai_task is not None and not self._ai_task.done():
            self._ai_task.cancel()
        self._ai_task = None

    async def _run_ai_turn(self, generation: int, version: int):
        try:
            await asyncio.sleep(self.config.ai_delay)
        except asyncio.CancelledError:
            logger.debug(f"AI turn cancelled (generation {generation}, version {version})")
            raise

        if generation != self.generation or version != self.state.version:
            logger.info("Discarding stale AI decision")
            return

        player_index = self.state.current_turn_index
        action = GreedyBot(player_index).choose_action(self.state)
        if action is None:
            return

        logger.info(f"{self.state.players[player_index].name} chooses {action}")
        # Detach before committing so rescheduling does not cancel this task
        self._ai_task = None
        try:
            await self._apply(apply_bot_action(self.state, player_index, action))
        except Exception as e:
            logger.error(f"AI turn failed for {self.state.players[player_index].name}: {e}")
            raise

    async def wait_for_ai(self):
        """Wait until no AI decision is pending (the human is up or the game ended)."""
        while self.ai_pending:
            await asyncio.wait({self._ai_task})

    async def close(self):
        self.cancel_ai_turn()
