"""
Game configuration and validation.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import HAND_SIZE, HUMAN_NAME, STATS_NAMESPACE
from .errors import INVALID_PLAYER_COUNT, raise_error

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "CRAZY8_AI_DELAY": "ai_delay",
    "CRAZY8_STATS_PATH": "stats_path",
    "CRAZY8_HUMAN_NAME": "human_name",
}


class GameConfig(BaseModel):
    """Configuration for game rules and session settings."""

    min_players: int = Field(
        default=2,
        ge=2,
        le=4,
        description="Minimum number of players, human included"
    )
    max_players: int = Field(
        default=4,
        ge=2,
        le=4,
        description="Maximum number of players, human included"
    )
    hand_size: int = Field(
        default=HAND_SIZE,
        ge=1,
        le=10,
        description="Cards dealt to each player"
    )
    ai_delay: float = Field(
        default=1.5,
        ge=0,
        le=30,
        description="Seconds an AI player 'thinks' before acting"
    )
    human_name: str = Field(
        default=HUMAN_NAME,
        min_length=1,
        max_length=30,
        description="Display name of the human player"
    )
    stats_path: Optional[str] = Field(
        default=None,
        description="JSON file holding win/loss stats (None keeps them in memory)"
    )
    stats_namespace: str = Field(
        default=STATS_NAMESPACE,
        min_length=1,
        description="Key the stats record is stored under"
    )

    @field_validator('max_players')
    @classmethod
    def validate_max_players(cls, v, info):
        """Validate maximum players doesn't fall below minimum."""
        min_players = info.data.get('min_players', 2)
        if v < min_players:
            raise ValueError(f'max_players ({v}) must be >= min_players ({min_players})')
        return v

    def validate_player_count(self, player_count: int) -> bool:
        """Check if a player count is valid for this configuration."""
        return self.min_players <= player_count <= self.max_players

    def require_player_count(self, player_count: int):
        """Raise GameError unless the player count is supported."""
        if not self.validate_player_count(player_count):
            raise_error(
                INVALID_PLAYER_COUNT,
                f"Player count must be between {self.min_players} and {self.max_players}"
            )


# Default configuration instance
default_config = GameConfig()


def create_config(**overrides) -> GameConfig:
    """Create a GameConfig with optional overrides."""
    config_dict = default_config.model_dump()
    config_dict.update(overrides)
    return GameConfig(**config_dict)


def config_from_env() -> GameConfig:
    """
    Build a GameConfig from CRAZY8_* environment variables.

    Values are validated by pydantic; an invalid one is logged and the
    default kept for that field.
    """
    overrides = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if not value:
            continue
        try:
            create_config(**{field_name: value})
        except ValidationError as e:
            logger.error(f"Ignoring invalid {env_name}={value!r}: {e.errors()[0]['msg']}")
            continue
        overrides[field_name] = value
    return create_config(**overrides)
