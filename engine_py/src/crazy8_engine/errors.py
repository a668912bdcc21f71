# engine_py/src/crazy8_engine/errors.py

class GameError(Exception):
    """Base exception for game-related errors."""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

# Specific error codes
INVALID_PLAYER_COUNT = "INVALID_PLAYER_COUNT"
NOT_YOUR_TURN = "NOT_YOUR_TURN"
OWNERSHIP_MISMATCH = "OWNERSHIP_MISMATCH"
ILLEGAL_MOVE = "ILLEGAL_MOVE"
SUIT_PENDING = "SUIT_PENDING"
NO_PENDING_WILD = "NO_PENDING_WILD"
INVALID_SUIT = "INVALID_SUIT"
GAME_OVER = "GAME_OVER"
ACTION_NOT_ALLOWED = "ACTION_NOT_ALLOWED"

# Helper function to raise common errors
def raise_error(code: str, message: str):
    raise GameError(code, message)
