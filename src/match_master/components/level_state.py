from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class LevelState:
    """Per-level counters; everything here resets when the level advances."""
    level: int = 1
    score: int = 0
    moves: int = 0
    bomb_index: Optional[int] = None
    completion_reason: Optional[str] = None
