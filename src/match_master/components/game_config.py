from dataclasses import dataclass

from match_master.constants import (
    BOMB_MATCH,
    BOOSTER_MATCH,
    BOOSTER_MAX,
    BOOSTER_STEP,
    GRID_SIZE,
    MAX_MOVES,
    MIN_MATCH,
    SELECTION_CAPACITY,
    SETTLE_DELAY,
    TARGET_SCORE,
    TIME_LIMIT,
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Per-engine rule configuration stored on the state entity.

    The bomb cell is regenerated with the rest of a settled match unless it
    is clicked inside the settle window. preserve_bomb_on_settle opts out of
    that and leaves the bomb on the board until it is clicked.
    cancel_settle_on_clear drops a pending settle when the selection is
    cleared by a bomb, a star reset or a level advance.
    """
    target_score: int = TARGET_SCORE
    max_moves: int = MAX_MOVES
    time_limit: int = TIME_LIMIT
    grid_size: int = GRID_SIZE
    selection_capacity: int = SELECTION_CAPACITY
    min_match: int = MIN_MATCH
    booster_match: int = BOOSTER_MATCH
    bomb_match: int = BOMB_MATCH
    booster_step: int = BOOSTER_STEP
    booster_max: int = BOOSTER_MAX
    settle_delay: float = SETTLE_DELAY
    preserve_bomb_on_settle: bool = False
    cancel_settle_on_clear: bool = True

    def __post_init__(self) -> None:
        for name in ('target_score', 'max_moves', 'time_limit', 'grid_size', 'min_match', 'booster_max'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.selection_capacity < self.min_match:
            raise ValueError("selection_capacity must be at least min_match")
        if self.booster_step < 0:
            raise ValueError("booster_step must not be negative")
        if self.settle_delay < 0:
            raise ValueError("settle_delay must not be negative")

    @property
    def cell_count(self) -> int:
        return self.grid_size * self.grid_size
