from dataclasses import dataclass

@dataclass(slots=True)
class MatchRound:
    """Rewards already granted for the selection currently on the board.

    A selection can grow from three to five cards before it settles; the
    resolver re-evaluates on each growth and only grants what is still owed.
    """
    awarded: int = 0
    move_counted: bool = False
    booster_fired: bool = False
    bomb_placed: bool = False

    @property
    def matched(self) -> bool:
        return self.awarded > 0
