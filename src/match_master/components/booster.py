from dataclasses import dataclass

@dataclass(slots=True)
class Booster:
    """Booster meter (0-100) and the star board-reset it unlocks."""
    progress: int = 0
    star_available: bool = False
