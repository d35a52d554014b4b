from dataclasses import dataclass

@dataclass(slots=True)
class Countdown:
    """Level timer in whole seconds.

    elapsed accumulates tick dt until a full second has passed.
    """
    remaining: int
    elapsed: float = 0.0
