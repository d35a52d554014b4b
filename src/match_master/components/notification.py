from dataclasses import dataclass

@dataclass(slots=True)
class Notification:
    """One-shot message shown to the player until its lifetime runs out."""
    kind: str
    message: str
    remaining: float
    sequence: int = 0
