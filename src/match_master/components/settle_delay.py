from dataclasses import dataclass

@dataclass(slots=True)
class SettleDelay:
    """Pending deferred action: resolve the selection once remaining hits zero."""
    remaining: float
