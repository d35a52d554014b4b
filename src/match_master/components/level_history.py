from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class LevelResult:
    level: int
    score: int


@dataclass(slots=True)
class LevelHistory:
    """Append-only record of finished levels for the current session."""
    results: List[LevelResult] = field(default_factory=list)
