from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SelectionRejection(Enum):
    """Reasons a click did not add a card to the selection."""
    INVALID_INDEX = "invalid_index"
    SELECTION_FULL = "selection_full"
    ALREADY_SELECTED = "already_selected"
    LEVEL_COMPLETE = "level_complete"


@dataclass(slots=True)
class Selection:
    """Board indices the player has flipped, in click order."""
    indices: List[int] = field(default_factory=list)

    def __contains__(self, index: int) -> bool:
        return index in self.indices

    def __len__(self) -> int:
        return len(self.indices)
