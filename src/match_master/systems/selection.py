import logging

from esper import World

from match_master.components.selection import SelectionRejection
from match_master.events.bus import (
    EventBus,
    EVENT_BOMB_TRIGGERED,
    EVENT_SELECTION_READY,
    EVENT_SELECTION_REJECTED,
    EVENT_TILE_CLICK,
    EVENT_TILE_SELECTED,
)
from match_master.systems.board_ops import get_board, in_bounds, index_to_position, is_bomb
from match_master.utils.state import get_config, get_selection, is_level_complete

logger = logging.getLogger(__name__)


class SelectionSystem:
    """Routes cell clicks: bomb cells go to the bomb activator, the rest are flipped."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_tile_click(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is None:
            return
        if not in_bounds(self.world, index):
            self._reject(index, SelectionRejection.INVALID_INDEX)
            return
        if is_level_complete(self.world):
            self._reject(index, SelectionRejection.LEVEL_COMPLETE)
            return
        if is_bomb(self.world, index):
            self.event_bus.emit(EVENT_BOMB_TRIGGERED, index=index)
            return
        self.select(index)

    def select(self, index: int) -> bool:
        """Add index to the selection; rejected clicks leave it untouched."""
        selection = get_selection(self.world)
        config = get_config(self.world)
        if index in selection:
            self._reject(index, SelectionRejection.ALREADY_SELECTED)
            return False
        if len(selection) >= config.selection_capacity:
            self._reject(index, SelectionRejection.SELECTION_FULL)
            return False
        selection.indices.append(index)
        row, col = index_to_position(index, get_board(self.world).cols)
        self.event_bus.emit(EVENT_TILE_SELECTED, index=index, row=row, col=col, size=len(selection))
        if len(selection) >= config.min_match:
            self.event_bus.emit(EVENT_SELECTION_READY, indices=list(selection.indices))
        return True

    def _reject(self, index, reason: SelectionRejection):
        logger.debug("Rejected click on %r: %s", index, reason.value)
        self.event_bus.emit(EVENT_SELECTION_REJECTED, index=index, reason=reason)
