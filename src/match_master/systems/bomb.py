import logging

from esper import World

from match_master.events.bus import EventBus, EVENT_BOARD_CHANGED, EVENT_BOMB_TRIGGERED
from match_master.systems.board_ops import in_bounds, is_bomb, regenerate_cross
from match_master.utils.selection import clear_selection
from match_master.utils.state import get_level_state

logger = logging.getLogger(__name__)


class BombSystem:
    """Detonates a clicked bomb: its whole row and column get fresh symbols."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BOMB_TRIGGERED, self.on_bomb_triggered)

    def on_bomb_triggered(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is None or not in_bounds(self.world, index):
            return
        if not is_bomb(self.world, index):
            return
        affected = regenerate_cross(self.world, index)
        state = get_level_state(self.world)
        state.bomb_index = None
        logger.debug("Bomb at %d cleared %d cells", index, len(affected))
        clear_selection(self.world, self.event_bus, reason='bomb', forced=True)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='bomb', indices=affected)
