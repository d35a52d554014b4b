from esper import World

from match_master.components.board import Board
from match_master.components.board_position import BoardPosition
from match_master.components.tile import TileType
from match_master.events.bus import EventBus, EVENT_BOARD_CHANGED
from match_master.systems.board_ops import generate_symbols, respawn_full_board
from match_master.utils.state import get_config


class BoardSystem:
    """Lays out one tile entity per cell and owns whole-board regeneration."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        size = get_config(world).grid_size
        self.board_entity = self.world.create_entity(Board(rows=size, cols=size))
        self._init_board(size)

    def _init_board(self, size: int):
        symbols = generate_symbols(self.world, size * size)
        for index, type_name in enumerate(symbols):
            row, col = divmod(index, size)
            self.world.create_entity(BoardPosition(row=row, col=col), TileType(type_name=type_name))

    def regenerate(self, reason: str) -> list[int]:
        indices = respawn_full_board(self.world)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason, indices=indices)
        return indices
