from __future__ import annotations

import random
from typing import Dict, Iterable, List, Tuple

from esper import World

from match_master.components.board import Board
from match_master.components.board_position import BoardPosition
from match_master.components.symbol_registry import SymbolRegistry
from match_master.components.symbol_types import SymbolTypes
from match_master.components.tile import TileType
from match_master.constants import BOMB_SYMBOL

Position = Tuple[int, int]


def get_symbol_registry(world: World) -> SymbolTypes:
    for entity, _ in world.get_component(SymbolRegistry):
        return world.component_for_entity(entity, SymbolTypes)
    raise RuntimeError("SymbolTypes definitions not found")


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def world_random(world: World) -> random.Random:
    return getattr(world, "random", None) or random


def index_to_position(index: int, cols: int) -> Position:
    return divmod(index, cols)


def position_to_index(row: int, col: int, cols: int) -> int:
    return row * cols + col


def in_bounds(world: World, index) -> bool:
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < get_board(world).cell_count


def generate_symbols(world: World, count: int) -> List[str]:
    """Return count independent, uniformly random spawnable symbols."""
    choices = get_symbol_registry(world).spawnable_types()
    rng = world_random(world)
    return [rng.choice(choices) for _ in range(count)]


def cell_entities(world: World) -> Dict[int, int]:
    """Map board index -> tile entity."""
    board = get_board(world)
    return {
        position_to_index(pos.row, pos.col, board.cols): entity
        for entity, pos in world.get_component(BoardPosition)
    }


def get_entity_at(world: World, index: int) -> int | None:
    board = get_board(world)
    row, col = index_to_position(index, board.cols)
    for entity, position in world.get_component(BoardPosition):
        if position.row == row and position.col == col:
            return entity
    return None


def get_symbol(world: World, index: int) -> str | None:
    entity = get_entity_at(world, index)
    if entity is None:
        return None
    return world.component_for_entity(entity, TileType).type_name


def set_symbol(world: World, index: int, type_name: str) -> bool:
    entity = get_entity_at(world, index)
    if entity is None:
        return False
    world.component_for_entity(entity, TileType).type_name = type_name
    return True


def is_bomb(world: World, index: int) -> bool:
    return get_symbol(world, index) == BOMB_SYMBOL


def board_symbols(world: World) -> List[str]:
    """Row-major list of every cell's symbol."""
    entities = cell_entities(world)
    return [
        world.component_for_entity(entities[index], TileType).type_name
        for index in sorted(entities)
    ]


def regenerate_cells(world: World, indices: Iterable[int]) -> List[int]:
    """Give each listed cell a freshly generated symbol; returns the indices touched."""
    entities = cell_entities(world)
    targets = [index for index in indices if index in entities]
    for index, type_name in zip(targets, generate_symbols(world, len(targets))):
        world.component_for_entity(entities[index], TileType).type_name = type_name
    return targets


def cross_indices(world: World, index: int) -> List[int]:
    """Indices of the full row followed by the full column through index.

    The intersection appears twice.
    """
    board = get_board(world)
    row, col = index_to_position(index, board.cols)
    row_cells = [position_to_index(row, c, board.cols) for c in range(board.cols)]
    col_cells = [position_to_index(r, col, board.cols) for r in range(board.rows)]
    return row_cells + col_cells


def regenerate_cross(world: World, index: int) -> List[int]:
    """Regenerate the row and the column through index; returns the unique cells touched."""
    touched = regenerate_cells(world, cross_indices(world, index))
    return sorted(set(touched))


def respawn_full_board(world: World) -> List[int]:
    """Fill the entire board with fresh symbols."""
    return regenerate_cells(world, sorted(cell_entities(world)))
