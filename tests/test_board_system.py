import random

from match_master.constants import BOMB_SYMBOL, SYMBOL_GLYPHS
from match_master.engine import GameEngine
from match_master.events.bus import EVENT_BOARD_CHANGED
from match_master.systems.board_ops import (
    board_symbols,
    cross_indices,
    generate_symbols,
    get_symbol,
    in_bounds,
    index_to_position,
    position_to_index,
    regenerate_cross,
)
from tests.helpers import make_engine, only_spawn, record, set_cells


def test_generated_board_fills_every_cell_with_a_plain_symbol():
    engine = make_engine()
    symbols = board_symbols(engine.world)
    assert len(symbols) == 64
    assert all(symbol in SYMBOL_GLYPHS for symbol in symbols)
    assert BOMB_SYMBOL not in symbols


def test_board_size_follows_config():
    engine = make_engine(grid_size=4)
    assert len(board_symbols(engine.world)) == 16
    assert len(engine.snapshot().board) == 16


def test_generator_never_spawns_bomb():
    engine = make_engine()
    symbols = generate_symbols(engine.world, 2000)
    assert BOMB_SYMBOL not in symbols
    # Uniform draw over five symbols: every one shows up in a large sample.
    assert set(symbols) == set(SYMBOL_GLYPHS)


def test_repeated_generation_is_independent():
    first = board_symbols(GameEngine(rng=random.Random(1)).world)
    second = board_symbols(GameEngine(rng=random.Random(2)).world)
    assert first != second


def test_index_position_round_trip_is_row_major():
    assert index_to_position(0, 8) == (0, 0)
    assert index_to_position(9, 8) == (1, 1)
    assert index_to_position(63, 8) == (7, 7)
    assert position_to_index(2, 3, 8) == 19


def test_in_bounds_rejects_out_of_range_and_non_integers():
    engine = make_engine()
    assert in_bounds(engine.world, 0)
    assert in_bounds(engine.world, 63)
    assert not in_bounds(engine.world, -1)
    assert not in_bounds(engine.world, 64)
    assert not in_bounds(engine.world, "3")
    assert not in_bounds(engine.world, True)


def test_cross_covers_row_and_column_with_intersection_twice():
    engine = make_engine()
    cells = cross_indices(engine.world, 19)  # row 2, col 3
    assert len(cells) == 16
    assert cells.count(19) == 2
    assert set(cells) == {16, 17, 18, 19, 20, 21, 22, 23, 3, 11, 27, 35, 43, 51, 59}


def test_regenerate_cross_touches_only_row_and_column():
    engine = make_engine()
    set_cells(engine, {index: 'star' for index in range(64)})
    only_spawn(engine, 'circle')

    touched = regenerate_cross(engine.world, 0)

    assert touched == sorted(set(range(8)) | {8 * r for r in range(8)})
    for index in range(64):
        expected = 'circle' if index in touched else 'star'
        assert get_symbol(engine.world, index) == expected


def test_full_regeneration_emits_board_changed():
    engine = make_engine()
    changes = record(engine, EVENT_BOARD_CHANGED)
    only_spawn(engine, 'square')

    engine.board_system.regenerate(reason='test')

    assert changes and changes[-1]['reason'] == 'test'
    assert len(changes[-1]['indices']) == 64
    assert set(board_symbols(engine.world)) == {'square'}
