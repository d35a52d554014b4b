from match_master.constants import BOMB_SYMBOL
from match_master.events.bus import (
    EVENT_BOMB_PLACED,
    EVENT_MATCH_EVALUATED,
    EVENT_MATCH_SETTLED,
    EVENT_NOTIFICATION,
)
from match_master.systems.board_ops import get_symbol
from match_master.systems.match_resolution import count_matches
from match_master.utils.state import get_booster
from tests.helpers import drive_ticks, make_engine, only_spawn, record, set_cells


def _select(engine, indices):
    for index in indices:
        engine.on_cell_click(index)


def test_count_matches_uses_first_selected_symbol_as_reference():
    assert count_matches(['star', 'star', 'star']) == 3
    assert count_matches(['circle', 'star', 'star']) == 1
    assert count_matches(['star', 'circle', 'star', 'star']) == 3
    assert count_matches([]) == 0


def test_three_match_scores_and_settles_after_delay():
    engine = make_engine()
    set_cells(engine, {0: 'star', 9: 'star', 30: 'star'})
    only_spawn(engine, 'circle')
    evaluated = record(engine, EVENT_MATCH_EVALUATED)

    _select(engine, [0, 9, 30])

    snap = engine.snapshot()
    assert evaluated[-1]['match_count'] == 3
    assert snap.score == 3
    assert snap.moves == 1
    assert snap.selection == (0, 9, 30)
    assert snap.settle_pending

    drive_ticks(engine, count=9, dt=0.1)
    assert engine.snapshot().selection == (0, 9, 30)

    drive_ticks(engine, count=1, dt=0.1)
    snap = engine.snapshot()
    assert snap.selection == ()
    assert not snap.settle_pending
    assert [snap.board[i] for i in (0, 9, 30)] == ['circle'] * 3
    assert snap.score == 3
    assert snap.moves == 1


def test_non_match_flips_back_without_reward():
    engine = make_engine()
    set_cells(engine, {0: 'star', 1: 'circle', 2: 'circle'})
    only_spawn(engine, 'square')
    settled = record(engine, EVENT_MATCH_SETTLED)

    _select(engine, [0, 1, 2])
    drive_ticks(engine, count=11, dt=0.1)

    snap = engine.snapshot()
    assert snap.score == 0
    assert snap.moves == 0
    assert snap.selection == ()
    assert [snap.board[i] for i in (0, 1, 2)] == ['star', 'circle', 'circle']
    assert settled == [{'indices': [0, 1, 2], 'matched': False}]


def test_reference_is_first_pick_not_majority():
    engine = make_engine()
    # Two circles outvote the star, but the star was picked first.
    set_cells(engine, {0: 'star', 1: 'circle', 2: 'circle', 3: 'circle'})

    _select(engine, [0, 1, 2, 3])

    assert engine.snapshot().score == 0
    assert engine.snapshot().moves == 0


def test_exact_four_match_advances_booster_and_unlocks_star():
    engine = make_engine()
    set_cells(engine, {i: 'cross' for i in (4, 5, 6, 7)})
    notes = record(engine, EVENT_NOTIFICATION)

    _select(engine, [4, 5, 6, 7])

    snap = engine.snapshot()
    assert snap.score == 4
    assert snap.moves == 1
    assert snap.slider_value == 20
    assert snap.star_available
    assert [note['kind'] for note in notes] == ['booster']


def test_booster_progress_caps_at_maximum():
    engine = make_engine()
    get_booster(engine.world).progress = 90
    set_cells(engine, {i: 'cross' for i in (4, 5, 6, 7)})

    _select(engine, [4, 5, 6, 7])

    assert engine.snapshot().slider_value == 100


def test_growing_selection_is_scored_once_per_round():
    engine = make_engine()
    set_cells(engine, {i: 'square' for i in (10, 11, 12, 13, 14)})

    _select(engine, [10, 11, 12])
    assert (engine.snapshot().score, engine.snapshot().moves) == (3, 1)

    _select(engine, [13])
    assert (engine.snapshot().score, engine.snapshot().moves) == (4, 1)
    assert engine.snapshot().slider_value == 20

    _select(engine, [14])
    snap = engine.snapshot()
    assert (snap.score, snap.moves) == (5, 1)
    assert snap.slider_value == 20
    assert snap.bomb_index in (10, 11, 12, 13, 14)


def test_five_match_bomb_is_replaced_when_the_match_settles():
    engine = make_engine()
    picked = [0, 1, 2, 3, 4]
    set_cells(engine, {i: 'triangle' for i in picked})
    only_spawn(engine, 'circle')
    placed = record(engine, EVENT_BOMB_PLACED)

    _select(engine, picked)

    snap = engine.snapshot()
    bomb_index = snap.bomb_index
    assert placed == [{'index': bomb_index}]
    assert [snap.board[i] for i in picked].count(BOMB_SYMBOL) == 1
    assert snap.board[bomb_index] == BOMB_SYMBOL
    assert snap.score == 5

    drive_ticks(engine, count=11, dt=0.1)

    snap = engine.snapshot()
    assert snap.bomb_index is None
    assert BOMB_SYMBOL not in snap.board
    assert [snap.board[i] for i in picked] == ['circle'] * 5


def test_preserved_bomb_survives_settle():
    engine = make_engine(preserve_bomb_on_settle=True)
    picked = [0, 1, 2, 3, 4]
    set_cells(engine, {i: 'triangle' for i in picked})
    only_spawn(engine, 'circle')

    _select(engine, picked)
    bomb_index = engine.snapshot().bomb_index
    drive_ticks(engine, count=11, dt=0.1)

    snap = engine.snapshot()
    assert snap.bomb_index == bomb_index
    assert get_symbol(engine.world, bomb_index) == BOMB_SYMBOL
    for index in picked:
        if index != bomb_index:
            assert snap.board[index] == 'circle'


def test_second_bomb_replaces_preserved_one():
    engine = make_engine(preserve_bomb_on_settle=True)
    only_spawn(engine, 'circle')
    set_cells(engine, {i: 'triangle' for i in range(5)})
    _select(engine, range(5))
    first = engine.snapshot().bomb_index
    drive_ticks(engine, count=11, dt=0.1)

    set_cells(engine, {i: 'square' for i in range(40, 45)})
    _select(engine, range(40, 45))

    snap = engine.snapshot()
    assert snap.bomb_index in range(40, 45)
    assert snap.board.count(BOMB_SYMBOL) == 1
    assert snap.board[first] == 'circle'
