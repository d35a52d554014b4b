from match_master.components.selection import SelectionRejection
from match_master.constants import BOMB_SYMBOL
from match_master.events.bus import (
    EVENT_BOMB_TRIGGERED,
    EVENT_SELECTION_REJECTED,
    EVENT_TILE_SELECTED,
)
from match_master.utils.state import get_selection
from tests.helpers import make_engine, record, set_cells


def _distinct_cells(engine, indices):
    # Alternate symbols so no selection below forms a match.
    symbols = ['circle', 'triangle', 'cross', 'star', 'square']
    set_cells(engine, {index: symbols[i % len(symbols)] for i, index in enumerate(indices)})


def test_click_adds_index_and_reports_position():
    engine = make_engine()
    selected = record(engine, EVENT_TILE_SELECTED)

    engine.on_cell_click(10)

    assert engine.snapshot().selection == (10,)
    assert selected == [{'index': 10, 'row': 1, 'col': 2, 'size': 1}]


def test_reselecting_same_index_is_noop():
    engine = make_engine()
    rejected = record(engine, EVENT_SELECTION_REJECTED)

    engine.on_cell_click(5)
    engine.on_cell_click(5)

    assert engine.snapshot().selection == (5,)
    assert rejected[-1]['reason'] is SelectionRejection.ALREADY_SELECTED


def test_selection_never_exceeds_capacity():
    engine = make_engine()
    _distinct_cells(engine, range(6))
    rejected = record(engine, EVENT_SELECTION_REJECTED)

    for index in range(6):
        engine.on_cell_click(index)

    assert engine.snapshot().selection == (0, 1, 2, 3, 4)
    assert rejected[-1] == {'index': 5, 'reason': SelectionRejection.SELECTION_FULL}


def test_out_of_bounds_index_rejected():
    engine = make_engine()
    rejected = record(engine, EVENT_SELECTION_REJECTED)

    engine.on_cell_click(64)
    engine.on_cell_click(-3)

    assert engine.snapshot().selection == ()
    assert [item['reason'] for item in rejected] == [SelectionRejection.INVALID_INDEX] * 2


def test_bomb_cell_click_triggers_bomb_instead_of_selecting():
    engine = make_engine()
    set_cells(engine, {12: BOMB_SYMBOL})
    triggered = record(engine, EVENT_BOMB_TRIGGERED)

    engine.on_cell_click(12)

    assert triggered == [{'index': 12}]
    assert 12 not in get_selection(engine.world)


def test_clicks_rejected_once_level_complete():
    engine = make_engine(max_moves=1)
    set_cells(engine, {0: 'star', 1: 'star', 2: 'star'})
    for index in (0, 1, 2):
        engine.on_cell_click(index)
    assert engine.snapshot().level_complete
    rejected = record(engine, EVENT_SELECTION_REJECTED)

    engine.on_cell_click(20)

    assert rejected == [{'index': 20, 'reason': SelectionRejection.LEVEL_COMPLETE}]
    assert 20 not in engine.snapshot().selection
