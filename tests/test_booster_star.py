from match_master.events.bus import EVENT_STAR_USED
from match_master.utils.state import get_booster, get_level_state
from tests.helpers import make_engine, only_spawn, record, set_cells


def test_star_request_ignored_while_unavailable():
    engine = make_engine()
    get_level_state(engine.world).score = 12
    before = engine.snapshot().board
    used = record(engine, EVENT_STAR_USED)

    engine.on_star_click()

    snap = engine.snapshot()
    assert snap.score == 12
    assert snap.board == before
    assert used == []


def test_star_reset_trades_score_for_fresh_board():
    engine = make_engine()
    set_cells(engine, {i: 'cross' for i in (4, 5, 6, 7)})
    set_cells(engine, {20: 'star'})
    for index in (4, 5, 6, 7):
        engine.on_cell_click(index)
    assert engine.snapshot().star_available
    engine.on_cell_click(20)
    only_spawn(engine, 'triangle')
    used = record(engine, EVENT_STAR_USED)

    engine.on_star_click()

    snap = engine.snapshot()
    assert snap.score == 0
    assert not snap.star_available
    assert snap.selection == ()
    assert not snap.settle_pending
    assert set(snap.board) == {'triangle'}
    # The meter is not spent by the reset.
    assert snap.slider_value == 20
    assert used == [{'forfeited_score': 4}]


def test_star_can_only_be_used_once():
    engine = make_engine()
    get_booster(engine.world).star_available = True
    engine.on_star_click()
    only_spawn(engine, 'circle')

    engine.on_star_click()

    assert set(engine.snapshot().board) != {'circle'}
