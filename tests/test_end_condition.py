from match_master.events.bus import EVENT_LEVEL_COMPLETE, EVENT_NOTIFICATION
from match_master.utils.scoring import add_score
from match_master.utils.state import get_countdown, get_level_state
from tests.helpers import make_engine, record, set_cells


def test_reaching_target_score_completes_level():
    engine = make_engine()
    completed = record(engine, EVENT_LEVEL_COMPLETE)

    add_score(engine.world, engine.event_bus, 100)

    snap = engine.snapshot()
    assert snap.level_complete
    assert snap.completion_reason == 'target_score'
    assert completed[-1]['reason'] == 'target_score'


def test_exhausting_moves_completes_level():
    engine = make_engine(max_moves=2)
    completed = record(engine, EVENT_LEVEL_COMPLETE)
    set_cells(engine, {i: 'star' for i in (0, 1, 2)})
    set_cells(engine, {i: 'circle' for i in (10, 11, 12)})

    for index in (0, 1, 2):
        engine.on_cell_click(index)
    engine.tick(1.0)
    assert not engine.snapshot().level_complete
    for index in (10, 11, 12):
        engine.on_cell_click(index)

    assert engine.snapshot().moves == 2
    assert [item['reason'] for item in completed] == ['moves_exhausted']


def test_timer_expiry_completes_level():
    engine = make_engine(time_limit=3)
    completed = record(engine, EVENT_LEVEL_COMPLETE)

    for _ in range(3):
        engine.tick(1.0)

    assert engine.snapshot().timer == 0
    assert completed == [
        {'level': 1, 'score': 0, 'moves': 0, 'timer': 0, 'reason': 'time_up'}
    ]


def test_completion_is_announced_once():
    engine = make_engine()
    completed = record(engine, EVENT_LEVEL_COMPLETE)
    notes = record(engine, EVENT_NOTIFICATION)

    add_score(engine.world, engine.event_bus, 100)
    add_score(engine.world, engine.event_bus, 5)
    engine.end_condition_system.evaluate()
    get_countdown(engine.world).remaining = 0
    assert engine.end_condition_system.evaluate() is False

    assert len(completed) == 1
    assert [note['kind'] for note in notes] == ['level_complete']


def test_score_reset_after_completion_keeps_level_complete():
    engine = make_engine()
    add_score(engine.world, engine.event_bus, 100)
    get_level_state(engine.world).score = 0

    engine.end_condition_system.evaluate()

    assert engine.snapshot().level_complete
