from esper import World

from match_master.events.bus import EventBus, EVENT_MOVES_CHANGED, EVENT_SCORE_CHANGED
from match_master.utils.state import get_level_state


def set_score(world: World, event_bus: EventBus, score: int) -> int:
    state = get_level_state(world)
    delta = score - state.score
    state.score = max(0, score)
    event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, delta=delta)
    return state.score


def add_score(world: World, event_bus: EventBus, amount: int) -> int:
    return set_score(world, event_bus, get_level_state(world).score + amount)


def set_moves(world: World, event_bus: EventBus, moves: int) -> int:
    state = get_level_state(world)
    delta = moves - state.moves
    state.moves = max(0, moves)
    event_bus.emit(EVENT_MOVES_CHANGED, moves=state.moves, delta=delta)
    return state.moves


def add_move(world: World, event_bus: EventBus) -> int:
    return set_moves(world, event_bus, get_level_state(world).moves + 1)
