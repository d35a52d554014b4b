from __future__ import annotations

from esper import World

from match_master.components.match_round import MatchRound
from match_master.events.bus import EventBus, EVENT_SELECTION_CLEARED
from match_master.systems.settle import cancel_settles
from match_master.utils.state import get_config, get_selection


def get_or_create_match_round(world: World) -> MatchRound:
    """Return the shared MatchRound component, creating it if absent."""
    existing = list(world.get_component(MatchRound))
    if existing:
        return existing[0][1]
    world.create_entity(MatchRound())
    return list(world.get_component(MatchRound))[0][1]


def end_match_round(world: World) -> None:
    for entity in [entity for entity, _ in world.get_component(MatchRound)]:
        world.delete_entity(entity, immediate=True)


def clear_selection(world: World, event_bus: EventBus, reason: str, *, forced: bool = False) -> list[int]:
    """Empty the selection and close the current match round.

    forced marks a clear that interrupts play (bomb, star, level advance);
    those also cancel the pending settle unless the config keeps the race.
    """
    selection = get_selection(world)
    previous = list(selection.indices)
    selection.indices.clear()
    end_match_round(world)
    if forced and get_config(world).cancel_settle_on_clear:
        cancel_settles(world)
    event_bus.emit(EVENT_SELECTION_CLEARED, indices=previous, reason=reason)
    return previous
