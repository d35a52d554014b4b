from __future__ import annotations

from esper import World

from match_master.components.settle_delay import SettleDelay
from match_master.events.bus import EventBus, EVENT_TICK, EVENT_SETTLE_COMPLETE
from match_master.utils.state import get_selection


def pending_settles(world: World) -> list[int]:
    return [entity for entity, _ in world.get_component(SettleDelay)]


def schedule_settle(world: World, delay: float) -> int:
    """Schedule a fire-once settle of the current selection after delay seconds."""
    return world.create_entity(SettleDelay(remaining=delay))


def cancel_settles(world: World) -> int:
    """Drop every pending settle; returns how many were cancelled."""
    entities = pending_settles(world)
    for entity in entities:
        world.delete_entity(entity, immediate=True)
    return len(entities)


class SettleSystem:
    """Counts down pending settle actions and fires them on expiry.

    A settle resolves against whatever selection exists when it fires.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        expired: list[int] = []
        for entity, delay in self.world.get_component(SettleDelay):
            delay.remaining -= dt
            if delay.remaining <= 1e-9:
                expired.append(entity)
        for entity in expired:
            if not self.world.entity_exists(entity):
                # Cancelled by an earlier settle in this same tick.
                continue
            self.world.delete_entity(entity, immediate=True)
            indices = list(get_selection(self.world).indices)
            self.event_bus.emit(EVENT_SETTLE_COMPLETE, entity=entity, indices=indices)
