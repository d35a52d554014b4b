import logging

from esper import World

from match_master.components.notification import Notification
from match_master.constants import NOTIFICATION_LIFETIME
from match_master.events.bus import EventBus, EVENT_NOTIFICATION, EVENT_TICK

logger = logging.getLogger(__name__)


def latest_notification(world: World) -> Notification | None:
    notes = [note for _, note in world.get_component(Notification)]
    if not notes:
        return None
    return max(notes, key=lambda note: note.sequence)


class NotificationSystem:
    """Keeps player-facing messages alive for a short while after they are raised."""
    def __init__(self, world: World, event_bus: EventBus, lifetime: float = NOTIFICATION_LIFETIME):
        self.world = world
        self.event_bus = event_bus
        self.lifetime = lifetime
        self._sequence = 0
        self.event_bus.subscribe(EVENT_NOTIFICATION, self.on_notification)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_notification(self, sender, **kwargs):
        message = kwargs.get('message')
        if not message:
            return
        kind = kwargs.get('kind', 'info')
        self._sequence += 1
        logger.info("[%s] %s", kind, message)
        self.world.create_entity(
            Notification(kind=kind, message=message, remaining=self.lifetime, sequence=self._sequence)
        )

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        expired = []
        for entity, note in self.world.get_component(Notification):
            note.remaining -= dt
            if note.remaining <= 0:
                expired.append(entity)
        for entity in expired:
            self.world.delete_entity(entity, immediate=True)
