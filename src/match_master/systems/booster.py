import logging

from esper import World

from match_master.events.bus import (
    EventBus,
    EVENT_BOOSTER_ACTIVATED,
    EVENT_BOOSTER_CHANGED,
    EVENT_NOTIFICATION,
    EVENT_STAR_REQUEST,
    EVENT_STAR_USED,
)
from match_master.systems.board import BoardSystem
from match_master.utils.scoring import set_score
from match_master.utils.selection import clear_selection
from match_master.utils.state import get_booster, get_config, get_level_state

logger = logging.getLogger(__name__)

BOOSTER_MESSAGE = "Booster activated! Score increased!"


class BoosterSystem:
    """Advances the booster meter on exact four-matches and runs the star reset."""
    def __init__(self, world: World, event_bus: EventBus, board_system: BoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.event_bus.subscribe(EVENT_BOOSTER_ACTIVATED, self.on_booster_activated)
        self.event_bus.subscribe(EVENT_STAR_REQUEST, self.on_star_request)

    def on_booster_activated(self, sender, **kwargs):
        config = get_config(self.world)
        booster = get_booster(self.world)
        booster.progress = min(booster.progress + config.booster_step, config.booster_max)
        booster.star_available = True
        self.event_bus.emit(
            EVENT_BOOSTER_CHANGED,
            progress=booster.progress,
            star_available=booster.star_available,
        )
        self.event_bus.emit(EVENT_NOTIFICATION, kind='booster', message=BOOSTER_MESSAGE)

    def on_star_request(self, sender, **kwargs):
        booster = get_booster(self.world)
        if not booster.star_available:
            logger.debug("Star reset requested while unavailable")
            return
        forfeited = get_level_state(self.world).score
        booster.star_available = False
        get_level_state(self.world).bomb_index = None
        clear_selection(self.world, self.event_bus, reason='star', forced=True)
        self.board_system.regenerate(reason='star')
        set_score(self.world, self.event_bus, 0)
        logger.debug("Star reset forfeited %d points", forfeited)
        self.event_bus.emit(
            EVENT_BOOSTER_CHANGED,
            progress=booster.progress,
            star_available=booster.star_available,
        )
        self.event_bus.emit(EVENT_STAR_USED, forfeited_score=forfeited)
