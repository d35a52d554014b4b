import logging

from esper import World

from match_master.components.game_state import GameMode
from match_master.components.level_history import LevelResult
from match_master.events.bus import (
    EventBus,
    EVENT_BOOSTER_CHANGED,
    EVENT_LEVEL_ADVANCE_REQUEST,
    EVENT_LEVEL_ADVANCED,
    EVENT_MOVES_CHANGED,
    EVENT_SCORE_CHANGED,
    EVENT_TIMER_CHANGED,
)
from match_master.systems.board import BoardSystem
from match_master.systems.timer import reset_countdown
from match_master.utils.selection import clear_selection
from match_master.utils.state import (
    get_booster,
    get_history,
    get_level_state,
    is_level_complete,
    set_game_mode,
)

logger = logging.getLogger(__name__)


class LevelSystem:
    """Moves a completed level into history and starts the next one."""
    def __init__(self, world: World, event_bus: EventBus, board_system: BoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.event_bus.subscribe(EVENT_LEVEL_ADVANCE_REQUEST, self.on_advance_request)

    def on_advance_request(self, sender, **kwargs):
        self.advance_level()

    def advance_level(self) -> LevelResult | None:
        if not is_level_complete(self.world):
            logger.debug("Level advance requested before completion")
            return None
        state = get_level_state(self.world)
        result = LevelResult(level=state.level, score=state.score)
        get_history(self.world).results.append(result)

        clear_selection(self.world, self.event_bus, reason='level_advance', forced=True)
        state.level += 1
        state.bomb_index = None
        state.completion_reason = None
        booster = get_booster(self.world)
        booster.progress = 0
        booster.star_available = False
        countdown = reset_countdown(self.world)
        self.board_system.regenerate(reason='level_advance')
        previous_score, previous_moves = state.score, state.moves
        state.score = 0
        state.moves = 0
        # Counters are zeroed before leaving LEVEL_COMPLETE so the change events see fresh play.
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=-previous_score)
        self.event_bus.emit(EVENT_MOVES_CHANGED, moves=0, delta=-previous_moves)
        self.event_bus.emit(EVENT_TIMER_CHANGED, remaining=countdown.remaining)
        self.event_bus.emit(EVENT_BOOSTER_CHANGED, progress=booster.progress, star_available=booster.star_available)
        logger.info("Advanced to level %d (level %d scored %d)", state.level, result.level, result.score)
        self.event_bus.emit(EVENT_LEVEL_ADVANCED, level=state.level, result=result)
        return result
