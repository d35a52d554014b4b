import logging

from esper import World

from match_master.components.game_state import GameMode
from match_master.events.bus import (
    EventBus,
    EVENT_LEVEL_COMPLETE,
    EVENT_MOVES_CHANGED,
    EVENT_NOTIFICATION,
    EVENT_SCORE_CHANGED,
    EVENT_TIMER_CHANGED,
)
from match_master.utils.state import (
    get_config,
    get_countdown,
    get_level_state,
    is_level_complete,
    set_game_mode,
)

logger = logging.getLogger(__name__)

COMPLETION_MESSAGES = {
    'target_score': "Level cleared! Target score reached.",
    'moves_exhausted': "Game over! Try again.",
    'time_up': "Game over! Try again.",
}


class EndConditionSystem:
    """Ends the level on target score, exhausted moves or an expired timer.

    Completion is announced once; re-evaluating a completed level is a no-op.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_state_changed)
        self.event_bus.subscribe(EVENT_MOVES_CHANGED, self.on_state_changed)
        self.event_bus.subscribe(EVENT_TIMER_CHANGED, self.on_state_changed)

    def on_state_changed(self, sender, **kwargs):
        self.evaluate()

    def completion_reason(self) -> str | None:
        config = get_config(self.world)
        state = get_level_state(self.world)
        if state.score >= config.target_score:
            return 'target_score'
        if state.moves >= config.max_moves:
            return 'moves_exhausted'
        if get_countdown(self.world).remaining <= 0:
            return 'time_up'
        return None

    def evaluate(self) -> bool:
        """Return True only on the evaluation that completes the level."""
        if is_level_complete(self.world):
            return False
        reason = self.completion_reason()
        if reason is None:
            return False
        state = get_level_state(self.world)
        state.completion_reason = reason
        set_game_mode(self.world, self.event_bus, GameMode.LEVEL_COMPLETE)
        logger.info("Level %d complete (%s) with %d points", state.level, reason, state.score)
        self.event_bus.emit(
            EVENT_LEVEL_COMPLETE,
            level=state.level,
            score=state.score,
            moves=state.moves,
            timer=get_countdown(self.world).remaining,
            reason=reason,
        )
        self.event_bus.emit(EVENT_NOTIFICATION, kind='level_complete', message=COMPLETION_MESSAGES[reason])
        return True
