from esper import World

from match_master.components.countdown import Countdown
from match_master.events.bus import (
    EventBus,
    EVENT_MOVES_CHANGED,
    EVENT_SCORE_CHANGED,
    EVENT_TICK,
    EVENT_TIMER_CHANGED,
)
from match_master.utils.state import get_config, get_countdown, get_level_state

# Float tolerance so ten ticks of 0.1s count as one second.
_EPSILON = 1e-9


def reset_countdown(world: World) -> Countdown:
    """Replace the level countdown with a fresh one at the configured limit."""
    for entity, _ in list(world.get_component(Countdown)):
        world.remove_component(entity, Countdown)
        world.add_component(entity, Countdown(remaining=get_config(world).time_limit))
        break
    return get_countdown(world)


class TimerSystem:
    """Counts the level timer down once per second while play can continue.

    The guard is re-checked before every one-second step, so the countdown
    stops inside the tick in which an end condition becomes true. A score or
    move change restarts the current second.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_state_changed)
        self.event_bus.subscribe(EVENT_MOVES_CHANGED, self.on_state_changed)

    def is_running(self) -> bool:
        config = get_config(self.world)
        state = get_level_state(self.world)
        countdown = get_countdown(self.world)
        return (
            countdown.remaining > 0
            and state.score < config.target_score
            and state.moves < config.max_moves
        )

    def on_state_changed(self, sender, **kwargs):
        get_countdown(self.world).elapsed = 0.0

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        countdown = get_countdown(self.world)
        if not self.is_running():
            countdown.elapsed = 0.0
            return
        countdown.elapsed += dt
        while countdown.elapsed + _EPSILON >= 1.0 and self.is_running():
            countdown.elapsed -= 1.0
            countdown.remaining -= 1
            self.event_bus.emit(EVENT_TIMER_CHANGED, remaining=countdown.remaining)
        if not self.is_running():
            countdown.elapsed = 0.0
