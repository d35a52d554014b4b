from esper import World

from match_master.components.level_history import LevelResult
from match_master.components.theme import THEMES
from match_master.constants import HINT_MESSAGE
from match_master.events.bus import (
    EventBus,
    EVENT_HINT_REQUEST,
    EVENT_NOTIFICATION,
    EVENT_RESULTS_REQUEST,
    EVENT_THEME_CHANGED,
    EVENT_THEME_TOGGLE_REQUEST,
)
from match_master.utils.state import get_history, get_theme


def format_results(results: list[LevelResult]) -> str:
    if not results:
        return "Results: no levels finished yet."
    summary = ', '.join(f"Level {res.level}: {res.score} points" for res in results)
    return f"Results: {summary}"


class InterfaceSystem:
    """Presentation-only actions: theme toggle, hint and results read-out.

    None of these touch board, score or level state.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_THEME_TOGGLE_REQUEST, self.on_toggle_theme)
        self.event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)
        self.event_bus.subscribe(EVENT_RESULTS_REQUEST, self.on_results_request)

    def on_toggle_theme(self, sender, **kwargs):
        theme = get_theme(self.world)
        theme.name = THEMES[1] if theme.name == THEMES[0] else THEMES[0]
        self.event_bus.emit(EVENT_THEME_CHANGED, theme=theme.name)

    def on_hint_request(self, sender, **kwargs):
        self.event_bus.emit(EVENT_NOTIFICATION, kind='hint', message=HINT_MESSAGE)

    def on_results_request(self, sender, **kwargs):
        message = format_results(list(get_history(self.world).results))
        self.event_bus.emit(EVENT_NOTIFICATION, kind='results', message=message)
