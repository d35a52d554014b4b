from match_master.events.bus import (
    EventBus,
    EVENT_HINT_REQUEST,
    EVENT_LEVEL_ADVANCE_REQUEST,
    EVENT_MOUSE_PRESS,
    EVENT_RESULTS_REQUEST,
    EVENT_STAR_REQUEST,
    EVENT_THEME_TOGGLE_REQUEST,
    EVENT_TILE_CLICK,
)
from match_master.snapshot import GameSnapshot
from match_master.ui.layout import button_rects, cell_at_point, compute_board_geometry, point_in_rect

BUTTON_EVENTS = {
    'theme': EVENT_THEME_TOGGLE_REQUEST,
    'hint': EVENT_HINT_REQUEST,
    'results': EVENT_RESULTS_REQUEST,
    'star': EVENT_STAR_REQUEST,
    'next_level': EVENT_LEVEL_ADVANCE_REQUEST,
}


def visible_buttons(snapshot: GameSnapshot) -> list[str]:
    """Buttons the HUD currently shows; hidden buttons ignore clicks."""
    visible = ['theme', 'hint', 'results']
    if snapshot.star_available:
        visible.append('star')
    if snapshot.level_complete:
        visible.append('next_level')
    return visible


class InputSystem:
    """Translates raw mouse presses into engine requests."""
    def __init__(self, event_bus: EventBus, window, engine):
        self.event_bus = event_bus
        self.window = window
        self.engine = engine
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Left button (1) only.
        if button != 1:
            return
        snapshot = self.engine.snapshot()
        geometry = compute_board_geometry(self.window.width, self.window.height, snapshot.grid_size)
        rects = button_rects(geometry)
        for action in visible_buttons(snapshot):
            if point_in_rect(rects[action], x, y):
                self.event_bus.emit(BUTTON_EVENTS[action])
                return
        index = cell_at_point(geometry, x, y)
        if index is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, index=index)
