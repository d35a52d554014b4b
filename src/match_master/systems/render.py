from match_master.rendering.board_renderer import BoardRenderer
from match_master.rendering.hud_renderer import HudRenderer
from match_master.rendering.palette import theme_colors
from match_master.systems.input import visible_buttons
from match_master.ui.layout import BoardGeometry, compute_board_geometry


class RenderSystem:
    """Draws the latest engine snapshot; never mutates engine state."""
    def __init__(self, engine, window):
        self.engine = engine
        self.window = window
        self._board_renderer = BoardRenderer()
        self._hud_renderer = HudRenderer()
        self.geometry: BoardGeometry | None = None

    def background_color(self):
        return theme_colors(self.engine.snapshot().theme)['background']

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        snapshot = self.engine.snapshot()
        self.geometry = compute_board_geometry(self.window.width, self.window.height, snapshot.grid_size)
        self._board_renderer.render(arcade, snapshot, self.geometry, headless)
        if headless:
            return
        self._hud_renderer.render(arcade, snapshot, self.geometry, visible_buttons(snapshot))
