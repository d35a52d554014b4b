from __future__ import annotations

from typing import TYPE_CHECKING

from match_master.constants import TILE_PADDING
from match_master.rendering.palette import theme_colors
from match_master.ui.layout import cell_center

if TYPE_CHECKING:
    from match_master.snapshot import GameSnapshot
    from match_master.ui.layout import BoardGeometry


class BoardRenderer:
    def __init__(self, padding: int = TILE_PADDING):
        self._padding = padding
        # index -> (cx, cy) of the last frame, kept for hit-testing tools and tests
        self.last_draw_coords: dict[int, tuple[float, float]] = {}

    def render(self, arcade, snapshot: GameSnapshot, geometry: BoardGeometry, headless: bool) -> None:
        colors = theme_colors(snapshot.theme)
        size = geometry.tile_size - self._padding * 2
        self.last_draw_coords = {}
        for index, glyph in enumerate(snapshot.glyphs):
            cx, cy = cell_center(geometry, index)
            self.last_draw_coords[index] = (cx, cy)
            if headless:
                continue
            fill = colors['tile_selected'] if snapshot.is_selected(index) else colors['tile']
            left = cx - size / 2
            bottom = cy - size / 2
            arcade.draw_lbwh_rectangle_filled(left, bottom, size, size, fill)
            arcade.draw_lbwh_rectangle_outline(left, bottom, size, size, colors['tile_border'], border_width=1)
            arcade.draw_text(
                glyph,
                cx,
                cy,
                colors['text'],
                int(geometry.tile_size * 0.45),
                anchor_x='center',
                anchor_y='center',
            )
