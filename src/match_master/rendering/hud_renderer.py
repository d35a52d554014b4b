from __future__ import annotations

from typing import TYPE_CHECKING

from match_master.rendering.palette import BUTTON_COLORS, theme_colors
from match_master.ui.layout import BUTTON_LABELS, booster_bar_rect, button_rects, stats_baseline

if TYPE_CHECKING:
    from match_master.snapshot import GameSnapshot
    from match_master.ui.layout import BoardGeometry


def stats_line(snapshot: GameSnapshot) -> str:
    return (
        f"Level {snapshot.level}   Score: {snapshot.score}   "
        f"Moves: {snapshot.moves}/{snapshot.max_moves}   Time: {snapshot.timer}s"
    )


class HudRenderer:
    """Stats line, booster bar, action buttons and the current notification."""

    def render(self, arcade, snapshot: GameSnapshot, geometry: BoardGeometry, visible: list[str]) -> None:
        colors = theme_colors(snapshot.theme)
        arcade.draw_text(
            stats_line(snapshot),
            geometry.start_x + geometry.width / 2,
            stats_baseline(geometry),
            colors['text'],
            16,
            anchor_x='center',
        )

        left, bottom, width, height = booster_bar_rect(geometry)
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, colors['bar_track'])
        fill_width = width * max(0, min(snapshot.slider_value, 100)) / 100
        if fill_width > 0:
            arcade.draw_lbwh_rectangle_filled(left, bottom, fill_width, height, colors['bar_fill'])
        arcade.draw_text(
            f"{snapshot.slider_value}% Complete",
            left + width + 8,
            bottom,
            colors['text'],
            11,
        )

        rects = button_rects(geometry)
        for action in visible:
            b_left, b_bottom, b_width, b_height = rects[action]
            arcade.draw_lbwh_rectangle_filled(b_left, b_bottom, b_width, b_height, BUTTON_COLORS[action])
            arcade.draw_text(
                BUTTON_LABELS[action],
                b_left + b_width / 2,
                b_bottom + b_height / 2,
                (255, 255, 255),
                12,
                anchor_x='center',
                anchor_y='center',
            )

        if snapshot.notification:
            arcade.draw_text(
                snapshot.notification,
                geometry.start_x + geometry.width / 2,
                geometry.start_y + geometry.width / 2,
                colors['text'],
                20,
                anchor_x='center',
                anchor_y='center',
                bold=True,
            )
