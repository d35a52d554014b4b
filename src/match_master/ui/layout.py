from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from match_master.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOOSTER_BAR_HEIGHT,
    BOTTOM_MARGIN,
    BUTTON_GAP,
    BUTTON_HEIGHT,
    HUD_LINE_HEIGHT,
)

Rect = Tuple[float, float, float, float]  # left, bottom, width, height

# Button order left to right; star and next_level only draw when available.
BUTTON_ACTIONS = ('theme', 'hint', 'results', 'star', 'next_level')
BUTTON_LABELS = {
    'theme': 'Theme',
    'hint': 'Hint',
    'results': 'Results',
    'star': 'Star Reset',
    'next_level': 'Next Level',
}


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    tile_size: int
    start_x: float
    start_y: float
    grid_size: int

    @property
    def width(self) -> float:
        return self.tile_size * self.grid_size

    @property
    def top(self) -> float:
        return self.start_y + self.width


def compute_board_geometry(window_width: int, window_height: int, grid_size: int) -> BoardGeometry:
    """Size the board so it stays within the configured share of the window.

    Input mapping and rendering both go through this so clicks land on the drawn cells.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / grid_size, max_board_h / grid_size))
    if tile_size < 20:
        tile_size = 20
    total_width = grid_size * tile_size
    start_x = (window_width - total_width) / 2
    return BoardGeometry(tile_size=tile_size, start_x=start_x, start_y=BOTTOM_MARGIN, grid_size=grid_size)


def cell_at_point(geometry: BoardGeometry, x: float, y: float) -> int | None:
    """Board index under (x, y); row 0 is drawn at the top of the board."""
    if x < geometry.start_x or x >= geometry.start_x + geometry.width:
        return None
    if y < geometry.start_y or y >= geometry.top:
        return None
    col = int((x - geometry.start_x) // geometry.tile_size)
    row_from_bottom = int((y - geometry.start_y) // geometry.tile_size)
    row = geometry.grid_size - 1 - row_from_bottom
    return row * geometry.grid_size + col


def cell_center(geometry: BoardGeometry, index: int) -> Tuple[float, float]:
    row, col = divmod(index, geometry.grid_size)
    cx = geometry.start_x + col * geometry.tile_size + geometry.tile_size / 2
    cy = geometry.start_y + (geometry.grid_size - 1 - row) * geometry.tile_size + geometry.tile_size / 2
    return cx, cy


def booster_bar_rect(geometry: BoardGeometry) -> Rect:
    return (geometry.start_x, geometry.top + BUTTON_GAP, geometry.width, BOOSTER_BAR_HEIGHT)


def button_rects(geometry: BoardGeometry) -> Dict[str, Rect]:
    """Row of equally sized buttons above the booster bar."""
    _, bar_bottom, _, bar_height = booster_bar_rect(geometry)
    bottom = bar_bottom + bar_height + BUTTON_GAP
    count = len(BUTTON_ACTIONS)
    width = (geometry.width - BUTTON_GAP * (count - 1)) / count
    rects: Dict[str, Rect] = {}
    for slot, action in enumerate(BUTTON_ACTIONS):
        left = geometry.start_x + slot * (width + BUTTON_GAP)
        rects[action] = (left, bottom, width, BUTTON_HEIGHT)
    return rects


def stats_baseline(geometry: BoardGeometry) -> float:
    """Baseline y for the score/moves/time line above the buttons."""
    return geometry.top + BUTTON_GAP * 3 + BOOSTER_BAR_HEIGHT + BUTTON_HEIGHT + HUD_LINE_HEIGHT / 2


def point_in_rect(rect: Rect, x: float, y: float) -> bool:
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height
