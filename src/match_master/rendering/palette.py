from typing import Dict, Tuple

Color = Tuple[int, int, int]

# Colours per theme; the theme flag never reaches game rules.
THEME_COLORS: Dict[str, Dict[str, Color]] = {
    'white': {
        'background': (255, 255, 255),
        'text': (0, 0, 0),
        'tile': (156, 163, 175),        # gray-400
        'tile_selected': (147, 197, 253),  # blue-300
        'tile_border': (209, 213, 219),
        'bar_track': (229, 231, 235),
        'bar_fill': (59, 130, 246),
    },
    'black': {
        'background': (0, 0, 0),
        'text': (255, 255, 255),
        'tile': (75, 85, 99),
        'tile_selected': (96, 165, 250),
        'tile_border': (31, 41, 55),
        'bar_track': (55, 65, 81),
        'bar_fill': (96, 165, 250),
    },
}

BUTTON_COLORS: Dict[str, Color] = {
    'theme': (59, 130, 246),       # blue-500
    'hint': (99, 102, 241),
    'results': (107, 114, 128),
    'star': (234, 179, 8),         # yellow-500
    'next_level': (34, 197, 94),   # green-500
}


def theme_colors(theme: str) -> Dict[str, Color]:
    return THEME_COLORS.get(theme, THEME_COLORS['white'])
