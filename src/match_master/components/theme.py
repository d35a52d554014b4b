from dataclasses import dataclass

THEMES = ('white', 'black')

@dataclass(slots=True)
class Theme:
    """Cosmetic light/dark flag; never read by game rules."""
    name: str = 'white'
