import random

from esper import World

from match_master.components.booster import Booster
from match_master.components.countdown import Countdown
from match_master.components.game_config import GameConfig
from match_master.components.game_state import GameMode, GameState
from match_master.components.level_history import LevelHistory
from match_master.components.level_state import LevelState
from match_master.components.selection import Selection
from match_master.components.symbol_registry import SymbolRegistry
from match_master.components.symbol_types import SymbolTypes
from match_master.components.theme import Theme
from match_master.constants import BOMB_GLYPH, BOMB_SYMBOL, SYMBOL_GLYPHS


def create_world(
    config: GameConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the ECS world with the state entity and the symbol registry.

    The board itself is laid out by BoardSystem.
    """
    config = config or GameConfig()
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(
        GameState(mode=GameMode.PLAYING),
        config,
        LevelState(),
        Booster(),
        Countdown(remaining=config.time_limit),
        Selection(),
        LevelHistory(),
        Theme(),
    )

    # Bomb is defined (so it has a glyph) but never spawned by the generator.
    glyphs = dict(SYMBOL_GLYPHS)
    glyphs[BOMB_SYMBOL] = BOMB_GLYPH
    world.create_entity(
        SymbolRegistry(),
        SymbolTypes(glyphs=glyphs, spawnable=list(SYMBOL_GLYPHS.keys())),
    )
    return world
