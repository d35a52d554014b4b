from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from match_master.components.booster import Booster
from match_master.components.countdown import Countdown
from match_master.components.game_config import GameConfig
from match_master.components.game_state import GameMode, GameState
from match_master.components.level_history import LevelHistory
from match_master.components.level_state import LevelState
from match_master.components.selection import Selection
from match_master.components.theme import Theme
from match_master.events.bus import EVENT_GAME_MODE_CHANGED, EventBus

C = TypeVar("C")


def get_singleton(world: World, component_type: Type[C]) -> C:
    """Return the single instance of component_type, raising if the world lacks it."""
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} not found")


def get_config(world: World) -> GameConfig:
    return get_singleton(world, GameConfig)


def get_level_state(world: World) -> LevelState:
    return get_singleton(world, LevelState)


def get_booster(world: World) -> Booster:
    return get_singleton(world, Booster)


def get_countdown(world: World) -> Countdown:
    return get_singleton(world, Countdown)


def get_selection(world: World) -> Selection:
    return get_singleton(world, Selection)


def get_history(world: World) -> LevelHistory:
    return get_singleton(world, LevelHistory)


def get_theme(world: World) -> Theme:
    return get_singleton(world, Theme)


def get_game_state(world: World) -> GameState:
    return get_singleton(world, GameState)


def is_level_complete(world: World) -> bool:
    return get_game_state(world).mode == GameMode.LEVEL_COMPLETE


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> bool:
    """Update the global game mode; emit a change event and return True when it differs."""
    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return False
    state.mode = mode
    event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)
    return True
