from __future__ import annotations

import random
from typing import Mapping

from match_master.components.game_config import GameConfig
from match_master.engine import GameEngine
from match_master.systems.board_ops import get_symbol_registry, set_symbol


def make_engine(config: GameConfig | None = None, *, seed: int = 7, **overrides) -> GameEngine:
    """Engine with a seeded RNG; keyword overrides build a GameConfig."""
    if overrides:
        config = GameConfig(**overrides)
    return GameEngine(config, rng=random.Random(seed))


def set_cells(engine: GameEngine, symbols: Mapping[int, str]) -> None:
    for index, type_name in symbols.items():
        assert set_symbol(engine.world, index, type_name)


def only_spawn(engine: GameEngine, *type_names: str) -> None:
    """Restrict the generator so regenerated cells are recognisable."""
    get_symbol_registry(engine.world).set_spawnable(type_names)


def drive_ticks(engine: GameEngine, count: int = 10, dt: float = 0.1) -> None:
    for _ in range(count):
        engine.tick(dt)


def record(engine: GameEngine, event_name: str) -> list[dict]:
    """Collect the payload of every emission of event_name."""
    received: list[dict] = []
    engine.event_bus.subscribe(event_name, lambda sender, **payload: received.append(payload))
    return received
