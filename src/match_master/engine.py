"""Game engine facade wiring the ECS world, event bus and rule systems."""
from __future__ import annotations

import logging
import random

from match_master.components.game_config import GameConfig
from match_master.events.bus import (
    EventBus,
    EVENT_HINT_REQUEST,
    EVENT_LEVEL_ADVANCE_REQUEST,
    EVENT_RESULTS_REQUEST,
    EVENT_STAR_REQUEST,
    EVENT_THEME_TOGGLE_REQUEST,
    EVENT_TICK,
    EVENT_TILE_CLICK,
)
from match_master.snapshot import GameSnapshot, take_snapshot
from match_master.systems.board import BoardSystem
from match_master.systems.bomb import BombSystem
from match_master.systems.booster import BoosterSystem
from match_master.systems.end_condition import EndConditionSystem
from match_master.systems.interface import InterfaceSystem
from match_master.systems.level import LevelSystem
from match_master.systems.match_resolution import MatchResolutionSystem
from match_master.systems.notification import NotificationSystem
from match_master.systems.selection import SelectionSystem
from match_master.systems.settle import SettleSystem, cancel_settles
from match_master.systems.timer import TimerSystem
from match_master.world import create_world

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns all game state and exposes the actions the presentation layer may dispatch.

    Every action is published on the event bus; systems react synchronously,
    so the state returned by snapshot() is current as soon as a call returns.
    Time only advances through tick(dt).
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        event_bus: EventBus | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.config = config or GameConfig()
        self.world = create_world(self.config, rng=rng)

        # Board first: every other system reads it.
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.selection_system = SelectionSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)
        self.settle_system = SettleSystem(self.world, self.event_bus)
        self.bomb_system = BombSystem(self.world, self.event_bus)
        self.booster_system = BoosterSystem(self.world, self.event_bus, self.board_system)
        self.timer_system = TimerSystem(self.world, self.event_bus)
        self.end_condition_system = EndConditionSystem(self.world, self.event_bus)
        self.level_system = LevelSystem(self.world, self.event_bus, self.board_system)
        self.notification_system = NotificationSystem(self.world, self.event_bus)
        self.interface_system = InterfaceSystem(self.world, self.event_bus)
        self._closed = False
        logger.debug("Engine ready: %s", self.config)

    # Game actions ---------------------------------------------------------

    def on_cell_click(self, index: int) -> None:
        self.event_bus.emit(EVENT_TILE_CLICK, index=index)

    def on_star_click(self) -> None:
        self.event_bus.emit(EVENT_STAR_REQUEST)

    def advance_level(self) -> None:
        self.event_bus.emit(EVENT_LEVEL_ADVANCE_REQUEST)

    def tick(self, dt: float) -> None:
        self.event_bus.emit(EVENT_TICK, dt=dt)

    # Presentation-only actions --------------------------------------------

    def on_toggle_theme(self) -> None:
        self.event_bus.emit(EVENT_THEME_TOGGLE_REQUEST)

    def on_request_hint(self) -> None:
        self.event_bus.emit(EVENT_HINT_REQUEST)

    def on_show_results(self) -> None:
        self.event_bus.emit(EVENT_RESULTS_REQUEST)

    # State ----------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return take_snapshot(self.world)

    def systems(self) -> list:
        return [
            self.board_system,
            self.selection_system,
            self.match_resolution_system,
            self.settle_system,
            self.bomb_system,
            self.booster_system,
            self.timer_system,
            self.end_condition_system,
            self.level_system,
            self.notification_system,
            self.interface_system,
        ]

    def close(self) -> None:
        """Cancel pending deferred actions and detach from the bus."""
        if self._closed:
            return
        self._closed = True
        cancel_settles(self.world)
        for system in self.systems():
            self.event_bus.unsubscribe_owner(system)
