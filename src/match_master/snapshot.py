"""Immutable, render-ready view of the engine state."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from esper import World

from match_master.components.level_history import LevelResult
from match_master.systems.board_ops import board_symbols, get_board, get_symbol_registry
from match_master.systems.notification import latest_notification
from match_master.systems.settle import pending_settles
from match_master.utils.state import (
    get_booster,
    get_config,
    get_countdown,
    get_history,
    get_level_state,
    get_selection,
    get_theme,
    is_level_complete,
)


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    grid_size: int
    board: Tuple[str, ...]
    glyphs: Tuple[str, ...]
    selection: Tuple[int, ...]
    score: int
    moves: int
    max_moves: int
    target_score: int
    timer: int
    level: int
    slider_value: int
    star_available: bool
    bomb_index: Optional[int]
    level_complete: bool
    completion_reason: Optional[str]
    settle_pending: bool
    history: Tuple[LevelResult, ...]
    theme: str
    notification: Optional[str]

    def is_selected(self, index: int) -> bool:
        return index in self.selection


def take_snapshot(world: World) -> GameSnapshot:
    config = get_config(world)
    registry = get_symbol_registry(world)
    state = get_level_state(world)
    booster = get_booster(world)
    board = tuple(board_symbols(world))
    note = latest_notification(world)
    return GameSnapshot(
        grid_size=get_board(world).cols,
        board=board,
        glyphs=tuple(registry.glyph_for(name) for name in board),
        selection=tuple(get_selection(world).indices),
        score=state.score,
        moves=state.moves,
        max_moves=config.max_moves,
        target_score=config.target_score,
        timer=get_countdown(world).remaining,
        level=state.level,
        slider_value=booster.progress,
        star_available=booster.star_available,
        bomb_index=state.bomb_index,
        level_complete=is_level_complete(world),
        completion_reason=state.completion_reason,
        settle_pending=bool(pending_settles(world)),
        history=tuple(get_history(world).results),
        theme=get_theme(world).name,
        notification=note.message if note else None,
    )
