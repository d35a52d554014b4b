import logging
from typing import List

from esper import World

from match_master.constants import BOMB_SYMBOL
from match_master.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOMB_PLACED,
    EVENT_BOOSTER_ACTIVATED,
    EVENT_MATCH_EVALUATED,
    EVENT_MATCH_SETTLED,
    EVENT_SELECTION_READY,
    EVENT_SETTLE_COMPLETE,
)
from match_master.systems.board_ops import get_symbol, is_bomb, regenerate_cells, set_symbol, world_random
from match_master.systems.settle import pending_settles, schedule_settle
from match_master.utils.scoring import add_move, add_score
from match_master.utils.selection import clear_selection, get_or_create_match_round
from match_master.utils.state import get_config, get_level_state

logger = logging.getLogger(__name__)


def count_matches(symbols: List[str]) -> int:
    """Count the symbols equal to the first one.

    The first selected card is the reference, not the most common symbol:
    ['star', 'circle', 'circle'] counts 1.
    """
    if not symbols:
        return 0
    reference = symbols[0]
    return sum(1 for symbol in symbols if symbol == reference)


class MatchResolutionSystem:
    """Scores a selection of three or more cards and settles it after a delay.

    Scoring happens as soon as the selection is evaluated. The settle, fired
    by SettleSystem, replaces matched cards with fresh symbols or flips
    unmatched ones back, then empties the selection.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SELECTION_READY, self.on_selection_ready)
        self.event_bus.subscribe(EVENT_SETTLE_COMPLETE, self.on_settle_complete)

    def on_selection_ready(self, sender, **kwargs):
        indices = kwargs.get('indices')
        if not indices:
            return
        self.evaluate(list(indices))

    def evaluate(self, indices: List[int]) -> int:
        config = get_config(self.world)
        symbols = [get_symbol(self.world, index) for index in indices]
        match_count = count_matches(symbols)
        self.event_bus.emit(
            EVENT_MATCH_EVALUATED,
            indices=indices,
            reference=symbols[0],
            match_count=match_count,
        )
        match_round = get_or_create_match_round(self.world)
        # One settle per round, scheduled when the selection first becomes ready.
        if not pending_settles(self.world):
            schedule_settle(self.world, config.settle_delay)
        if match_count < config.min_match:
            return match_count

        if match_count > match_round.awarded:
            add_score(self.world, self.event_bus, match_count - match_round.awarded)
            match_round.awarded = match_count
        if not match_round.move_counted:
            match_round.move_counted = True
            add_move(self.world, self.event_bus)

        if match_count == config.booster_match and not match_round.booster_fired:
            match_round.booster_fired = True
            self.event_bus.emit(EVENT_BOOSTER_ACTIVATED, match_count=match_count)
        if match_count >= config.bomb_match and not match_round.bomb_placed:
            match_round.bomb_placed = True
            self._place_bomb(indices)
        logger.debug("Matched %d of %d selected cards", match_count, len(indices))
        return match_count

    def _place_bomb(self, indices: List[int]) -> None:
        state = get_level_state(self.world)
        bomb_index = world_random(self.world).choice(indices)
        changed = [bomb_index]
        # Only one bomb lives on the board; a preserved older one is replaced.
        previous = state.bomb_index
        if previous is not None and previous != bomb_index and is_bomb(self.world, previous):
            changed = regenerate_cells(self.world, [previous]) + changed
        set_symbol(self.world, bomb_index, BOMB_SYMBOL)
        state.bomb_index = bomb_index
        logger.debug("Bomb placed at %d", bomb_index)
        self.event_bus.emit(EVENT_BOMB_PLACED, index=bomb_index)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='bomb_placed', indices=changed)

    def on_settle_complete(self, sender, **kwargs):
        indices = list(kwargs.get('indices') or [])
        match_round = get_or_create_match_round(self.world)
        matched = match_round.matched
        if matched:
            refreshed = self._refresh_matched(indices)
            if refreshed:
                self.event_bus.emit(EVENT_BOARD_CHANGED, reason='match', indices=refreshed)
        self.event_bus.emit(EVENT_MATCH_SETTLED, indices=indices, matched=matched)
        clear_selection(self.world, self.event_bus, reason='match' if matched else 'flip_back')

    def _refresh_matched(self, indices: List[int]) -> List[int]:
        state = get_level_state(self.world)
        targets = list(indices)
        if state.bomb_index in targets:
            if get_config(self.world).preserve_bomb_on_settle:
                targets.remove(state.bomb_index)
            else:
                state.bomb_index = None
        return regenerate_cells(self.world, targets)
