from __future__ import annotations

from esper import World

from reelmatch.components.move_counter import MoveCounter
from reelmatch.constants import SOLVER_MAX_ITERATIONS
from reelmatch.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_GAME_WON,
    EVENT_MOVES_CHANGED,
    EVENT_MOVES_COMPUTED,
    EVENT_SPIN_RESULT,
    EVENT_TILE_SWAP_FINALIZE,
)
from reelmatch.reels.solver import solve_minimum_swaps
from reelmatch.systems.board_ops import board_grid, find_all_matches, get_board_entity


class MoveCounterSystem:
    """Gives each spun board a swap budget equal to its minimum-swap distance.

    The round is won as soon as a match shows on the board and lost
    when the budget runs out first. Boards the solver cannot size get no
    budget and never time out.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        max_iterations: int = SOLVER_MAX_ITERATIONS,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.max_iterations = max_iterations
        self.event_bus.subscribe(EVENT_SPIN_RESULT, self._on_spin_result)
        self.event_bus.subscribe(EVENT_TILE_SWAP_FINALIZE, self._on_swap_finalize)

    def remaining(self) -> int | None:
        counter = self._counter()
        return counter.remaining if counter is not None else None

    def _counter(self) -> MoveCounter | None:
        board_entity = get_board_entity(self.world)
        if board_entity is None or not self.world.has_component(board_entity, MoveCounter):
            return None
        return self.world.component_for_entity(board_entity, MoveCounter)

    def _on_spin_result(self, sender, **kwargs) -> None:
        board_entity = get_board_entity(self.world)
        if board_entity is None:
            return
        moves = solve_minimum_swaps(board_grid(self.world), max_iterations=self.max_iterations)
        counter = self._counter()
        if counter is None:
            counter = MoveCounter(remaining=moves)
            self.world.add_component(board_entity, counter)
        else:
            counter.remaining = moves
            counter.finished = False
        self.event_bus.emit(EVENT_MOVES_COMPUTED, moves=moves)
        # A stop that already shows a match is won before any swap.
        if moves == 0:
            counter.finished = True
            self.event_bus.emit(EVENT_GAME_WON, remaining=0)

    def _on_swap_finalize(self, sender, **kwargs) -> None:
        counter = self._counter()
        if counter is None or counter.finished:
            return
        if counter.remaining is not None:
            counter.remaining = max(counter.remaining - 1, 0)
            self.event_bus.emit(EVENT_MOVES_CHANGED, remaining=counter.remaining)
        if find_all_matches(self.world):
            counter.finished = True
            self.event_bus.emit(EVENT_GAME_WON, remaining=counter.remaining)
        elif counter.remaining == 0:
            counter.finished = True
            self.event_bus.emit(EVENT_GAME_OVER, reason='out_of_moves')
