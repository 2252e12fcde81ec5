from __future__ import annotations

import random
from typing import Sequence, Tuple

from esper import World

from reelmatch.components.board import Board
from reelmatch.components.board_position import BoardPosition
from reelmatch.components.reel_strip import ReelStrip
from reelmatch.components.spin_state import SpinState
from reelmatch.components.tile import TileType
from reelmatch.constants import (
    DEFAULT_COLUMN_LENGTH,
    GRID_SIZE_CHOICES,
    MIN_TILES_PER_TYPE,
    POOL_MAX_ATTEMPTS,
    POOL_TARGET_SIZE,
)
from reelmatch.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_POOL_DEGRADED,
    EVENT_SESSION_START_REQUEST,
    EVENT_SESSION_STARTED,
    EVENT_SPIN_REQUEST,
    EVENT_SPIN_RESULT,
)
from reelmatch.reels.materializer import normalize_offsets
from reelmatch.reels.session import Session, choose_grid_size, create_session
from reelmatch.systems.board_ops import (
    clear_board,
    get_board_entity,
    get_tile_catalog,
    sync_board_to_offsets,
)


class ReelSystem:
    """Owns the reel session behind the live board and resolves spins.

    A session is rebuilt on every ``start_session``; each spin only draws a new
    stop from the session's pool and writes the resulting tiles into the cells.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        grid_size: int | None = None,
        grid_size_choices: Sequence[int] = GRID_SIZE_CHOICES,
        min_tiles_per_type: int = MIN_TILES_PER_TYPE,
        column_length: int = DEFAULT_COLUMN_LENGTH,
        target_pool_size: int = POOL_TARGET_SIZE,
        max_attempts: int = POOL_MAX_ATTEMPTS,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.grid_size = grid_size
        self.grid_size_choices = tuple(grid_size_choices)
        self.min_tiles_per_type = min_tiles_per_type
        self.column_length = column_length
        self.target_pool_size = target_pool_size
        self.max_attempts = max_attempts
        candidate_rng = rng or getattr(world, "random", None)
        self._rng: random.Random = candidate_rng if isinstance(candidate_rng, random.Random) else random.Random()
        self.event_bus.subscribe(EVENT_SESSION_START_REQUEST, self._on_session_start_request)
        self.event_bus.subscribe(EVENT_SPIN_REQUEST, self._on_spin_request)

    def _on_session_start_request(self, sender, **kwargs) -> None:
        self.start_session(kwargs.get("grid_size"))

    def _on_spin_request(self, sender, **kwargs) -> None:
        self.spin()

    def session(self) -> Session | None:
        board_entity = get_board_entity(self.world)
        if board_entity is None or not self.world.has_component(board_entity, Session):
            return None
        return self.world.component_for_entity(board_entity, Session)

    def current_offsets(self) -> Tuple[int, ...]:
        board_entity = get_board_entity(self.world)
        if board_entity is None:
            return ()
        return tuple(self.world.component_for_entity(board_entity, SpinState).offsets)

    def start_session(self, grid_size: int | None = None) -> Session:
        """Build fresh reel strips and cells, then show a random valid stop."""
        size = grid_size if grid_size is not None else self.grid_size
        if size is None:
            size = choose_grid_size(self._rng, self.grid_size_choices)
        catalog = get_tile_catalog(self.world)
        # Configuration errors surface before the old board is torn down.
        session = create_session(
            size,
            catalog,
            self.min_tiles_per_type,
            self.column_length,
            rng=self._rng,
            target_pool_size=self.target_pool_size,
            max_attempts=self.max_attempts,
        )
        clear_board(self.world)
        self.world.create_entity(Board(rows=size, cols=size), session, SpinState())
        for col, sequence in enumerate(session.sequences):
            self.world.create_entity(ReelStrip(column=col, tiles=tuple(sequence)))
        for row in range(size):
            for col in range(size):
                self.world.create_entity(
                    BoardPosition(row=row, col=col),
                    TileType(type_name=session.sequences[col][row]),
                )
        self.apply_offsets(session.sample_offsets())
        self.event_bus.emit(
            EVENT_SESSION_STARTED,
            grid_size=size,
            pool_size=len(session.pool),
            degraded=session.degraded,
        )
        if session.degraded:
            self.event_bus.emit(EVENT_POOL_DEGRADED, grid_size=size, attempts=session.pool.attempts)
        return session

    def apply_offsets(self, offsets: Sequence[int]) -> Tuple[int, ...]:
        """Show an explicit reel stop; offsets are taken modulo the strip length."""
        session = self._require_session()
        if len(offsets) != session.grid_size:
            raise ValueError(f"Expected {session.grid_size} offsets, got {len(offsets)}")
        folded = normalize_offsets(offsets, session.column_length)
        sync_board_to_offsets(self.world, session.sequences, folded)
        board_entity = get_board_entity(self.world)
        state = self.world.component_for_entity(board_entity, SpinState)
        state.offsets = folded
        return folded

    def spin(self) -> Tuple[int, ...]:
        session = self._require_session()
        offsets = self.apply_offsets(session.sample_offsets())
        board_entity = get_board_entity(self.world)
        state = self.world.component_for_entity(board_entity, SpinState)
        state.spin_count += 1
        self.event_bus.emit(EVENT_SPIN_RESULT, offsets=offsets, spin_count=state.spin_count)
        positions = [(row, col) for row in range(session.grid_size) for col in range(session.grid_size)]
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="spin", positions=positions)
        return offsets

    def _require_session(self) -> Session:
        session = self.session()
        if session is None:
            raise RuntimeError("No reel session; call start_session first")
        return session
