from esper import World

from reelmatch.components.move_counter import MoveCounter
from reelmatch.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_MATCH_FOUND,
    EVENT_TILE_SWAP_FINALIZE,
    EVENT_TILE_SWAP_INVALID,
    EVENT_TILE_SWAP_REQUEST,
)
from reelmatch.systems.board_ops import (
    find_all_matches,
    get_board_entity,
    in_bounds,
    is_adjacent,
    swap_tile_types,
)


class BoardSystem:
    """Applies player swaps to the live board and reports the matches they make."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if not src or not dst:
            return
        reason = self._reject_reason(tuple(src), tuple(dst))
        if reason:
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst, reason=reason)
            return
        swap_tile_types(self.world, tuple(src), tuple(dst))
        self.event_bus.emit(EVENT_TILE_SWAP_FINALIZE, src=src, dst=dst)
        for group in find_all_matches(self.world):
            self.event_bus.emit(EVENT_MATCH_FOUND, positions=group, size=len(group))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='swap', positions=[tuple(src), tuple(dst)])

    def _reject_reason(self, src, dst) -> str | None:
        if not (in_bounds(self.world, src) and in_bounds(self.world, dst)):
            return 'out_of_bounds'
        if not is_adjacent(src, dst):
            return 'not_adjacent'
        board_entity = get_board_entity(self.world)
        if board_entity is not None and self.world.has_component(board_entity, MoveCounter):
            if self.world.component_for_entity(board_entity, MoveCounter).finished:
                return 'round_over'
        return None
