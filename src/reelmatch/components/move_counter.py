from dataclasses import dataclass

@dataclass(slots=True)
class MoveCounter:
    """Swap budget for the current board.

    remaining: swaps left before the round is lost; None when the solver could
        not determine a budget.
    finished: set once the round was won or lost so later swaps are ignored.
    """
    remaining: int | None = None
    finished: bool = False
