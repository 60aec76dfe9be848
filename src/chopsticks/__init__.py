"""chopsticks package.

Rules, move generation and a depth-bounded minimax solver for a four-cell
combat game, plus position exports and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .datasets import ExportArgs, run_export
from .game_basics import (
    INITIAL_POSITION,
    NO_MOVE,
    Action,
    Move,
    Position,
    Side,
    apply_move,
    evaluate,
    game_over,
    parse_position,
)
from .moves import legal_moves
from .solver import SearchResult, best_move, search, solve_all_reachable

__all__ = [
    "Action",
    "Move",
    "Position",
    "Side",
    "INITIAL_POSITION",
    "NO_MOVE",
    "SearchResult",
    "apply_move",
    "best_move",
    "evaluate",
    "game_over",
    "legal_moves",
    "parse_position",
    "search",
    "solve_all_reachable",
    "run_export",
    "ExportArgs",
]
