"""
Depth-bounded minimax, from the Player's perspective.
Tie-break policy:
- The Player maximizes and the Computer minimizes the score.
- A move replaces the current best only on strict improvement, so the first
  generated move reaching the best score is the one reported.
- Positions not decided within the depth bound score 0.
"""
import logging
from collections import deque
from typing import Dict, List, NamedTuple, Tuple

from .game_basics import (
    INITIAL_POSITION,
    NO_MOVE,
    Move,
    Position,
    Side,
    apply_move,
    evaluate,
    game_over,
    is_valid_position,
    serialize_position,
)
from .moves import legal_moves


class SearchResult(NamedTuple):
    score: int
    move: Move


def _minimax(position: Position, depth: int, mover: Side) -> SearchResult:
    if depth == 0 or game_over(position):
        return SearchResult(evaluate(position), NO_MOVE)
    if mover is Side.PLAYER:
        best_score, best = -2, NO_MOVE
        for mv in legal_moves(position, mover):
            score = _minimax(apply_move(position, mv), depth - 1, Side.COMPUTER).score
            if score > best_score:
                best_score, best = score, mv
    else:
        best_score, best = 2, NO_MOVE
        for mv in legal_moves(position, mover):
            score = _minimax(apply_move(position, mv), depth - 1, Side.PLAYER).score
            if score < best_score:
                best_score, best = score, mv
    return SearchResult(best_score, best)


def search(position: Position, depth: int, mover: Side) -> SearchResult:
    """Search ``depth`` plies ahead with ``mover`` to play.

    The returned move is the one to play in ``position`` itself.
    """
    if depth < 0:
        raise ValueError(f"Search depth must be non-negative, got {depth}")
    if not is_valid_position(position):
        raise ValueError(f"Invalid position: {position!r}")
    res = _minimax(position, depth, mover)
    logging.debug(
        "search position=%s mover=%s depth=%d -> score=%d move=%s",
        serialize_position(position), mover.value, depth, res.score, list(res.move.cells),
    )
    return res


def best_move(player, computer, depth: int, mover: Side) -> SearchResult:
    return search(Position(tuple(player), tuple(computer)), depth, mover)


def state_key(position: Position, side: Side) -> str:
    return serialize_position(position) + side.code


def reachable_positions(position: Position = INITIAL_POSITION,
                        mover: Side = Side.COMPUTER) -> List[Tuple[Position, Side]]:
    """Enumerate every (position, side to move) reachable from the given state."""
    start = (position, mover)
    order = [start]
    seen = {start}
    q = deque([start])
    while q:
        pos, side = q.popleft()
        for mv in legal_moves(pos, side):
            child = (apply_move(pos, mv), ~side)
            if child not in seen:
                seen.add(child)
                order.append(child)
                q.append(child)
    return order


def solve_all_reachable(depth: int, position: Position = INITIAL_POSITION,
                        mover: Side = Side.COMPUTER) -> Dict[str, SearchResult]:
    solved = {}
    for pos, side in reachable_positions(position, mover):
        solved[state_key(pos, side)] = search(pos, depth, side)
    return solved
