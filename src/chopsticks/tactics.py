"""
Tactics: immediate wins and moves that hand the opponent one.
Teaching notes:
- A one-ply look-ahead catches most blunders before any deep search.
"""
from typing import List

from .game_basics import Move, Position, Side, apply_move, evaluate
from .moves import legal_moves


def _wins_for(side: Side) -> int:
    return 1 if side is Side.PLAYER else -1


def immediate_winning_moves(position: Position, side: Side) -> List[Move]:
    wins: List[Move] = []
    for mv in legal_moves(position, side):
        if evaluate(apply_move(position, mv)) == _wins_for(side):
            wins.append(mv)
    return wins


def gives_opponent_immediate_win(position: Position, side: Side, move: Move) -> bool:
    nxt = apply_move(position, move)
    if evaluate(nxt) != 0:
        return False
    return len(immediate_winning_moves(nxt, ~side)) > 0
