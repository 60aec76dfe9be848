"""
Move generation for the side to move.
Teaching notes:
- Offense first (a striker must be alive), then the two defensive moves: split and merge.
- Generation order matters: the search keeps the first move reaching the best score.
- The Player's second cell is gated on the Player's own cells, not on its targets,
  so it may strike an empty Computer cell and bring it back to life.
"""
from typing import List

from .game_basics import Action, Move, Position, Side, evaluate


def _attacks(position: Position, side: Side) -> List[Move]:
    p0, p1, c0, c1 = position.cells
    moves: List[Move] = []
    if side is Side.PLAYER:
        if p0 != 0:
            if c0 != 0:
                moves.append(Move(0, 2, Action.ATTACK))
            if c1 != 0:
                moves.append(Move(0, 3, Action.ATTACK))
        if p1 != 0:
            if p0 != 0:
                moves.append(Move(1, 2, Action.ATTACK))
            if p1 != 0:
                moves.append(Move(1, 3, Action.ATTACK))
    else:
        if c0 != 0:
            if p0 != 0:
                moves.append(Move(2, 0, Action.ATTACK))
            if p1 != 0:
                moves.append(Move(2, 1, Action.ATTACK))
        if c1 != 0:
            if p0 != 0:
                moves.append(Move(3, 0, Action.ATTACK))
            if p1 != 0:
                moves.append(Move(3, 1, Action.ATTACK))
    return moves


def _own_cells(position: Position, side: Side):
    """Return the mover's two cells and their unified indices."""
    if side is Side.PLAYER:
        return position.player, (0, 1)
    return position.computer, (2, 3)


def _splits(position: Position, side: Side) -> List[Move]:
    (a, b), (i, j) = _own_cells(position, side)
    if a == 0:
        if b % 2 == 0:
            return [Move(j, i, Action.SPLIT)]
    elif b == 0:
        if a % 2 == 0:
            return [Move(i, j, Action.SPLIT)]
    return []


def _merges(position: Position, side: Side) -> List[Move]:
    (a, b), (i, j) = _own_cells(position, side)
    if a in (1, 2) and a == b:
        return [Move(i, j, Action.MERGE), Move(j, i, Action.MERGE)]
    return []


def legal_moves(position: Position, side: Side) -> List[Move]:
    if evaluate(position) != 0:
        return []
    return _attacks(position, side) + _splits(position, side) + _merges(position, side)
