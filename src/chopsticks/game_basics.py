"""
Game basics: sides, actions, positions, moves, evaluation and the transition rule.
Teaching notes:
- A position holds two cells per side. Moves address cells through a unified index:

      +---+---+
      | 2 | 3 |  Computer
      +---+---+
      | 0 | 1 |  Player
      +---+---+

- Scores are always from the Player's perspective: -1 lost, 0 undecided, +1 won.
- Positions are tuples; applying a move builds a new one.
"""
from enum import Enum
from typing import NamedTuple, Optional, Tuple

MODULUS = 5


class Side(Enum):
    PLAYER = "player"
    COMPUTER = "computer"

    def __invert__(self) -> "Side":
        return Side.COMPUTER if self is Side.PLAYER else Side.PLAYER

    def flip(self) -> "Side":
        return ~self

    @property
    def code(self) -> str:
        return "P" if self is Side.PLAYER else "C"

    @classmethod
    def parse(cls, text: str) -> "Side":
        key = (text or "").strip().lower()
        if key in ("player", "p"):
            return cls.PLAYER
        if key in ("computer", "c"):
            return cls.COMPUTER
        raise ValueError(f"Unknown side: {text!r}")


class Action(Enum):
    ATTACK = "attack"
    MERGE = "merge"
    SPLIT = "split"


class Position(NamedTuple):
    player: Tuple[int, int]
    computer: Tuple[int, int]

    @property
    def cells(self) -> Tuple[int, int, int, int]:
        return (self.player[0], self.player[1], self.computer[0], self.computer[1])

    @classmethod
    def from_cells(cls, cells) -> "Position":
        return cls(player=(cells[0], cells[1]), computer=(cells[2], cells[3]))


class Move(NamedTuple):
    source: int
    target: int
    action: Optional[Action]

    @property
    def cells(self) -> Tuple[int, int]:
        return (self.source, self.target)


NO_MOVE = Move(0, 0, None)
INITIAL_POSITION = Position(player=(2, 2), computer=(1, 0))


def serialize_position(position: Position) -> str:
    return ''.join(str(cell) for cell in position.cells)


def parse_position(text: str) -> Position:
    raw = (text or "").strip()
    halves = raw.split("|")
    if len(halves) == 2 and all(len(h) == 2 for h in halves):
        raw = "".join(halves)
    if len(raw) != 4 or any(c not in "0123456789" for c in raw):
        raise ValueError(f"Invalid position {text!r}: expected 4 digits such as 2210 or 22|10")
    return Position.from_cells([int(c) for c in raw])


def is_valid_position(position) -> bool:
    try:
        sides = (position.player, position.computer)
    except AttributeError:
        return False
    for cells in sides:
        if len(cells) != 2:
            return False
        for v in cells:
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                return False
    return True


def evaluate(position: Position) -> int:
    # Player loss is checked first, so a double wipe-out counts against the Player.
    if tuple(position.player) == (0, 0):
        return -1
    if tuple(position.computer) == (0, 0):
        return 1
    return 0


def game_over(position: Position) -> bool:
    return tuple(position.player) == (0, 0) or tuple(position.computer) == (0, 0)


def apply_move(position: Position, move: Move) -> Position:
    """Return the position reached by playing ``move``.

    The move is trusted to come from the move generator for this position;
    nothing is re-validated here.
    """
    cells = list(position.cells)
    src, dst = move.source, move.target
    if move.action is Action.ATTACK:
        cells[dst] = (cells[dst] + cells[src]) % MODULUS
    elif move.action is Action.MERGE:
        cells[src] = 0
        cells[dst] *= 2
    elif move.action is Action.SPLIT:
        # floor division twice: an odd cell loses one unit
        cells[dst] = cells[src] // 2
        cells[src] //= 2
    else:
        raise ValueError(f"Unknown action: {move.action!r}")
    return Position.from_cells(cells)
