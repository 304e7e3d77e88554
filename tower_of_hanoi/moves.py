"""
Move engine for the Tower of Hanoi puzzle.

HanoiPuzzle owns the live PuzzleState together with the move counter and
applies single-disk moves under the stacking rules:
1. Only the top disk of a peg can be moved
2. A disk can only go onto an empty peg or onto a strictly larger disk
"""

import logging
from itertools import permutations
from numbers import Integral
from typing import List, Optional, Tuple

from .render import ConsoleRenderer
from .state import PEGS, PuzzleState, check_peg, deserialize, is_solved, serialize

logger = logging.getLogger(__name__)

Move = Tuple[int, int]

# (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2)
BRANCHES: Tuple[Move, ...] = tuple(permutations(PEGS, 2))


def _is_peg(peg) -> bool:
    return isinstance(peg, Integral) and not isinstance(peg, bool) and peg in PEGS


class HanoiPuzzle:
    """
    A puzzle instance: source/spare/destination pegs, disk count and the
    current disk placement.

    The renderer is only used for accepted, non-silent moves. Pass
    renderer=None for a puzzle that never prints (search scratch copies).
    """

    def __init__(
        self,
        source: int = 1,
        spare: int = 2,
        dest: int = 3,
        num_disks: int = 3,
        renderer: Optional[ConsoleRenderer] = None,
        state: Optional[PuzzleState] = None,
    ):
        self.source = check_peg(source)
        self.spare = check_peg(spare)
        self.dest = check_peg(dest)
        if len({self.source, self.spare, self.dest}) != 3:
            raise ValueError(
                f"Source, spare and destination pegs must be 3 different numbers, "
                f"got {source}, {spare}, {dest}"
            )
        self.num_disks = num_disks
        self.renderer = renderer
        if state is None:
            state = PuzzleState.initial(num_disks, self.source)
        elif state.num_disks != num_disks:
            raise ValueError(f"State holds {state.num_disks} disks, puzzle expects {num_disks}")
        self.state = state
        self._start = self.state.copy()
        self.moves = 0
        self.history: List[Move] = []

    @classmethod
    def from_config(cls, config, renderer: Optional[ConsoleRenderer] = None) -> "HanoiPuzzle":
        return cls(config.source, config.spare, config.dest, config.num_disks, renderer=renderer)

    def scratch(self) -> "HanoiPuzzle":
        """Silent copy of this puzzle at its current state, with a fresh counter."""
        return HanoiPuzzle(
            self.source, self.spare, self.dest, self.num_disks,
            renderer=None, state=self.state.copy(),
        )

    @property
    def optimal_moves(self) -> int:
        return 2 ** self.num_disks - 1

    def key(self) -> str:
        return serialize(self.state)

    def start_key(self) -> str:
        return serialize(self._start)

    def solved_key(self) -> str:
        return serialize(PuzzleState.solved(self.num_disks, self.dest))

    def is_solved(self) -> bool:
        return is_solved(self.state, self.dest)

    def ensure_solved(self) -> None:
        if not self.is_solved():
            raise RuntimeError(f"Not solved. Final state: {self.state}")

    def set_key(self, key: str) -> None:
        """Load a StateKey into the live state without touching the counter."""
        loaded = deserialize(key)
        if loaded.num_disks != self.num_disks:
            raise ValueError(f"State key holds {loaded.num_disks} disks, puzzle expects {self.num_disks}")
        self.state.restore(loaded)

    def reset(self, key: Optional[str] = None) -> None:
        """Return to `key` (default: the starting configuration) and zero the counter."""
        if key is None:
            self.state.restore(self._start)
        else:
            self.set_key(key)
        self.moves = 0
        self.history = []

    def show(self) -> None:
        if self.renderer is not None:
            self.renderer.show_towers(self.state)

    def try_move(self, from_peg: int, to_peg: int, silent: bool = False) -> Optional[str]:
        """
        Move the top disk of from_peg onto to_peg if the rules allow it.

        Returns the StateKey after the move, or None if the move is invalid.
        An invalid move leaves the state and the move counter untouched.
        """
        if not (_is_peg(from_peg) and _is_peg(to_peg)):
            logger.debug("Rejected move %r -> %r: peg out of range", from_peg, to_peg)
            return None
        if from_peg == to_peg:
            logger.debug("Rejected move %d -> %d: same peg", from_peg, to_peg)
            return None

        backup = self.state.copy()
        slots = self.state.slots
        num_disks = self.num_disks

        disk = 0
        for i in range(num_disks - 1, -1, -1):
            disk = int(slots[from_peg - 1, i])
            if disk > 0:
                slots[from_peg - 1, i] = 0
                break

        moved = False
        if disk > 0:
            for i in range(num_disks):
                if slots[to_peg - 1, i] == 0:
                    if i == 0 or disk < slots[to_peg - 1, i - 1]:
                        slots[to_peg - 1, i] = disk
                        moved = True
                    break

        if not moved:
            self.state.restore(backup)
            logger.debug("Rejected move %d -> %d in state %s", from_peg, to_peg, self.state)
            return None

        self.moves += 1
        self.history.append((from_peg, to_peg))
        if not silent and self.renderer is not None:
            self.renderer.announce_move(self.moves, from_peg, to_peg, self.state)
        return serialize(self.state)
