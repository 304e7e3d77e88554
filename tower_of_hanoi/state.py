"""
Tower of Hanoi state model.

This module keeps the pieces every solver builds on:
- PuzzleState: the three pegs as a fixed-size slot array
- StateKey encoding/decoding (serialize / deserialize)
- Solved-state check
"""

import re
from typing import List, Sequence

import numpy as np


NUM_PEGS = 3
PEGS = (1, 2, 3)

_GROUP_PATTERN = re.compile(r'\(((?:(?:0|[1-9][0-9]*),)*)\)')


class StateKeyError(ValueError):
    """Raised when a StateKey string cannot be decoded into a legal state."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Invalid state key {key!r}: {reason}")
        self.key = key
        self.reason = reason


def check_peg(peg: int) -> int:
    if peg not in PEGS:
        raise ValueError(f"Invalid peg number: {peg}. Must be between 1 and {NUM_PEGS}")
    return peg


# ============================================================================
# Puzzle State
# ============================================================================


class PuzzleState:
    """
    Disk placement across the three pegs.

    slots[peg - 1, i] is the disk in slot i + 1 of peg, counted from the
    bottom; 0 marks an empty slot. Disks are numbered 1 (smallest) to
    num_disks (largest).
    """

    def __init__(self, num_disks: int, slots: np.ndarray = None):
        if num_disks < 1:
            raise ValueError(f"Number of disks must be greater than 0, got {num_disks}")
        self.num_disks = num_disks
        if slots is None:
            self.slots = np.zeros((NUM_PEGS, num_disks), dtype=np.int64)
        else:
            self.slots = np.array(slots, dtype=np.int64).reshape(NUM_PEGS, num_disks)

    @classmethod
    def initial(cls, num_disks: int, peg: int) -> "PuzzleState":
        """All disks stacked on `peg`, largest at the bottom."""
        state = cls(num_disks)
        state.slots[check_peg(peg) - 1] = np.arange(num_disks, 0, -1)
        return state

    @classmethod
    def solved(cls, num_disks: int, dest_peg: int) -> "PuzzleState":
        return cls.initial(num_disks, dest_peg)

    @classmethod
    def from_pegs(cls, pegs: Sequence[Sequence[int]], num_disks: int = None) -> "PuzzleState":
        """Build a state from three bottom-to-top disk lists, e.g. [[3, 2, 1], [], []]."""
        if len(pegs) != NUM_PEGS:
            raise ValueError(f"State must have exactly {NUM_PEGS} pegs, got {len(pegs)}")
        if num_disks is None:
            num_disks = sum(len(p) for p in pegs)
        state = cls(num_disks)
        for idx, peg in enumerate(pegs):
            if len(peg) > num_disks:
                raise ValueError(f"Peg {idx + 1} holds {len(peg)} disks, more than {num_disks}")
            state.slots[idx, :len(peg)] = peg
        state.validate()
        return state

    def copy(self) -> "PuzzleState":
        return PuzzleState(self.num_disks, self.slots.copy())

    def restore(self, snapshot: "PuzzleState") -> None:
        """Overwrite this state in place with a snapshot taken by copy()."""
        if snapshot.num_disks != self.num_disks:
            raise ValueError(
                f"Cannot restore a {snapshot.num_disks}-disk snapshot into a {self.num_disks}-disk state"
            )
        np.copyto(self.slots, snapshot.slots)

    def peg(self, peg: int) -> List[int]:
        """Disks on `peg`, bottom to top."""
        row = self.slots[check_peg(peg) - 1]
        return [int(d) for d in row if d > 0]

    def height(self, peg: int) -> int:
        return int(np.count_nonzero(self.slots[check_peg(peg) - 1]))

    def top(self, peg: int) -> int:
        """Top disk of `peg`, or 0 when the peg is empty."""
        height = self.height(peg)
        if height == 0:
            return 0
        return int(self.slots[peg - 1, height - 1])

    def pegs(self) -> List[List[int]]:
        return [self.peg(p) for p in PEGS]

    def validate(self) -> None:
        """
        Check the three placement invariants:
        1. occupied slots on every peg are contiguous from the bottom
        2. disk sizes strictly decrease from bottom to top
        3. every disk 1..num_disks is present exactly once
        """
        for idx, row in enumerate(self.slots):
            height = int(np.count_nonzero(row))
            if np.any(row[:height] == 0) or np.any(row[height:] != 0):
                raise ValueError(f"Peg {idx + 1} has a gap between disks: {row.tolist()}")
            if np.any(row < 0):
                raise ValueError(f"Peg {idx + 1} holds a negative disk size: {row.tolist()}")
            occupied = row[:height]
            if np.any(np.diff(occupied) >= 0):
                raise ValueError(
                    f"Invalid peg ordering {occupied.tolist()}: larger disks must be below smaller disks"
                )

        all_disks = sorted(int(d) for d in self.slots.flatten() if d > 0)
        expected = list(range(1, self.num_disks + 1))
        if all_disks != expected:
            raise ValueError(
                f"State must contain each disk exactly once (expected {expected}, got {all_disks})"
            )

    def __eq__(self, other):
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self.num_disks == other.num_disks and np.array_equal(self.slots, other.slots)

    # Slots change in place, so states are not hashable; use serialize() as a key
    __hash__ = None

    def __str__(self):
        return " ".join(f"{p}:{self.peg(p)}" for p in PEGS)

    def __repr__(self):
        return f"PuzzleState({serialize(self)!r})"


# ============================================================================
# StateKey encoding
# ============================================================================


def serialize(state: PuzzleState) -> str:
    """
    Encode a state as its StateKey:

        (s1,s2,...,sN,)(s1,s2,...,sN,)(s1,s2,...,sN,)

    one group per peg in peg order, every slot listed bottom to top with 0 for
    an empty slot.
    """
    return "".join(
        "(" + "".join(f"{int(d)}," for d in row) + ")"
        for row in state.slots
    )


def deserialize(key: str) -> PuzzleState:
    """Decode a StateKey produced by serialize(); raises StateKeyError otherwise."""
    if not isinstance(key, str):
        raise StateKeyError(repr(key), "state key must be a string")

    groups = []
    pos = 0
    while pos < len(key):
        match = _GROUP_PATTERN.match(key, pos)
        if match is None:
            raise StateKeyError(key, f"unexpected text at position {pos}")
        groups.append([int(d) for d in match.group(1).split(",")[:-1]])
        pos = match.end()

    if len(groups) != NUM_PEGS:
        raise StateKeyError(key, f"expected {NUM_PEGS} peg groups, found {len(groups)}")

    num_disks = len(groups[0])
    if num_disks == 0:
        raise StateKeyError(key, "peg groups must list at least one slot")
    if any(len(g) != num_disks for g in groups):
        raise StateKeyError(key, "peg groups must all list the same number of slots")
    if any(d > num_disks for g in groups for d in g):
        raise StateKeyError(key, f"disk sizes must not exceed {num_disks}")

    state = PuzzleState(num_disks, np.array(groups))
    try:
        state.validate()
    except ValueError as e:
        raise StateKeyError(key, str(e)) from e
    return state


def is_solved(state: PuzzleState, dest_peg: int) -> bool:
    """True iff dest_peg holds num_disks, ..., 1 from the bottom up."""
    row = state.slots[check_peg(dest_peg) - 1]
    return bool(np.array_equal(row, np.arange(state.num_disks, 0, -1)))
