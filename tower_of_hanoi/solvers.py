"""
Tower of Hanoi solvers.

- hanoi / solve_recursive: classic divide-and-conquer, always 2^n - 1 moves
- search_backward / solve_bfs: breadth-first search over puzzle states, from
  the solved configuration back to the current one, then replayed forward

Both work on an explicit HanoiPuzzle and issue their moves through
HanoiPuzzle.try_move.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from tqdm import tqdm

from .moves import BRANCHES, HanoiPuzzle, Move
from .state import NUM_PEGS, PuzzleState

logger = logging.getLogger(__name__)


def _say(puzzle: HanoiPuzzle, text: str) -> None:
    if puzzle.renderer is not None:
        puzzle.renderer.write(text)


# ============================================================================
# Recursive Solver
# ============================================================================


def hanoi(puzzle: HanoiPuzzle, peg_from: int, peg_spare: int, peg_to: int, disks: int) -> None:
    """
    Recursive solution:
    If there is just one disk to move, move it from peg_from to peg_to.
    Otherwise:
    1) Move all the disks except the largest one to the spare peg,
       using the destination peg as a swap.
    2) Move the largest disk to the destination peg.
    3) Move the disks from the spare peg to the destination peg,
       using the source peg as a swap.
    """
    if disks == 1:
        puzzle.try_move(peg_from, peg_to)
    else:
        hanoi(puzzle, peg_from, peg_to, peg_spare, disks - 1)
        puzzle.try_move(peg_from, peg_to)
        hanoi(puzzle, peg_spare, peg_from, peg_to, disks - 1)


def solve_recursive(puzzle: HanoiPuzzle) -> int:
    """Solve from the puzzle's starting configuration; returns the number of moves issued."""
    before = puzzle.moves
    hanoi(puzzle, puzzle.source, puzzle.spare, puzzle.dest, puzzle.num_disks)
    logger.info("Recursive solver issued %d moves", puzzle.moves - before)
    return puzzle.moves - before


# ============================================================================
# Graph Solver (BFS)
# ============================================================================


@dataclass
class SearchResult:
    """Outcome of a backward breadth-first search."""

    found: bool
    path: List[str] = field(default_factory=list)  # StateKeys, start .. solved
    moves: List[Move] = field(default_factory=list)  # forward (from, to) pairs along path
    states_checked: int = 0

    @property
    def num_moves(self) -> int:
        return len(self.moves)


def search_backward(puzzle: HanoiPuzzle, show_progress: bool = False, stream=None) -> SearchResult:
    """
    Shortest path from the puzzle's current state to its solved state.

    Expands states breadth-first starting at the solved state and stops as soon
    as the current state is generated. Every move has an inverse, so the path
    found backward is also a shortest path forward. The live puzzle is not
    modified; moves are tried on a silent scratch copy.
    """
    solved = puzzle.solved_key()
    start = puzzle.key()
    if start == solved:
        return SearchResult(found=True, path=[start])

    scratch = puzzle.scratch()
    frontier: List[str] = [solved]
    snapshots: List[PuzzleState] = [PuzzleState.solved(puzzle.num_disks, puzzle.dest)]
    backpointer: List[int] = [-1]
    via: List[Optional[Move]] = [None]
    visited = {solved}
    goal_index = -1

    progress = tqdm(
        total=NUM_PEGS ** puzzle.num_disks,
        desc="States checked",
        unit="state",
        disable=not show_progress,
        file=stream,
        leave=False,
    )

    i = 0
    while i < len(frontier) and goal_index < 0:
        for from_peg, to_peg in BRANCHES:
            scratch.state.restore(snapshots[i])
            key = scratch.try_move(from_peg, to_peg, silent=True)
            if key is None or key in visited:
                continue

            visited.add(key)
            frontier.append(key)
            snapshots.append(scratch.state.copy())
            backpointer.append(i)
            via.append((from_peg, to_peg))

            if key == start:
                goal_index = len(frontier) - 1
                break
        i += 1
        progress.update(1)
    progress.close()

    if goal_index < 0:
        return SearchResult(found=False, states_checked=i)

    path = []
    moves = []
    idx = goal_index
    while idx > 0:
        path.append(frontier[idx])
        from_peg, to_peg = via[idx]
        moves.append((to_peg, from_peg))
        idx = backpointer[idx]
    path.append(frontier[0])

    logger.info("BFS checked %d states, discovered %d, path length %d", i, len(frontier), len(moves))
    return SearchResult(found=True, path=path, moves=moves, states_checked=i)


def solve_bfs(puzzle: HanoiPuzzle, show_progress: bool = True) -> SearchResult:
    """
    Find a shortest solution with search_backward, then replay it on the live
    puzzle with the move counter restarted from zero.
    """
    _say(puzzle, "Searching...")
    stream = puzzle.renderer.stream if puzzle.renderer is not None else None
    result = search_backward(puzzle, show_progress=show_progress, stream=stream)

    if not result.found:
        logger.warning(
            "No path found from %s to %s after checking %d states",
            puzzle.key(), puzzle.solved_key(), result.states_checked,
        )
        _say(puzzle, "No path found.")
        return result

    _say(puzzle, "Path to solution found.\n")
    puzzle.moves = 0
    puzzle.history = []
    for from_peg, to_peg in result.moves:
        if puzzle.try_move(from_peg, to_peg) is None:
            raise RuntimeError(
                f"Replayed move {from_peg} -> {to_peg} was rejected in state {puzzle.state}"
            )
    return result
