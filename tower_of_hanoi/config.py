"""
Configuration for a Tower of Hanoi run.

This module contains:
- Method: the available solving methods
- PuzzleConfig: pegs, disk count and method for one run, with validation
"""

from dataclasses import dataclass
from enum import IntEnum

from .state import PEGS


class ConfigurationError(ValueError):
    """Raised for peg numbers, disk counts or methods the puzzle cannot run with."""


class Method(IntEnum):
    RECURSIVE = 0
    BFS = 1
    INTERACTIVE = 2


@dataclass
class PuzzleConfig:
    """Puzzle configuration."""
    # Pegs (1..3, pairwise distinct)
    source: int = 1
    spare: int = 2
    dest: int = 3

    # Puzzle size
    num_disks: int = 3

    # Solving method: 0 - recursive / 1 - BFS iterative / 2 - interactive
    method: Method = Method.RECURSIVE

    # Output
    show_progress: bool = True  # tqdm counter during BFS
    log_level: str = "warning"

    def validate(self) -> "PuzzleConfig":
        for name in ("source", "spare", "dest"):
            peg = getattr(self, name)
            if peg not in PEGS:
                raise ConfigurationError(f"Invalid {name} peg {peg}: must be between 1 and 3")
        if len({self.source, self.spare, self.dest}) != 3:
            raise ConfigurationError(
                f"src, spare, dest must be 3 different numbers, "
                f"got {self.source}, {self.spare}, {self.dest}"
            )
        if self.num_disks < 1:
            raise ConfigurationError(f"Number of disks must be greater than 0, got {self.num_disks}")
        try:
            self.method = Method(self.method)
        except ValueError as e:
            raise ConfigurationError(f"Unknown method {self.method}: must be 0, 1 or 2") from e
        return self
