"""
Console rendering of the towers.

Each peg is drawn as a column of fixed-width bars, 2 * num_disks characters
wide: '#' for the part covered by a disk, '.' elsewhere. Pegs are separated by
two spaces and the tallest possible stack is drawn top row first.
"""

import sys
from typing import TextIO

from .state import PuzzleState


def render_towers(state: PuzzleState) -> str:
    num_disks = state.num_disks
    width = num_disks * 2
    lines = [""]
    for row in range(num_disks - 1, -1, -1):
        line = ""
        for peg_row in state.slots:
            disk = int(peg_row[row])
            begin = num_disks - disk
            end = width - begin - 1
            line += "".join("#" if begin <= cur <= end else "." for cur in range(width))
            line += "  "
        lines.append(line)
    lines.append("")
    return "\n".join(lines) + "\n"


class ConsoleRenderer:
    """Writes move announcements and boards to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO = None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stream)

    def show_towers(self, state: PuzzleState) -> None:
        self.stream.write(render_towers(state))

    def announce_move(self, count: int, from_peg: int, to_peg: int, state: PuzzleState) -> None:
        self.write(f"{count}) Move {from_peg} to {to_peg}.")
        self.show_towers(state)
