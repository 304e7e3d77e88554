"""
Manual play: the user types moves until the puzzle is solved or they quit.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .moves import HanoiPuzzle
from .render import ConsoleRenderer

logger = logging.getLogger(__name__)

PROMPT = "Disk move (from to) > "

HELP_TEXT = """Use following format for commands:
   PEG#[SPACE]PEG# - to move disk from peg to peg,
   Q|q - to quit.
   R|r - to reset.
Invalid commands will be ignored.
"""


@dataclass
class SessionResult:
    solved: bool
    quit: bool
    moves: int
    optimal: int

    @property
    def well_done(self) -> bool:
        return self.solved and self.moves == self.optimal


class InteractiveSession:
    """
    Reads commands with `read_command` (input() by default) and applies them
    to the puzzle:
      q / Q      - quit
      r / R      - restore the starting configuration and zero the counter
      FROM TO    - move the top disk of peg FROM onto peg TO
    Anything else is ignored.
    """

    def __init__(
        self,
        puzzle: HanoiPuzzle,
        read_command: Callable[[str], str] = input,
        renderer: Optional[ConsoleRenderer] = None,
    ):
        self.puzzle = puzzle
        self.read_command = read_command
        self.renderer = renderer if renderer is not None else puzzle.renderer
        self.start_key = puzzle.key()

    def _say(self, text: str = "") -> None:
        if self.renderer is not None:
            self.renderer.write(text)

    def execute(self, command: str) -> bool:
        """Apply one command. Returns False when the command is quit."""
        command = command.strip()
        if command in ("q", "Q"):
            return False

        if command in ("r", "R"):
            self.puzzle.reset(self.start_key)
            self._say("\nPuzzle has been reset.")
            if self.renderer is not None:
                self.renderer.show_towers(self.puzzle.state)
            return True

        tokens = command.split()
        if len(tokens) < 2:
            logger.debug("Ignored command %r", command)
            return True
        try:
            from_peg = int(tokens[0])
            to_peg = int(tokens[1])
        except ValueError:
            logger.debug("Ignored command %r", command)
            return True

        self.puzzle.try_move(from_peg, to_peg)
        return True

    def run(self) -> SessionResult:
        self._say(HELP_TEXT)

        quit_requested = False
        while not self.puzzle.is_solved():
            try:
                command = self.read_command(PROMPT)
            except EOFError:
                quit_requested = True
                break
            if not self.execute(command):
                quit_requested = True
                break

        result = SessionResult(
            solved=self.puzzle.is_solved(),
            quit=quit_requested,
            moves=self.puzzle.moves,
            optimal=self.puzzle.optimal_moves,
        )
        if result.well_done:
            self._say("Well done!")
        return result
