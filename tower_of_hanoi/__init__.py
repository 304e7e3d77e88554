"""
Tower of Hanoi puzzle simulator and solver.

- state: PuzzleState and the StateKey encoding
- moves: HanoiPuzzle, the move engine
- solvers: recursive and breadth-first solvers
- interactive: manual play
- state_graph: the full state space as a networkx graph
"""

from .config import ConfigurationError, Method, PuzzleConfig
from .interactive import InteractiveSession, SessionResult
from .moves import BRANCHES, HanoiPuzzle
from .render import ConsoleRenderer, render_towers
from .solvers import SearchResult, hanoi, search_backward, solve_bfs, solve_recursive
from .state import PuzzleState, StateKeyError, deserialize, is_solved, serialize
from .state_graph import all_states, build_state_graph, is_symmetric, shortest_move_count

__version__ = "0.1.0"
