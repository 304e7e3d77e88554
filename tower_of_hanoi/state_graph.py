"""
Full state space of an n-disk Tower of Hanoi puzzle as a networkx graph.

Nodes are StateKeys, edges are legal single-disk moves labelled with their
(from_peg, to_peg) pair. The graph has 3^n nodes and forms a Sierpinski
triangle; it is used to check the assumptions the backward BFS relies on.
"""

import itertools
from typing import List

import networkx as nx

from .moves import BRANCHES, HanoiPuzzle
from .state import NUM_PEGS, PuzzleState, serialize


def all_states(num_disks: int) -> List[PuzzleState]:
    """Generate all valid states for num_disks disks on 3 pegs."""
    states = []
    # assignment[i] = peg (0-based) holding disk i + 1
    for assignment in itertools.product(range(NUM_PEGS), repeat=num_disks):
        pegs = [[], [], []]
        # Place disks from largest to smallest
        for disk in range(num_disks, 0, -1):
            pegs[assignment[disk - 1]].append(disk)
        states.append(PuzzleState.from_pegs(pegs, num_disks))
    return states


def build_state_graph(num_disks: int) -> nx.DiGraph:
    G = nx.DiGraph()
    puzzle = HanoiPuzzle(num_disks=num_disks)

    states = all_states(num_disks)
    G.add_nodes_from(serialize(s) for s in states)

    for s in states:
        source_key = serialize(s)
        for from_peg, to_peg in BRANCHES:
            puzzle.state.restore(s)
            target_key = puzzle.try_move(from_peg, to_peg, silent=True)
            if target_key is not None:
                G.add_edge(source_key, target_key, move=(from_peg, to_peg))

    return G


def is_symmetric(G: nx.DiGraph) -> bool:
    """True if every move can be undone by the reverse move."""
    for u, v, data in G.edges(data=True):
        if not G.has_edge(v, u):
            return False
        from_peg, to_peg = data["move"]
        if G.edges[v, u]["move"] != (to_peg, from_peg):
            return False
    return True


def shortest_move_count(G: nx.DiGraph, start_key: str, goal_key: str) -> int:
    return nx.shortest_path_length(G, start_key, goal_key)
