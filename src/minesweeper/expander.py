"""
Zero-cell flood fill.

Revealing a cell with no adjacent mines reveals all of its neighbours; any
neighbour that is itself zero does the same. This module computes that
transitive set without touching game state.
"""
from collections import deque
from typing import Deque, FrozenSet, Set, Tuple

from .board import Board
from .cell import Coordinate


def expand(board: Board, origin: Tuple[int, int]) -> FrozenSet[Coordinate]:
    """
    Collect every cell auto-revealed by opening a zero-valued origin.

    Breadth-first over the origin's neighbours, continuing only through
    zero-valued cells.

    Args:
        board: The generated minefield.
        origin: (row, column) of the opened cell.

    Returns:
        Discovered coordinates, excluding origin itself.
    """
    origin = Coordinate(*origin)
    visited: Set[Coordinate] = {origin}
    queue: Deque[Coordinate] = deque()

    for neighbor in board.neighbors(origin):
        visited.add(neighbor)
        queue.append(neighbor)

    while queue:
        cell = queue.popleft()
        if board.value(cell) != 0:
            continue
        for neighbor in board.neighbors(cell):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    visited.discard(origin)
    return frozenset(visited)
