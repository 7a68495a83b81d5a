"""
Control flow graph of a DEC program.

Vertices are the program's assignment and return statements; an edge means
control may pass directly from one statement to the next.
"""

from collections import deque
from typing import List, Optional, Tuple

from ..parser.ast_nodes import Statement
from .digraph import DiGraph


class CFG(DiGraph[Statement]):
    """Directed graph of statements with a designated start statement."""

    def __init__(self):
        super().__init__()
        self.start: Optional[Statement] = None

    def breadth_first_search(self) -> Tuple[List[Statement], List[Statement]]:
        """
        Split the statements into those reachable from start and the rest.

        Returns:
            (reachable, unreachable); reachable is in visiting order, unreachable
            keeps the graph's vertex order
        """
        reachable: List[Statement] = []
        discovered = set()

        if self.start is not None:
            queue = deque([self.start])
            discovered.add(self.start)
            while queue:
                current = queue.popleft()
                reachable.append(current)
                for neighbor in self.get_neighbors(current):
                    if neighbor not in discovered:
                        discovered.add(neighbor)
                        queue.append(neighbor)

        unreachable = [vertex for vertex in self.get_vertices() if vertex not in discovered]
        return reachable, unreachable
