"""
Directed graph container.

Vertices are any hashable objects and are kept in insertion order, as are
each vertex's outgoing neighbors. A None vertex is never stored: the
mutating operations answer False for it instead of raising.
"""

from typing import Dict, Generic, Hashable, Iterator, List, TypeVar

T = TypeVar("T", bound=Hashable)


class DiGraph(Generic[T]):
    """Directed graph over an adjacency mapping of ordered neighbor sets."""

    def __init__(self):
        # vertex -> {neighbor: None}; dicts keep insertion order
        self._adjacency: Dict[T, Dict[T, None]] = {}

    def add_vertex(self, vertex: T) -> bool:
        """Add a vertex if it is not already present. Adding twice is not an error."""
        if vertex is None:
            return False
        self._adjacency.setdefault(vertex, {})
        return True

    def add_edge(self, source: T, destination: T) -> bool:
        """
        Add a directed edge from source to destination.

        Returns:
            True if the edge was added, False if it was already present

        Raises:
            ValueError: If either vertex is not in the graph
        """
        if source is None or destination is None:
            return False
        self._require_vertex(source, "Source")
        self._require_vertex(destination, "Destination")

        neighbors = self._adjacency[source]
        if destination in neighbors:
            return False
        neighbors[destination] = None
        return True

    def remove_vertex(self, vertex: T) -> bool:
        """Remove a vertex together with every edge into or out of it."""
        if vertex is None:
            return False
        if vertex in self._adjacency:
            del self._adjacency[vertex]
            for neighbors in self._adjacency.values():
                neighbors.pop(vertex, None)
        return True

    def remove_edge(self, source: T, destination: T) -> bool:
        """
        Remove the edge from source to destination if there is one.

        Raises:
            ValueError: If either vertex is not in the graph
        """
        if source is None or destination is None:
            return False
        self._require_vertex(source, "Source")
        self._require_vertex(destination, "Destination")
        self._adjacency[source].pop(destination, None)
        return True

    def has_edge(self, source: T, destination: T) -> bool:
        return source in self._adjacency and destination in self._adjacency[source]

    def has_vertex(self, vertex: T) -> bool:
        return vertex in self._adjacency

    def get_neighbors(self, vertex: T) -> List[T]:
        """
        Vertices reached by an edge out of the given vertex, in insertion order.

        Raises:
            ValueError: If the vertex is not in the graph
        """
        self._require_vertex(vertex, "Vertex")
        return list(self._adjacency[vertex])

    def get_vertices(self) -> List[T]:
        return list(self._adjacency)

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values())

    def transpose(self) -> 'DiGraph[T]':
        """Graph with the same vertices and every edge reversed."""
        transposed: DiGraph[T] = DiGraph()
        for vertex in self._adjacency:
            transposed.add_vertex(vertex)
        for source, neighbors in self._adjacency.items():
            for destination in neighbors:
                transposed.add_edge(destination, source)
        return transposed

    def depth_first_search(self) -> List[T]:
        """
        Visit every vertex depth first, starting new trees in vertex order.

        Returns:
            Vertices in order of increasing finish time, so the last item
            is the vertex that finished last
        """
        visited = set()
        finished: List[T] = []
        for vertex in self._adjacency:
            if vertex not in visited:
                self._visit(vertex, visited, finished.append)
        return finished

    def find_strongly_connected_components(self) -> List[List[T]]:
        """
        Strongly connected components (Kosaraju).

        Components come out in decreasing order of the finish time of their
        first vertex in the forward search.
        """
        finish_order = self.depth_first_search()
        transposed = self.transpose()

        visited = set()
        components: List[List[T]] = []
        for vertex in reversed(finish_order):
            if vertex in visited:
                continue
            component: List[T] = []
            transposed._visit(vertex, visited, component.append)
            components.append(component)
        return components

    def _visit(self, root: T, visited: set, on_finish) -> None:
        """Iterative depth-first visit from root, calling on_finish as each vertex finishes."""
        visited.add(root)
        stack = [(root, iter(self._adjacency[root]))]
        while stack:
            vertex, neighbors = stack[-1]
            advanced = False
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append((neighbor, iter(self._adjacency[neighbor])))
                    advanced = True
                    break
            if not advanced:
                stack.pop()
                on_finish(vertex)

    def _require_vertex(self, vertex: T, role: str):
        if vertex not in self._adjacency:
            raise ValueError(f"{role} vertex not in graph: {vertex!r}")

    def __contains__(self, vertex: T) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[T]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        lines = []
        for vertex, neighbors in self._adjacency.items():
            targets = ", ".join(str(neighbor) for neighbor in neighbors)
            lines.append(f"{vertex} -> [{targets}]")
        return "\n".join(lines)
