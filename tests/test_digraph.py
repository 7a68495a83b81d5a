"""
Test suite for the directed graph container.

Tests cover:
- Vertex and edge management
- Transpose
- Depth-first finish order
- Strongly connected components
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from declang.optimizer import DiGraph


def build_graph(vertices, edges) -> DiGraph:
    graph = DiGraph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for source, destination in edges:
        graph.add_edge(source, destination)
    return graph


class TestDiGraph(unittest.TestCase):
    """Test cases for DiGraph."""

    def setUp(self):
        """Set up test fixtures."""
        self.graph = build_graph([1, 2, 3], [(1, 2), (2, 3)])

    def test_add_vertex_is_idempotent(self):
        graph = DiGraph()
        self.assertTrue(graph.add_vertex("a"))
        self.assertTrue(graph.add_vertex("a"))
        self.assertEqual(graph.vertex_count(), 1)

    def test_none_vertex_is_refused(self):
        graph = DiGraph()
        self.assertFalse(graph.add_vertex(None))
        self.assertEqual(graph.vertex_count(), 0)
        self.assertFalse(self.graph.add_edge(None, 1))
        self.assertFalse(self.graph.remove_vertex(None))
        self.assertFalse(self.graph.remove_edge(1, None))

    def test_add_edge(self):
        self.assertTrue(self.graph.add_edge(3, 1))
        self.assertFalse(self.graph.add_edge(3, 1))
        self.assertTrue(self.graph.has_edge(3, 1))
        self.assertFalse(self.graph.has_edge(1, 3))
        self.assertEqual(self.graph.edge_count(), 3)

    def test_self_loop(self):
        self.assertTrue(self.graph.add_edge(1, 1))
        self.assertTrue(self.graph.has_edge(1, 1))

    def test_edge_requires_both_vertices(self):
        with self.assertRaises(ValueError):
            self.graph.add_edge(1, 99)
        with self.assertRaises(ValueError):
            self.graph.add_edge(99, 1)
        with self.assertRaises(ValueError):
            self.graph.remove_edge(99, 1)

    def test_remove_vertex_removes_incident_edges(self):
        self.assertTrue(self.graph.remove_vertex(2))
        self.assertEqual(self.graph.vertex_count(), 2)
        self.assertEqual(self.graph.edge_count(), 0)
        self.assertFalse(self.graph.has_edge(1, 2))
        self.assertTrue(self.graph.remove_vertex(42))

    def test_remove_edge(self):
        self.assertTrue(self.graph.remove_edge(1, 2))
        self.assertFalse(self.graph.has_edge(1, 2))
        self.assertTrue(self.graph.remove_edge(1, 2))
        self.assertEqual(self.graph.edge_count(), 1)

    def test_neighbors_and_vertices(self):
        self.graph.add_edge(1, 3)
        self.assertEqual(self.graph.get_neighbors(1), [2, 3])
        self.assertEqual(self.graph.get_vertices(), [1, 2, 3])
        with self.assertRaises(ValueError):
            self.graph.get_neighbors(7)

    def test_transpose(self):
        transposed = self.graph.transpose()
        self.assertTrue(transposed.has_edge(2, 1))
        self.assertTrue(transposed.has_edge(3, 2))
        self.assertFalse(transposed.has_edge(1, 2))
        self.assertEqual(transposed.vertex_count(), 3)
        # source graph untouched
        self.assertTrue(self.graph.has_edge(1, 2))

    def test_depth_first_search_finish_order(self):
        """The vertex that finishes last comes last."""
        self.assertEqual(self.graph.depth_first_search(), [3, 2, 1])
        self.assertEqual(DiGraph().depth_first_search(), [])

    def test_depth_first_search_visits_disconnected_vertices(self):
        graph = build_graph(["a", "b", "c"], [("b", "c")])
        order = graph.depth_first_search()
        self.assertEqual(order, ["a", "c", "b"])

    def test_strongly_connected_components(self):
        graph = build_graph(
            [1, 2, 3, 4, 5],
            [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 4)]
        )
        components = [sorted(component) for component in graph.find_strongly_connected_components()]
        self.assertEqual(sorted(components), [[1, 2, 3], [4, 5]])

    def test_linear_graph_has_singleton_components(self):
        components = self.graph.find_strongly_connected_components()
        self.assertEqual(components, [[1], [2], [3]])

    def test_long_chain_does_not_recurse(self):
        graph = build_graph(range(5000), [(i, i + 1) for i in range(4999)])
        self.assertEqual(len(graph.depth_first_search()), 5000)
        self.assertEqual(len(graph.find_strongly_connected_components()), 5000)

    def test_string_form(self):
        self.assertEqual(str(self.graph), "1 -> [2]\n2 -> [3]\n3 -> []")


if __name__ == '__main__':
    unittest.main()
