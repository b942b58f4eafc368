import pytest

from edge import Edge
from graph import Graph
from history import GraphHistory


class TestGraph:

    def test_edges_are_deduplicated(self):
        g = Graph(range(3))
        assert g.addEdge(0, 1)
        assert not g.addEdge(1, 0)
        assert g.edgeCount() == 1
        assert g.getEdges() == [Edge(0, 1)]

    def test_self_loop_rejected(self):
        g = Graph(range(2))
        with pytest.raises(ValueError):
            g.addEdge(1, 1)

    def test_remove_node_drops_incident_edges(self, path_graph):
        path_graph.removeNode(2)
        assert path_graph.getNodes() == [0, 1, 3, 4]
        assert path_graph.getEdges() == [Edge(0, 1), Edge(3, 4)]
        assert path_graph.validate_invariants()

    def test_remove_missing_node(self):
        with pytest.raises(KeyError):
            Graph().removeNode(7)

    def test_copy_is_independent(self, path_graph):
        snap = path_graph.copy()
        path_graph.removeEdge(0, 1)
        assert snap.hasEdge(0, 1)
        assert snap != path_graph

    def test_structural_equality(self):
        a = Graph(range(3), [(0, 1), (1, 2)])
        b = Graph(range(3), [(2, 1), (1, 0)])
        assert a == b

    def test_labels_survive_copy(self):
        g = Graph()
        g.addNode(0, label=(0, 1))
        assert g.copy().labels == {0: (0, 1)}

    def test_stats(self, path_graph):
        assert path_graph.get_stats() == {"nodes": 5, "edges": 4, "min_degree": 1, "max_degree": 2}


class TestEdge:

    def test_canonical_orientation(self):
        assert Edge(4, 2).key() == (2, 4)
        assert Edge(4, 2) == Edge(2, 4)

    def test_adjacency(self):
        assert Edge(0, 1).isAdjacent(Edge(1, 2))
        assert not Edge(0, 1).isAdjacent(Edge(2, 3))


class TestGraphHistory:

    def test_push_pop_order(self, path_graph):
        h = GraphHistory()
        h.push(path_graph)
        smaller = path_graph.copy()
        smaller.removeNode(4)
        h.push(smaller)
        assert h.getSizes() == (5, 4)
        assert h.validate()
        assert h.pop() == smaller
        assert h.pop() == path_graph
        assert h.pop() is None

    def test_push_stores_a_copy(self, path_graph):
        h = GraphHistory()
        h.push(path_graph)
        path_graph.removeNode(0)
        assert h.peek().nodeCount() == 5

    def test_history_must_shrink(self, path_graph):
        h = GraphHistory()
        h.push(path_graph)
        with pytest.raises(ValueError):
            h.push(path_graph)
