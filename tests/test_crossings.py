import pytest

from conftest import P
from crossings import CrossingDetector, LineIntersects, find_crossings
from edge import Edge

X_EDGES = [
    (0, P(0, 0), 1, P(10, 10)),
    (2, P(0, 10), 3, P(10, 0)),
]
APART_EDGES = [
    (0, P(0, 0), 1, P(1, 0)),
    (2, P(5, 0), 3, P(6, 0)),
]


class TestFindCrossings:

    def test_clear_x(self):
        assert list(find_crossings(X_EDGES)) == [(Edge(0, 1), Edge(2, 3))]

    def test_disjoint(self):
        assert list(find_crossings(APART_EDGES)) == []

    def test_shared_endpoint_never_crosses(self):
        # collinear and overlapping, but both touch node 1
        edges = [
            (0, P(0, 0), 1, P(10, 0)),
            (1, P(10, 0), 2, P(5, 0)),
        ]
        assert list(find_crossings(edges)) == []

    def test_adjacency_is_by_id_not_position(self):
        # distinct ids drawn at the same spot still touch
        edges = [
            (0, P(0, 0), 1, P(10, 0)),
            (2, P(0, 0), 3, P(0, 10)),
        ]
        assert len(list(find_crossings(edges))) == 1


class TestCrossingDetector:

    def test_count_and_edges(self):
        edges = [
            (0, P(5, -5), 1, P(5, 5)),
            (2, P(0, 0), 3, P(10, 0)),
            (4, P(0, 2), 5, P(10, 2)),
        ]
        report = CrossingDetector().detect(edges)
        assert report.crossing_count == 2
        assert report.crossing_edges == frozenset({Edge(0, 1), Edge(2, 3), Edge(4, 5)})
        assert not report.solved

    def test_solved_when_nothing_crosses(self):
        detector = CrossingDetector()
        report = detector.detect(APART_EDGES)
        assert report.solved
        assert detector.is_solved()
        assert set(report.node_status.values()) == {LineIntersects.SOLVED}

    def test_status_transitions(self):
        detector = CrossingDetector()
        detector.reset(range(4))

        report = detector.detect(X_EDGES)
        assert set(report.node_status.values()) == {LineIntersects.UNSOLVED}

        report = detector.detect(APART_EDGES)
        assert set(report.node_status.values()) == {LineIntersects.SOLVED}

        report = detector.detect(X_EDGES)
        assert set(report.node_status.values()) == {LineIntersects.INTERSECTING}

        report = detector.detect(APART_EDGES)
        assert set(report.node_status.values()) == {LineIntersects.SOLVED}

    def test_only_implicated_nodes_intersect(self):
        detector = CrossingDetector()
        tail = [(3, P(10, 0), 4, P(20, 0))]
        detector.detect(APART_EDGES + tail)
        report = detector.detect(X_EDGES + tail)
        assert report.node_status[4] is LineIntersects.SOLVED
        assert report.node_status[0] is LineIntersects.INTERSECTING

    def test_reset_forgets_previous_nodes(self):
        detector = CrossingDetector()
        detector.detect(APART_EDGES)
        detector.reset([0, 1])
        assert detector.status == {0: LineIntersects.UNSOLVED, 1: LineIntersects.UNSOLVED}
