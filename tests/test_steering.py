import pytest

from conftest import P, xy
from steering import apply_velocity, steering_direction, steering_velocity
from utils_geom import v_len


class TestSteeringDirection:

    def test_lone_node_outside_ring_is_pulled_in(self):
        direction = steering_direction(0, P(100, 0), {0: P(100, 0)}, [], 50.0, 1.05)
        assert xy(direction) == pytest.approx((-3.0, 0.0))

    def test_lone_node_inside_ring(self):
        direction = steering_direction(0, P(10, 0), {0: P(10, 0)}, [], 50.0, 1.05)
        assert xy(direction) == pytest.approx((-0.25, 0.0))

    def test_close_neighbour_pushes_away(self):
        positions = {0: P(10, 0), 1: P(12, 0)}
        direction = steering_direction(0, P(10, 0), positions, [], 50.0, 1.05)
        assert xy(direction) == pytest.approx((-3.0, 0.0))

    def test_close_edge_pushes_away(self):
        positions = {0: P(0, 1), 1: P(-20, 0), 2: P(40, 0)}
        edges = [(1, positions[1], 2, positions[2])]
        direction = steering_direction(0, P(0, 1), positions, edges, 50.0, 1000.0)
        assert xy(direction) == pytest.approx((0.0, 3.0), abs=1e-6)

    def test_direction_is_clamped(self):
        positions = {0: P(0, 0), 1: P(0.1, 0), 2: P(-300, 0)}
        for n, p in positions.items():
            assert v_len(steering_direction(n, p, positions, [], 50.0, 1.05)) <= 3.0 + 1e-9


class TestVelocity:

    def test_scaled_by_time_and_speed(self):
        assert xy(steering_velocity(P(1, 2), 0.05, 100.0)) == pytest.approx((5.0, 10.0))

    def test_long_frames_are_capped(self):
        assert xy(steering_velocity(P(1, 0), 2.0, 100.0)) == pytest.approx((10.0, 0.0))

    def test_apply_without_cursor(self):
        assert xy(apply_velocity(P(1, 1), P(2, 3))) == pytest.approx((3.0, 4.0))

    def test_cursor_slows_nearby_nodes(self):
        assert xy(apply_velocity(P(0, 0), P(4, 0), cursor=P(0, 0))) == (0.0, 0.0)
        assert xy(apply_velocity(P(0, 0), P(4, 0), cursor=P(50, 0))) == pytest.approx((1.0, 0.0))
        assert xy(apply_velocity(P(0, 0), P(4, 0), cursor=P(500, 0))) == pytest.approx((4.0, 0.0))
