import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import numpy as np
import pytest

from smallestcircle import solvers
from smallestcircle.geometry import Circle, in_circle_mask
from smallestcircle.solvers import make_circle_one_point, make_circle_two_points


def test_one_point_single():
    points = np.array([[2.0, 3.0]])
    assert make_circle_one_point(points, (2.0, 3.0)) == Circle(2.0, 3.0, 0.0)


def test_one_point_promotes_to_diameter():
    points = np.array([[4.0, 0.0], [0.0, 0.0]])
    c = make_circle_one_point(points, (0.0, 0.0))
    assert c == Circle(2.0, 0.0, 2.0)


def test_one_point_keeps_anchor_on_boundary():
    rng = np.random.default_rng(11)
    points = rng.normal(size=(30, 2))
    p = points[-1]
    c = make_circle_one_point(points, p.tolist())
    assert np.all(in_circle_mask(c, points))
    assert np.hypot(p[0] - c.x, p[1] - c.y) == pytest.approx(c.r)


def test_two_points_diameter_suffices():
    points = np.array([[1.0, 0.5], [2.0, -0.5], [3.0, 0.0]])
    c = make_circle_two_points(points, (0.0, 0.0), (4.0, 0.0))
    assert c == Circle(2.0, 0.0, 2.0)


def test_two_points_left_third_point():
    points = np.array([[0.0, 0.0], [4.0, 0.0], [2.0, 3.0]])
    c = make_circle_two_points(points, (0.0, 0.0), (4.0, 0.0))
    # circumcircle of (0,0), (4,0), (2,3): centre (2, 5/6)
    assert c.x == pytest.approx(2.0)
    assert c.y == pytest.approx(5.0 / 6.0)
    assert c.r == pytest.approx(np.hypot(2.0, 5.0 / 6.0))


def test_two_points_right_third_point():
    points = np.array([[2.0, -3.0]])
    c = make_circle_two_points(points, (0.0, 0.0), (4.0, 0.0))
    assert c.y == pytest.approx(-5.0 / 6.0)


def test_two_points_picks_furthest_centre_per_side():
    points = np.array([[2.0, 2.5], [2.0, 3.0], [1.0, 2.2]])
    p, q = (0.0, 0.0), (4.0, 0.0)
    c = make_circle_two_points(points, p, q)
    assert np.all(in_circle_mask(c, points))


def test_two_points_both_sides_keeps_left_when_smaller():
    points = np.array([[2.0, -1.0], [2.0, 3.0]])
    c = make_circle_two_points(points, (0.0, 0.0), (4.0, 0.0))
    assert np.all(in_circle_mask(c, points))
    assert c.y == pytest.approx(5.0 / 6.0)


def test_two_points_both_sides_takes_right_when_smaller():
    points = np.array([[2.0, 1.2], [2.0, -3.0]])
    c = make_circle_two_points(points, (0.0, 0.0), (4.0, 0.0))
    assert np.all(in_circle_mask(c, points))
    assert c.y == pytest.approx(-5.0 / 6.0)


def test_two_points_skips_collinear_candidates():
    points = np.array([[-1.0, 0.0], [2.0, 3.0]])
    c = make_circle_two_points(points, (0.0, 0.0), (4.0, 0.0))
    assert c is not None
    assert c.y == pytest.approx(5.0 / 6.0)


def test_two_points_equal_radii_prefers_left():
    points = np.array([[2.0, -3.0], [2.0, 3.0]])
    c = make_circle_two_points(points, (0.0, 0.0), (4.0, 0.0))
    assert c.x == pytest.approx(2.0)
    assert c.y == pytest.approx(5.0 / 6.0)
    assert c.r == pytest.approx(13.0 / 6.0)


@pytest.mark.parametrize("side", [1.0, -1.0])
def test_two_points_first_candidate_wins_on_equal_centres(monkeypatch, side):
    # both third points give a centre at the same distance from the line p -> q
    circles = {
        (1.0, 3.0 * side): Circle(1.0, 1.5 * side, 9.0),
        (3.0, 3.0 * side): Circle(3.0, 1.5 * side, 8.0),
    }
    monkeypatch.setattr(solvers, "make_circumcircle", lambda p, q, r: circles.get(tuple(r)))
    points = np.array([[1.0, 3.0 * side], [3.0, 3.0 * side]])
    c = make_circle_two_points(points, (0.0, 0.0), (4.0, 0.0))
    assert c == Circle(1.0, 1.5 * side, 9.0)
