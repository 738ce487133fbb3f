"""Tests for the boundingbox HitTester module."""

import pytest
from PySide6.QtCore import QPointF

from boundingbox.geometry import RectGeometry
from boundingbox.hit_tester import HitTester
from boundingbox.utils import Handle


@pytest.fixture
def hit_tester():
    """Create a HitTester with the default three unit handles."""
    return HitTester()


@pytest.fixture
def box():
    """Standard element geometry for testing."""
    return RectGeometry(x=10, y=10, width=50, height=50)


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        (QPointF(30, 30), Handle.MOVE),
        (QPointF(10, 30), Handle.W),
        (QPointF(58, 30), Handle.E),
        (QPointF(30, 11), Handle.N),
        (QPointF(30, 58), Handle.S),
        (QPointF(11, 11), Handle.NW),
        (QPointF(58, 11), Handle.NE),
        (QPointF(11, 58), Handle.SW),
        (QPointF(58, 58), Handle.SE),
    ],
)
def test_classify_regions(hit_tester, box, point, expected):
    assert hit_tester.classify(point, box) == expected


def test_zone_edges_are_exclusive(hit_tester, box):
    """Exactly on the handle boundary the pointer is already inside."""
    assert hit_tester.classify(QPointF(13, 13), box) == Handle.MOVE
    assert hit_tester.classify(QPointF(57, 57), box) == Handle.MOVE


def test_points_outside_still_report_nearest_border(hit_tester, box):
    assert hit_tester.classify(QPointF(0, 30), box) == Handle.W
    assert hit_tester.classify(QPointF(100, 100), box) == Handle.SE


def test_disallowed_direction_returns_none(box):
    hit_tester = HitTester(directions=[Handle.N, Handle.S])
    assert hit_tester.classify(QPointF(30, 30), box) == Handle.NONE
    assert hit_tester.classify(QPointF(10, 30), box) == Handle.NONE
    assert hit_tester.classify(QPointF(30, 11), box) == Handle.N


def test_corner_needs_its_own_direction(box):
    hit_tester = HitTester(directions=[Handle.N, Handle.W, Handle.MOVE])
    assert hit_tester.classify(QPointF(11, 11), box) == Handle.NONE


def test_per_edge_handle_size(box):
    hit_tester = HitTester(handle_size={"n": 10, "s": 0, "e": 0, "w": 1})
    assert hit_tester.classify(QPointF(30, 19), box) == Handle.N
    assert hit_tester.classify(QPointF(11, 30), box) == Handle.MOVE
    assert hit_tester.classify(QPointF(30, 60), box) == Handle.MOVE


def test_overlapping_zones_prefer_borders():
    """A box thinner than its two handles never classifies as a move."""
    hit_tester = HitTester()
    tiny = RectGeometry(x=10, y=10, width=4, height=4)
    assert hit_tester.classify(QPointF(12, 12), tiny) == Handle.NW
    assert hit_tester.classify(QPointF(13, 13), tiny) == Handle.SE


def test_classification_never_combines_opposite_edges(hit_tester, box):
    for px in range(0, 71, 2):
        for py in range(0, 71, 2):
            code = hit_tester.classify(QPointF(px, py), box).value
            assert not ("n" in code and "s" in code)
            assert not ("w" in code and "e" in code)


def test_axes_at_reports_raw_flags(box):
    hit_tester = HitTester(directions=[Handle.MOVE])
    axes = hit_tester.axes_at(QPointF(11, 58), box)
    assert axes.vertical == "s"
    assert axes.horizontal == "w"
