import math

import pytest

from polarplot.checks import (
    CheckResult,
    check_segment,
    crosses_rotation_max,
    dead_zone_distance,
)
from polarplot.errors import CrossesDeadZone, CrossesRotationMax
from polarplot.points import PointCartesian as P


def test_crosses_rotation_max_positive_x():
    assert crosses_rotation_max(P(22.5, 1.0), P(22.5, -1.0))
    assert crosses_rotation_max(P(22.5, -1.0), P(0.0, 25.0))


def test_rotation_max_negative_x_passes():
    assert not crosses_rotation_max(P(-22.5, 1.0), P(-22.5, -1.0))
    assert not crosses_rotation_max(P(-22.5, 1.0), P(22.5, -1.0))


def test_rotation_max_same_sign_passes():
    assert not crosses_rotation_max(P(20.0, 1.0), P(25.0, 8.0))
    assert not crosses_rotation_max(P(20.0, -1.0), P(25.0, -8.0))


def test_rotation_max_signed_zero():
    assert not crosses_rotation_max(P(22.5, 0.0), P(0.0, 22.5))
    assert crosses_rotation_max(P(22.5, -0.0), P(0.0, 22.5))


def test_dead_zone_distance():
    assert dead_zone_distance(P(-22.5, 13.0), P(22.5, 13.0)) == 13.0
    assert dead_zone_distance(P(20.0, -30.0), P(20.0, 30.0)) == 20.0
    assert dead_zone_distance(P(22.5, 0.0), P(0.0, 22.5)) == pytest.approx(22.5 / math.sqrt(2))


def test_dead_zone_distance_is_to_infinite_line():
    # the closest point of the line, (0, 15), is not on the finite segment
    assert dead_zone_distance(P(20.0, 15.0), P(25.0, 15.0)) == 15.0
    assert dead_zone_distance(P(-20.0, -10.0), P(-25.0, -10.0)) == 10.0


def test_dead_zone_distance_degenerate():
    assert dead_zone_distance(P(3.0, 4.0), P(3.0, 4.0)) == 5.0


def test_check_segment():
    ok = check_segment(P(22.5, 0.0), P(0.0, 22.5))
    assert isinstance(ok, CheckResult)
    assert ok
    assert ok.error is None

    bad = check_segment(P(22.5, 1.0), P(22.5, -1.0))
    assert not bad
    assert bad.error == CrossesRotationMax()

    bad = check_segment(P(-22.5, 13.0), P(22.5, 13.0))
    assert not bad
    assert bad.error == CrossesDeadZone(13.0)


def test_rotation_max_checked_first():
    # this segment also runs through the center
    result = check_segment(P(20.0, 20.0), P(20.0, -20.0))
    assert result.error == CrossesRotationMax()
    result = check_segment(P(20.0, 10.0), P(-20.0, -10.0))
    assert isinstance(result.error, CrossesDeadZone)
    assert result.error.distance == 0.0
