import math

import pytest

from polarplot.config import MAX_RADIUS, MIN_RADIUS
from polarplot.errors import (
    AboveMaximumRadius,
    BelowMinimumRadius,
    ErrorKind,
    OutOfBoundsError,
)
from polarplot.points import PointCartesian, PointPolar

## unit tests for polarplot points.py


def test_new_point_cartesian():
    point = PointCartesian(2.0, 1.0)
    assert point.x == 2.0
    assert point.y == 1.0
    assert point == PointCartesian(2.0, 1.0)


def test_points_are_immutable():
    point = PointPolar(20.0, 0.5)
    with pytest.raises(AttributeError):
        point.radius = 100.0
    cart = PointCartesian(1.0, 2.0)
    with pytest.raises(AttributeError):
        cart.x = 3.0


class TestAsPolar:
    """Cartesian to polar conversion"""

    def test_axes(self):
        assert PointCartesian(15.0, 0.0).as_polar() == PointPolar(15.0, 0.0)
        assert PointCartesian(0.0, 15.0).as_polar() == PointPolar(15.0, 0.5 * math.pi)
        assert PointCartesian(-15.0, 0.0).as_polar() == PointPolar(15.0, math.pi)
        assert PointCartesian(0.0, -15.0).as_polar() == PointPolar(15.0, -0.5 * math.pi)

    def test_theta_not_renormalized(self):
        p = PointCartesian(-20.0, -0.5).as_polar()
        assert -math.pi < p.theta < 0.0

    def test_below_minimum(self):
        with pytest.raises(BelowMinimumRadius) as info:
            PointCartesian(MIN_RADIUS / 2.0, MIN_RADIUS / 2.0).as_polar()
        err = info.value
        assert err.kind is ErrorKind.BELOW_MINIMUM_RADIUS
        assert err.radius == pytest.approx(math.hypot(7.0, 7.0))
        assert err.theta == pytest.approx(math.pi / 4)

    def test_above_maximum(self):
        with pytest.raises(AboveMaximumRadius) as info:
            PointCartesian(MAX_RADIUS, MAX_RADIUS).as_polar()
        assert info.value.radius == pytest.approx(MAX_RADIUS * math.sqrt(2))
        assert info.value.theta == pytest.approx(math.pi / 4)

    @pytest.mark.parametrize("x, y", [
        (14.0, 0.0),
        (0.0, -31.0),
        (-10.0, 20.0),
        (21.0, -21.0),
        (0.0, 0.0),
        (40.0, 3.0),
        (-5.0, -5.0),
    ])
    def test_succeeds_iff_in_band(self, x, y):
        radius = math.hypot(x, y)
        in_band = MIN_RADIUS <= radius <= MAX_RADIUS
        try:
            p = PointCartesian(x, y).as_polar()
        except OutOfBoundsError as e:
            assert not in_band
            assert e.radius == radius
            assert e.theta == math.atan2(y, x)
        else:
            assert in_band
            assert p.radius == radius
            assert p.theta == math.atan2(y, x)


class TestPointPolar:
    """bounds enforcement in the PointPolar constructor"""

    def test_min_radius(self):
        with pytest.raises(BelowMinimumRadius):
            PointPolar(13.0, 0.0)
        with pytest.raises(BelowMinimumRadius):
            PointPolar(MIN_RADIUS - 1.0, 0.0)

    def test_max_radius(self):
        with pytest.raises(AboveMaximumRadius):
            PointPolar(MAX_RADIUS + 1.0, 0.0)

    def test_bounds_inclusive(self):
        assert PointPolar(MIN_RADIUS, 1.0).radius == MIN_RADIUS
        assert PointPolar(MAX_RADIUS, -1.0).radius == MAX_RADIUS

    def test_nan_radius_rejected(self):
        with pytest.raises(BelowMinimumRadius):
            PointPolar(float('nan'), 0.0)

    def test_replace_revalidates(self):
        from dataclasses import replace
        p = PointPolar(20.0, 0.0)
        with pytest.raises(AboveMaximumRadius):
            replace(p, radius=50.0)

    @pytest.mark.parametrize("theta", [math.pi, 2.5, 0.75, 0.0, -0.1, -1.6, -3.0])
    def test_round_trip(self, theta):
        p = PointPolar(22.0, theta)
        back = p.as_cartesian().as_polar()
        assert back.radius == pytest.approx(22.0)
        assert back.theta == pytest.approx(theta)
