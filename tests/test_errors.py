import copy
import pickle

import pytest

from polarplot.errors import (
    AboveMaximumRadius,
    BelowMinimumRadius,
    CrossesDeadZone,
    CrossesRotationMax,
    ErrorKind,
    OutOfBoundsError,
)


def test_every_kind_is_an_out_of_bounds_error():
    errors = [
        BelowMinimumRadius(10.0, 0.0),
        AboveMaximumRadius(40.0, 1.0),
        CrossesRotationMax(),
        CrossesDeadZone(13.0),
    ]
    assert [e.kind for e in errors] == list(ErrorKind)
    for e in errors:
        assert isinstance(e, OutOfBoundsError)


def test_errors_compare_by_value():
    assert CrossesDeadZone(13.0) == CrossesDeadZone(13.0)
    assert CrossesDeadZone(13.0) != CrossesDeadZone(12.0)
    assert BelowMinimumRadius(10.0, 0.0) != AboveMaximumRadius(10.0, 0.0)
    assert CrossesRotationMax() == CrossesRotationMax()
    assert hash(CrossesDeadZone(1.5)) == hash(CrossesDeadZone(1.5))


def test_to_json():
    data = BelowMinimumRadius(10.0, 0.25).to_json()
    assert data["kind"] == "below_minimum_radius"
    assert data["radius"] == 10.0
    assert data["theta"] == 0.25
    assert "minimum" in data["message"]

    data = CrossesRotationMax().to_json()
    assert data["kind"] == "crosses_rotation_max"
    assert set(data) == {"kind", "message"}


def test_repr():
    assert repr(CrossesDeadZone(13.0)) == "CrossesDeadZone(distance=13.0)"


@pytest.mark.parametrize("error", [
    BelowMinimumRadius(10.0, 0.0),
    AboveMaximumRadius(40.0, 1.0),
    CrossesRotationMax(),
    CrossesDeadZone(13.0),
])
def test_copy_and_pickle(error):
    for clone in (copy.copy(error), copy.deepcopy(error), pickle.loads(pickle.dumps(error))):
        assert clone == error
        assert str(clone) == str(error)
        assert clone.kind is error.kind


def test_str():
    assert str(BelowMinimumRadius(10.0, 0.0)) == "radius 10 mm is below the minimum radius"
    assert str(CrossesRotationMax()) == "path crosses the rotation max"
