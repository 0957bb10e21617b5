import pytest

from planegeom.orientation import Orientation


@pytest.mark.parametrize(
    "value, label",
    [
        (Orientation.CLOCKWISE, "Clockwise"),
        (Orientation.COLLINEAR, "Collinear"),
        (Orientation.COUNTER_CLOCKWISE, "CounterClockwise"),
    ],
)
def test_str(value, label):
    assert str(value) == label


@pytest.mark.parametrize(
    "number, label",
    [(-1, "Clockwise"), (0, "Collinear"), (1, "CounterClockwise")],
)
def test_integer_values_follow_sign_convention(number, label):
    orientation = Orientation(number)
    assert int(orientation) == number
    assert str(orientation) == label


def test_ordering_relative_to_collinear():
    ordered = sorted([Orientation(1), Orientation(-1), Orientation(0)])
    assert [str(o) for o in ordered] == ["Clockwise", "Collinear", "CounterClockwise"]


def test_round_trip_from_int():
    for o in Orientation:
        assert Orientation(int(o)) is o


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        Orientation(2)