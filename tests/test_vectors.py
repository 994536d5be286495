import math

import numpy as np
import pytest

from flowfield.core import Vector2, Vector3, length, normalize, perpendicular


def test_vector2_is_an_immutable_float32_pair():
    v = Vector2.of(1, 2.5)

    assert v == (1.0, 2.5)
    assert isinstance(v.x, np.float32)
    assert isinstance(v.y, np.float32)
    with pytest.raises(AttributeError):
        v.x = 3.0


def test_vector3_holds_three_components():
    v = Vector3.of(1, 2, 3)

    assert v == (1.0, 2.0, 3.0)
    assert v.to_array().dtype == np.float32


def test_normalize_returns_0_0_if_no_length():
    assert normalize((0.0, 0.0)) == (0.0, 0.0)


def test_normalize_returns_correctly_for_horizontal_vector():
    assert normalize((15.0, 0.0)) == (1.0, 0.0)


def test_normalize_returns_correctly_for_vertical_vector():
    assert normalize((0.0, 42.0)) == (0.0, 1.0)


def test_normalize_returns_correctly_for_angled_vector():
    result = normalize((3.0, 4.0))

    assert result.x == np.float32(3.0) / np.float32(5.0)
    assert result.y == np.float32(4.0) / np.float32(5.0)


@pytest.mark.parametrize('vec', [
    (1.0, 1.0),
    (-2.5, 7.1),
    (1e-3, -4e-3),
    (1234.5, -0.25),
    (-1.0, 0.0),
])
def test_normalize_has_unit_length(vec):
    result = normalize(vec)

    assert float(length(result)) == pytest.approx(1.0, abs=1e-6)
    assert math.atan2(result.y, result.x) == pytest.approx(math.atan2(vec[1], vec[0]), abs=1e-6)


def test_perpendicular_rotates_clockwise():
    assert perpendicular((1.0, 0.0)) == (0.0, -1.0)
    assert perpendicular((3.0, -2.0)) == (-2.0, -3.0)
