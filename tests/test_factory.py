import logging

import numpy as np
import pytest

from flowfield.fields import BoundedFlowField2D, Pole2D, get_field, sample_grid


def test_get_field_bounded_defaults():
    field = get_field("bounded")

    assert isinstance(field, BoundedFlowField2D)
    assert len(field) == 0
    assert field.coefficient == np.float32(6.67)


def test_get_field_accepts_poles_and_triples():
    pole = Pole2D(1.0, 2.0, 3.0)

    field = get_field("bounded", {"coefficient": 2.0, "poles": [pole, (4.0, 5.0, -6.0)]})

    assert field.coefficient == 2.0
    assert field.poles == (pole, Pole2D(4.0, 5.0, -6.0))


def test_get_field_does_not_modify_params():
    params = {"coefficient": 1.0, "poles": [(0.0, 0.0, 1.0)]}

    get_field("bounded", params)

    assert params == {"coefficient": 1.0, "poles": [(0.0, 0.0, 1.0)]}


def test_get_field_rejects_unknown_type():
    with pytest.raises(ValueError, match="Unknown field type"):
        get_field("unbounded")


def test_get_field_rejects_malformed_pole():
    with pytest.raises(ValueError, match="x, y, mass"):
        get_field("bounded", {"poles": [(1.0, 2.0)]})


def test_get_field_warns_about_unknown_params(caplog):
    with caplog.at_level(logging.WARNING):
        get_field("bounded", {"k": 3.0})

    assert "Ignoring unknown field parameters: k" in caplog.text


### Sampling ###

def test_sample_grid_layout():
    field = get_field("bounded", {"coefficient": 1.0, "poles": [(0.5, 0.5, 1.0)]})
    xs = [-1.0, 0.0, 1.0]
    ys = [-2.0, 2.0]

    grid = sample_grid(field, xs, ys)

    assert grid.shape == (2, 3, 2)
    assert grid.dtype == np.float32
    for i, y in enumerate(ys):
        for j, x in enumerate(xs):
            assert tuple(grid[i, j]) == field.get_vec(x, y)


@pytest.mark.parametrize('mode, query', [
    ("normalized", "get_normalized_vec"),
    ("perp", "get_perp_vec"),
    ("perp_normalized", "get_perp_normalized_vec"),
])
def test_sample_grid_modes(mode, query):
    field = get_field("bounded", {"poles": [(0.5, 0.5, 1.0), (-3.0, 1.5, -2.0)]})

    grid = sample_grid(field, [1.0, 2.0], [-1.0], mode=mode)

    assert tuple(grid[0, 1]) == getattr(field, query)(2.0, -1.0)


def test_sample_grid_rejects_unknown_mode():
    with pytest.raises(ValueError, match="Unknown sampling mode"):
        sample_grid(get_field("bounded"), [0.0], [0.0], mode="curl")
