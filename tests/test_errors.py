import pytest

import distrkit
from distrkit.errors import DistrkitError, ParameterShapeError


def test_parameter_shape_error():
    with pytest.raises(ParameterShapeError) as exc_info:
        distrkit.dmixnorm(0, [[0, 1]], [[1, 1, 1]], [[1, 1]])

    err = exc_info.value
    assert isinstance(err, DistrkitError)
    assert isinstance(err, ValueError)
    assert err.shapes == {"mu": (1, 2), "sigma": (1, 3), "alpha": (1, 2)}
    assert "sigma=(1, 3)" in str(err)


def test_error_without_shapes():
    assert str(ParameterShapeError("bad")) == "bad"
