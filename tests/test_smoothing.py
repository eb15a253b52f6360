import math

import pytest

from juliarender.escape import PixelResult, evaluate
from juliarender.smoothing import smooth_iterations, smooth_value

def test_smooth_value_formula():
    # log10(log10(100)) / log10(2) == 1
    assert smooth_value(PixelResult(3, True, 10.0, 0.0)) == pytest.approx(4.0)

def test_smooth_value_matches_reference_expression():
    result = evaluate(1.5, 0.0, 0.0, 0.0, 3.0, 100)
    mag2 = result.final_re ** 2 + result.final_im ** 2
    expected = result.raw_iterations + 2 - math.log10(math.log10(mag2)) / math.log10(2)
    assert smooth_value(result) == pytest.approx(expected)

def test_smooth_iterations_grows_with_raw_count():
    assert smooth_iterations(5, 4.0, 0.0) - smooth_iterations(4, 4.0, 0.0) == pytest.approx(1.0)

def test_bounded_point_is_rejected():
    with pytest.raises(ValueError):
        smooth_value(PixelResult(1000, False, 0.1, 0.2))
