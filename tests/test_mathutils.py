import numpy as np
import pytest

from baamboo.mathutils import align_up, calculate_mip_count, smooth_step


@pytest.mark.parametrize("size", [0, 1, 7, 255, 256, 257, 1000])
@pytest.mark.parametrize("alignment", [1, 4, 256])
def test_align_up_invariants(size, alignment):
    result = align_up(size, alignment)
    assert result % alignment == 0
    assert size <= result < size + alignment


def test_align_up_already_aligned():
    assert align_up(256, 256) == 256


def test_mip_count_values():
    assert calculate_mip_count(1, 1) == 1
    assert calculate_mip_count(1024, 1024) == 11
    assert calculate_mip_count(1024, 512) == calculate_mip_count(512, 512)


def test_mip_count_rejects_zero():
    with pytest.raises(ValueError):
        calculate_mip_count(0, 16)


def test_smooth_step_endpoints_and_clamp():
    a = [0.0, 1.0, 2.0]
    b = [4.0, 5.0, 6.0]
    assert np.allclose(smooth_step(a, b, 0.0), a)
    assert np.allclose(smooth_step(a, b, 1.0), b)
    assert np.allclose(smooth_step(a, b, -3.0), a)
    assert np.allclose(smooth_step(a, b, 2.0), b)


def test_smooth_step_midpoint_is_symmetric():
    a = np.array([0.0, 1.0, 2.0])
    b = np.array([4.0, 5.0, 6.0])
    assert np.allclose(smooth_step(a, b, 0.5), (a + b) / 2)