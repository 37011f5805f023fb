# -*- coding: utf-8 -*-
"""
Tests for the separable running-sum mean filter.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-11

Modified
--------
2026-10-18
"""

import numpy as np
import pytest
from scipy.ndimage import uniform_filter

from fastfilter.exceptions import InvalidDimensionsError
from fastfilter.image_processing.filters.linear import (
    mean_filter,
    mean_height_filter,
    mean_width_filter,
)
from fastfilter.vocabulary import PaddingMode


def _demo_ramp():
    """25x25 image where every row is 1..25."""
    return np.tile(np.arange(1, 26, dtype=np.float32), 25)


def _clipped_box_mean(image, fw, fh):
    """Brute-force mean over the in-bounds part of each window."""
    rows, cols = image.shape
    out = np.empty_like(image, dtype=np.float64)
    for r in range(rows):
        r0, r1 = max(r - (fh - 1) // 2, 0), min(r + fh // 2, rows - 1)
        for c in range(cols):
            c0, c1 = max(c - (fw - 1) // 2, 0), min(c + fw // 2, cols - 1)
            out[r, c] = image[r0:r1 + 1, c0:c1 + 1].mean()
    return out


class TestRunningSum:
    """Truncated-window running means."""

    def test_row_edges_truncate(self):
        out = mean_filter([1, 2, 3, 4, 5], 5, 1, 3, 1)
        np.testing.assert_allclose(out, [1.5, 2, 3, 4, 4.5])

    def test_column_edges_truncate(self):
        out = mean_filter([1, 2, 3, 4, 5], 1, 5, 1, 3)
        np.testing.assert_allclose(out, [1.5, 2, 3, 4, 4.5])

    def test_width_pass_alone(self):
        src = np.array([1, 2, 3, 4, 5, 10, 20, 30, 40, 50], dtype=np.float64)
        out = mean_width_filter(src, 5, 2, 3)
        np.testing.assert_allclose(
            out, [1.5, 2, 3, 4, 4.5, 15, 20, 30, 40, 45]
        )

    def test_height_pass_alone(self):
        src = np.array([1, 10, 2, 20, 3, 30], dtype=np.float64)  # 2 wide, 3 tall
        out = mean_height_filter(src, 2, 3, 3)
        np.testing.assert_allclose(out, [1.5, 15, 2, 20, 2.5, 25])

    def test_kernel_wider_than_image(self):
        out = mean_filter([1, 2, 3], 3, 1, 7, 1)
        np.testing.assert_allclose(out, [2, 2, 2])

    def test_even_kernel_window(self):
        out = mean_filter([1, 2, 3, 4, 5], 5, 1, 2, 1)
        np.testing.assert_allclose(out, [1.5, 2.5, 3.5, 4.5, 5])

    @pytest.mark.parametrize('fw,fh', [(3, 3), (5, 3), (1, 7), (4, 2)])
    def test_matches_clipped_box_mean(self, fw, fh):
        image = np.random.RandomState(1).rand(9, 12)
        out = mean_filter(image.ravel(), 12, 9, fw, fh).reshape(9, 12)
        np.testing.assert_allclose(out, _clipped_box_mean(image, fw, fh),
                                   rtol=1e-10, atol=1e-12)

    def test_interior_matches_uniform_filter(self):
        image = np.random.RandomState(2).rand(15, 20)
        out = mean_filter(image.ravel(), 20, 15, 5, 3).reshape(15, 20)
        ref = uniform_filter(image, size=(3, 5))
        np.testing.assert_allclose(out[1:-1, 2:-2], ref[1:-1, 2:-2], rtol=1e-10)


class TestIdentity:
    """1x1 kernels leave the image unchanged."""

    def test_demo_ramp_unchanged(self):
        src = _demo_ramp()
        out = mean_filter(src, 25, 25, 1, 1)
        np.testing.assert_array_equal(out, src)

    def test_separate_passes_unchanged(self):
        src = _demo_ramp()
        out = mean_width_filter(src, 25, 25, 1)
        out = mean_height_filter(out, 25, 25, 1)
        np.testing.assert_array_equal(out, src)

    def test_returns_new_buffer(self):
        src = np.arange(6, dtype=np.float32)
        out = mean_filter(src, 3, 2, 1, 1)
        assert out is not src
        out[0] = 99.0
        assert src[0] == 0.0


class TestBuffers:
    """Dimensions, dtypes and input ownership."""

    @pytest.mark.parametrize('fw,fh', [(1, 1), (3, 3), (5, 1), (2, 4)])
    def test_length_preserved(self, fw, fh):
        out = mean_filter(np.ones(7 * 4), 7, 4, fw, fh)
        assert out.shape == (28,)

    def test_float64_preserved(self):
        assert mean_filter(np.ones(9), 3, 3, 3, 3).dtype == np.float64

    def test_float32_preserved(self):
        out = mean_filter(np.ones(9, dtype=np.float32), 3, 3, 3, 3)
        assert out.dtype == np.float32

    def test_integers_promoted_to_float32(self):
        out = mean_filter(np.arange(9, dtype=np.uint16), 3, 3, 3, 3)
        assert out.dtype == np.float32

    def test_input_not_modified(self):
        src = np.random.RandomState(4).rand(30)
        before = src.copy()
        mean_filter(src, 6, 5, 3, 3)
        np.testing.assert_array_equal(src, before)

    def test_constant_image(self):
        out = mean_filter(np.full(20, 3.5), 5, 4, 3, 3)
        np.testing.assert_allclose(out, 3.5)


class TestPaddedMean:
    """Mean over an extrapolated border."""

    def test_constant_image(self):
        out = mean_filter(np.full(30, 2.0), 6, 5, 3, 3, PaddingMode.SYMMETRIC)
        np.testing.assert_allclose(out, 2.0)

    def test_symmetric_ramp_is_preserved(self):
        """Symmetric windows over a trend-continuing border average to the center."""
        src = _demo_ramp().astype(np.float64)
        out = mean_filter(src, 25, 25, 3, 5, 'symmetric')
        np.testing.assert_allclose(out, src, rtol=1e-12)

    def test_differs_from_truncated_at_edges(self):
        src = _demo_ramp().astype(np.float64)
        truncated = mean_filter(src, 25, 25, 3, 3).reshape(25, 25)
        padded = mean_filter(src, 25, 25, 3, 3, 'symmetric').reshape(25, 25)
        assert truncated[0, 0] == pytest.approx(1.5)
        assert padded[0, 0] == pytest.approx(1.0)
        np.testing.assert_allclose(truncated[:, 1:-1], padded[:, 1:-1])

    def test_antisymmetric_ramp_edge(self):
        src = np.tile(np.arange(1.0, 6.0), 3)
        out = mean_filter(src, 5, 3, 3, 1, PaddingMode.ANTISYMMETRIC)
        # border column mirrors to 2, so the first window is {2, 1, 2}
        assert out[0] == pytest.approx(5.0 / 3.0)

    def test_single_row_constant(self):
        out = mean_filter(np.full(3, 2.0), 3, 1, 3, 3, 'symmetric')
        assert out.shape == (3,)
        np.testing.assert_allclose(out, 2.0)

    def test_single_row_ramp_is_preserved(self):
        src = np.arange(5.0)
        out = mean_filter(src, 5, 1, 3, 3, PaddingMode.SYMMETRIC)
        np.testing.assert_allclose(out, src, rtol=1e-12)

    def test_kernel_larger_than_image(self):
        out = mean_filter(np.full(4, 7.0), 2, 2, 5, 5, 'antisymmetric')
        assert out.shape == (4,)
        np.testing.assert_allclose(out, 7.0)


class TestErrors:
    """Preconditions fail before any output is produced."""

    @pytest.mark.parametrize('fw,fh', [(0, 3), (3, 0), (-1, 1)])
    def test_non_positive_kernel(self, fw, fh):
        with pytest.raises(InvalidDimensionsError, match=">= 1"):
            mean_filter(np.ones(9), 3, 3, fw, fh)

    def test_non_integer_kernel(self):
        with pytest.raises(InvalidDimensionsError, match="integer"):
            mean_filter(np.ones(9), 3, 3, 3.0, 3)

    def test_buffer_length_mismatch(self):
        with pytest.raises(InvalidDimensionsError, match="does not match"):
            mean_filter(np.ones(8), 3, 3, 3, 3)

    def test_zero_width(self):
        with pytest.raises(InvalidDimensionsError, match="width"):
            mean_filter(np.ones(0), 0, 3, 3, 3)

    def test_two_dimensional_buffer_rejected(self):
        with pytest.raises(InvalidDimensionsError, match="1D"):
            mean_filter(np.ones((3, 3)), 3, 3, 3, 3)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            mean_filter(np.ones(9), 3, 3, 0, 3)
