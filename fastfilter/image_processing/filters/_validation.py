# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Kernel, buffer, and border geometry checks.

Every filter entry point runs these checks before allocating its output,
so a bad call fails with a typed exception and never with a partially
written buffer. The padding geometry is computed and bounds-checked here
once, which keeps the per-ring index arithmetic in the padding routine
free of runtime range checks.

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

# Standard library
from dataclasses import dataclass
from typing import Any, Sequence, Union

# Third-party
import numpy as np

# fastfilter internal
from fastfilter.exceptions import (
    InvalidDimensionsError,
    OutOfRangeAccessError,
    UnsupportedKernelSizeError,
)


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass(frozen=True)
class KernelSpec:
    """Rectangular kernel dimensions.

    Parameters
    ----------
    filter_width : int
        Kernel width in pixels (columns).
    filter_height : int
        Kernel height in pixels (rows).
    """

    filter_width: int
    filter_height: int

    @property
    def half_width(self) -> int:
        return self.filter_width // 2

    @property
    def half_height(self) -> int:
        return self.filter_height // 2

    @property
    def size(self) -> int:
        """Number of samples in the kernel."""
        return self.filter_width * self.filter_height

    @property
    def is_odd(self) -> bool:
        return self.filter_width % 2 == 1 and self.filter_height % 2 == 1


@dataclass(frozen=True)
class PaddedGeometry:
    """Source and padded canvas sizes for border synthesis.

    The source occupies the sub-rectangle starting at
    ``(offset_y, offset_x)`` of the padded canvas.

    Parameters
    ----------
    width, height : int
        Source image size.
    padded_width, padded_height : int
        Padded canvas size.
    """

    width: int
    height: int
    padded_width: int
    padded_height: int

    @classmethod
    def for_kernel(cls, width: int, height: int,
                   kernel: KernelSpec) -> 'PaddedGeometry':
        """Geometry adding ``filter_dim // 2`` samples on every side."""
        return cls(
            width=width,
            height=height,
            padded_width=width + 2 * kernel.half_width,
            padded_height=height + 2 * kernel.half_height,
        )

    @property
    def extra_width(self) -> int:
        return self.padded_width - self.width

    @property
    def extra_height(self) -> int:
        return self.padded_height - self.height

    @property
    def offset_x(self) -> int:
        return self.extra_width // 2

    @property
    def offset_y(self) -> int:
        return self.extra_height // 2


def validate_image_size(width: int, height: int) -> None:
    """Validate that *width* and *height* are positive integers.

    Raises
    ------
    InvalidDimensionsError
        If either dimension is not a positive integer.
    """
    for name, value in (('width', width), ('height', height)):
        if not _is_int(value):
            raise InvalidDimensionsError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
        if value < 1:
            raise InvalidDimensionsError(f"{name} must be >= 1, got {value}")


def validate_kernel(filter_width: int, filter_height: int,
                    require_odd: bool = False) -> KernelSpec:
    """Validate kernel dimensions and return them as a ``KernelSpec``.

    Parameters
    ----------
    filter_width, filter_height : int
        Kernel dimensions in pixels.
    require_odd : bool
        Reject even dimensions. Default ``False``.

    Raises
    ------
    InvalidDimensionsError
        If a dimension is not an integer or is less than 1.
    UnsupportedKernelSizeError
        If *require_odd* is set and a dimension is even.
    """
    for name, value in (('filter_width', filter_width),
                        ('filter_height', filter_height)):
        if not _is_int(value):
            raise InvalidDimensionsError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
        if value < 1:
            raise InvalidDimensionsError(f"{name} must be >= 1, got {value}")
        if require_odd and value % 2 == 0:
            raise UnsupportedKernelSizeError(
                f"{name} must be odd, got {value}"
            )
    return KernelSpec(int(filter_width), int(filter_height))


def working_dtype(array: np.ndarray) -> np.dtype:
    """float64 input keeps float64; anything else is processed as float32."""
    if array.dtype == np.float64:
        return np.dtype(np.float64)
    return np.dtype(np.float32)


def validate_buffer(buffer: Union[np.ndarray, Sequence[float]],
                    width: int, height: int) -> np.ndarray:
    """Check a flat row-major pixel buffer against its image size.

    Parameters
    ----------
    buffer : array_like
        1-D pixel samples, length ``width * height``.
    width, height : int
        Image size.

    Returns
    -------
    np.ndarray
        The samples as a 1-D floating-point array (float64 input stays
        float64, anything else becomes float32). The caller's buffer is
        never returned itself.

    Raises
    ------
    InvalidDimensionsError
        If the size is invalid, the buffer is not 1-D, or its length is
        not ``width * height``.
    """
    validate_image_size(width, height)
    array = np.asarray(buffer)
    if array.ndim != 1:
        raise InvalidDimensionsError(
            f"Pixel buffer must be 1D, got shape {array.shape}"
        )
    if array.size != width * height:
        raise InvalidDimensionsError(
            f"Pixel buffer length {array.size} does not match "
            f"width*height = {width}*{height} = {width * height}"
        )
    return array.astype(working_dtype(array), copy=True)


def validate_padding(geometry: PaddedGeometry) -> None:
    """Check that the padded canvas frames the image evenly.

    Ring ``r`` of the border reads interior samples ``r`` and ``r + 1``
    clamped to the last interior sample, so any image size is accepted
    once each padded size exceeds it by a non-negative even amount.

    Raises
    ------
    OutOfRangeAccessError
        If an extra size is negative or odd.
    """
    for axis, extra in (
        ('width', geometry.extra_width),
        ('height', geometry.extra_height),
    ):
        if extra < 0 or extra % 2:
            raise OutOfRangeAccessError(
                f"Padded {axis} must exceed the image {axis} by a "
                f"non-negative even amount, got {extra}"
            )
