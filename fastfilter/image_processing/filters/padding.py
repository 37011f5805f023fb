# -*- coding: utf-8 -*-
"""
Border Padding - Ring-by-ring extrapolation of image borders.

Builds a padded canvas whose interior is an exact copy of the source and
whose border is synthesized one ring at a time, outward from the interior
edge. Each new row (then column) is the previously written neighbor plus
or minus the first difference of two interior samples:

    new = prev + sign * (x[r] - x[r + 1])

With ``PaddingMode.SYMMETRIC`` (``sign = +1``) the rings close to
``x[-k] = 2*x[0] - x[k]``: the local slope at the edge continues outward,
which keeps gradients continuous for smoothing and background filters.
``PaddingMode.ANTISYMMETRIC`` (``sign = -1``) closes to ``x[-k] = x[k]``,
a mirror that folds the gradient back.

On an axis shorter than the border, the difference indices clamp to the
last interior sample, so the outer rings repeat the last written value
(a single row or column is extended as a constant).

Rows are padded before columns, and the column rings span the full padded
height, so the corners are extrapolated from the already-padded rows.

Dependencies
------------
numpy

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
2026-02-12

Modified
--------
2026-10-18
"""

# Standard library
import logging
from typing import Sequence, Union

# Third-party
import numpy as np

# fastfilter internal
from fastfilter.exceptions import InvalidDimensionsError
from fastfilter.image_processing.filters._validation import (
    PaddedGeometry,
    validate_buffer,
    validate_image_size,
    validate_kernel,
    validate_padding,
    working_dtype,
)
from fastfilter.vocabulary import PaddingMode

logger = logging.getLogger(__name__)


def _fill_rows(canvas: np.ndarray, geometry: PaddedGeometry, sign: float) -> None:
    oy, ox = geometry.offset_y, geometry.offset_x
    top, bot = oy, oy + geometry.height - 1
    last = geometry.height - 1
    cols = slice(ox, ox + geometry.width)
    for r in range(oy):
        # indices clamp to the interior; past its end the ring repeats
        a, b = min(r, last), min(r + 1, last)
        canvas[top - 1 - r, cols] = canvas[top - r, cols] + sign * (
            canvas[top + a, cols] - canvas[top + b, cols]
        )
        canvas[bot + 1 + r, cols] = canvas[bot + r, cols] + sign * (
            canvas[bot - a, cols] - canvas[bot - b, cols]
        )


def _fill_cols(canvas: np.ndarray, geometry: PaddedGeometry, sign: float) -> None:
    ox = geometry.offset_x
    left, right = ox, ox + geometry.width - 1
    last = geometry.width - 1
    for c in range(ox):
        a, b = min(c, last), min(c + 1, last)
        canvas[:, left - 1 - c] = canvas[:, left - c] + sign * (
            canvas[:, left + a] - canvas[:, left + b]
        )
        canvas[:, right + 1 + c] = canvas[:, right + c] + sign * (
            canvas[:, right - a] - canvas[:, right - b]
        )


def pad(
    src: Union[np.ndarray, Sequence[float]],
    width: int,
    height: int,
    padded_width: int,
    padded_height: int,
    mode: Union[PaddingMode, str] = PaddingMode.SYMMETRIC,
) -> np.ndarray:
    """Pad a flat row-major pixel buffer to a larger canvas.

    Parameters
    ----------
    src : array_like
        Source pixels, length ``width * height``. Not modified.
    width, height : int
        Source image size.
    padded_width, padded_height : int
        Canvas size. Each must exceed the source size by a non-negative
        even amount.
    mode : PaddingMode or str
        Border extrapolation mode. Default ``PaddingMode.SYMMETRIC``.

    Returns
    -------
    np.ndarray
        Flat padded buffer of length ``padded_width * padded_height``.
        The sub-rectangle at ``((padded_height - height) // 2,
        (padded_width - width) // 2)`` equals *src* exactly.

    Raises
    ------
    InvalidDimensionsError
        If the source size or buffer length is invalid.
    OutOfRangeAccessError
        If a padded size is smaller than the image size or exceeds it
        by an odd amount.
    ValidationError
        If *mode* is not a padding mode.
    """
    mode = PaddingMode.coerce(mode)
    pixels = validate_buffer(src, width, height)
    geometry = PaddedGeometry(width, height, padded_width, padded_height)
    validate_padding(geometry)
    logger.debug("Padding %dx%d -> %dx%d (%s)", width, height,
                 padded_width, padded_height, mode.value)

    canvas = np.zeros((padded_height, padded_width), dtype=pixels.dtype)
    oy, ox = geometry.offset_y, geometry.offset_x
    canvas[oy:oy + height, ox:ox + width] = pixels.reshape(height, width)
    _fill_rows(canvas, geometry, mode.sign)
    _fill_cols(canvas, geometry, mode.sign)
    return canvas.ravel()


def pad_image(
    image: np.ndarray,
    filter_width: int,
    filter_height: int,
    mode: Union[PaddingMode, str] = PaddingMode.SYMMETRIC,
) -> np.ndarray:
    """Pad a 2-D image by ``filter_dim // 2`` samples on every side.

    Parameters
    ----------
    image : np.ndarray
        Single-channel image, shape ``(rows, cols)``.
    filter_width, filter_height : int
        Kernel size the padding is meant for.
    mode : PaddingMode or str
        Border extrapolation mode.

    Returns
    -------
    np.ndarray
        Padded image, shape ``(rows + 2*(filter_height//2),
        cols + 2*(filter_width//2))``.
    """
    image = np.asarray(image)
    if image.ndim != 2:
        raise InvalidDimensionsError(
            f"Expected 2D image, got shape {image.shape}"
        )
    kernel = validate_kernel(filter_width, filter_height)
    height, width = image.shape
    geometry = PaddedGeometry.for_kernel(width, height, kernel)
    flat = pad(image.ravel(), width, height, geometry.padded_width,
               geometry.padded_height, mode)
    return flat.reshape(geometry.padded_height, geometry.padded_width)


def copy_interior(
    padded: Union[np.ndarray, Sequence[float]],
    padded_width: int,
    padded_height: int,
    width: int,
    height: int,
) -> np.ndarray:
    """Extract the centered ``width x height`` interior of a padded buffer.

    Parameters
    ----------
    padded : array_like
        Flat padded buffer, length ``padded_width * padded_height``.
    padded_width, padded_height : int
        Padded canvas size.
    width, height : int
        Interior size.

    Returns
    -------
    np.ndarray
        Flat buffer of length ``width * height``.
    """
    validate_image_size(width, height)
    pixels = validate_buffer(padded, padded_width, padded_height)
    geometry = PaddedGeometry(width, height, padded_width, padded_height)
    if geometry.extra_width < 0 or geometry.extra_height < 0:
        raise InvalidDimensionsError(
            f"Interior {width}x{height} does not fit in "
            f"{padded_width}x{padded_height}"
        )
    oy, ox = geometry.offset_y, geometry.offset_x
    canvas = pixels.reshape(padded_height, padded_width)
    return canvas[oy:oy + height, ox:ox + width].ravel()
