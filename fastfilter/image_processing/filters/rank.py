# -*- coding: utf-8 -*-
"""
Median Filter - Rectangular-kernel median via order-statistic selection.

The image is first padded by ``filter_dim // 2`` samples on every side
with :func:`~fastfilter.image_processing.filters.padding.pad`, so every
output pixel sees a full ``filter_width x filter_height`` neighborhood.
For each pixel the neighborhood is gathered in row-major kernel order
(kernel rows outer, kernel columns inner) into a scratch buffer, and
:func:`~fastfilter.image_processing.filters.selection.select` extracts the
sample of rank ``n // 2``.

Kernel dimensions must be odd; with an odd sample count rank ``n // 2``
is the true median.

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
2026-02-11

Modified
--------
2026-10-18
"""

# Standard library
import logging
from typing import Annotated, Any, Callable, List, Optional, Sequence, Union

# Third-party
import numpy as np

# fastfilter internal
from fastfilter.image_processing.base import ImageTransform
from fastfilter.image_processing.params import Desc, Options, Range
from fastfilter.image_processing.versioning import processor_tags, processor_version
from fastfilter.image_processing.filters._validation import (
    PaddedGeometry,
    validate_buffer,
    validate_kernel,
    validate_padding,
)
from fastfilter.image_processing.filters.padding import pad
from fastfilter.image_processing.filters.selection import select
from fastfilter.vocabulary import PaddingMode, ProcessorCategory

logger = logging.getLogger(__name__)


def median_filter(
    buffer: Union[np.ndarray, Sequence[float]],
    width: int,
    height: int,
    filter_width: int,
    filter_height: int,
    mode: Union[PaddingMode, str] = PaddingMode.SYMMETRIC,
    progress: Optional[Callable[[float], None]] = None,
) -> np.ndarray:
    """Median filter of a flat row-major image.

    Parameters
    ----------
    buffer : array_like
        Pixel samples, length ``width * height``. Not modified.
    width, height : int
        Image size.
    filter_width, filter_height : int
        Kernel size in pixels. Both must be odd.
    mode : PaddingMode or str
        Border extrapolation mode. Default ``PaddingMode.SYMMETRIC``.
    progress : callable, optional
        Called with the completed fraction after each output row.

    Returns
    -------
    np.ndarray
        New flat buffer of length ``width * height``; float64 when the
        input is float64, float32 otherwise.

    Raises
    ------
    InvalidDimensionsError
        If a kernel dimension is < 1 or the buffer length is wrong.
    UnsupportedKernelSizeError
        If a kernel dimension is even.
    """
    kernel = validate_kernel(filter_width, filter_height, require_odd=True)
    pixels = validate_buffer(buffer, width, height)
    mode = PaddingMode.coerce(mode)
    geometry = PaddedGeometry.for_kernel(width, height, kernel)
    validate_padding(geometry)
    logger.debug("Median filter %dx%d on %dx%d, %s padding",
                 filter_width, filter_height, width, height, mode.value)

    pw, ph = geometry.padded_width, geometry.padded_height
    padded = pad(pixels, width, height, pw, ph, mode).reshape(ph, pw)

    n = kernel.size
    rank = n // 2
    scratch: List[float] = [0.0] * n
    out = np.empty(width * height, dtype=pixels.dtype)
    for row in range(height):
        window_rows = padded[row:row + kernel.filter_height]
        offset = row * width
        for col in range(width):
            scratch[:] = window_rows[:, col:col + kernel.filter_width].ravel().tolist()
            out[offset + col] = select(scratch, 0, n - 1, rank)
        if progress is not None:
            progress((row + 1) / height)
    return out


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.NOISE,
                description='Rectangular median with extrapolated borders')
class MedianFilter(ImageTransform):
    """Spatial median filter with synthesized borders.

    Parameters
    ----------
    filter_width : int
        Kernel width in pixels, odd. Default 3.
    filter_height : int
        Kernel height in pixels, odd. Default 3.
    padding : str
        ``'symmetric'`` or ``'antisymmetric'`` border extrapolation.
        Default ``'symmetric'``.

    Examples
    --------
    >>> from fastfilter.image_processing.filters import MedianFilter
    >>> denoised = MedianFilter(filter_width=5, filter_height=5).apply(image)
    """

    filter_width: Annotated[int, Range(min=1, max=255),
                            Desc('Kernel width in pixels (odd)')] = 3
    filter_height: Annotated[int, Range(min=1, max=255),
                             Desc('Kernel height in pixels (odd)')] = 3
    padding: Annotated[str, Options('symmetric', 'antisymmetric'),
                       Desc('Border extrapolation')] = 'symmetric'

    def __post_init__(self) -> None:
        validate_kernel(self.filter_width, self.filter_height, require_odd=True)

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Filter a 2-D image.

        Parameters may be overridden per call. A ``progress_callback``
        keyword receives the completed fraction after each row.

        Returns
        -------
        np.ndarray
            Filtered image, same shape as *source*.
        """
        source = self._require_2d(source)
        params = self._resolve_params(kwargs)
        height, width = source.shape
        result = median_filter(
            source.ravel(), width, height,
            params['filter_width'], params['filter_height'],
            params['padding'],
            progress=lambda f: self._report_progress(kwargs, f),
        )
        return result.reshape(height, width)
