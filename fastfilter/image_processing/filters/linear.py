# -*- coding: utf-8 -*-
"""
Separable Mean Filter - Running-sum box mean in two 1-D passes.

A 2-D box mean is the outer product of two 1-D box means, so the filter
runs a horizontal pass along every row and then a vertical pass along
every column of the intermediate result. Each pass keeps a running sum
over a sliding window: moving one sample subtracts the sample that leaves
the window and adds the one that enters it, so the cost per output sample
does not depend on the kernel size. All rows (or columns) advance
together as numpy vectors.

Border handling
---------------
By default no border is synthesized. Near an edge the window is truncated
to the samples that exist and the mean divides by that count, e.g. a
width-3 mean of ``[1, 2, 3, 4, 5]`` is ``[1.5, 2, 3, 4, 4.5]``. Passing a
``PaddingMode`` instead pads the image with
:func:`~fastfilter.image_processing.filters.padding.pad`, filters the
padded canvas, and crops the interior.

Even kernel sizes are accepted: the window spans ``size`` samples at
offsets ``-(size - 1) // 2 .. size // 2``.

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
from typing import Annotated, Any, Optional, Sequence, Union

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
from fastfilter.image_processing.filters.padding import copy_interior, pad
from fastfilter.vocabulary import PaddingMode, ProcessorCategory

logger = logging.getLogger(__name__)

Buffer = Union[np.ndarray, Sequence[float]]


def _running_mean(lines: np.ndarray, size: int) -> np.ndarray:
    """Truncated-window running mean along axis 1 of *lines*."""
    if size == 1:
        return lines.copy()
    before = (size - 1) // 2
    after = size // 2
    n = lines.shape[1]
    out = np.empty_like(lines)
    total = lines[:, :min(after, n - 1) + 1].sum(axis=1)
    for i in range(n):
        if i > 0:
            entering = i + after
            if entering < n:
                total += lines[:, entering]
            leaving = i - before - 1
            if leaving >= 0:
                total -= lines[:, leaving]
        count = min(i + after, n - 1) - max(i - before, 0) + 1
        out[:, i] = total / count
    return out


def mean_width_filter(buffer: Buffer, width: int, height: int,
                      filter_width: int) -> np.ndarray:
    """Horizontal pass: 1-D running mean of length *filter_width* along rows.

    Returns a new flat buffer; a width of 1 returns an unchanged copy.
    """
    pixels = validate_buffer(buffer, width, height)
    validate_kernel(filter_width, 1)
    rows = pixels.reshape(height, width)
    return _running_mean(rows, filter_width).ravel()


def mean_height_filter(buffer: Buffer, width: int, height: int,
                       filter_height: int) -> np.ndarray:
    """Vertical pass: 1-D running mean of length *filter_height* along columns.

    Returns a new flat buffer; a height of 1 returns an unchanged copy.
    """
    pixels = validate_buffer(buffer, width, height)
    validate_kernel(1, filter_height)
    cols = pixels.reshape(height, width).T
    return _running_mean(cols, filter_height).T.ravel()


def mean_filter(
    buffer: Buffer,
    width: int,
    height: int,
    filter_width: int,
    filter_height: int,
    mode: Optional[Union[PaddingMode, str]] = None,
) -> np.ndarray:
    """Separable box mean of a flat row-major image.

    Parameters
    ----------
    buffer : array_like
        Pixel samples, length ``width * height``. Not modified.
    width, height : int
        Image size.
    filter_width, filter_height : int
        Kernel size in pixels, each >= 1.
    mode : PaddingMode or str, optional
        ``None`` (default) truncates the window at the edges. A padding
        mode extrapolates a border first and filters the padded canvas.

    Returns
    -------
    np.ndarray
        New flat buffer of length ``width * height``; float64 when the
        input is float64, float32 otherwise.

    Raises
    ------
    InvalidDimensionsError
        If a kernel dimension is < 1 or the buffer length is wrong.
    """
    kernel = validate_kernel(filter_width, filter_height)
    pixels = validate_buffer(buffer, width, height)

    if mode is None:
        logger.debug("Mean filter %dx%d on %dx%d, truncated edges",
                     filter_width, filter_height, width, height)
        result = mean_width_filter(pixels, width, height, kernel.filter_width)
        return mean_height_filter(result, width, height, kernel.filter_height)

    mode = PaddingMode.coerce(mode)
    geometry = PaddedGeometry.for_kernel(width, height, kernel)
    validate_padding(geometry)
    logger.debug("Mean filter %dx%d on %dx%d, %s padding",
                 filter_width, filter_height, width, height, mode.value)
    pw, ph = geometry.padded_width, geometry.padded_height
    padded = pad(pixels, width, height, pw, ph, mode)
    result = mean_width_filter(padded, pw, ph, kernel.filter_width)
    result = mean_height_filter(result, pw, ph, kernel.filter_height)
    return copy_interior(result, pw, ph, width, height)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Separable running-sum box mean')
class MeanFilter(ImageTransform):
    """Fast separable mean (box) filter.

    Parameters
    ----------
    filter_width : int
        Kernel width in pixels. Default 3.
    filter_height : int
        Kernel height in pixels. Default 3.
    padding : str
        ``'none'`` truncates the window at the edges; ``'symmetric'`` or
        ``'antisymmetric'`` extrapolates a border first. Default
        ``'none'``.

    Examples
    --------
    >>> from fastfilter.image_processing.filters import MeanFilter
    >>> smoothed = MeanFilter(filter_width=5, filter_height=3).apply(image)
    """

    filter_width: Annotated[int, Range(min=1, max=255),
                            Desc('Kernel width in pixels')] = 3
    filter_height: Annotated[int, Range(min=1, max=255),
                             Desc('Kernel height in pixels')] = 3
    padding: Annotated[str, Options('none', 'symmetric', 'antisymmetric'),
                       Desc('Border handling')] = 'none'

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Filter a 2-D image.

        Parameters may be overridden per call, e.g.
        ``apply(image, filter_width=7)``.

        Returns
        -------
        np.ndarray
            Filtered image, same shape as *source*.
        """
        source = self._require_2d(source)
        params = self._resolve_params(kwargs)
        height, width = source.shape
        mode = None if params['padding'] == 'none' else params['padding']
        result = mean_filter(
            source.ravel(), width, height,
            params['filter_width'], params['filter_height'], mode,
        )
        self._report_progress(kwargs, 1.0)
        return result.reshape(height, width)
