# -*- coding: utf-8 -*-
"""
NumPy Image Source - In-memory ``ImageSource`` backed by a numpy array.

Wraps a 2-D array (any real dtype) as a filter input, converting it to
float32 the way an 8/16-bit grayscale image is promoted before filtering.
Color or multi-band arrays are rejected up front.

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
2026-02-18
"""

# Standard library
from typing import Optional, Tuple

# Third-party
import numpy as np

# fastfilter internal
from fastfilter.exceptions import InvalidDimensionsError, ValidationError
from fastfilter.IO.base import ImageSource


class ArrayImageSource(ImageSource):
    """Single-channel image held in memory.

    Parameters
    ----------
    array : np.ndarray
        Image of shape ``(rows, cols)``. A trailing singleton channel
        ``(rows, cols, 1)`` is accepted and dropped. The array is copied.

    Raises
    ------
    ValidationError
        If the image has more than one channel or a complex dtype.
    InvalidDimensionsError
        If the array is not 2-D (after dropping a singleton channel) or
        is empty.

    Examples
    --------
    >>> from fastfilter.IO import ArrayImageSource, run_filter
    >>> from fastfilter.image_processing import MedianFilter
    >>> src = ArrayImageSource(image)
    >>> run_filter(src, MedianFilter(filter_width=3, filter_height=3))
    >>> cleaned = src.result
    """

    def __init__(self, array: np.ndarray) -> None:
        array = np.asarray(array)
        if array.ndim == 3 and array.shape[-1] == 1:
            array = array[..., 0]
        if array.ndim == 3:
            raise ValidationError(
                f"Image needs to be a grayscale image, got shape {array.shape}"
            )
        if array.ndim != 2 or array.size == 0:
            raise InvalidDimensionsError(
                f"Expected non-empty 2D image, got shape {array.shape}"
            )
        if np.iscomplexobj(array):
            raise ValidationError("Complex images are not supported")
        self._pixels = array.astype(np.float32)
        self._result: Optional[np.ndarray] = None

    @property
    def shape(self) -> Tuple[int, int]:
        """``(rows, cols)`` of the wrapped image."""
        return self._pixels.shape

    def get_pixels_as_float(self) -> Tuple[np.ndarray, int, int]:
        height, width = self._pixels.shape
        return self._pixels.ravel().copy(), width, height

    def set_result(self, buffer: np.ndarray) -> None:
        buffer = np.asarray(buffer)
        height, width = self._pixels.shape
        if buffer.size != width * height:
            raise InvalidDimensionsError(
                f"Result length {buffer.size} does not match "
                f"width*height = {width * height}"
            )
        self._result = buffer.reshape(height, width).copy()

    @property
    def result(self) -> Optional[np.ndarray]:
        return self._result
