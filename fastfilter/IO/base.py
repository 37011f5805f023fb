# -*- coding: utf-8 -*-
"""
Image Source Interface - Host-side adapter for single-channel filtering.

The filters consume a flat row-major float buffer plus its width and
height, and produce the same. ``ImageSource`` is the seam between them
and whatever image container the host uses: the host converts its pixels
to floating point in ``get_pixels_as_float`` and takes the filtered
buffer back in ``set_result``. ``run_filter`` is the dispatch step that
ties a source to an ``ImageTransform``.

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
2026-01-30

Modified
--------
2026-02-18
"""

# Standard library
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

# Third-party
import numpy as np

# fastfilter internal
from fastfilter.image_processing.base import ImageTransform

logger = logging.getLogger(__name__)


class ImageSource(ABC):
    """
    Abstract base class for images handed to the filters.

    Concrete sources own the conversion from their native pixel format
    to a flat floating-point buffer and back. A source is expected to
    reject multi-channel imagery when it is constructed.
    """

    @abstractmethod
    def get_pixels_as_float(self) -> Tuple[np.ndarray, int, int]:
        """
        Return the image as a flat row-major floating-point buffer.

        Returns
        -------
        Tuple[np.ndarray, int, int]
            ``(buffer, width, height)`` with ``len(buffer) == width * height``.
        """
        ...

    @abstractmethod
    def set_result(self, buffer: np.ndarray) -> None:
        """
        Accept a filtered buffer of the same logical size.

        Parameters
        ----------
        buffer : np.ndarray
            Flat row-major buffer, length ``width * height``.
        """
        ...

    @property
    @abstractmethod
    def result(self) -> Optional[np.ndarray]:
        """The last buffer passed to ``set_result``, or ``None``."""
        ...


def run_filter(source: ImageSource, transform: ImageTransform,
               **kwargs: Any) -> np.ndarray:
    """Filter the pixels of *source* and store the result back on it.

    Parameters
    ----------
    source : ImageSource
        Image to read from and write to.
    transform : ImageTransform
        Filter to apply.
    **kwargs
        Forwarded to ``transform.apply`` (parameter overrides,
        ``progress_callback``).

    Returns
    -------
    np.ndarray
        The filtered image, shape ``(height, width)``.
    """
    buffer, width, height = source.get_pixels_as_float()
    logger.debug("Running %s on %dx%d image",
                 type(transform).__qualname__, width, height)
    result = transform.apply(np.asarray(buffer).reshape(height, width), **kwargs)
    source.set_result(result.ravel())
    return result
