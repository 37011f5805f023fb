# -*- coding: utf-8 -*-
"""
FastFilter - Fast mean and median spatial filters for single-channel images.

A separable running-sum mean filter, a quickselect-driven median filter,
and the ring-by-ring border extrapolation the median filter pads with.
The functional core works on flat row-major float buffers; the processor
classes wrap it for 2-D numpy arrays.

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
2026-01-30

Modified
--------
2026-02-18
"""

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from fastfilter.exceptions import (
    FastFilterError,
    ValidationError,
    InvalidDimensionsError,
    UnsupportedKernelSizeError,
    OutOfRangeAccessError,
)
from fastfilter.vocabulary import PaddingMode, ProcessorCategory
from fastfilter.image_processing.filters import (
    mean_filter,
    median_filter,
    pad,
    select,
)

__all__ = [
    'FastFilterError',
    'ValidationError',
    'InvalidDimensionsError',
    'UnsupportedKernelSizeError',
    'OutOfRangeAccessError',
    'PaddingMode',
    'ProcessorCategory',
    'mean_filter',
    'median_filter',
    'pad',
    'select',
]
