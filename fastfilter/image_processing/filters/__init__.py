# -*- coding: utf-8 -*-
"""
Spatial Filters - Fast mean and median filters for single-channel images.

Functional core
    ``mean_filter`` — separable running-sum box mean
    ``median_filter`` — rectangular median via quickselect
    ``pad`` / ``pad_image`` / ``copy_interior`` — border synthesis
    ``select`` — in-place order-statistic selection

Processors
    ``MeanFilter`` — ``ImageTransform`` wrapper for ``mean_filter``
    ``MedianFilter`` — ``ImageTransform`` wrapper for ``median_filter``

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
2026-02-18
"""

from fastfilter.image_processing.filters._validation import (
    KernelSpec,
    PaddedGeometry,
)
from fastfilter.image_processing.filters.linear import (
    MeanFilter,
    mean_filter,
    mean_height_filter,
    mean_width_filter,
)
from fastfilter.image_processing.filters.padding import copy_interior, pad, pad_image
from fastfilter.image_processing.filters.rank import MedianFilter, median_filter
from fastfilter.image_processing.filters.selection import select

__all__ = [
    'KernelSpec',
    'PaddedGeometry',
    'MeanFilter',
    'MedianFilter',
    'mean_filter',
    'mean_width_filter',
    'mean_height_filter',
    'median_filter',
    'pad',
    'pad_image',
    'copy_interior',
    'select',
]
