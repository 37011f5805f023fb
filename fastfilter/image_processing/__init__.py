# -*- coding: utf-8 -*-
"""
Image Processing Module - Processor framework and spatial filters.

Base infrastructure:
    ``ImageProcessor``, ``ImageTransform``, ``Pipeline``,
    ``processor_version``, ``processor_tags``,
    ``Range``, ``Options``, ``Desc``, ``ParamSpec``

Filters:
    ``MeanFilter``, ``MedianFilter``, ``mean_filter``, ``median_filter``

Usage
-----
    >>> from fastfilter.image_processing import MedianFilter
    >>> f = MedianFilter(filter_width=5, filter_height=5, padding='antisymmetric')
    >>> cleaned = f.apply(image)

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

from fastfilter.image_processing.base import ImageProcessor, ImageTransform
from fastfilter.image_processing.params import Desc, Options, ParamSpec, Range
from fastfilter.image_processing.pipeline import Pipeline
from fastfilter.image_processing.versioning import processor_tags, processor_version
from fastfilter.image_processing.filters import (
    MeanFilter,
    MedianFilter,
    mean_filter,
    median_filter,
)

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'Pipeline',
    'processor_version',
    'processor_tags',
    'Range',
    'Options',
    'Desc',
    'ParamSpec',
    'MeanFilter',
    'MedianFilter',
    'mean_filter',
    'median_filter',
]
