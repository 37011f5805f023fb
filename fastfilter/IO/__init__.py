# -*- coding: utf-8 -*-
"""
IO Module - Host-side image sources for the filters.

Provides the ``ImageSource`` interface, the in-memory
``ArrayImageSource``, and the ``run_filter`` dispatch helper.

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

from fastfilter.IO.base import ImageSource, run_filter
from fastfilter.IO.numpy_io import ArrayImageSource

__all__ = ['ImageSource', 'ArrayImageSource', 'run_filter']
