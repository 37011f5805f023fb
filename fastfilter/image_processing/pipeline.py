# -*- coding: utf-8 -*-
"""
Processing Pipeline - Sequential composition of image transforms.

Chains ``ImageTransform`` instances so that the output of each step feeds
the next, e.g. a mean pre-smoothing followed by a median background
estimate. The pipeline is itself an ``ImageTransform`` and can be nested.

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
2026-02-10

Modified
--------
2026-02-18
"""

# Standard library
import logging
from typing import Any, List, Sequence

# Third-party
import numpy as np

# fastfilter internal
from fastfilter.image_processing.base import ImageTransform

logger = logging.getLogger(__name__)


class Pipeline(ImageTransform):
    """Sequential chain of image transforms.

    Parameters
    ----------
    steps : Sequence[ImageTransform]
        Ordered transforms to apply. Must contain at least one.

    Examples
    --------
    >>> from fastfilter.image_processing import Pipeline
    >>> from fastfilter.image_processing.filters import MeanFilter, MedianFilter
    >>> background = Pipeline([
    ...     MeanFilter(filter_width=3, filter_height=3),
    ...     MedianFilter(filter_width=15, filter_height=15,
    ...                  padding='antisymmetric'),
    ... ])
    >>> result = background.apply(image)
    """

    __processor_version__ = '1.0.0'

    def __init__(self, steps: Sequence[ImageTransform]) -> None:
        if not steps:
            raise ValueError("Pipeline requires at least one transform")
        for i, step in enumerate(steps):
            if not isinstance(step, ImageTransform):
                raise TypeError(
                    f"Step {i} is not an ImageTransform: {type(step).__name__}"
                )
        self._steps: List[ImageTransform] = list(steps)

    @property
    def steps(self) -> List[ImageTransform]:
        """Shallow copy of the ordered step list."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"Pipeline({[type(s).__name__ for s in self._steps]})"

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply every step in order.

        ``progress_callback`` is intercepted and rescaled so each step
        reports its share of the overall progress. Other keyword
        arguments are forwarded to every step.
        """
        n = len(self._steps)
        outer_cb = kwargs.pop('progress_callback', None)

        result = source
        for i, step in enumerate(self._steps):
            logger.debug("Pipeline step %d/%d: %s", i + 1, n,
                         type(step).__qualname__)
            step_kwargs = dict(kwargs)
            if outer_cb is not None:
                step_kwargs['progress_callback'] = (
                    lambda f, _b=i / n, _s=1.0 / n: outer_cb(_b + f * _s)
                )
            result = step.apply(result, **step_kwargs)
            if outer_cb is not None:
                outer_cb((i + 1) / n)
        return result
