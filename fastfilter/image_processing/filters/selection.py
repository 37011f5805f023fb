# -*- coding: utf-8 -*-
"""
Order-Statistic Selection - In-place quickselect.

Finds the k-th smallest value of an unordered buffer by repeated Hoare
partitioning, narrowing to the side that holds rank ``k`` each round.
Average cost is linear in the range length; adversarial inputs can reach
quadratic cost, which is irrelevant for the small fixed-size neighborhoods
gathered by the median filter.

Author
------
Steven Siebert

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
from typing import MutableSequence

# fastfilter internal
from fastfilter.exceptions import ValidationError


def _median_of_three(a: float, b: float, c: float) -> float:
    if a > b:
        a, b = b, a
    if b > c:
        b = c
    return a if a > b else b


def select(buffer: MutableSequence[float], low: int, high: int, k: int) -> float:
    """Return the value of rank *k* within ``buffer[low..high]``.

    The value returned is the one that would sit at index *k* if the
    inclusive range ``buffer[low..high]`` were sorted ascending. The
    range is partitioned in place; elements outside it are untouched.
    Duplicate values are handled; which of several equal samples ends up
    at index *k* is unspecified.

    Parameters
    ----------
    buffer : MutableSequence[float]
        List or 1-D numpy array. Reordered in place.
    low, high : int
        Inclusive bounds of the range to select from.
    k : int
        0-based rank, ``low <= k <= high``.

    Returns
    -------
    float
        The rank-*k* value.

    Raises
    ------
    ValidationError
        If the bounds fall outside *buffer* or *k* is outside
        ``[low, high]``.

    Examples
    --------
    >>> select([9, 3, 7, 1, 5], 0, 4, 2)
    5.0
    """
    if not 0 <= low <= high < len(buffer):
        raise ValidationError(
            f"Selection range [{low}, {high}] is outside a buffer of "
            f"length {len(buffer)}"
        )
    if not low <= k <= high:
        raise ValidationError(
            f"Rank {k} is outside the selection range [{low}, {high}]"
        )

    while low < high:
        pivot = _median_of_three(
            buffer[low], buffer[(low + high) // 2], buffer[high]
        )
        i, j = low, high
        while i <= j:
            while buffer[i] < pivot:
                i += 1
            while buffer[j] > pivot:
                j -= 1
            if i <= j:
                buffer[i], buffer[j] = buffer[j], buffer[i]
                i += 1
                j -= 1
        # buffer[low..j] <= pivot <= buffer[i..high]; anything between is
        # equal to the pivot and already in its final position.
        if k <= j:
            high = j
        elif k >= i:
            low = i
        else:
            break
    return float(buffer[k])
