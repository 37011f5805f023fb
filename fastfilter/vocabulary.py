# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the fastfilter package.

Defines the controlled vocabularies used across the package: the border
padding modes understood by the padding and median routines, and the
processor categories stamped by ``@processor_tags``.

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
2026-02-10

Modified
--------
2026-10-18
"""

from enum import Enum
from typing import Union

from fastfilter.exceptions import ValidationError


class PaddingMode(Enum):
    """Border extrapolation strategy for padded filters.

    ``SYMMETRIC`` reflects the border through its edge sample, so a local
    slope continues outward (``x[-k] = 2*x[0] - x[k]``).
    ``ANTISYMMETRIC`` applies the opposite sign to the same recurrence and
    folds the local gradient back, which mirrors the samples
    (``x[-k] = x[k]``).

    The labels are swapped relative to the ImageJ fast-filters plugin,
    whose ``sym`` option is the mirror ``x[-1] = x[1]``. Here the name
    follows the signed recurrence, so callers porting settings from that
    plugin should map ``sym`` to ``ANTISYMMETRIC``.
    """

    SYMMETRIC = "symmetric"
    ANTISYMMETRIC = "antisymmetric"

    @property
    def sign(self) -> float:
        """Sign applied to the local first difference when extrapolating."""
        return 1.0 if self is PaddingMode.SYMMETRIC else -1.0

    @classmethod
    def coerce(cls, value: Union['PaddingMode', str]) -> 'PaddingMode':
        """Return the member named by *value*.

        Parameters
        ----------
        value : PaddingMode or str
            A member, or its string value (case-insensitive).

        Raises
        ------
        ValidationError
            If *value* does not name a padding mode.
        """
        if isinstance(value, cls):
            return value
        choices = tuple(m.value for m in cls)
        if not isinstance(value, str) or value.lower() not in choices:
            raise ValidationError(
                f"padding mode must be one of {choices}, got {value!r}"
            )
        return cls(value.lower())


class ProcessorCategory(Enum):
    """Processing categories for processor tagging."""

    FILTERS = "filters"
    BACKGROUND = "background"
    NOISE = "noise"
