# -*- coding: utf-8 -*-
"""
FastFilter Exception Hierarchy - Typed failures for filter preconditions.

Every precondition a filter checks (kernel dimensions, buffer length,
border geometry) is validated before any output buffer is allocated, and a
violation is raised as one of the exceptions below. All of them subclass
both ``FastFilterError`` and the appropriate built-in exception, so callers
may catch either the package error or the familiar ``ValueError`` /
``IndexError``.

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
2026-02-06

Modified
--------
2026-10-18
"""


class FastFilterError(Exception):
    """Base exception for all fastfilter errors."""


class ValidationError(FastFilterError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for unknown padding modes, bad selection ranks, multi-channel
    images handed to a single-channel filter, and other input failures.
    """


class InvalidDimensionsError(ValidationError):
    """Image or kernel dimensions are not usable.

    Raised when a kernel dimension is not a positive integer, when the
    image width or height is not positive, or when a pixel buffer's
    length differs from ``width * height``.
    """


class UnsupportedKernelSizeError(ValidationError):
    """Kernel dimension has no unique center pixel.

    The median filter only accepts odd kernel dimensions; an even one
    raises this rather than silently picking a biased median.
    """


class OutOfRangeAccessError(FastFilterError, IndexError):
    """Padding geometry does not frame the image interior.

    Raised while the padding geometry is validated, before any pixel is
    written, when a padded size is smaller than the image size or exceeds
    it by an odd amount.
    """
