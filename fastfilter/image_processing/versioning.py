# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability tags for filter processors.

Provides the ``@processor_version`` class decorator that stamps a semantic
version on a processor, and ``@processor_tags`` for category and
description metadata used when listing the available filters.

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
2026-02-18
"""

# Standard library
import importlib.metadata
from typing import Callable, Optional, Type, TypeVar

# fastfilter internal
from fastfilter.vocabulary import ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None) -> Callable[[Type[T]], Type[T]]:
    """Class decorator that stamps ``__processor_version__`` on a processor.

    When *version* is omitted the installed ``fastfilter`` distribution
    version is used, or ``'unknown'`` if the package is not installed.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class MyFilter(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> MyFilter.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('fastfilter')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = 'unknown'
        return cls
    return decorator


def processor_tags(
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
) -> Callable[[Type[T]], Type[T]]:
    """Class decorator for processor capability metadata.

    Parameters
    ----------
    category : ProcessorCategory, optional
        Processing category.
    description : str, optional
        Short human-readable description of the processor.

    Raises
    ------
    TypeError
        If *category* is not a ``ProcessorCategory`` member.
    """
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'description': description,
        }
        return cls
    return decorator
