# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for filter processors.

Defines ``ImageProcessor``, the common base that collects ``Annotated``
tunable parameters, generates a validating ``__init__``, warns once per
class when no processor version was declared, and resolves per-call
parameter overrides; and ``ImageTransform``, the ABC for processors that
map a single-channel image to a new image of the same shape.

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
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# fastfilter internal
from fastfilter.exceptions import InvalidDimensionsError
from fastfilter.image_processing.params import ParamSpec, collect_param_specs, _make_init

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: concrete subclasses that do not declare a
    version via ``@processor_version('x.y.z')`` trigger a ``UserWarning``
    at first instantiation. The check lives in ``__new__`` so decorators
    have already run.

    **Tunable parameters**: subclasses declare settings as
    ``typing.Annotated`` class-body fields using the markers from
    :mod:`fastfilter.image_processing.params`. ``__init_subclass__``
    collects them into ``__param_specs__`` and generates ``__init__``
    unless the subclass defines its own. ``_resolve_params(kwargs)``
    merges instance values with per-call overrides.
    """

    _version_warned_classes: set = set()

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance settings with runtime *kwargs* overrides.

        Keys in *kwargs* that are not declared parameters (for example
        ``progress_callback``) are ignored. Every resolved value is
        validated against its spec.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs[spec.name] if spec.name in kwargs else getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(self, kwargs: Dict[str, Any], fraction: float) -> None:
        """Call the optional ``progress_callback`` in *kwargs* with *fraction*."""
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))


class ImageTransform(ImageProcessor):
    """
    Abstract base class for image transforms.

    A transform takes a 2-D single-channel image array and returns a new
    array of identical shape. The input is never modified.
    """

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """
        Apply the transform to a source image array.

        Parameters
        ----------
        source : np.ndarray
            Single-channel image, shape ``(rows, cols)``.

        Returns
        -------
        np.ndarray
            Transformed image, shape ``(rows, cols)``.
        """
        ...

    @staticmethod
    def _require_2d(source: np.ndarray) -> np.ndarray:
        """Return *source* as an array, rejecting anything but 2-D input."""
        source = np.asarray(source)
        if source.ndim != 2:
            raise InvalidDimensionsError(
                f"Expected 2D single-channel image, got shape {source.shape}"
            )
        return source
