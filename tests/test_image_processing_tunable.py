# -*- coding: utf-8 -*-
"""
Tests for Annotated tunable parameters, versioning, and the processor base.

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
2026-02-18
"""

import inspect
import warnings
from typing import Annotated

import numpy as np
import pytest

from fastfilter.exceptions import ValidationError
from fastfilter.image_processing.base import ImageTransform
from fastfilter.image_processing.params import (
    Desc,
    Options,
    ParamMeta,
    ParamSpec,
    Range,
    collect_param_specs,
)
from fastfilter.image_processing.versioning import processor_tags, processor_version
from fastfilter.vocabulary import ProcessorCategory


@processor_version('0.1.0')
class _Scale(ImageTransform):
    factor: Annotated[float, Range(min=0.0, max=10.0), Desc('Gain')] = 1.0
    rounding: Annotated[str, Options('floor', 'none'), Desc('Rounding')] = 'none'

    def apply(self, source, **kwargs):
        params = self._resolve_params(kwargs)
        out = np.asarray(source) * params['factor']
        return np.floor(out) if params['rounding'] == 'floor' else out


class TestMarkers:
    """Constraint marker construction."""

    def test_range(self):
        r = Range(min=1, max=3)
        assert (r.min, r.max) == (1, 3)
        assert isinstance(r, ParamMeta)

    def test_options_requires_choice(self):
        with pytest.raises(ValueError):
            Options()

    def test_desc_repr(self):
        assert repr(Desc('x')) == "Desc('x')"


class TestParamSpec:
    """Validation of individual values."""

    def _spec(self, **kw):
        base = dict(name='n', param_type=int, default=3, has_default=True)
        base.update(kw)
        return ParamSpec(**base)

    def test_int_accepted(self):
        self._spec(min_value=1).validate(5)

    def test_float_accepts_int(self):
        self._spec(param_type=float).validate(2)

    def test_type_error(self):
        with pytest.raises(TypeError, match="must be int"):
            self._spec().validate('3')

    def test_below_minimum(self):
        with pytest.raises(ValidationError, match="below minimum"):
            self._spec(min_value=1).validate(0)

    def test_above_maximum(self):
        with pytest.raises(ValidationError, match="above maximum"):
            self._spec(max_value=5).validate(6)

    def test_choices(self):
        spec = self._spec(param_type=str, choices=('a', 'b'))
        with pytest.raises(ValidationError, match="allowed choices"):
            spec.validate('c')

    def test_required(self):
        assert self._spec(has_default=False).required


class TestCollection:
    """Class-level collection and generated __init__."""

    def test_specs_in_declaration_order(self):
        names = [s.name for s in _Scale.__param_specs__]
        assert names == ['factor', 'rounding']

    def test_spec_details(self):
        factor = _Scale.__param_specs__[0]
        assert factor.min_value == 0.0
        assert factor.max_value == 10.0
        assert factor.description == 'Gain'

    def test_generated_signature(self):
        sig = inspect.signature(_Scale.__init__)
        assert sig.parameters['factor'].kind is inspect.Parameter.KEYWORD_ONLY
        assert sig.parameters['rounding'].default == 'none'

    def test_range_and_options_conflict(self):
        class _Bad:
            x: Annotated[int, Range(min=0), Options(1, 2)] = 1

        with pytest.raises(TypeError, match="mutually exclusive"):
            collect_param_specs(_Bad)

    def test_plain_annotations_ignored(self):
        class _Plain:
            x: int = 1
            y: Annotated[int, 'not a marker'] = 2

        assert collect_param_specs(_Plain) == ()

    def test_inherited_params(self):
        @processor_version('0.1.0')
        class _Child(_Scale):
            offset: Annotated[float, Desc('Offset')] = 0.0

        assert [s.name for s in _Child.__param_specs__] == [
            'factor', 'rounding', 'offset'
        ]
        assert _Child(offset=2.0).factor == 1.0


class TestResolve:
    """Per-call overrides."""

    def test_instance_values(self):
        out = _Scale(factor=2.0).apply(np.ones(3))
        np.testing.assert_array_equal(out, 2.0)

    def test_override(self):
        f = _Scale(factor=2.0)
        out = f.apply(np.full(3, 1.5), factor=1.0, rounding='floor')
        np.testing.assert_array_equal(out, 1.0)
        assert f.factor == 2.0

    def test_override_validated(self):
        with pytest.raises(ValidationError):
            _Scale().apply(np.ones(3), factor=20.0)


class TestVersioning:
    """Version and tag decorators."""

    def test_missing_version_warns(self):
        class _Unversioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        with pytest.warns(UserWarning, match="processor version"):
            _Unversioned()

    def test_versioned_does_not_warn(self):
        @processor_version('2.0.0')
        class _Versioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        with warnings.catch_warnings():
            warnings.simplefilter('error')
            _Versioned()

    def test_tags(self):
        @processor_tags(category=ProcessorCategory.BACKGROUND, description='d')
        class _Tagged:
            pass

        assert _Tagged.__processor_tags__ == {
            'category': ProcessorCategory.BACKGROUND,
            'description': 'd',
        }

    def test_tags_reject_string_category(self):
        with pytest.raises(TypeError):
            processor_tags(category='filters')

    def test_version_from_metadata_fallback(self):
        @processor_version()
        class _Auto:
            pass

        assert isinstance(_Auto.__processor_version__, str)
