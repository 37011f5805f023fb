# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative filter settings via typing.Annotated.

Filters declare their settings (kernel width and height, padding mode) as
class-body ``typing.Annotated`` fields carrying the constraint markers
``Range``, ``Options`` and ``Desc``. ``ImageProcessor.__init_subclass__``
turns those fields into ``ParamSpec`` records and, unless the class writes
its own, a keyword-only ``__init__`` that validates every value.

Usage
-----
::

    from typing import Annotated
    from fastfilter.image_processing.params import Range, Options, Desc

    class MyFilter(ImageTransform):
        filter_width: Annotated[int, Range(min=1, max=101),
                                Desc('Kernel width in pixels')] = 3
        padding: Annotated[str, Options('symmetric', 'antisymmetric'),
                           Desc('Border extrapolation')] = 'symmetric'

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

# Standard library
import inspect
from typing import (
    Annotated,
    Any,
    Callable,
    List,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

# fastfilter internal
from fastfilter.exceptions import ValidationError


Number = Union[int, float]


class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types."""


class Range(ParamMeta):
    """Inclusive numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Smallest accepted value.
    max : int or float, optional
        Largest accepted value.
    """

    __slots__ = ('min', 'max')

    def __init__(self, min: Optional[Number] = None,
                 max: Optional[Number] = None) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        return f"Range(min={self.min!r}, max={self.max!r})"


class Options(ParamMeta):
    """Discrete choice constraint."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


_SENTINEL = object()


class ParamSpec:
    """Resolved specification for one tunable filter setting.

    Attributes
    ----------
    name : str
        Keyword-argument name.
    param_type : type
        Expected Python type. ``int`` is accepted where ``float`` is
        declared; ``bool`` is never accepted where ``int`` is declared.
    default : Any
        Default value (``None`` when the parameter is required).
    description : str
        Text from the ``Desc`` marker.
    min_value, max_value : int, float or None
        Inclusive bounds from ``Range``.
    choices : tuple or None
        Allowed values from ``Options``.
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str = '',
        min_value: Optional[Number] = None,
        max_value: Optional[Number] = None,
        choices: Optional[Tuple] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices

    @property
    def required(self) -> bool:
        """Whether the parameter has no default."""
        return not self._has_default

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type and constraints.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValidationError
            If *value* is outside the range or not one of the choices.
        """
        if self.param_type is float:
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        elif self.param_type is int:
            ok = isinstance(value, int) and not isinstance(value, bool)
        elif self.param_type is object:
            ok = True
        else:
            ok = isinstance(value, self.param_type)
        if not ok:
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        text = f"ParamSpec(name={self.name!r}, type={self.param_type.__name__}"
        if not self.required:
            text += f", default={self.default!r}"
        if self.choices is not None:
            text += f", choices={self.choices!r}"
        return text + ")"


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Gather ``Annotated`` tunable fields of *cls* into ``ParamSpec`` records.

    Fields are returned parent-class first, in declaration order. Only
    fields whose metadata carries at least one ``ParamMeta`` marker are
    collected.

    Raises
    ------
    TypeError
        If a field carries both ``Range`` and ``Options``.
    """
    hints = get_type_hints(cls, include_extras=True)

    names: List[str] = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in names:
                names.append(name)

    specs: List[ParamSpec] = []
    for name in names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue

        rng = next((m for m in metas if isinstance(m, Range)), None)
        opts = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        if rng is not None and opts is not None:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        default = getattr(cls, name, _SENTINEL)
        has_default = default is not _SENTINEL
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=default if has_default else None,
            has_default=has_default,
            description=desc.text if desc else '',
            min_value=rng.min if rng else None,
            max_value=rng.max if rng else None,
            choices=opts.choices if opts else None,
        ))
    return tuple(specs)


def _make_init(param_specs: Tuple[ParamSpec, ...]) -> Callable[..., None]:
    """Build a keyword-only ``__init__`` that validates *param_specs*.

    The generated initializer sets each parameter as an instance
    attribute, rejects unknown keywords, and finally calls
    ``self.__post_init__()`` when the class defines one.
    """
    specs = param_specs

    def __init__(self, **kwargs: Any) -> None:
        unexpected = set(kwargs) - {s.name for s in specs}
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif not spec.required:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            setattr(self, spec.name, value)
        if hasattr(self, '__post_init__'):
            self.__post_init__()

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in specs:
        params.append(inspect.Parameter(
            spec.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=inspect.Parameter.empty if spec.required else spec.default,
        ))
    __init__.__signature__ = inspect.Signature(params)
    return __init__
