from __future__ import annotations
import math
from typing import ClassVar, Self

from boundednumbers import BoundType, bound_type_to_np_function

from ..utils.num_utils import wrap_circular


class ComponentRangeError(ValueError):
    """Raised when a component value falls outside its valid domain."""

    component: ClassVar[str] = "Component"

    def __init__(self, value: float, lower: float, upper: float, upper_inclusive: bool = True) -> None:
        self.value = value
        self.lower = lower
        self.upper = upper
        self.upper_inclusive = upper_inclusive
        super().__init__(
            f"{self.component} value {value} is out of valid range {self.range_text}"
        )

    @property
    def valid_range(self) -> tuple[float, float]:
        return (self.lower, self.upper)

    @property
    def range_text(self) -> str:
        closing = "]" if self.upper_inclusive else ")"
        return f"[{self.lower:g}, {self.upper:g}{closing}"


class BoundedScalar:
    """
    A float confined to ``[lower, upper]`` (or ``[lower, upper)``).

    Calling the class validates strictly and raises ``error`` on a value
    outside the domain. ``bounded`` never rejects a number: it applies the
    class ``policy``, clamping to the nearest bound or wrapping around a
    circular domain. NaN is rejected by both.
    """
    __slots__ = ('_value', '_is_frozen')

    lower:           ClassVar[float] = 0.0
    upper:           ClassVar[float] = 1.0
    upper_inclusive: ClassVar[bool] = True
    policy:          ClassVar[BoundType] = BoundType.CLAMP
    error:           ClassVar[type[ComponentRangeError]] = ComponentRangeError

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: float) -> None:
        value = float(value)
        if not self.contains(value):
            raise self._range_error(value)
        self._freeze(value)

    def _freeze(self, value: float) -> None:
        super().__setattr__('_value', value)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _range_error(cls, value: float) -> ComponentRangeError:
        return cls.error(value, cls.lower, cls.upper, cls.upper_inclusive)

    @classmethod
    def contains(cls, value: float) -> bool:
        """Whether ``value`` lies inside the domain. NaN never does."""
        if value < cls.lower:
            return False
        if cls.upper_inclusive:
            return value <= cls.upper
        return value < cls.upper

    @classmethod
    def bounded(cls, value: float) -> Self:
        value = float(value)
        if math.isnan(value):
            raise cls._range_error(value)
        if cls.policy is BoundType.CYCLIC:
            if math.isinf(value):
                raise cls._range_error(value)
            coerced = cls.lower + wrap_circular(value - cls.lower, cls.upper - cls.lower)
        else:
            fn = bound_type_to_np_function[cls.policy]
            coerced = float(fn(value, cls.lower, cls.upper))
        obj = cls.__new__(cls)
        obj._freeze(coerced)
        return obj

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> float:
        return self._value

    @property
    def description(self) -> str:
        return str(self)

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __reduce__(self):
        return (type(self), (self._value,))
