from __future__ import annotations
from typing import Any, Callable, ClassVar, Self, Tuple

from ..types.color_types import ColorSpace, ColorValue, is_hue_space


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, str, str]]
    # def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Tuple[Any, ...]) -> None:
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(value)}")

        # safe assignment; __setattr__ still allows it during init
        super().__setattr__('_value', tuple(value))

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_value(cls, value: Tuple[Any, ...]) -> Self:
        """Build an instance from already-checked channels, skipping ``__init__``."""
        obj = cls.__new__(cls)
        ColorBase.__init__(obj, value)
        return obj

    @staticmethod
    def _require(component: Any, expected: type, name: str) -> Any:
        if not isinstance(component, expected):
            raise TypeError(
                f"{name} must be {expected.__name__}, got {type(component).__name__}"
            )
        return component

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        """Channels as plain floats."""
        return tuple(float(c) for c in self._value)  # type: ignore[return-value]

    @property
    def has_hue(self) -> bool:
        """Check if this color model includes a hue channel."""
        return is_hue_space(self.mode)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.mode, self.value))

    def __repr__(self) -> str:
        channels = ", ".join(f"{n}={v}" for n, v in zip(self.channel_names, self.value))
        return f"{type(self).__name__}({channels})"
