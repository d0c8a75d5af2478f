from __future__ import annotations
from abc import ABC
from typing import Any, ClassVar, Iterator, Self, Tuple

from ..types.color_types import ColorSpace, Scalar, is_hue_space


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no __dict__ → immutability

    num_channels: ClassVar[int]
    mode:         ClassVar[ColorSpace]
    channels:     ClassVar[Tuple[str, ...]]
    maxima:       ClassVar[Tuple[Scalar, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, *values: Any) -> None:
        # Accept both Color(1, 2, 3) and Color((1, 2, 3))
        if len(values) == 1 and not isinstance(values[0], (int, float)):
            values = tuple(values[0])

        value = self._coerce(tuple(values))
        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels {self.channels!r}, got {len(value)}"
            )

        self._value = value
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce(cls, values: Tuple[Any, ...]) -> Tuple[Scalar, ...]:
        """Validate/convert raw channel values; subclasses override."""
        return values

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def as_dict(self) -> dict[str, Scalar]:
        return dict(zip(self.channels, self._value))

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self._value)


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: Tuple[Scalar, ...]

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar]

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    @property
    def is_opaque(self) -> bool:
        return self.alpha == self.alpha_max

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, validated like any other channel.

        Returns:
            New color instance with updated alpha.
        """
        return self.__class__(self.value[:-1] + (alpha,))  # type: ignore[call-arg]


def channel(index: int, doc: str | None = None) -> property:
    """Build a read-only property exposing one channel of ``value``."""
    def getter(self: ColorBase) -> Scalar:
        return self._value[index]
    return property(getter, doc=doc)
