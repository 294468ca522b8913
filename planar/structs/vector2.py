from __future__ import annotations

import math
import numbers
import time
from typing import Any, ClassVar, Iterator, Union

import numpy as np


Scalar = Union[int, float]


class ImmutableFieldError(AttributeError):
    """Raised when code tries to assign or delete a field of a Vector2."""


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def _is_real(val: Any) -> bool:
    return isinstance(val, numbers.Real) and not isinstance(val, bool)


def _is_scalar(val: Any) -> bool:
    # finite reals only; nan and +-inf operands leave the receiver unchanged
    if not _is_real(val):
        return False
    return isinstance(val, numbers.Integral) or math.isfinite(val)


def _isnan(val: Scalar) -> bool:
    return isinstance(val, float) and math.isnan(val)


def _max(a: Scalar, b: Scalar) -> Scalar:
    if _isnan(a) or _isnan(b):
        return math.nan
    return max(a, b)


def _min(a: Scalar, b: Scalar) -> Scalar:
    if _isnan(a) or _isnan(b):
        return math.nan
    return min(a, b)


def _div(a: Scalar, b: Scalar) -> float:
    # IEEE-754 division: x/0 -> +-inf, 0/0 -> nan.
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(a) / np.float64(b))


def _sign(d: Scalar) -> float:
    return _div(d, abs(d))


class Vector2:
    """Immutable 2D vector tagged with its creation time ``w`` (epoch ms).

    The named arithmetic methods accept another Vector2 or a finite real
    scalar and hand back the receiver unchanged for anything else, nan and
    infinities included. The operator overloads return ``NotImplemented``
    for operands that are not real numbers at all.
    """

    __slots__ = ("_x", "_y", "_w")

    ORIGIN: ClassVar["Vector2"]
    ZERO: ClassVar["Vector2"]
    ONE: ClassVar["Vector2"]
    LEFT: ClassVar["Vector2"]
    TOP: ClassVar["Vector2"]
    BOTTOM: ClassVar["Vector2"]
    RIGHT: ClassVar["Vector2"]

    def __init__(self, x: Scalar, y: Scalar, w: Scalar | None = None) -> None:
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y)
        object.__setattr__(self, "_w", now_millis() if w is None else w)

    @property
    def x(self) -> Scalar:
        return self._x

    @property
    def y(self) -> Scalar:
        return self._y

    @property
    def w(self) -> Scalar:
        return self._w

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableFieldError(f"cannot assign to field '{name}': Vector2 is immutable")

    def __delattr__(self, name: str) -> None:
        raise ImmutableFieldError(f"cannot delete field '{name}': Vector2 is immutable")

    def __reduce__(self):
        return (Vector2, (self._x, self._y, self._w))

    # arithmetic

    def addition(self, val: Any) -> "Vector2":
        if isinstance(val, Vector2):
            return Vector2(self.x + val.x, self.y + val.y)
        if _is_scalar(val):
            return Vector2(self.x + val, self.y + val)
        return self

    def subtract(self, val: Any) -> "Vector2":
        if isinstance(val, Vector2):
            return Vector2(self.x - val.x, self.y - val.y)
        if _is_scalar(val):
            return Vector2(self.x - val, self.y - val)
        return self

    def multiply(self, val: Any) -> "Vector2":
        if isinstance(val, Vector2):
            return Vector2(self.x * val.x, self.y * val.y)
        if _is_scalar(val):
            return Vector2(self.x * val, self.y * val)
        return self

    def divide(self, val: Any) -> "Vector2":
        """Divide component-wise or by a scalar.

        A scalar zero yields a copy of ``Vector2.ZERO``. Zero components of a
        Vector2 divisor are not special-cased and give inf/nan.
        """
        if isinstance(val, Vector2):
            return Vector2(_div(self.x, val.x), _div(self.y, val.y))
        if _is_scalar(val):
            if val == 0:
                return Vector2.ZERO.copy()
            return Vector2(_div(self.x, val), _div(self.y, val))
        return self

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y, self.w)

    # comparison

    def compare(self, val: Any) -> Union["Vector2", int]:
        """Per-axis sign of ``self - val``.

        An axis with a zero difference comes back as nan, not 0. Anything
        that is not a Vector2 compares as ``1``.
        """
        if isinstance(val, Vector2):
            return Vector2(_sign(self.x - val.x), _sign(self.y - val.y))
        return 1

    def equals(self, val: Any) -> bool:
        if not isinstance(val, Vector2):
            return False
        return (self.x - val.x) == 0 and (self.y - val.y) == 0

    def elapse(self, val: Any) -> float:
        if isinstance(val, Vector2):
            return self.w - val.w
        if _is_scalar(val):
            return self.w - val
        return math.nan

    # geometry

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def sqr_magnitude(self) -> Scalar:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> "Vector2":
        length = self.magnitude()
        if length == 0:
            return Vector2.ORIGIN.copy()
        return self.divide(length)

    def shift(self, pivot: Any) -> "Vector2":
        if isinstance(pivot, Vector2):
            return self.subtract(pivot)
        return self

    def unshift(self, pivot: Any) -> "Vector2":
        if isinstance(pivot, Vector2):
            return self.addition(pivot)
        return self

    def forward(self, length: Any) -> "Vector2":
        if _is_scalar(length):
            return self.addition(self.normalize().multiply(length))
        return self

    # python protocol

    def __str__(self) -> str:
        return f"{{ x:{self.x}, y:{self.y} }}"

    def __repr__(self) -> str:
        return f"{{ x:{self.x}, y:{self.y}, w:{self.w} }}"

    def __iter__(self) -> Iterator[Scalar]:
        return iter((self.x, self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((float(self.x), float(self.y)))

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __add__(self, o: Any) -> "Vector2":
        if not (isinstance(o, Vector2) or _is_real(o)):
            return NotImplemented
        return self.addition(o)

    __radd__ = __add__

    def __sub__(self, o: Any) -> "Vector2":
        if not (isinstance(o, Vector2) or _is_real(o)):
            return NotImplemented
        return self.subtract(o)

    def __mul__(self, o: Any) -> "Vector2":
        if not (isinstance(o, Vector2) or _is_real(o)):
            return NotImplemented
        return self.multiply(o)

    __rmul__ = __mul__

    def __truediv__(self, o: Any) -> "Vector2":
        if not (isinstance(o, Vector2) or _is_real(o)):
            return NotImplemented
        return self.divide(o)

    # static operations

    @staticmethod
    def angle(v1: "Vector2", v2: "Vector2") -> float:
        """Angle in degrees between two vectors, measured on a chord.

        ``v2`` is scaled to the length of ``v1`` and the angle is recovered
        from half the chord between the two tips. Degenerate input (zero
        length, chord longer than the diameter) gives nan.
        """
        r = v1.magnitude()
        t = v2.normalize().forward(r - 1)
        a = Vector2.distance(t, v1) * 0.5
        with np.errstate(invalid="ignore"):
            half = np.degrees(np.arcsin(_div(a, r)))
        return float(half) * 2

    @staticmethod
    def distance(v1: "Vector2", v2: "Vector2") -> float:
        return math.hypot(v1.x - v2.x, v1.y - v2.y)

    @staticmethod
    def dot(v1: "Vector2", v2: "Vector2") -> Scalar:
        return v1.x * v2.x + v1.y * v2.y

    @staticmethod
    def lerp(v1: "Vector2", v2: "Vector2", amount: Any) -> "Vector2":
        # amount is clamped to [0, 1]; nan or non-numeric counts as 0
        if not _is_real(amount) or _isnan(amount):
            amount = 0
        amount = min(max(amount, 0), 1)
        return v1.addition(v2.subtract(v1).multiply(amount))

    @staticmethod
    def clamp(v: "Vector2", lo: "Vector2", hi: "Vector2") -> "Vector2":
        return Vector2(_max(_min(v.x, hi.x), lo.x), _max(_min(v.y, hi.y), lo.y))

    @staticmethod
    def max(v1: "Vector2", v2: "Vector2") -> "Vector2":
        return Vector2(_max(v1.x, v2.x), _max(v1.y, v2.y))

    @staticmethod
    def min(v1: "Vector2", v2: "Vector2") -> "Vector2":
        return Vector2(_min(v1.x, v2.x), _min(v1.y, v2.y))

    @staticmethod
    def mid(v1: "Vector2", v2: "Vector2") -> "Vector2":
        lo = Vector2.min(v1, v2)
        hi = Vector2.max(v1, v2)
        return hi.subtract(lo).divide(2).addition(lo)

    @staticmethod
    def trend(v: "Vector2") -> "Vector2":
        xt = _sign(v.x)
        yt = _sign(v.y)
        return Vector2(0.0 if math.isnan(xt) else xt, 0.0 if math.isnan(yt) else yt)


Vector2.ORIGIN = Vector2(0, 0)
Vector2.ZERO = Vector2(0, 0)
Vector2.ONE = Vector2(1, 1)
Vector2.LEFT = Vector2(-1, 0)
Vector2.TOP = Vector2(0, 1)
Vector2.BOTTOM = Vector2(0, -1)
Vector2.RIGHT = Vector2(1, 0)
