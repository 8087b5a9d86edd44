"""A mutable two-component float vector."""

from __future__ import annotations

from numbers import Real


class Vector2:
    """A 2D vector with in-place operations and arithmetic operators.

    Ordering compares ``x`` first and ``y`` only when the ``x`` values are equal.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def from_points(cls, p1: Vector2, p2: Vector2) -> Vector2:
        """Return the vector that leads from ``p1`` to ``p2``."""
        return cls(p2.x - p1.x, p2.y - p1.y)

    def is_zero(self) -> bool:
        """Whether both components are zero."""
        return self.x == 0.0 and self.y == 0.0

    def is_one(self) -> bool:
        """Whether both components are one."""
        return self.x == 1.0 and self.y == 1.0

    def add(self, v: Vector2) -> None:
        """Add ``v`` in place."""
        self.x += v.x
        self.y += v.y

    def subtract(self, v: Vector2) -> None:
        """Subtract ``v`` in place."""
        self.x -= v.x
        self.y -= v.y

    def distance_squared(self, v: Vector2) -> float:
        """Squared distance between this point and ``v``."""
        dx = v.x - self.x
        dy = v.y - self.y
        return dx * dx + dy * dy

    def dot(self, v: Vector2) -> float:
        """Dot product with ``v``."""
        return self.x * v.x + self.y * v.y

    def length_squared(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def negate(self) -> None:
        """Negate both components in place."""
        self.x = -self.x
        self.y = -self.y

    def scale(self, factor: float | Vector2) -> None:
        """Scale in place by a number, or component-wise by another vector."""
        if isinstance(factor, Vector2):
            self.x *= factor.x
            self.y *= factor.y
        elif isinstance(factor, Real):
            self.x *= float(factor)
            self.y *= float(factor)
        else:
            raise TypeError(f"cannot scale Vector2 by {type(factor).__name__}")

    def set(self, x: float, y: float) -> None:
        """Set both components."""
        self.x = float(x)
        self.y = float(y)

    def set_zero(self) -> None:
        """Set both components to zero."""
        self.x = self.y = 0.0

    def smooth(self, target: Vector2, elapsed_time: float, response_time: float) -> None:
        """Move towards ``target`` by the fraction elapsed / (elapsed + response)."""
        if elapsed_time > 0:
            self += (target - self) * (elapsed_time / (elapsed_time + response_time))

    def copy(self) -> Vector2:
        """Return an independent copy."""
        return Vector2(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        if self.x == other.x:
            return self.y < other.y
        return self.x < other.x

    def __gt__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        if self.x == other.x:
            return self.y > other.y
        return self.x > other.x

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __iadd__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.add(other)
        return self

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        result = self.copy()
        result.subtract(other)
        return result

    def __isub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.subtract(other)
        return self

    def __neg__(self) -> Vector2:
        result = self.copy()
        result.negate()
        return result

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        result = self.copy()
        result.scale(scalar)
        return result

    __rmul__ = __mul__

    def __imul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.scale(scalar)
        return self

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)