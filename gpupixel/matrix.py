"""Square 3x3 and 4x4 float matrices stored in column-major order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Callable, ClassVar, TypeVar

_M = TypeVar("_M", bound="_SquareMatrix")


class _SquareMatrix:
    """Shared behaviour of the fixed-size matrices.

    Values live in ``m`` in column-major order, as a graphics API expects
    them. Arithmetic between two matrices is element-wise.
    """

    _order: ClassVar[int] = 0
    __slots__ = ("m",)

    def _init(self, args: tuple[object, ...]) -> None:
        self.m: list[float] = self._identity_values()
        if args:
            self._set(args)

    @classmethod
    def _size(cls) -> int:
        return cls._order * cls._order

    @classmethod
    def _identity_values(cls) -> list[float]:
        n = cls._order
        return [1.0 if row == col else 0.0 for col in range(n) for row in range(n)]

    @classmethod
    def _from_array(cls: type[_M], array: Iterable[float]) -> _M:
        matrix = cls()
        matrix._load_array(array)
        return matrix

    def _load_array(self, array: Iterable[float]) -> None:
        try:
            values = [float(value) for value in array]
        except TypeError as exc:
            raise TypeError(
                f"{type(self).__name__} needs an iterable of numbers"
            ) from exc
        if len(values) != self._size():
            raise ValueError(
                f"{type(self).__name__} needs {self._size()} values, got {len(values)}"
            )
        self.m = values

    def _set(self, args: tuple[object, ...]) -> None:
        n = self._order
        if len(args) == 1:
            value = args[0]
            if isinstance(value, _SquareMatrix):
                self._check_same_kind(value)
                self.m = list(value.m)
            else:
                self._load_array(value)  # type: ignore[arg-type]
        elif len(args) == self._size():
            values = [float(v) for v in args]  # type: ignore[arg-type]
            self.m = [values[row * n + col] for col in range(n) for row in range(n)]
        else:
            raise TypeError(
                f"{type(self).__name__}.set takes a matrix, a sequence or "
                f"{self._size()} numbers, got {len(args)} arguments"
            )

    def _set_identity(self) -> None:
        self.m = self._identity_values()

    def _negate(self) -> None:
        self.m = [-value for value in self.m]

    def _transpose(self) -> None:
        n = self._order
        old = self.m
        self.m = [old[row * n + col] for col in range(n) for row in range(n)]

    def _copy(self: _M) -> _M:
        result = type(self)()
        result.m = list(self.m)
        return result

    def _check_same_kind(self, other: _SquareMatrix) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def _combine(self, other: object, op: Callable[[float, float], float]) -> None:
        if isinstance(other, _SquareMatrix):
            self._check_same_kind(other)
            self.m = [op(a, b) for a, b in zip(self.m, other.m)]
        elif isinstance(other, Real):
            scalar = float(other)
            self.m = [op(a, scalar) for a in self.m]
        else:
            raise TypeError(
                f"{type(self).__name__} cannot be combined with {type(other).__name__}"
            )

    def __iter__(self) -> Iterator[float]:
        return iter(self.m)

    def __len__(self) -> int:
        return len(self.m)

    def __getitem__(self, index: int) -> float:
        return self.m[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.m == other.m  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_array({self.m!r})"

    def __neg__(self: _M) -> _M:
        result = self._copy()
        result._negate()
        return result

    def __add__(self: _M, other: object) -> _M:
        result = self._copy()
        result._combine(other, lambda a, b: a + b)
        return result

    def __sub__(self: _M, other: object) -> _M:
        result = self._copy()
        result._combine(other, lambda a, b: a - b)
        return result

    def __mul__(self: _M, other: object) -> _M:
        result = self._copy()
        result._combine(other, lambda a, b: a * b)
        return result

    def __rmul__(self: _M, other: object) -> _M:
        if not isinstance(other, Real):
            return NotImplemented
        return self * other

    def __iadd__(self: _M, other: object) -> _M:
        self._combine(other, lambda a, b: a + b)
        return self

    def __isub__(self: _M, other: object) -> _M:
        self._combine(other, lambda a, b: a - b)
        return self

    def __imul__(self: _M, other: object) -> _M:
        self._combine(other, lambda a, b: a * b)
        return self


class Matrix4(_SquareMatrix):
    """A 4x4 float matrix in column-major order."""

    _order = 4
    __slots__ = ()

    def __init__(self, *args: object) -> None:
        """Create an identity matrix, or one set from ``args`` as in ``set``."""
        self._init(args)

    @classmethod
    def identity(cls) -> Matrix4:
        """Return a new identity matrix."""
        return cls()

    @classmethod
    def from_array(cls, array: Iterable[float]) -> Matrix4:
        """Build a matrix from 16 values already in column-major order."""
        return cls._from_array(array)

    def set(self, *args: object) -> None:
        """Set from another Matrix4, a column-major sequence, or 16 row-major numbers."""
        self._set(args)

    def set_identity(self) -> None:
        """Reset to the identity matrix."""
        self._set_identity()

    def negate(self) -> None:
        """Negate every element in place."""
        self._negate()

    def negated(self) -> Matrix4:
        """Return a negated copy."""
        return -self

    def transpose(self) -> None:
        """Transpose in place."""
        self._transpose()

    def transposed(self) -> Matrix4:
        """Return a transposed copy."""
        result = self._copy()
        result._transpose()
        return result

    def add(self, other: Matrix4 | float) -> None:
        """Add a scalar or, element-wise, a matrix, in place."""
        self._combine(other, lambda a, b: a + b)

    def subtract(self, other: Matrix4 | float) -> None:
        """Subtract a scalar or, element-wise, a matrix, in place."""
        self._combine(other, lambda a, b: a - b)

    def multiply(self, other: Matrix4 | float) -> None:
        """Multiply by a scalar or, element-wise, by a matrix, in place."""
        self._combine(other, lambda a, b: a * b)

    def copy(self) -> Matrix4:
        """Return an independent copy."""
        return self._copy()


class Matrix3(_SquareMatrix):
    """A 3x3 float matrix in column-major order."""

    _order = 3
    __slots__ = ()

    def __init__(self, *args: object) -> None:
        """Create an identity matrix, or one set from ``args`` as in ``set``."""
        self._init(args)

    @classmethod
    def identity(cls) -> Matrix3:
        """Return a new identity matrix."""
        return cls()

    @classmethod
    def from_array(cls, array: Iterable[float]) -> Matrix3:
        """Build a matrix from 9 values already in column-major order."""
        return cls._from_array(array)

    def set(self, *args: object) -> None:
        """Set from another Matrix3, a column-major sequence, or 9 row-major numbers."""
        self._set(args)

    def set_identity(self) -> None:
        """Reset to the identity matrix."""
        self._set_identity()

    def negate(self) -> None:
        """Negate every element in place."""
        self._negate()

    def negated(self) -> Matrix3:
        """Return a negated copy."""
        return -self

    def transpose(self) -> None:
        """Transpose in place."""
        self._transpose()

    def transposed(self) -> Matrix3:
        """Return a transposed copy."""
        result = self._copy()
        result._transpose()
        return result

    def add(self, other: Matrix3 | float) -> None:
        """Add a scalar or, element-wise, a matrix, in place."""
        self._combine(other, lambda a, b: a + b)

    def subtract(self, other: Matrix3 | float) -> None:
        """Subtract a scalar or, element-wise, a matrix, in place."""
        self._combine(other, lambda a, b: a - b)

    def multiply(self, other: Matrix3 | float) -> None:
        """Multiply by a scalar or, element-wise, by a matrix, in place."""
        self._combine(other, lambda a, b: a * b)

    def copy(self) -> Matrix3:
        """Return an independent copy."""
        return self._copy()