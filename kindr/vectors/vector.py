"""
This module provides the physically typed vector classes.

A :class:`Vector` is a thin wrapper around a 1 dimensional numpy array.  Each subclass fixes the physical quantity the
vector represents (see :class:`.PhysicalType`), which is used to decide which arithmetic is allowed between two
vectors: addition and subtraction need the exact same class, while cross products follow the fixed table in
:mod:`kindr.phys_quant`.  Mixing types raises a :exc:`TypeError`.

For example::

    >>> from kindr.vectors import Position, Force
    >>> arm = Position(1, 2, 3)
    >>> arm.cross(Force(3, 2, 1))
    Torque(array([-4.,  8., -4.]))
    >>> arm + Force(3, 2, 1)
    Traceback (most recent call last):
    ...
    TypeError: Cannot add a Force to a Position
"""

from numbers import Number
from typing import Any, ClassVar, Self

import numpy as np
from numpy.typing import DTypeLike

from kindr._typing import ARRAY_LIKE, DOUBLE_ARRAY
from kindr.phys_quant import PhysicalType, cross_product_type


__all__ = ['Vector', 'Position', 'Velocity', 'Acceleration', 'Force', 'Torque', 'Momentum',
           'AngularAcceleration', 'AngularMomentum']


_VECTOR_TYPES: dict[PhysicalType, type['Vector']] = {}
"""
Maps each physical type to the class that is created for it by cross products.
"""


class Vector:
    """
    A typeless vector of any length.

    The vector can be built in a number of ways:

    * ``Vector()`` builds a zero vector (of length :attr:`dimension` or 3)
    * ``Vector(1, 2, 3)`` builds a vector from its components
    * ``Vector([1, 2, 3])`` or ``Vector(numpy_array)`` builds a vector from an array like object
    * ``Vector(other)`` copies another vector of the same class (or strips the type from any vector when called on
      the typeless :class:`Vector` class itself)

    The data is stored as a numpy array of ``dtype`` (float64 by default, float32 is also supported).  The
    :meth:`to_implementation` method returns it as an Nx1 column view.
    """

    physical_type: ClassVar[PhysicalType] = PhysicalType.TYPELESS
    """
    The physical quantity this class represents
    """

    dimension: ClassVar[int | None] = None
    """
    The required length of the vector or ``None`` if any length is accepted
    """

    __array_ufunc__ = None
    """
    Opt out of numpy's operator dispatch so that ``ndarray + Vector`` cannot bypass the type checks.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        _VECTOR_TYPES.setdefault(cls.physical_type, cls)

    def __init__(self, *components: Any, dtype: DTypeLike | None = None):
        """
        :param components: Nothing, the scalar components, a single array like, or a single vector to copy
        :param dtype: The floating point type to store the components as
        """

        if not components:
            data = np.zeros(self.dimension or 3)

        elif len(components) == 1 and isinstance(components[0], Vector):
            other = components[0]

            if type(other) is not type(self) and type(self) is not Vector:
                raise TypeError('Cannot build a {} from a {}'.format(type(self).__name__, type(other).__name__))

            data = other._vector

            if dtype is None:
                dtype = other.dtype

        elif len(components) == 1:
            data = np.asanyarray(components[0])

            if dtype is None and np.issubdtype(data.dtype, np.floating):
                dtype = data.dtype

        else:
            data = np.asanyarray(components)

        self._vector: DOUBLE_ARRAY = np.array(data, dtype=self._check_dtype(dtype)).ravel()

        if self.dimension is not None and self._vector.size != self.dimension:
            raise ValueError('A {} must have exactly {} components'.format(type(self).__name__, self.dimension))

    @staticmethod
    def _check_dtype(dtype: DTypeLike | None) -> np.dtype:

        dtype = np.dtype(np.float64 if dtype is None else dtype)

        if not np.issubdtype(dtype, np.floating):
            raise ValueError('Vectors can only store floating point values, not {}'.format(dtype))

        return dtype

    def _new(self, data: ARRAY_LIKE) -> Self:
        """
        Builds a vector of the same class and dtype as self around ``data``.
        """

        return type(self)(np.asarray(data), dtype=self.dtype)

    def _sub_vector(self, data: ARRAY_LIKE) -> 'Vector':
        """
        Builds a vector with the same physical type for a slice of self.

        Classes with a fixed dimension cannot hold a slice, so they fall back to the registered class of their type
        when it accepts any length, or to a typeless vector otherwise.
        """

        if self.dimension is None:
            return self._new(data)

        cls = _VECTOR_TYPES.get(self.physical_type, Vector)

        if cls.dimension is not None:
            cls = Vector

        return cls(np.asarray(data), dtype=self.dtype)

    @classmethod
    def zero(cls, size: int | None = None, dtype: DTypeLike | None = None) -> Self:
        """
        Returns a zero vector.

        :param size: The number of components. Defaults to :attr:`dimension` (or 3)
        :param dtype: The floating point type to use
        """

        return cls(np.zeros(size or cls.dimension or 3), dtype=dtype)

    @classmethod
    def unit_x(cls, dtype: DTypeLike | None = None) -> Self:
        """
        Returns the 3 dimensional unit vector along x
        """

        return cls(1, 0, 0, dtype=dtype)

    @classmethod
    def unit_y(cls, dtype: DTypeLike | None = None) -> Self:
        """
        Returns the 3 dimensional unit vector along y
        """

        return cls(0, 1, 0, dtype=dtype)

    @classmethod
    def unit_z(cls, dtype: DTypeLike | None = None) -> Self:
        """
        Returns the 3 dimensional unit vector along z
        """

        return cls(0, 0, 1, dtype=dtype)

    @property
    def dtype(self) -> np.dtype:
        """
        The floating point type of the components
        """

        return self._vector.dtype

    @property
    def x(self) -> float:
        """
        The first component
        """

        return self._vector[0]

    @x.setter
    def x(self, value: float):
        self._vector[0] = value

    @property
    def y(self) -> float:
        """
        The second component
        """

        return self._vector[1]

    @y.setter
    def y(self, value: float):
        self._vector[1] = value

    @property
    def z(self) -> float:
        """
        The third component
        """

        return self._vector[2]

    @z.setter
    def z(self, value: float):
        self._vector[2] = value

    def to_implementation(self) -> DOUBLE_ARRAY:
        """
        Returns the underlying data as an Nx1 column.

        The column is a view, so writing to it changes the vector.
        """

        return self._vector.reshape(-1, 1)

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> DOUBLE_ARRAY:

        if dtype is None:
            return self._vector.copy() if copy else self._vector

        return self._vector.astype(dtype)

    def __len__(self) -> int:
        return self._vector.size

    def __iter__(self):
        return iter(self._vector)

    def __getitem__(self, item):
        return self._vector[item]

    def __setitem__(self, key, value):
        self._vector[key] = value

    def _check_same_type(self, other: Any, operation: str) -> 'Vector':

        if not isinstance(other, Vector):
            raise TypeError('Cannot {} a {} to a {}'.format(operation, type(other).__name__, type(self).__name__))

        if type(other) is not type(self):
            raise TypeError('Cannot {} a {} to a {}'.format(operation, type(other).__name__, type(self).__name__))

        if other._vector.size != self._vector.size:
            raise ValueError('The vectors must have the same length ({} vs {})'.format(self._vector.size,
                                                                                      other._vector.size))

        return other

    def __add__(self, other: Self) -> Self:

        if not isinstance(other, Vector):
            return NotImplemented

        self._check_same_type(other, 'add')

        return self._new(self._vector + other._vector)

    def __sub__(self, other: Self) -> Self:

        if not isinstance(other, Vector):
            return NotImplemented

        self._check_same_type(other, 'subtract')

        return self._new(self._vector - other._vector)

    def __iadd__(self, other: Self) -> Self:

        self._check_same_type(other, 'add')

        self._vector += other._vector

        return self

    def __isub__(self, other: Self) -> Self:

        self._check_same_type(other, 'subtract')

        self._vector -= other._vector

        return self

    def __neg__(self) -> Self:
        return self._new(-self._vector)

    def __pos__(self) -> Self:
        return self._new(self._vector)

    def __mul__(self, other: float) -> Self:

        if not isinstance(other, Number):
            return NotImplemented

        return self._new(self._vector * other)

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> Self:

        if not isinstance(other, Number):
            return NotImplemented

        return self._new(self._vector / other)

    def __eq__(self, other: Any) -> bool:

        if type(other) is not type(self):
            return NotImplemented

        return bool(np.array_equal(self._vector, other._vector))

    def __repr__(self) -> str:
        return '{0}({1!r})'.format(type(self).__name__, self._vector)

    def __str__(self) -> str:
        return str(self._vector)

    def set_zero(self) -> Self:
        """
        Sets all components to zero in place.

        :return: self
        """

        self._vector[:] = 0

        return self

    def norm(self) -> float:
        """
        Returns the euclidean length of the vector
        """

        return float(np.linalg.norm(self._vector))

    def normalize(self) -> Self:
        """
        Normalizes the vector to unit length in place.

        :return: self
        """

        self._vector /= np.linalg.norm(self._vector)

        return self

    def normalized(self) -> Self:
        """
        Returns a unit length copy of the vector
        """

        return self._new(self._vector / np.linalg.norm(self._vector))

    def dot(self, other: 'Vector | ARRAY_LIKE') -> float:
        """
        Returns the dot product with another vector (of any physical type) or an array like.
        """

        return float(np.dot(self._vector, np.asarray(other, dtype=np.float64).ravel()))

    def sum(self) -> float:
        return self._vector.sum()

    def max(self) -> float:
        return self._vector.max()

    def min(self) -> float:
        return self._vector.min()

    def mean(self) -> float:
        return self._vector.mean()

    def is_similar_to(self, other: Self, tol: float) -> bool:
        """
        Checks whether each component of ``other`` is within ``tol`` of the corresponding component of self.

        :param other: A vector of the same class
        :param tol: The absolute tolerance
        :return: ``True`` if the vectors are similar
        """

        self._check_same_type(other, 'compare')

        return bool(np.all(np.abs(self._vector - other._vector) <= tol))

    def _typeless_operand(self, other: 'Vector | ARRAY_LIKE') -> DOUBLE_ARRAY:

        if isinstance(other, Vector) and other.physical_type is not PhysicalType.TYPELESS:
            raise TypeError('Elementwise operations are only defined with typeless vectors, not a {}'.format(
                type(other).__name__))

        operand = np.asarray(other).ravel()

        if operand.size != self._vector.size:
            raise ValueError('The vectors must have the same length ({} vs {})'.format(self._vector.size,
                                                                                      operand.size))

        return operand

    def elementwise_multiplication(self, other: 'Vector | ARRAY_LIKE') -> Self:
        """
        Multiplies each component by the corresponding component of a typeless vector (or array like).

        The result keeps the type of self.
        """

        return self._new(self._vector * self._typeless_operand(other))

    def elementwise_division(self, other: 'Vector | ARRAY_LIKE') -> Self:
        """
        Divides each component by the corresponding component of a typeless vector (or array like).

        The result keeps the type of self.
        """

        return self._new(self._vector / self._typeless_operand(other))

    def _check_range(self, start: int, size: int) -> None:

        if start < 0 or size < 0 or start + size > self._vector.size:
            raise IndexError('The segment [{}, {}) is out of range for a vector of length {}'.format(
                start, start + size, self._vector.size))

    def head(self, size: int) -> 'Vector':
        """
        Returns the first ``size`` components as a new vector with the same physical type

        :raises IndexError: If ``size`` is negative or longer than the vector
        """

        self._check_range(0, size)

        return self._sub_vector(self._vector[:size])

    def tail(self, size: int) -> 'Vector':
        """
        Returns the last ``size`` components as a new vector with the same physical type

        :raises IndexError: If ``size`` is negative or longer than the vector
        """

        self._check_range(self._vector.size - size, size)

        return self._sub_vector(self._vector[self._vector.size - size:])

    def segment(self, start: int, size: int) -> 'Vector':
        """
        Returns ``size`` components starting at index ``start`` as a new vector with the same physical type
        """

        self._check_range(start, size)

        return self._sub_vector(self._vector[start:start + size])

    def cross(self, other: 'Vector') -> 'Vector':
        """
        Returns the cross product of two 3 dimensional vectors.

        The physical type of the result comes from :func:`.cross_product_type`; for example a :class:`Position`
        crossed with a :class:`Force` gives a :class:`Torque`.

        :param other: The right hand operand
        :return: The cross product
        :raises TypeError: If the cross product between the two physical types is not defined
        """

        if not isinstance(other, Vector):
            raise TypeError('The cross product is only defined between vectors, not with a {}'.format(
                type(other).__name__))

        if self._vector.size != 3 or other._vector.size != 3:
            raise ValueError('The cross product is only defined for 3 dimensional vectors')

        result_type = cross_product_type(self.physical_type, other.physical_type)

        if result_type is other.physical_type and self.physical_type is PhysicalType.TYPELESS:
            cls = type(other)
        elif result_type is self.physical_type:
            cls = type(self)
        else:
            cls = _VECTOR_TYPES[result_type]

        return cls(np.cross(self._vector, other._vector), dtype=np.result_type(self.dtype, other.dtype))

    def rotate(self, rotation) -> Self:
        """
        Rotates the vector with a rotation of any representation (see :meth:`.RotationBase.rotate`).

        :param rotation: The rotation to apply
        :return: The rotated vector, with the same class as self
        """

        return rotation.rotate(self)

    def inverse_rotate(self, rotation) -> Self:
        """
        Rotates the vector with the inverse of a rotation (see :meth:`.RotationBase.inverse_rotate`).
        """

        return rotation.inverse_rotate(self)


_VECTOR_TYPES[PhysicalType.TYPELESS] = Vector


class Position(Vector):
    """
    A position (or length) vector
    """

    physical_type = PhysicalType.POSITION


class Velocity(Vector):
    """
    A linear velocity vector
    """

    physical_type = PhysicalType.VELOCITY


class Acceleration(Vector):
    """
    A linear acceleration vector
    """

    physical_type = PhysicalType.ACCELERATION


class Force(Vector):
    """
    A force vector
    """

    physical_type = PhysicalType.FORCE


class Torque(Vector):
    """
    A torque vector
    """

    physical_type = PhysicalType.TORQUE


class Momentum(Vector):
    """
    A linear momentum vector
    """

    physical_type = PhysicalType.MOMENTUM


class AngularAcceleration(Vector):
    """
    An angular acceleration vector
    """

    physical_type = PhysicalType.ANGULAR_ACCELERATION


class AngularMomentum(Vector):
    """
    An angular momentum vector
    """

    physical_type = PhysicalType.ANGULAR_MOMENTUM
