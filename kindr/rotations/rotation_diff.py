"""
This module provides the time derivatives of the rotation parameters.

Each rotation representation has a matching differential class (for instance :class:`RotationQuaternionDiff` for
:class:`.RotationQuaternion`) holding the rates of its parameters in the same layout.  The differentials form a vector
space on their own, but relating them to angular velocities (or to each other) requires the rotation they were taken
at, which is done through the :class:`.AngularVelocityMapper`::

    >>> from kindr.rotations import EulerAnglesZyx, EulerAnglesZyxDiff, LocalAngularVelocity
    >>> attitude = EulerAnglesZyx(0.1, 0.2, 0.3)
    >>> rates = EulerAnglesZyxDiff.from_angular_velocity(attitude, LocalAngularVelocity(0, 0, 1))
    >>> rates.to_local_angular_velocity(attitude).is_similar_to(LocalAngularVelocity(0, 0, 1), 1e-12)
    True
"""

from numbers import Number
from typing import TYPE_CHECKING, Any, ClassVar, Self

import numpy as np
from numpy.typing import DTypeLike

from kindr._typing import ARRAY_LIKE, DOUBLE_ARRAY
from kindr.rotations.rotation import (RotationBase, RotationQuaternion, RotationMatrix, AngleAxis, RotationVector,
                                      EulerAnglesXyz, EulerAnglesZyx)

if TYPE_CHECKING:
    from kindr.rotations.angular_velocity import LocalAngularVelocity, GlobalAngularVelocity
    from kindr.rotations.mapper import AngularVelocityMapper


__all__ = ['RotationDiffBase', 'RotationQuaternionDiff', 'RotationMatrixDiff', 'AngleAxisDiff', 'RotationVectorDiff',
           'EulerAnglesXyzDiff', 'EulerAnglesZyxDiff', 'diff_type_for']


_DIFF_TYPES: dict[type[RotationBase], type['RotationDiffBase']] = {}
"""
Maps each rotation representation to its differential class
"""


def diff_type_for(rotation: RotationBase | type[RotationBase]) -> type['RotationDiffBase']:
    """
    Returns the differential class of a rotation (or rotation class).

    :raises TypeError: If no differential is registered for the representation
    """

    rotation_type = rotation if isinstance(rotation, type) else type(rotation)

    for cls in rotation_type.__mro__:
        if cls in _DIFF_TYPES:
            return _DIFF_TYPES[cls]

    raise TypeError('No differential is defined for {}'.format(rotation_type.__name__))


class RotationDiffBase:
    """
    The base class for the time derivatives of rotation parameters.

    A differential can be initialized with nothing (zero), the scalar components, a single array like in the layout
    of the parameters of :attr:`rotation_type`, or another differential of the same class (copy).

    Differentials of the same class can be added, subtracted, negated and scaled without reference to a rotation.
    Everything else needs the rotation the derivative was taken at.
    """

    rotation_type: ClassVar[type[RotationBase]]
    """
    The rotation representation whose parameters this is the derivative of
    """

    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        _DIFF_TYPES[cls.rotation_type] = cls

    def __init__(self, *data: Any, dtype: DTypeLike | None = None):
        """
        :param data: Nothing, the scalar components, a single array like, or a differential of the same class
        :param dtype: The floating point type to store the rates as
        :raises TypeError: If data is a differential of another class
        :raises ValueError: If the data does not have the size of the parameters
        """

        shape = self.rotation_type._parameter_shape

        if not data:
            rates = np.zeros(shape)

        elif len(data) == 1 and isinstance(data[0], RotationDiffBase):
            if type(data[0]) is not type(self):
                raise TypeError('Cannot build a {} from a {} without a rotation.  Use from_diff instead'.format(
                    type(self).__name__, type(data[0]).__name__))

            rates = data[0]._rates

            if dtype is None:
                dtype = data[0].dtype

        elif len(data) == 1:
            rates = np.asarray(data[0])

            if dtype is None and np.issubdtype(rates.dtype, np.floating):
                dtype = rates.dtype

        else:
            rates = self._parse_components(data)

        rates = np.array(rates, dtype=RotationBase._check_dtype(dtype))

        if rates.size != int(np.prod(shape)):
            raise ValueError('A {} needs {} components, got {}'.format(type(self).__name__, int(np.prod(shape)),
                                                                       rates.size))

        self._rates: DOUBLE_ARRAY = rates.reshape(shape)
        """
        The stored parameter rates
        """

    @classmethod
    def _parse_components(cls, components: tuple[Any, ...]) -> DOUBLE_ARRAY:
        return np.array(components, dtype=np.float64)

    def _new(self, rates: ARRAY_LIKE) -> Self:
        return type(self)(np.asarray(rates), dtype=self.dtype)

    @classmethod
    def zero(cls, dtype: DTypeLike | None = None) -> Self:
        """
        Returns the zero differential.
        """

        return cls(dtype=dtype)

    def set_zero(self) -> Self:
        """
        Sets all rates to zero in place.

        :return: self
        """

        self._rates[...] = 0

        return self

    @property
    def dtype(self) -> np.dtype:
        """
        The floating point type of the rates
        """

        return self._rates.dtype

    def to_implementation(self) -> DOUBLE_ARRAY:
        """
        Returns a copy of the stored rates in the layout of the rotation parameters.
        """

        return self._rates.copy()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> DOUBLE_ARRAY:

        if dtype is None:
            return self._rates.copy() if copy else self._rates

        return self._rates.astype(dtype)

    def _check_same_type(self, other: Any, operation: str):

        if type(other) is not type(self):
            raise TypeError('Cannot {} a {} to a {}'.format(operation, type(other).__name__, type(self).__name__))

    def __add__(self, other: Self) -> Self:

        if not isinstance(other, RotationDiffBase):
            return NotImplemented

        self._check_same_type(other, 'add')

        return self._new(self._rates + other._rates)

    def __sub__(self, other: Self) -> Self:

        if not isinstance(other, RotationDiffBase):
            return NotImplemented

        self._check_same_type(other, 'subtract')

        return self._new(self._rates - other._rates)

    def __iadd__(self, other: Self) -> Self:

        self._check_same_type(other, 'add')

        self._rates += other._rates

        return self

    def __isub__(self, other: Self) -> Self:

        self._check_same_type(other, 'subtract')

        self._rates -= other._rates

        return self

    def __neg__(self) -> Self:
        return self._new(-self._rates)

    def __mul__(self, other: float) -> Self:

        if not isinstance(other, Number):
            return NotImplemented

        return self._new(self._rates * other)

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> Self:

        if not isinstance(other, Number):
            return NotImplemented

        return self._new(self._rates / other)

    def __eq__(self, other: Any) -> bool:

        if type(other) is not type(self):
            return NotImplemented

        return bool(np.array_equal(self._rates, other._rates))

    def __repr__(self) -> str:
        return '{0}({1!r})'.format(type(self).__name__, self._rates)

    def __str__(self) -> str:
        return str(self._rates)

    def is_near(self, other: Self, tol: float = 1e-6) -> bool:
        """
        Checks whether each rate of ``other`` is within ``tol`` of the corresponding rate of self.

        :raises TypeError: If other is a differential of another class
        """

        self._check_same_type(other, 'compare')

        return bool(np.allclose(self._rates, other._rates, rtol=0, atol=tol))

    @classmethod
    def from_angular_velocity(cls, rotation: RotationBase,
                              angular_velocity: 'LocalAngularVelocity | GlobalAngularVelocity',
                              mapper: 'AngularVelocityMapper | None' = None) -> Self:
        """
        Computes the parameter rates of ``rotation`` that produce an angular velocity.

        The frame of the angular velocity is taken from its class.

        :param rotation: The rotation to compute the rates at.  It must be a :attr:`rotation_type`
        :param angular_velocity: The local or global angular velocity
        :param mapper: The mapper to use.  The default mapper is used if ``None``
        :return: The parameter rates
        :raises TypeError: If rotation is not a :attr:`rotation_type`
        """

        if not isinstance(rotation, cls.rotation_type):
            raise TypeError('A {} needs a {}, not a {}'.format(cls.__name__, cls.rotation_type.__name__,
                                                               type(rotation).__name__))

        from kindr.rotations.mapper import resolve_mapper

        return resolve_mapper(mapper).rotation_diff(rotation, angular_velocity)

    @classmethod
    def from_diff(cls, rotation: RotationBase, diff: 'RotationDiffBase',
                  mapper: 'AngularVelocityMapper | None' = None) -> Self:
        """
        Converts the differential of another representation into this representation.

        ``rotation`` is the rotation ``diff`` was taken at, so it must be a ``diff.rotation_type``.  The result is the
        derivative of the parameters of ``rotation`` converted into :attr:`rotation_type` with the same usage.

        :param rotation: The rotation the derivative is taken at
        :param diff: The differential to convert
        :param mapper: The mapper to use.  The default mapper is used if ``None``
        :return: The converted differential
        :raises TypeError: If rotation is not a ``diff.rotation_type``
        """

        from kindr.rotations.mapper import resolve_mapper

        return resolve_mapper(mapper).convert_diff(rotation, diff, cls)

    def to_local_angular_velocity(self, rotation: RotationBase,
                                  mapper: 'AngularVelocityMapper | None' = None) -> 'LocalAngularVelocity':
        """
        Computes the angular velocity in the body frame for these rates at ``rotation``.
        """

        from kindr.rotations.mapper import resolve_mapper

        return resolve_mapper(mapper).local_angular_velocity(rotation, self)

    def to_global_angular_velocity(self, rotation: RotationBase,
                                   mapper: 'AngularVelocityMapper | None' = None) -> 'GlobalAngularVelocity':
        """
        Computes the angular velocity in the reference frame for these rates at ``rotation``.
        """

        from kindr.rotations.mapper import resolve_mapper

        return resolve_mapper(mapper).global_angular_velocity(rotation, self)


class RotationQuaternionDiff(RotationDiffBase):
    """
    The time derivative of a rotation quaternion, ``[x', y', z', w']``
    """

    rotation_type = RotationQuaternion

    @property
    def x(self) -> float:
        return self._rates[0]

    @property
    def y(self) -> float:
        return self._rates[1]

    @property
    def z(self) -> float:
        return self._rates[2]

    @property
    def w(self) -> float:
        return self._rates[3]


class RotationMatrixDiff(RotationDiffBase):
    """
    The time derivative of a rotation matrix.

    Like :class:`.RotationMatrix` it accepts a 3x3 array or 9 components in row major order.
    """

    rotation_type = RotationMatrix

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        A copy of the matrix rates
        """

        return self._rates.copy()


class AngleAxisDiff(RotationDiffBase):
    """
    The time derivative of an angle-axis rotation, ``[angle', x', y', z']``.

    The constructor accepts ``AngleAxisDiff(angle_rate, x, y, z)``, ``AngleAxisDiff(angle_rate, axis_rates)`` or a
    single length 4 array.
    """

    rotation_type = AngleAxis

    @classmethod
    def _parse_components(cls, components: tuple[Any, ...]) -> DOUBLE_ARRAY:

        if len(components) == 2:
            return np.hstack([np.ravel(components[0]), np.ravel(components[1])]).astype(np.float64)

        return super()._parse_components(components)

    @property
    def angle(self) -> float:
        """
        The rate of the rotation angle
        """

        return self._rates[0]

    @property
    def axis(self) -> DOUBLE_ARRAY:
        """
        A copy of the rates of the rotation axis
        """

        return self._rates[1:].copy()


class RotationVectorDiff(RotationDiffBase):
    """
    The time derivative of a rotation vector
    """

    rotation_type = RotationVector

    @property
    def x(self) -> float:
        return self._rates[0]

    @property
    def y(self) -> float:
        return self._rates[1]

    @property
    def z(self) -> float:
        return self._rates[2]

    @property
    def vector(self) -> DOUBLE_ARRAY:
        return self._rates.copy()


class EulerAnglesXyzDiff(RotationDiffBase):
    """
    The time derivative of x-y'-z'' Euler angles, ``[x', y', z']``
    """

    rotation_type = EulerAnglesXyz

    @property
    def x(self) -> float:
        return self._rates[0]

    @property
    def y(self) -> float:
        return self._rates[1]

    @property
    def z(self) -> float:
        return self._rates[2]


class EulerAnglesZyxDiff(RotationDiffBase):
    """
    The time derivative of z-y'-x'' Euler angles, stored like the angles as ``[z', y', x']``
    """

    rotation_type = EulerAnglesZyx

    @property
    def yaw(self) -> float:
        return self._rates[0]

    @property
    def pitch(self) -> float:
        return self._rates[1]

    @property
    def roll(self) -> float:
        return self._rates[2]

    z = yaw
    y = pitch
    x = roll
