"""
This module provides the rotation representations of kindr.

Every representation stores its own parameters (see the list below) and shares a common interface through
:class:`RotationBase`.  Each rotation is also tagged with a :class:`RotationUsage` which decides how the nominal
rotation matrix :math:`\\mathbf{N}` of the parameters is interpreted.

.. _rotation-representation-table:

* :class:`RotationQuaternion` stores ``[x, y, z, w]`` (vector part first), see :func:`.quaternion_to_rotmat`
* :class:`RotationMatrix` stores the 3x3 matrix itself
* :class:`AngleAxis` stores ``[angle, x, y, z]``, see :func:`.angle_axis_to_rotmat`
* :class:`RotationVector` stores ``angle * axis``, see :func:`.rotvec_to_rotmat`
* :class:`EulerAnglesXyz` stores ``[x, y, z]`` with :math:`\\mathbf{N}=\\mathbf{R}_x\\mathbf{R}_y\\mathbf{R}_z`
* :class:`EulerAnglesZyx` stores ``[z, y, x]`` (yaw, pitch, roll) with
  :math:`\\mathbf{N}=\\mathbf{R}_z\\mathbf{R}_y\\mathbf{R}_x`

Whatever the usage, :meth:`RotationBase.rotate` multiplies vectors by :math:`\\mathbf{N}`.  An active rotation reads
:math:`\\mathbf{N}` as the orientation of the body frame in the reference frame, a passive rotation reads it as the
transformation of coordinates from the reference frame into the body frame.  Converting between the two for the same
orientation therefore inverts the parameters.

Operator overloading makes composing rotations easy::

    >>> from kindr.rotations import RotationQuaternion, AngleAxis
    >>> from numpy import pi
    >>> rotation_a = AngleAxis(pi / 2, 0, 0, 1)
    >>> rotation_b = RotationQuaternion(rotation_a)
    >>> (rotation_b * rotation_a).is_near(AngleAxis(pi, 0, 0, 1))
    True
"""

import copy
import warnings

from abc import ABCMeta
from enum import Enum
from typing import Any, ClassVar, Literal, Self

import numpy as np
from numpy.typing import DTypeLike

from kindr._typing import ARRAY_LIKE, DOUBLE_ARRAY
from kindr.rotations.core._helpers import _check_vector_array_and_shape
from kindr.rotations.core.conversions import (ZERO_ANGLE_TOLERANCE, quaternion_to_rotvec, quaternion_to_rotmat,
                                              quaternion_to_angle_axis, rotvec_to_rotmat, rotvec_to_quaternion,
                                              rotmat_to_quaternion, rotmat_to_euler_xyz, rotmat_to_euler_zyx,
                                              angle_axis_to_quaternion, angle_axis_to_rotmat,
                                              euler_xyz_to_rotmat, euler_zyx_to_rotmat)
from kindr.rotations.core.quaternion_math import quaternion_inverse, quaternion_multiplication, quaternion_normalize
from kindr.vectors.vector import Vector


__all__ = ['RotationUsage', 'RotationBase', 'RotationQuaternion', 'RotationMatrix', 'AngleAxis', 'RotationVector',
           'EulerAnglesXyz', 'EulerAnglesZyx']


NORMALIZATION_TOLERANCE: float = 1e-6
"""
Quaternions whose length differs from 1 (and matrices whose orthonormality error exceeds this) are corrected with a
warning.
"""


class RotationUsage(Enum):
    """
    How the nominal matrix of a rotation is interpreted.
    """

    ACTIVE = 'active'
    """
    The rotation rotates vectors within a fixed frame.  The nominal matrix is the orientation of the body frame.
    """

    PASSIVE = 'passive'
    """
    The rotation transforms the coordinates of a fixed vector from the reference frame into the body frame.
    """

    def __str__(self) -> str:
        return 'RotationUsage.{}'.format(self.name)


class RotationBase(metaclass=ABCMeta):
    """
    The base class for all rotation representations.

    A rotation can be initialized with

    * nothing, giving the identity;
    * the scalar components of the representation (for instance ``RotationQuaternion(x, y, z, w)``);
    * a single array like in the natural shape of the representation;
    * another rotation of any representation, which is converted.

    The ``usage`` keyword tags the rotation as active or passive.  When converting another rotation it defaults to the
    usage of that rotation.  Requesting the other usage keeps the orientation and inverts the parameters.  The
    ``dtype`` keyword chooses the floating point type of the stored parameters (float64 by default, float32 is also
    supported).

    All conversions between representations go through a hub: the nominal quaternion for most classes and the
    nominal matrix for the rotation matrix and the Euler angles.
    """

    _hub: ClassVar[Literal['quaternion', 'matrix']] = 'quaternion'
    """
    Which nominal form conversions into this class read from
    """

    _parameter_shape: ClassVar[tuple[int, ...]] = ()
    """
    The shape of the stored parameters
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *data: Any, usage: RotationUsage | None = None, dtype: DTypeLike | None = None):
        """
        :param data: The rotation data to initialize the class with
        :param usage: Whether the rotation is active or passive
        :param dtype: The floating point type to store the parameters as
        :raises ValueError: If the data cannot be interpreted as this representation
        """

        if usage is not None:
            usage = RotationUsage(usage)

        if len(data) == 1 and isinstance(data[0], RotationBase):
            source = data[0]

            if usage is None:
                usage = source.usage

            if dtype is None:
                dtype = source.dtype

            if type(source) is type(self):
                parameters = source._parameters.astype(np.float64)
            else:
                parameters = self._parameters_from_rotation(source)

            if usage is not source.usage:
                parameters = self._inverse_parameters(parameters)

        elif not data:
            parameters = self._identity_parameters()

        elif len(data) == 1:
            parameters = self._validate_parameters(self._parse_array(data[0]))

        else:
            parameters = self._validate_parameters(self._parse_components(data))

        self._usage: RotationUsage = RotationUsage.ACTIVE if usage is None else usage
        """
        The usage of this rotation
        """

        self._parameters: DOUBLE_ARRAY = np.array(parameters, dtype=self._check_dtype(dtype))
        """
        The stored parameters of this rotation
        """

    @staticmethod
    def _check_dtype(dtype: DTypeLike | None) -> np.dtype:

        dtype = np.dtype(np.float64 if dtype is None else dtype)

        if not np.issubdtype(dtype, np.floating):
            raise ValueError('Rotations can only store floating point values, not {}'.format(dtype))

        return dtype

    # hooks implemented by each representation

    @classmethod
    def _identity_parameters(cls) -> DOUBLE_ARRAY:
        return cls._parameters_from_quaternion(np.array([0, 0, 0, 1.0]))

    @classmethod
    def _parse_array(cls, data: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        Interprets a single array like as the parameters of this representation.
        """

        array = np.array(data, dtype=np.float64)

        if array.size != int(np.prod(cls._parameter_shape)):
            raise ValueError('A {} needs {} parameters, got {}'.format(cls.__name__, int(np.prod(cls._parameter_shape)),
                                                                       array.size))

        return array.reshape(cls._parameter_shape)

    @classmethod
    def _parse_components(cls, components: tuple[Any, ...]) -> DOUBLE_ARRAY:
        """
        Interprets scalar components as the parameters of this representation.
        """

        return cls._parse_array(np.array(components, dtype=np.float64))

    @classmethod
    def _validate_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        """
        Corrects user supplied parameters where possible (normalization, projection).
        """

        return parameters

    @classmethod
    def _parameters_from_quaternion(cls, quaternion: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return cls._parameters_from_matrix(quaternion_to_rotmat(quaternion))

    @classmethod
    def _parameters_from_matrix(cls, matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return cls._parameters_from_quaternion(rotmat_to_quaternion(matrix))

    @classmethod
    def _parameters_from_rotvec(cls, vector: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return cls._parameters_from_quaternion(rotvec_to_quaternion(vector))

    @classmethod
    def _parameters_from_rotation(cls, rotation: 'RotationBase') -> DOUBLE_ARRAY:
        """
        Reads the nominal form of another rotation through the hub of this class.
        """

        if cls._hub == 'matrix':
            return cls._parameters_from_matrix(rotation.as_matrix())

        return cls._parameters_from_quaternion(rotation.as_quaternion())

    @classmethod
    def _nominal_quaternion(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return rotmat_to_quaternion(cls._nominal_matrix(parameters))

    @classmethod
    def _nominal_matrix(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return quaternion_to_rotmat(cls._nominal_quaternion(parameters))

    @classmethod
    def _inverse_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return cls._parameters_from_matrix(cls._nominal_matrix(parameters).T)

    # construction helpers

    def _new(self, parameters: ARRAY_LIKE, usage: RotationUsage | None = None) -> Self:
        """
        Builds a rotation of the same class and dtype as self from already valid parameters.
        """

        out = type(self).__new__(type(self))
        out._usage = self._usage if usage is None else usage
        out._parameters = np.array(parameters, dtype=self.dtype).reshape(self._parameter_shape)

        return out

    def _check_usage(self, other: Any, operation: str) -> 'RotationBase':

        if not isinstance(other, RotationBase):
            raise TypeError('Cannot {} a {} with a {}'.format(operation, type(self).__name__, type(other).__name__))

        if other.usage is not self.usage:
            raise TypeError('Cannot {} an {} rotation with a {} rotation'.format(operation, self.usage.value,
                                                                                 other.usage.value))

        return other

    def _compose_nominal(self, quaternion: DOUBLE_ARRAY | None = None,
                         matrix: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
        """
        Multiplies the nominal form of self on the right by the nominal form of another rotation and returns the new
        parameters.  Only the form matching the hub of this class is used.
        """

        if self._hub == 'matrix':
            return self._parameters_from_matrix(self.as_matrix() @ matrix)

        return self._parameters_from_quaternion(quaternion_multiplication(self.as_quaternion(), quaternion))

    # public interface

    @property
    def usage(self) -> RotationUsage:
        """
        Whether this rotation is active or passive.  This property is read only.
        """

        return self._usage

    @property
    def dtype(self) -> np.dtype:
        """
        The floating point type of the stored parameters.
        """

        return self._parameters.dtype

    def to_implementation(self) -> DOUBLE_ARRAY:
        """
        Returns a copy of the stored parameters.
        """

        return self._parameters.copy()

    def as_quaternion(self) -> DOUBLE_ARRAY:
        """
        Returns the nominal rotation quaternion ``[x, y, z, w]`` of the parameters as a float64 array.
        """

        return self._nominal_quaternion(self._parameters.astype(np.float64))

    def as_matrix(self) -> DOUBLE_ARRAY:
        """
        Returns the nominal rotation matrix of the parameters as a float64 array.

        This is the matrix that :meth:`rotate` multiplies vectors by.
        """

        return self._nominal_matrix(self._parameters.astype(np.float64))

    def copy(self) -> Self:
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    def invert(self) -> Self:
        """
        Returns the inverse rotation in the same representation and with the same usage.
        """

        return self._new(self._inverse_parameters(self._parameters.astype(np.float64)))

    def compose(self, other: 'RotationBase') -> Self:
        """
        Composes self with another rotation so that ``self.compose(other).rotate(v) == self.rotate(other.rotate(v))``.

        The parameters are multiplied as ``p_self * p_other``.  ``other`` may be any representation; the result is in
        the representation of self.

        :param other: The rotation to apply first
        :return: The composed rotation
        :raises TypeError: If other is not a rotation or has a different usage
        """

        self._check_usage(other, 'compose')

        return self._new(self._compose_nominal(quaternion=other.as_quaternion() if self._hub == 'quaternion' else None,
                                               matrix=other.as_matrix() if self._hub == 'matrix' else None))

    def __mul__(self, other: 'RotationBase') -> Self:

        if isinstance(other, RotationBase):
            return self.compose(other)

        return NotImplemented

    def rotate(self, vector: ARRAY_LIKE | Vector) -> Any:
        """
        Rotates a vector, a 3xn array of column vectors, or a physically typed :class:`.Vector`.

        The vector(s) are multiplied on the left by the nominal matrix (see :meth:`as_matrix`).  A :class:`.Vector`
        keeps its class.

        :param vector: The vector(s) to rotate
        :return: The rotated vector(s)
        """

        return self._apply(self.as_matrix(), vector)

    def inverse_rotate(self, vector: ARRAY_LIKE | Vector) -> Any:
        """
        Rotates a vector by the inverse of this rotation (see :meth:`rotate`).
        """

        return self._apply(self.as_matrix().T, vector)

    @staticmethod
    def _apply(matrix: DOUBLE_ARRAY, vector: ARRAY_LIKE | Vector) -> Any:

        if isinstance(vector, Vector):
            if len(vector) != 3:
                raise ValueError('Only 3 dimensional vectors can be rotated')

            return type(vector)(matrix @ np.asarray(vector, dtype=np.float64), dtype=vector.dtype)

        return matrix @ _check_vector_array_and_shape(vector)

    def box_plus(self, delta: ARRAY_LIKE) -> Self:
        """
        Perturbs this rotation by a rotation vector on the right, ``self * exp(delta)``.

        :param delta: The rotation vector to apply
        :return: The perturbed rotation
        """

        delta = _check_vector_array_and_shape(delta).ravel()

        return self._new(self._compose_nominal(quaternion=rotvec_to_quaternion(delta),
                                               matrix=rotvec_to_rotmat(delta)))

    def box_minus(self, other: 'RotationBase') -> DOUBLE_ARRAY:
        """
        Returns the shortest rotation vector taking ``other`` to self, ``log(other^-1 * self)``.

        This is the inverse of :meth:`box_plus`: ``other.box_plus(self.box_minus(other))`` is near self.

        :param other: The rotation to subtract (any representation with the same usage)
        :return: The rotation vector
        :raises TypeError: If other is not a rotation or has a different usage
        """

        self._check_usage(other, 'subtract')

        difference = quaternion_multiplication(quaternion_inverse(other.as_quaternion()), self.as_quaternion())

        return quaternion_to_rotvec(quaternion_normalize(difference))

    def set_exponential_map(self, vector: ARRAY_LIKE) -> Self:
        """
        Sets this rotation in place from a rotation vector (the exponential map).

        :param vector: The rotation vector
        :return: self
        """

        vector = _check_vector_array_and_shape(vector).ravel()

        self._parameters = np.array(self._parameters_from_rotvec(vector), dtype=self.dtype)

        return self

    def get_exponential_map(self) -> DOUBLE_ARRAY:
        """
        Returns the rotation vector that reproduces this rotation through :meth:`set_exponential_map`.
        """

        return self.get_logarithmic_map()

    def get_logarithmic_map(self) -> DOUBLE_ARRAY:
        """
        Returns the shortest rotation vector of this rotation (its length is in :math:`[0, \\pi]`).
        """

        return quaternion_to_rotvec(quaternion_normalize(self.as_quaternion()))

    def get_active(self) -> Self:
        """
        Returns the active rotation with the same orientation as self.
        """

        return type(self)(self, usage=RotationUsage.ACTIVE)

    def get_passive(self) -> Self:
        """
        Returns the passive rotation with the same orientation as self.
        """

        return type(self)(self, usage=RotationUsage.PASSIVE)

    def get_unique(self) -> Self:
        """
        Returns the same rotation with canonical parameters.

        The canonical form has a non negative quaternion scalar part, an angle in :math:`[0, \\pi]`, a rotation vector
        no longer than :math:`\\pi`, or a middle Euler angle in :math:`[-\\pi/2, \\pi/2]`.
        """

        return self._new(self._parameters_from_rotation(self))

    def set_identity(self) -> Self:
        """
        Sets this rotation to the identity in place.

        :return: self
        """

        self._parameters = np.array(self._identity_parameters(), dtype=self.dtype)

        return self

    @classmethod
    def identity(cls, usage: RotationUsage | None = None, dtype: DTypeLike | None = None) -> Self:
        """
        Returns the identity rotation.
        """

        return cls(usage=usage, dtype=dtype)

    def is_near(self, other: 'RotationBase', tol: float = 1e-6) -> bool:
        """
        Checks whether another rotation (of any representation) describes the same orientation within ``tol``.

        The nominal matrices are compared elementwise, which is insensitive to the sign ambiguity of quaternions and
        to multiples of :math:`2\\pi` in angles.

        :param other: The rotation to compare to
        :param tol: The absolute tolerance on each matrix element
        :return: ``True`` if the rotations are near each other
        :raises TypeError: If other is not a rotation or has a different usage
        """

        self._check_usage(other, 'compare')

        return bool(np.allclose(self.as_matrix(), other.as_matrix(), rtol=0, atol=tol))

    def is_proper_rotation(self, tol: float = 1e-6) -> bool:
        """
        Checks that the nominal matrix is orthonormal with a determinant of +1 within ``tol``.
        """

        matrix = self.as_matrix()

        return bool(np.allclose(matrix @ matrix.T, np.eye(3), rtol=0, atol=tol) and
                    abs(np.linalg.det(matrix) - 1) <= tol)

    def __eq__(self, other: Any) -> bool:

        if type(other) is not type(self):
            return NotImplemented

        return other.usage is self.usage and bool(np.array_equal(self._parameters, other._parameters))

    def __repr__(self) -> str:
        return '{0}({1!r}, usage={2})'.format(type(self).__name__, self._parameters, self._usage)

    def __str__(self) -> str:
        return str(self._parameters)


class RotationQuaternion(RotationBase):
    """
    A rotation stored as a unit Hamilton quaternion ``[x, y, z, w]`` with the vector part first.

    Quaternions that are not of unit length are normalized with a warning when they are given to the constructor.
    The sign of the quaternion is kept as given (use :meth:`get_unique` for a non negative scalar part).
    """

    _parameter_shape = (4,)

    @classmethod
    def _validate_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:

        norm = np.linalg.norm(parameters)

        if norm == 0:
            raise ValueError('A rotation quaternion cannot be all zeros')

        if abs(norm - 1) > NORMALIZATION_TOLERANCE:
            warnings.warn('The quaternion {} is not of unit length.  It has been normalized'.format(parameters),
                          UserWarning)

        return parameters / norm

    @classmethod
    def _parameters_from_quaternion(cls, quaternion: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return quaternion_normalize(quaternion, unique=False)

    @classmethod
    def _nominal_quaternion(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return parameters

    @classmethod
    def _inverse_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return quaternion_inverse(parameters)

    def get_unique(self) -> Self:
        return self._new(quaternion_normalize(self._parameters.astype(np.float64)))

    @property
    def x(self) -> float:
        """
        The first element of the vector part
        """

        return self._parameters[0]

    @property
    def y(self) -> float:
        """
        The second element of the vector part
        """

        return self._parameters[1]

    @property
    def z(self) -> float:
        """
        The third element of the vector part
        """

        return self._parameters[2]

    @property
    def w(self) -> float:
        """
        The scalar part
        """

        return self._parameters[3]

    @property
    def q_vector(self) -> DOUBLE_ARRAY:
        """
        This is an alias to the first three elements of the quaternion array (the vector portion of the quaternion)
        """

        return self._parameters[:3].copy()

    @property
    def q_scalar(self) -> float:
        """
        This is an alias to the last element of the quaternion array (the scalar portion of the quaternion)
        """

        return self._parameters[-1]


class RotationMatrix(RotationBase):
    """
    A rotation stored as a 3x3 proper orthonormal matrix.

    The matrix can be given as a 3x3 array, a length 9 array, or 9 scalars in row major order.  Matrices that are not
    proper rotations are projected onto the closest rotation (in the Frobenius sense) with a warning.
    """

    _hub = 'matrix'

    _parameter_shape = (3, 3)

    @classmethod
    def _validate_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:

        if (np.allclose(parameters @ parameters.T, np.eye(3), rtol=0, atol=NORMALIZATION_TOLERANCE) and
                abs(np.linalg.det(parameters) - 1) <= NORMALIZATION_TOLERANCE):
            return parameters

        warnings.warn('The matrix is not a proper rotation.  It has been projected onto the closest rotation matrix',
                      UserWarning)

        left, _, right = np.linalg.svd(parameters)

        return left @ np.diag([1, 1, np.linalg.det(left @ right)]) @ right

    @classmethod
    def _parameters_from_matrix(cls, matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return np.array(matrix, dtype=np.float64)

    @classmethod
    def _nominal_matrix(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return parameters

    @classmethod
    def _inverse_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return parameters.T.copy()

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        A copy of the stored matrix
        """

        return self._parameters.copy()


class AngleAxis(RotationBase):
    """
    A rotation stored as an angle (in radians) about a unit axis.

    The parameters are stored as ``[angle, x, y, z]``.  The constructor accepts ``AngleAxis(angle, x, y, z)``,
    ``AngleAxis(angle, axis)`` or a single length 4 array.  The axis is normalized silently.  A zero axis is only
    accepted together with a zero angle, in which case the identity with the x axis is stored.
    """

    _parameter_shape = (4,)

    @classmethod
    def _identity_parameters(cls) -> DOUBLE_ARRAY:
        return np.array([0, 1, 0, 0.0])

    @classmethod
    def _parse_components(cls, components: tuple[Any, ...]) -> DOUBLE_ARRAY:

        if len(components) == 2:
            return cls._parse_array(np.hstack([np.ravel(components[0]), np.ravel(components[1])]))

        return super()._parse_components(components)

    @classmethod
    def _validate_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:

        norm = np.linalg.norm(parameters[1:])

        if norm < ZERO_ANGLE_TOLERANCE:
            if parameters[0] != 0:
                raise ValueError('The rotation axis cannot be zero for a non zero angle')

            return cls._identity_parameters()

        return np.hstack([parameters[0], parameters[1:] / norm])

    @classmethod
    def _parameters_from_quaternion(cls, quaternion: DOUBLE_ARRAY) -> DOUBLE_ARRAY:

        angle, axis = quaternion_to_angle_axis(quaternion_normalize(quaternion))

        return np.hstack([angle, axis])

    @classmethod
    def _parameters_from_rotvec(cls, vector: DOUBLE_ARRAY) -> DOUBLE_ARRAY:

        angle = np.linalg.norm(vector)

        if angle < ZERO_ANGLE_TOLERANCE:
            return cls._identity_parameters()

        return np.hstack([angle, vector / angle])

    @classmethod
    def _nominal_quaternion(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return angle_axis_to_quaternion(parameters[0], parameters[1:])

    @classmethod
    def _nominal_matrix(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return angle_axis_to_rotmat(parameters[0], parameters[1:])

    @classmethod
    def _inverse_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return np.hstack([-parameters[0], parameters[1:]])

    @property
    def angle(self) -> float:
        """
        The rotation angle in radians
        """

        return self._parameters[0]

    @property
    def axis(self) -> DOUBLE_ARRAY:
        """
        A copy of the unit rotation axis
        """

        return self._parameters[1:].copy()

    def get_exponential_map(self) -> DOUBLE_ARRAY:
        return (self._parameters[0] * self._parameters[1:]).astype(np.float64)


class RotationVector(RotationBase):
    """
    A rotation stored as a rotation vector, the rotation axis scaled by the rotation angle in radians.

    Conversions into a rotation vector give the shortest vector (length in :math:`[0, \\pi]`).
    """

    _parameter_shape = (3,)

    @classmethod
    def _parameters_from_quaternion(cls, quaternion: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return quaternion_to_rotvec(quaternion_normalize(quaternion))

    @classmethod
    def _parameters_from_rotvec(cls, vector: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return np.array(vector, dtype=np.float64)

    @classmethod
    def _nominal_quaternion(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return rotvec_to_quaternion(parameters)

    @classmethod
    def _nominal_matrix(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return rotvec_to_rotmat(parameters)

    @classmethod
    def _inverse_parameters(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return -parameters

    @property
    def x(self) -> float:
        return self._parameters[0]

    @property
    def y(self) -> float:
        return self._parameters[1]

    @property
    def z(self) -> float:
        return self._parameters[2]

    @property
    def vector(self) -> DOUBLE_ARRAY:
        """
        A copy of the rotation vector
        """

        return self._parameters.copy()

    def get_exponential_map(self) -> DOUBLE_ARRAY:
        return self._parameters.astype(np.float64)


class EulerAnglesXyz(RotationBase):
    """
    A rotation stored as x-y'-z'' Euler angles ``[x, y, z]`` in radians, with nominal matrix
    :math:`\\mathbf{R}_x(x)\\mathbf{R}_y(y)\\mathbf{R}_z(z)`.

    When extracted from another rotation at gimbal lock the z angle is set to 0.
    """

    _hub = 'matrix'

    _parameter_shape = (3,)

    @classmethod
    def _parameters_from_matrix(cls, matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return rotmat_to_euler_xyz(matrix)

    @classmethod
    def _nominal_matrix(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return euler_xyz_to_rotmat(parameters)

    @property
    def x(self) -> float:
        """
        The rotation about the x axis (applied first to the frame)
        """

        return self._parameters[0]

    @property
    def y(self) -> float:
        """
        The rotation about the intermediate y' axis
        """

        return self._parameters[1]

    @property
    def z(self) -> float:
        """
        The rotation about the final z'' axis
        """

        return self._parameters[2]


class EulerAnglesZyx(RotationBase):
    """
    A rotation stored as z-y'-x'' (yaw, pitch, roll) Euler angles ``[z, y, x]`` in radians, with nominal matrix
    :math:`\\mathbf{R}_z(z)\\mathbf{R}_y(y)\\mathbf{R}_x(x)`.

    When extracted from another rotation at gimbal lock the roll angle is set to 0.
    """

    _hub = 'matrix'

    _parameter_shape = (3,)

    @classmethod
    def _parameters_from_matrix(cls, matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return rotmat_to_euler_zyx(matrix)

    @classmethod
    def _nominal_matrix(cls, parameters: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return euler_zyx_to_rotmat(parameters)

    @property
    def yaw(self) -> float:
        """
        The rotation about the z axis
        """

        return self._parameters[0]

    @property
    def pitch(self) -> float:
        """
        The rotation about the intermediate y' axis
        """

        return self._parameters[1]

    @property
    def roll(self) -> float:
        """
        The rotation about the final x'' axis
        """

        return self._parameters[2]

    z = yaw
    y = pitch
    x = roll
