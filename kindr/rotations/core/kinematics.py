r"""
Differential kinematic equations of the rotation parameterizations.

Every routine here uses the *active* interpretation of the parameters: the nominal matrix
:math:`\mathbf{N}(\mathbf{p})` rotates body frame vectors into the reference frame, and the local angular velocity
:math:`\boldsymbol{\omega}_B` satisfies

.. math::
    \dot{\mathbf{N}} = \mathbf{N}\left[\boldsymbol{\omega}_B\times\right]

The routines either map parameter rates to :math:`\boldsymbol{\omega}_B` (the forward map) or back (the inverse map).
Handling of frames, usages and singular configurations lives in :mod:`kindr.rotations.mapper`.
"""

import numpy as np

from kindr._typing import ARRAY_LIKE, DOUBLE_ARRAY

from kindr.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                           _check_vector_array_and_shape)
from kindr.rotations.core.elementals import skew, unskew
from kindr.rotations.core.quaternion_math import quaternion_inverse, quaternion_multiplication


__all__ = ['quaternion_rates_to_local', 'local_to_quaternion_rates',
           'rotmat_rates_to_local', 'local_to_rotmat_rates',
           'rotvec_right_jacobian', 'rotvec_right_jacobian_inverse',
           'angle_axis_rates_to_local', 'local_to_angle_axis_rates',
           'euler_xyz_rate_matrix', 'euler_zyx_rate_matrix']


def quaternion_rates_to_local(quaternion: ARRAY_LIKE, quaternion_rates: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the local angular velocity from a quaternion and its time derivative

    .. math::
        \left[\begin{array}{c}\boldsymbol{\omega}_B \\ 0\end{array}\right] =
        2\mathbf{q}^{-1}\otimes\dot{\mathbf{q}}

    The scalar part of the product is zero when :math:`\dot{\mathbf{q}}` is tangent to the unit sphere and is
    discarded.

    :param quaternion: The unit quaternion ``[x, y, z, w]``
    :param quaternion_rates: The time derivative of the quaternion
    :return: The local angular velocity
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)
    quaternion_rates = _check_quaternion_array_and_shape(quaternion_rates)

    return 2 * quaternion_multiplication(quaternion_inverse(quaternion), quaternion_rates)[:3]


def local_to_quaternion_rates(quaternion: ARRAY_LIKE, angular_velocity: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the quaternion time derivative from a local angular velocity

    .. math::
        \dot{\mathbf{q}} = \frac{1}{2}\mathbf{q}\otimes\left[\begin{array}{c}\boldsymbol{\omega}_B \\ 0\end{array}\right]

    :param quaternion: The unit quaternion ``[x, y, z, w]``
    :param angular_velocity: The local angular velocity
    :return: The quaternion rates
    """

    angular_velocity = _check_vector_array_and_shape(angular_velocity)

    return 0.5 * quaternion_multiplication(quaternion, np.hstack([angular_velocity, 0.0]))


def rotmat_rates_to_local(matrix: ARRAY_LIKE, matrix_rates: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the local angular velocity from a rotation matrix and its time derivative

    .. math::
        \left[\boldsymbol{\omega}_B\times\right] = \mathbf{N}^T\dot{\mathbf{N}}

    Only the skew symmetric part of the product is used (see :func:`.unskew`).

    :param matrix: The rotation matrix
    :param matrix_rates: The time derivative of the rotation matrix
    :return: The local angular velocity
    """

    matrix = _check_matrix_array_and_shape(matrix)
    matrix_rates = _check_matrix_array_and_shape(matrix_rates)

    return unskew(matrix.T @ matrix_rates)


def local_to_rotmat_rates(matrix: ARRAY_LIKE, angular_velocity: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the rotation matrix time derivative :math:`\dot{\mathbf{N}}=\mathbf{N}\left[\boldsymbol{\omega}_B\times
    \right]`

    :param matrix: The rotation matrix
    :param angular_velocity: The local angular velocity
    :return: The rotation matrix rates
    """

    matrix = _check_matrix_array_and_shape(matrix)

    return matrix @ skew(angular_velocity)


def rotvec_right_jacobian(vector: ARRAY_LIKE, small_angle_tolerance: float = 1e-6) -> DOUBLE_ARRAY:
    r"""
    The right Jacobian of SO(3), mapping rotation vector rates to the local angular velocity

    .. math::
        \mathbf{J}_r(\mathbf{v}) = \mathbf{I} - \frac{1-\text{cos}\theta}{\theta^2}\left[\mathbf{v}\times\right]
        + \frac{\theta - \text{sin}\theta}{\theta^3}\left[\mathbf{v}\times\right]^2

    with :math:`\theta=\left\|\mathbf{v}\right\|`.  Below ``small_angle_tolerance`` the coefficients are replaced by
    their Taylor expansions, which are exact to double precision there.

    :param vector: The rotation vector
    :param small_angle_tolerance: The angle below which the series expansion is used
    :return: The 3x3 Jacobian
    """

    vector = _check_vector_array_and_shape(vector)

    theta = float(np.linalg.norm(vector))
    theta2 = theta * theta

    if theta < small_angle_tolerance:
        first = 0.5 - theta2 / 24
        second = 1 / 6 - theta2 / 120

    else:
        first = (1 - np.cos(theta)) / theta2
        second = (theta - np.sin(theta)) / (theta2 * theta)

    vector_skew = skew(vector)

    return np.eye(3) - first * vector_skew + second * vector_skew @ vector_skew


def rotvec_right_jacobian_inverse(vector: ARRAY_LIKE, small_angle_tolerance: float = 1e-6) -> DOUBLE_ARRAY:
    r"""
    The closed form inverse of :func:`rotvec_right_jacobian`

    .. math::
        \mathbf{J}_r^{-1}(\mathbf{v}) = \mathbf{I} + \frac{1}{2}\left[\mathbf{v}\times\right]
        + \left(\frac{1}{\theta^2} - \frac{\text{cot}(\theta/2)}{2\theta}\right)\left[\mathbf{v}\times\right]^2

    The inverse does not exist at :math:`\theta = 2k\pi, k\neq 0` where :math:`\text{cot}(\theta/2)` diverges; callers
    are expected to detect this (see :class:`.AngularVelocityMapper`).

    :param vector: The rotation vector
    :param small_angle_tolerance: The angle below which the series expansion is used
    :return: The 3x3 inverse Jacobian
    """

    vector = _check_vector_array_and_shape(vector)

    theta = float(np.linalg.norm(vector))
    theta2 = theta * theta

    if theta < small_angle_tolerance:
        second = 1 / 12 + theta2 / 720

    else:
        second = 1 / theta2 - 1 / (2 * theta * np.tan(theta / 2))

    vector_skew = skew(vector)

    return np.eye(3) + 0.5 * vector_skew + second * vector_skew @ vector_skew


def angle_axis_rates_to_local(angle: float, axis: ARRAY_LIKE, angle_rate: float, axis_rates: ARRAY_LIKE,
                              small_angle_tolerance: float = 1e-6) -> DOUBLE_ARRAY:
    r"""
    Computes the local angular velocity from an angle-axis pair and its rates

    With :math:`\mathbf{v}=\theta\hat{\mathbf{n}}` we have :math:`\dot{\mathbf{v}}=\dot{\theta}\hat{\mathbf{n}} +
    \theta\dot{\hat{\mathbf{n}}}` and therefore

    .. math::
        \boldsymbol{\omega}_B = \mathbf{J}_r(\theta\hat{\mathbf{n}})\left(\dot{\theta}\hat{\mathbf{n}} +
        \theta\dot{\hat{\mathbf{n}}}\right)

    :param angle: The rotation angle
    :param axis: The unit rotation axis
    :param angle_rate: The rate of the angle
    :param axis_rates: The rate of the axis (orthogonal to the axis for a valid trajectory)
    :param small_angle_tolerance: see :func:`rotvec_right_jacobian`
    :return: The local angular velocity
    """

    axis = _check_vector_array_and_shape(axis)
    axis_rates = _check_vector_array_and_shape(axis_rates)

    vector_rates = angle_rate * axis + angle * axis_rates

    return rotvec_right_jacobian(angle * axis, small_angle_tolerance) @ vector_rates


def local_to_angle_axis_rates(angle: float, axis: ARRAY_LIKE, angular_velocity: ARRAY_LIKE,
                              small_angle_tolerance: float = 1e-6) -> tuple[float, DOUBLE_ARRAY]:
    r"""
    Computes the angle and axis rates from a local angular velocity

    .. math::
        \dot{\theta} = \hat{\mathbf{n}}^T\boldsymbol{\omega}_B \\
        \dot{\hat{\mathbf{n}}} = \frac{1}{2}\left(\text{cot}\left(\frac{\theta}{2}\right)
        \left(\mathbf{I}-\hat{\mathbf{n}}\hat{\mathbf{n}}^T\right)\boldsymbol{\omega}_B +
        \hat{\mathbf{n}}\times\boldsymbol{\omega}_B\right)

    When :math:`\text{sin}(\theta/2)` is below ``small_angle_tolerance`` the rotation is the identity and the axis is
    not observable.  The component of the angular velocity orthogonal to the axis then has no finite preimage, so the
    limiting value keeps only the bounded part, :math:`\dot{\hat{\mathbf{n}}}=\frac{1}{2}\hat{\mathbf{n}}\times
    \boldsymbol{\omega}_B`.

    :param angle: The rotation angle
    :param axis: The unit rotation axis
    :param angular_velocity: The local angular velocity
    :param small_angle_tolerance: The threshold on :math:`\left|\text{sin}(\theta/2)\right|`
    :return: The angle rate and the axis rates
    """

    axis = _check_vector_array_and_shape(axis)
    angular_velocity = _check_vector_array_and_shape(angular_velocity)

    angle_rate = float(axis @ angular_velocity)

    axis_rates = 0.5 * np.cross(axis, angular_velocity)

    half_sine = np.sin(angle / 2)

    if abs(half_sine) >= small_angle_tolerance:
        orthogonal = angular_velocity - angle_rate * axis
        axis_rates += 0.5 * np.cos(angle / 2) / half_sine * orthogonal

    return angle_rate, axis_rates


def euler_xyz_rate_matrix(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The matrix mapping x-y'-z'' Euler angle rates to the local angular velocity

    .. math::
        \mathbf{E}(x, y, z) = \left[\begin{array}{ccc}
        \text{cos}y\,\text{cos}z & \text{sin}z & 0 \\
        -\text{cos}y\,\text{sin}z & \text{cos}z & 0 \\
        \text{sin}y & 0 & 1\end{array}\right]

    Its determinant is :math:`\text{cos}y`, so it is singular at gimbal lock.

    :param angles: The Euler angles ``[x, y, z]``
    :return: The 3x3 rate matrix
    """

    _, y, z = _check_vector_array_and_shape(angles)

    cy, sy = np.cos(y), np.sin(y)
    cz, sz = np.cos(z), np.sin(z)

    return np.array([[cy * cz, sz, 0],
                     [-cy * sz, cz, 0],
                     [sy, 0, 1]])


def euler_zyx_rate_matrix(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The matrix mapping z-y'-x'' Euler angle rates ``[z', y', x']`` to the local angular velocity

    .. math::
        \mathbf{E}(z, y, x) = \left[\begin{array}{ccc}
        -\text{sin}y & 0 & 1 \\
        \text{cos}y\,\text{sin}x & \text{cos}x & 0 \\
        \text{cos}y\,\text{cos}x & -\text{sin}x & 0\end{array}\right]

    Its determinant is :math:`-\text{cos}y`, so it is singular at gimbal lock.

    :param angles: The Euler angles ``[z, y, x]``
    :return: The 3x3 rate matrix
    """

    _, y, x = _check_vector_array_and_shape(angles)

    cy, sy = np.cos(y), np.sin(y)
    cx, sx = np.cos(x), np.sin(x)

    return np.array([[-sy, 0, 1],
                     [cy * sx, cx, 0],
                     [cy * cx, -sx, 0]])
