# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between different rotation representations.
All routines are implemented purely on numpy arrays (or array like objects).

Quaternions are stored as ``[x, y, z, w]`` with the hamiltonian product (see :func:`.quaternion_multiplication`).
All formulas here are the *nominal* (active) formulas, that is they return the matrix :math:`\\mathbf{N}` that the
parameters rotate vectors with.  Euler angles follow the intrinsic conventions

.. math::
    \\mathbf{N}_{xyz}(x, y, z) = \\mathbf{R}_x(x)\\mathbf{R}_y(y)\\mathbf{R}_z(z) \\\\
    \\mathbf{N}_{zyx}(z, y, x) = \\mathbf{R}_z(z)\\mathbf{R}_y(y)\\mathbf{R}_x(x)

where the Euler angle arrays are always stored in the order the angles appear in the name of the convention.
"""


import numpy as np

from kindr._typing import ARRAY_LIKE, DOUBLE_ARRAY

from kindr.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                           _check_vector_array_and_shape)
from kindr.rotations.core.elementals import rot_x, rot_y, rot_z, skew
from kindr.rotations.core.quaternion_math import quaternion_normalize


__all__ = ['quaternion_to_rotvec', 'quaternion_to_rotmat', 'quaternion_to_angle_axis',
           'quaternion_to_euler_xyz', 'quaternion_to_euler_zyx',
           'rotvec_to_rotmat', 'rotvec_to_quaternion',
           'rotmat_to_quaternion', 'rotmat_to_rotvec', 'rotmat_to_euler_xyz', 'rotmat_to_euler_zyx',
           'angle_axis_to_quaternion', 'angle_axis_to_rotmat',
           'euler_xyz_to_rotmat', 'euler_zyx_to_rotmat', 'euler_xyz_to_quaternion', 'euler_zyx_to_quaternion',
           'GIMBAL_LOCK_TOLERANCE', 'ZERO_ANGLE_TOLERANCE']


GIMBAL_LOCK_TOLERANCE: float = 1e-10
"""
When the cosine of the middle Euler angle drops below this value the extraction treats the matrix as gimbal locked.
"""

ZERO_ANGLE_TOLERANCE: float = 1e-15
"""
Rotations whose quaternion vector part is shorter than this are treated as the identity when an axis is needed.
"""


def quaternion_to_rotvec(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into a rotation vector.

    The rotation vector is returned as a numpy array and is formed by:

    .. math::
        \theta = 2\text{atan2}(\left\|\mathbf{q}_v\right\|, q_s) \\
        \mathbf{v} = \frac{\theta}{\left\|\mathbf{q}_v\right\|}\mathbf{q}_v

    Using the arctangent instead of :math:`2\text{cos}^{-1}(q_s)` keeps full precision for small angles.  When the
    vector part vanishes the limit :math:`\mathbf{v}=\frac{2}{q_s}\mathbf{q}_v` is used, so the identity maps to
    [0, 0, 0].  Note that a quaternion with a negative scalar part produces a rotation vector longer than
    :math:`\pi`; use :func:`.quaternion_normalize` first if the shortest vector is required.

    This function is also vectorized, meaning that you can specify multiple rotation quaternions to be converted to
    rotation vectors by specifying each quaternion as a column.

    :param quaternion: the rotation quaternion(s) to be converted to the rotation vector(s)
    :return: The rotation vector(s) corresponding to the input rotation quaternion(s)
    """

    # ensure we have a numpy array of the quaternion(s)
    quaternion = _check_quaternion_array_and_shape(quaternion)

    q_vec = quaternion[:3]
    q_scalar = quaternion[-1]

    vec_norm = np.linalg.norm(q_vec, axis=0)

    # get the rotation angle from the full quaternion
    theta = 2 * np.arctan2(vec_norm, q_scalar)

    with np.errstate(divide='ignore', invalid='ignore'):
        scale = np.where(vec_norm > ZERO_ANGLE_TOLERANCE, theta / vec_norm, 2 / q_scalar)

    return scale * q_vec


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the nominal rotation matrix of a unit quaternion

    .. math::
        \mathbf{N} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    with :math:`\mathbf{q}_v` the vector part and :math:`q_s` the scalar part.  A 4xn array of quaternions gives an
    nx3x3 stack of matrices (a single column gives a single 3x3 matrix).

    :param quaternion: The unit quaternion(s) ``[x, y, z, w]``
    :return: The rotation matrix(ces)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qv = quaternion[:3].reshape(3, -1)
    qs = quaternion[3].reshape(-1, 1, 1)

    matrices = ((qs ** 2 - np.einsum('in,in->n', qv, qv).reshape(-1, 1, 1)) * np.eye(3) +
                2 * np.einsum('in,jn->nij', qv, qv) + 2 * qs * skew(qv).reshape(-1, 3, 3))

    return matrices[0] if matrices.shape[0] == 1 else matrices


def quaternion_to_angle_axis(quaternion: ARRAY_LIKE) -> tuple[float, DOUBLE_ARRAY]:
    r"""
    This function converts a single rotation quaternion into an angle and a unit rotation axis.

    .. math::
        \theta = 2\text{atan2}(\left\|\mathbf{q}_v\right\|, q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\left\|\mathbf{q}_v\right\|}

    For the identity rotation the axis is not defined, in which case the x axis is returned with a zero angle.

    :param quaternion: The rotation quaternion to convert
    :return: The rotation angle in radians and the unit rotation axis
    """

    quaternion = _check_quaternion_array_and_shape(quaternion).ravel()

    vec_norm = float(np.linalg.norm(quaternion[:3]))

    if vec_norm < ZERO_ANGLE_TOLERANCE:
        return 0.0, np.array([1.0, 0.0, 0.0])

    return 2 * float(np.arctan2(vec_norm, quaternion[-1])), quaternion[:3] / vec_norm


def quaternion_to_euler_xyz(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts a rotation quaternion to x-y'-z'' Euler angles.

    The quaternion is first converted to a rotation matrix using :func:`quaternion_to_rotmat` and then the angles are
    extracted with :func:`rotmat_to_euler_xyz`.

    :param quaternion: The quaternion(s) to be converted to euler angles
    :return: The euler angles ``[x, y, z]``
    """

    return rotmat_to_euler_xyz(quaternion_to_rotmat(quaternion))


def quaternion_to_euler_zyx(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts a rotation quaternion to z-y'-x'' (yaw, pitch, roll) Euler angles.

    See :func:`quaternion_to_euler_xyz`.

    :param quaternion: The quaternion(s) to be converted to euler angles
    :return: The euler angles ``[z, y, x]``
    """

    return rotmat_to_euler_zyx(quaternion_to_rotmat(quaternion))


def rotvec_to_rotmat(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the exponential map of SO(3), the rotation matrix of a rotation vector, with Rodrigues' formula

    .. math::
        \mathbf{N} = \text{cos}(\theta)\mathbf{I}_{3\times 3}+\text{sin}(\theta)\left[\hat{\mathbf{x}}\times\right]+
        (1-\text{cos}(\theta))\hat{\mathbf{x}}\hat{\mathbf{x}}^T

    where :math:`\theta=\left\|\mathbf{v}\right\|` and :math:`\hat{\mathbf{x}}=\mathbf{v}/\theta`.  The zero vector
    gives the identity exactly.

    A single length 3 vector gives a 3x3 matrix.  A 3xn array gives an nx3x3 stack.

    :param vector: The rotation vector(s)
    :return: The rotation matrix(ces)
    """

    vector = _check_vector_array_and_shape(vector)

    columns = vector.reshape(3, -1)

    theta = np.linalg.norm(columns, axis=0)

    unit = np.divide(columns, theta, out=np.zeros_like(columns), where=theta > 0)

    ctheta = np.cos(theta).reshape(-1, 1, 1)
    stheta = np.sin(theta).reshape(-1, 1, 1)

    matrices = (ctheta * np.eye(3) + stheta * skew(unit).reshape(-1, 3, 3) +
                (1 - ctheta) * np.einsum('in,jn->nij', unit, unit))

    return matrices[0] if vector.ndim == 1 else matrices


def rotvec_to_quaternion(rot_vec: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Converts rotation vector(s) into unit quaternion(s)

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    Vectors shorter than :data:`ZERO_ANGLE_TOLERANCE` use the limit
    :math:`\text{sin}(\theta/2)/\theta\rightarrow 1/2`, so the zero vector gives ``[0, 0, 0, 1]``.  The scalar part
    is negative for vectors longer than :math:`\pi`.

    :param rot_vec: A length 3 rotation vector or a 3xn array of them
    :return: The quaternion(s), length 4 or 4xn to match the input
    """

    rot_vec = _check_vector_array_and_shape(rot_vec)

    columns = rot_vec.reshape(3, -1)

    theta = np.linalg.norm(columns, axis=0)

    # sin(theta/2)/theta
    scale = np.divide(np.sin(theta / 2), theta, out=np.full_like(theta, 0.5), where=theta >= ZERO_ANGLE_TOLERANCE)

    quaternions = np.vstack([scale * columns, np.cos(theta / 2)])

    return quaternions[:, 0] if rot_vec.ndim == 1 else quaternions


def _shepperd(matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    Shepperd's method for a single matrix: build the quaternion from the largest of the trace and the diagonal.
    """

    trace = np.trace(matrix)

    choice = int(np.argmax([matrix[0, 0], matrix[1, 1], matrix[2, 2], trace]))

    quaternion = np.empty(4)

    if choice == 3:
        quaternion[3] = 1 + trace
        quaternion[0] = matrix[2, 1] - matrix[1, 2]
        quaternion[1] = matrix[0, 2] - matrix[2, 0]
        quaternion[2] = matrix[1, 0] - matrix[0, 1]

    else:
        i = choice
        j = (i + 1) % 3
        k = (j + 1) % 3

        quaternion[i] = 1 - trace + 2 * matrix[i, i]
        quaternion[j] = matrix[j, i] + matrix[i, j]
        quaternion[k] = matrix[k, i] + matrix[i, k]
        quaternion[3] = matrix[k, j] - matrix[j, k]

    return quaternion / np.linalg.norm(quaternion)


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    The conversion uses Shepperd's method: the largest of
    :math:`\text{Tr}(\mathbf{T}), t_{11}, t_{22}, t_{33}` selects which quaternion component is computed from the
    diagonal, and the remaining components are formed from sums and differences of the off diagonal terms divided by
    it.  Unlike sign copying from the skew part of the matrix, this is well conditioned for every rotation including
    rotations by 180 degrees about arbitrary axes.

    The returned quaternion(s) have a non negative scalar part.

    This function is also vectorized, meaning that you can specify multiple rotation matrices to be converted to
    quaternions by specifying each matrix along the first axis.  The output then has the quaternions down the columns.

    :param rotation_matrix: The rotation matrix to convert to a rotation quaternion
    :return: the rotation quaternion(s) corresponding to the input rotation matrix(ces)
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    if rotation_matrix.ndim == 2:
        return quaternion_normalize(_shepperd(rotation_matrix))

    stack = rotation_matrix.reshape(-1, 3, 3)

    quaternions = np.empty((4, stack.shape[0]))

    for index, matrix in enumerate(stack):
        quaternions[:, index] = _shepperd(matrix)

    return quaternion_normalize(quaternions)


def rotmat_to_rotvec(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Converts a rotation matrix to a rotation vector (the logarithmic map of SO(3)).

    Currently this just calls :func:`.rotmat_to_quaternion` followed by :func:`.quaternion_to_rotvec`.  Since the
    quaternion has a non negative scalar part the resulting vector has a length of at most :math:`\\pi`.

    :param matrix: The matrix(ices) to convert

    :returns: The rotation vector(s)
    """

    return quaternion_to_rotvec(rotmat_to_quaternion(matrix))


def rotmat_to_euler_xyz(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into x-y'-z'' Euler angles.

    Expanding :math:`\mathbf{R}_x(x)\mathbf{R}_y(y)\mathbf{R}_z(z)` gives

    .. math::
        y = \text{atan2}(t_{13}, \sqrt{t_{11}^2+t_{12}^2}) \\
        x = \text{atan2}(-t_{23}, t_{33}) \\
        z = \text{atan2}(-t_{12}, t_{11})

    At gimbal lock (:math:`\text{cos}(y)\approx 0`) only the sum (or difference) of :math:`x` and :math:`z` is
    observable, so :math:`z` is set to 0 and :math:`x = \text{atan2}(t_{32}, t_{22})` absorbs the whole rotation,
    which reproduces the matrix exactly.

    This function is vectorized, therefore you can input matrix as a nx3x3 stack of rotation matrices down the first
    axis, in which case each angle is an array of length n.

    :param matrix: The matrix(ces) to convert to euler angles
    :return: The angles ``[x, y, z]`` in radians
    """

    matrix = _check_matrix_array_and_shape(matrix)

    cos_middle = np.sqrt(matrix[..., 0, 0] ** 2 + matrix[..., 0, 1] ** 2)

    locked = cos_middle < GIMBAL_LOCK_TOLERANCE

    middle = np.arctan2(matrix[..., 0, 2], cos_middle)

    first = np.where(locked,
                     np.arctan2(matrix[..., 2, 1], matrix[..., 1, 1]),
                     np.arctan2(-matrix[..., 1, 2], matrix[..., 2, 2]))

    last = np.where(locked, 0.0, np.arctan2(-matrix[..., 0, 1], matrix[..., 0, 0]))

    return np.array([first, middle, last])


def rotmat_to_euler_zyx(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into z-y'-x'' (yaw, pitch, roll) Euler angles.

    Expanding :math:`\mathbf{R}_z(z)\mathbf{R}_y(y)\mathbf{R}_x(x)` gives

    .. math::
        y = \text{atan2}(-t_{31}, \sqrt{t_{11}^2+t_{21}^2}) \\
        z = \text{atan2}(t_{21}, t_{11}) \\
        x = \text{atan2}(t_{32}, t_{33})

    At gimbal lock :math:`x` is set to 0 and :math:`z = \text{atan2}(-t_{12}, t_{22})`.

    :param matrix: The matrix(ces) to convert to euler angles
    :return: The angles ``[z, y, x]`` in radians
    """

    matrix = _check_matrix_array_and_shape(matrix)

    cos_middle = np.sqrt(matrix[..., 0, 0] ** 2 + matrix[..., 1, 0] ** 2)

    locked = cos_middle < GIMBAL_LOCK_TOLERANCE

    middle = np.arctan2(-matrix[..., 2, 0], cos_middle)

    first = np.where(locked,
                     np.arctan2(-matrix[..., 0, 1], matrix[..., 1, 1]),
                     np.arctan2(matrix[..., 1, 0], matrix[..., 0, 0]))

    last = np.where(locked, 0.0, np.arctan2(matrix[..., 2, 1], matrix[..., 2, 2]))

    return np.array([first, middle, last])


def angle_axis_to_quaternion(angle: float, axis: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts an angle and a unit axis into a rotation quaternion

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    :param angle: The rotation angle in radians
    :param axis: The unit rotation axis
    :return: The rotation quaternion
    """

    axis = _check_vector_array_and_shape(axis)

    return np.hstack([np.sin(angle / 2) * axis, np.cos(angle / 2)])


def angle_axis_to_rotmat(angle: float, axis: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts an angle and a unit axis into a rotation matrix using Rodrigues' formula.

    See :func:`rotvec_to_rotmat`.

    :param angle: The rotation angle in radians
    :param axis: The unit rotation axis
    :return: The rotation matrix
    """

    axis = _check_vector_array_and_shape(axis)

    cangle = np.cos(angle)

    return cangle * np.eye(3) + np.sin(angle) * skew(axis) + (1 - cangle) * np.outer(axis, axis)


def euler_xyz_to_rotmat(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts x-y'-z'' Euler angles ``[x, y, z]`` into the rotation matrix
    :math:`\\mathbf{R}_x(x)\\mathbf{R}_y(y)\\mathbf{R}_z(z)`.

    The rotation matrix is formed using the :func:`rot_x`, :func:`rot_y`, and :func:`rot_z` functions.  A 3xn array
    of angles produces an nx3x3 stack.

    :param angles: The euler angles
    :return: The rotation matrix formed by the euler angles
    """

    angles = _check_vector_array_and_shape(angles)

    return rot_x(angles[0]) @ rot_y(angles[1]) @ rot_z(angles[2])


def euler_zyx_to_rotmat(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts z-y'-x'' Euler angles ``[z, y, x]`` into the rotation matrix
    :math:`\\mathbf{R}_z(z)\\mathbf{R}_y(y)\\mathbf{R}_x(x)`.

    :param angles: The euler angles (yaw, pitch, roll)
    :return: The rotation matrix formed by the euler angles
    """

    angles = _check_vector_array_and_shape(angles)

    return rot_z(angles[0]) @ rot_y(angles[1]) @ rot_x(angles[2])


def euler_xyz_to_quaternion(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts x-y'-z'' Euler angles into a rotation quaternion.

    Currently this is just done through a call to :func:`.euler_xyz_to_rotmat` followed by a call to
    :func:`.rotmat_to_quaternion`.

    :param angles: The angles to convert
    :returns: The rotation quaternion(s)
    """

    return rotmat_to_quaternion(euler_xyz_to_rotmat(angles))


def euler_zyx_to_quaternion(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts z-y'-x'' Euler angles into a rotation quaternion.

    :param angles: The angles to convert
    :returns: The rotation quaternion(s)
    """

    return rotmat_to_quaternion(euler_zyx_to_rotmat(angles))
