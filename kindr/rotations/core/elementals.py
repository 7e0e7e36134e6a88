r"""
This module provides the elemental rotation matrices about the coordinate axes and the skew symmetric cross product
matrix.

The elemental rotations are right handed and active, so that ``rot_z(np.pi/2) @ [1, 0, 0]`` is ``[0, 1, 0]``.
"""

import numpy as np

from kindr._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, DOUBLE_ARRAY
from kindr.rotations.core._helpers import _check_vector_array_and_shape, _check_matrix_array_and_shape


__all__ = ["rot_x", "rot_y", "rot_z", "skew", "unskew"]


def _elemental(theta: SCALAR_OR_ARRAY, axis: int) -> DOUBLE_ARRAY:
    """
    Builds the right handed elemental rotation matrix(ces) about the requested axis (0=x, 1=y, 2=z).

    The other two axes are the cyclic successors of ``axis`` so that the same sine/cosine pattern produces all three
    elemental rotations.
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).flatten()

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    first = (axis + 1) % 3
    second = (axis + 2) % 3

    out = np.zeros((theta.size, 3, 3))
    out[:, axis, axis] = 1
    out[:, first, first] = ctheta
    out[:, first, second] = -stheta
    out[:, second, first] = stheta
    out[:, second, second] = ctheta

    return out.squeeze(axis=0) if theta.size == 1 else out


def rot_x(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Returns the rotation matrix for a right handed rotation of ``theta`` radians about the x axis

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    A scalar angle gives a single 3x3 matrix.  A sequence of n angles gives an nx3x3 stack::

        >>> from kindr.rotations import rot_x
        >>> rot_x([np.pi/2, 0]).shape
        (2, 3, 3)

    :param theta: The rotation angle(s) in radians
    :return: The rotation matrix(ces)
    """

    return _elemental(theta, 0)


def rot_y(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Returns the rotation matrix for a right handed rotation of ``theta`` radians about the y axis (see :func:`rot_x`)

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]
    """

    return _elemental(theta, 1)


def rot_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Returns the rotation matrix for a right handed rotation of ``theta`` radians about the z axis (see :func:`rot_x`)

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]
    """

    return _elemental(theta, 2)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the skew symmetric cross product matrix of a vector, defined by
    :math:`\left[\mathbf{a}\times\right]\mathbf{b}=\mathbf{a}\times\mathbf{b}`:

    .. math::
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    Row :math:`i` of the matrix is :math:`\hat{\mathbf{e}}_i\times\mathbf{a}`, which is how it is built.

    :param vector: A length 3 vector, or a 3xn array with one vector per column
    :return: The 3x3 matrix, or an nx3x3 stack for more than one vector
    """

    vector = _check_vector_array_and_shape(vector)

    if vector.ndim == 1:
        return np.cross(np.eye(3), vector)

    return np.cross(np.eye(3), vector.T[:, np.newaxis, :]).squeeze()


def unskew(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The inverse of :func:`skew`: extracts the vector from the skew symmetric part of a :math:`3\times 3` matrix.

    Only the skew symmetric part :math:`\frac{1}{2}(\mathbf{A}-\mathbf{A}^T)` is used, so any symmetric component
    of the input (for instance from numerical noise) is discarded.

    :param matrix: The matrix(ces) to extract the vector(s) from. Stacks go down the first axis
    :return: The vector(s), as a length 3 array or a 3xn array for stacked input
    """

    matrix = _check_matrix_array_and_shape(matrix)

    return 0.5 * np.array([matrix[..., 2, 1] - matrix[..., 1, 2],
                           matrix[..., 0, 2] - matrix[..., 2, 0],
                           matrix[..., 1, 0] - matrix[..., 0, 1]])
