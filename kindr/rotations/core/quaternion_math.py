r"""
This module provides the basic algebra of Hamilton quaternions stored vector part first, ``[x, y, z, w]``.

All of the functions accept either a single length 4 quaternion or a 4xn array with one quaternion per column.
"""

import numpy as np

from kindr._typing import ARRAY_LIKE, DOUBLE_ARRAY

from kindr.rotations.core._helpers import _check_quaternion_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_inverse", "quaternion_multiplication"]


_CONJUGATE_SIGNS: DOUBLE_ARRAY = np.array([-1, -1, -1, 1.0])
"""
Multiplying by these signs negates the vector part of a quaternion
"""


def quaternion_normalize(quaternion: ARRAY_LIKE, unique: bool = True) -> DOUBLE_ARRAY:
    """
    Scales the quaternion(s) to unit length.

    Since :math:`\\mathbf{q}` and :math:`-\\mathbf{q}` are the same rotation, ``unique`` also flips any quaternion
    with a negative scalar part so that each rotation has a single representation.  A zero scalar part is left
    alone.

    :param quaternion: The quaternion(s) to normalize
    :param unique: Whether to make the scalar part non-negative
    :return: The unit quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    scale = 1 / np.linalg.norm(quaternion, axis=0)

    if unique:
        scale = np.where(quaternion[-1] < 0, -scale, scale)

    return quaternion * scale


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the conjugate of the quaternion(s), which is the inverse of a unit quaternion:

    .. math::
        \mathbf{q}^{-1}=\left[\begin{array}{c}-\mathbf{q}_v\\ q_s\end{array}\right]

    so that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T`.

    The conjugate is linear, which is why it applies unchanged to quaternion rates.

    :param quaternion: The quaternion(s) to invert
    :return: The inverse quaternion(s) as a new array
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return quaternion * _CONJUGATE_SIGNS.reshape((4,) + (1,) * (quaternion.ndim - 1))


def _left_product_matrix(quaternion: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    Returns the matrix :math:`\\mathbf{L}(\\mathbf{q}_1)` with :math:`\\mathbf{q}_1\\otimes\\mathbf{q}_2=
    \\mathbf{L}(\\mathbf{q}_1)\\mathbf{q}_2`, stacked along trailing axes for multiple quaternions.
    """

    x, y, z, w = quaternion

    return np.array([[w, -z, y, x],
                     [z, w, -x, y],
                     [-y, x, w, z],
                     [-x, -y, -z, w]])


def quaternion_multiplication(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the Hamilton product of two quaternions

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    The product matches the rotation matrices in the same order,
    :math:`\mathbf{C}(\mathbf{q}_1\otimes\mathbf{q}_2)=\mathbf{C}(\mathbf{q}_1)\mathbf{C}(\mathbf{q}_2)`.

    Either input may be a 4xn array, in which case the products are taken column by column (a single quaternion is
    broadcast against all columns of the other).  Neither input needs to be of unit length, so this also multiplies
    quaternion rates.

    :param quaternion_1: The left quaternion(s)
    :param quaternion_2: The right quaternion(s)
    :return: The Hamilton product
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2)

    return np.einsum('ij...,j...->i...', _left_product_matrix(quaternion_1), quaternion_2)
