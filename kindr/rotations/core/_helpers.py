"""
Input validation shared by the core rotation routines.

Each check returns a fresh float64 array so the callers can work on it in place without touching the user's data.
"""

import numpy as np

from kindr._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(data: ARRAY_LIKE, name: str,
                           first_axis_length: int | None = None,
                           last_two_axes: tuple[int, int] | None = None) -> DOUBLE_ARRAY:
    """
    Checks the shape of ``data`` and returns it as a new float64 array.

    :param data: The array like to check
    :param name: What the data is, for the error messages
    :param first_axis_length: The required length of the first axis, if any
    :param last_two_axes: The required lengths of the last two axes, if any
    :raises ValueError: If the shape does not match
    """

    shape = np.shape(data)

    if not shape:
        raise ValueError('The {} must be an array, not a scalar'.format(name))

    if first_axis_length is not None and shape[0] != first_axis_length:
        raise ValueError('The {} must have {} elements along its first axis, got shape {}'.format(
            name, first_axis_length, shape))

    if last_two_axes is not None and shape[-2:] != last_two_axes:
        raise ValueError('The {} must be {}x{} in its last two axes, got shape {}'.format(name, *last_two_axes,
                                                                                         shape))

    return np.array(data, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, 'quaternion', first_axis_length=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, 'vector', first_axis_length=3)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, 'matrix', last_two_axes=(3, 3))
