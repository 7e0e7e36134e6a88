"""
This module provides the angular velocity vectors.

An angular velocity is expressed either in the body frame (:class:`LocalAngularVelocity`) or in the reference frame
(:class:`GlobalAngularVelocity`).  The two are different classes so that they cannot be added to each other by
mistake; :meth:`LocalAngularVelocity.to_global` and :meth:`GlobalAngularVelocity.to_local` convert between them given
the orientation of the body frame.
"""

from typing import TYPE_CHECKING

import numpy as np

from kindr.phys_quant import PhysicalType
from kindr.rotations.rotation import RotationBase, RotationUsage
from kindr.vectors.vector import Vector

if TYPE_CHECKING:
    from kindr.rotations.mapper import AngularVelocityMapper
    from kindr.rotations.rotation_diff import RotationDiffBase


__all__ = ['LocalAngularVelocity', 'GlobalAngularVelocity']


def _body_to_reference(rotation: RotationBase) -> np.ndarray:
    """
    Returns the matrix taking body frame coordinates into reference frame coordinates for a rotation of either usage.
    """

    matrix = rotation.as_matrix()

    if rotation.usage is RotationUsage.PASSIVE:
        return matrix.T

    return matrix


class LocalAngularVelocity(Vector):
    """
    An angular velocity expressed in the body frame
    """

    physical_type = PhysicalType.ANGULAR_VELOCITY

    dimension = 3

    @classmethod
    def from_rotation_diff(cls, rotation: RotationBase, diff: 'RotationDiffBase',
                           mapper: 'AngularVelocityMapper | None' = None) -> 'LocalAngularVelocity':
        """
        Computes the local angular velocity from a rotation and its time derivative.

        :param rotation: The rotation the derivative is taken at
        :param diff: The time derivative of the parameters of ``rotation``
        :param mapper: The mapper to use.  The default mapper is used if ``None``
        :return: The local angular velocity
        """

        from kindr.rotations.mapper import resolve_mapper

        return resolve_mapper(mapper).local_angular_velocity(rotation, diff)

    def to_global(self, rotation: RotationBase) -> 'GlobalAngularVelocity':
        """
        Expresses this angular velocity in the reference frame.

        :param rotation: The orientation of the body frame (either usage)
        :return: The global angular velocity
        """

        return GlobalAngularVelocity(_body_to_reference(rotation) @ self._vector, dtype=self.dtype)


class GlobalAngularVelocity(Vector):
    """
    An angular velocity expressed in the reference frame
    """

    physical_type = PhysicalType.ANGULAR_VELOCITY

    dimension = 3

    @classmethod
    def from_rotation_diff(cls, rotation: RotationBase, diff: 'RotationDiffBase',
                           mapper: 'AngularVelocityMapper | None' = None) -> 'GlobalAngularVelocity':
        """
        Computes the global angular velocity from a rotation and its time derivative.

        See :meth:`LocalAngularVelocity.from_rotation_diff`.
        """

        from kindr.rotations.mapper import resolve_mapper

        return resolve_mapper(mapper).global_angular_velocity(rotation, diff)

    def to_local(self, rotation: RotationBase) -> LocalAngularVelocity:
        """
        Expresses this angular velocity in the body frame.

        :param rotation: The orientation of the body frame (either usage)
        :return: The local angular velocity
        """

        return LocalAngularVelocity(_body_to_reference(rotation).T @ self._vector, dtype=self.dtype)
