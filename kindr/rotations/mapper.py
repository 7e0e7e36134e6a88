# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the :class:`AngularVelocityMapper` which relates rotation differentials to angular velocities.

Description
-----------

For a rotation with parameters :math:`\mathbf{p}` the kinematic equations of each representation (see
:mod:`kindr.rotations.core.kinematics`) give a map :math:`\mathbf{J}(\mathbf{p})` from the parameter rates to the
angular velocity of the body frame under the active interpretation of the nominal matrix :math:`\mathbf{N}`:

.. math::
    \boldsymbol{\omega}' = \mathbf{J}(\mathbf{p})\dot{\mathbf{p}}

The mapper then accounts for the frame and the usage of the rotation.  For an active rotation
:math:`\mathbf{N}=\mathbf{C}_{IB}` and

.. math::
    \boldsymbol{\omega}_B=\boldsymbol{\omega}' \\
    \boldsymbol{\omega}_I=\mathbf{N}\boldsymbol{\omega}'

while for a passive rotation :math:`\mathbf{N}=\mathbf{C}_{BI}` and

.. math::
    \boldsymbol{\omega}_B=-\mathbf{N}\boldsymbol{\omega}' \\
    \boldsymbol{\omega}_I=-\boldsymbol{\omega}'

The inverse map applies the same relations backwards before solving for :math:`\dot{\mathbf{p}}`.

Singular configurations
-----------------------

The Euler angles at gimbal lock and rotation vectors with an angle of :math:`2k\pi, k\neq 0` have no unique parameter
rates for a given angular velocity.  There the inverse map issues a :class:`SingularConfigurationWarning` (unless
disabled through :attr:`AngularVelocityMapperOptions.warn_on_singularity`) and returns the minimum norm solution
computed through the pseudo-inverse of :math:`\mathbf{J}`.

The angle-axis representation at a zero angle is not singular in this sense: the axis rates keep only their bounded
part (see :func:`.local_to_angle_axis_rates`) and the fallback is logged at the debug level.

Use
---

Most users never build a mapper directly since the differential and angular velocity classes use the default mapper
(see :func:`get_default_mapper`) when none is given.  To change the tolerances make a mapper with custom options::

    >>> from kindr.rotations import AngularVelocityMapper, AngularVelocityMapperOptions
    >>> mapper = AngularVelocityMapper(options=AngularVelocityMapperOptions(warn_on_singularity=False))
"""

import logging
import warnings

from dataclasses import dataclass

from typing import Callable

import numpy as np

from kindr._typing import DOUBLE_ARRAY
from kindr.rotations.angular_velocity import LocalAngularVelocity, GlobalAngularVelocity
from kindr.rotations.core.kinematics import (quaternion_rates_to_local, local_to_quaternion_rates,
                                             rotmat_rates_to_local, local_to_rotmat_rates,
                                             rotvec_right_jacobian, rotvec_right_jacobian_inverse,
                                             angle_axis_rates_to_local, local_to_angle_axis_rates,
                                             euler_xyz_rate_matrix, euler_zyx_rate_matrix)
from kindr.rotations.rotation import (RotationBase, RotationUsage, RotationQuaternion, RotationMatrix, AngleAxis,
                                      RotationVector, EulerAnglesXyz, EulerAnglesZyx)
from kindr.rotations.rotation_diff import RotationDiffBase, diff_type_for
from kindr.utilities.mixin_classes import UserOptionConfigured
from kindr.utilities.options import UserOptions


__all__ = ['AngularVelocityMapperOptions', 'AngularVelocityMapper', 'SingularConfigurationWarning',
           'get_default_mapper', 'resolve_mapper']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


_RATE_FUNCTION = Callable[[DOUBLE_ARRAY, DOUBLE_ARRAY], DOUBLE_ARRAY]


class SingularConfigurationWarning(UserWarning):
    """
    Issued when parameter rates are requested at a configuration where the kinematic map is not invertible.
    """


@dataclass
class AngularVelocityMapperOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.AngularVelocityMapper` class.

    You can set any of the options on an instance of this dataclass and pass it to the
    :class:`.AngularVelocityMapper` class at initialization (or through the method
    :meth:`.AngularVelocityMapper.apply_options`) to set the settings on the class. This class is the preferred way
    of setting options on the class due to ease of use in IDEs.
    """

    small_angle_tolerance: float = 1e-6
    """
    The rotation angle below which the series expansions of the rotation vector Jacobians are used, and the threshold
    on the sine of half the angle below which an angle-axis rotation is treated as the identity.
    """

    singularity_tolerance: float = 1e-8
    """
    The threshold below which the determinant of an Euler angle rate matrix (or the sine of half the angle of a
    rotation vector longer than the small angle tolerance) marks a singular configuration.
    """

    warn_on_singularity: bool = True
    """
    Whether to issue a :class:`SingularConfigurationWarning` when the pseudo-inverse is used.
    """


class AngularVelocityMapper(UserOptionConfigured[AngularVelocityMapperOptions], AngularVelocityMapperOptions):
    """
    This class maps between rotation differentials and local or global angular velocities.

    The kinematic equations of each representation are held in a dispatch table keyed by the rotation class.  The
    forward routines map the parameter rates to the angular velocity of the body frame under the active
    interpretation.  The inverse routines solve the same equation for the rates, handling singular configurations as
    described in the module documentation.
    """

    def __init__(self, options: AngularVelocityMapperOptions | None = None):
        """
        :param options: The options to configure the mapper with.  The defaults are used if ``None``
        """

        super().__init__(AngularVelocityMapperOptions, options=options)

        self._forward: dict[type[RotationBase], _RATE_FUNCTION] = {
            RotationQuaternion: quaternion_rates_to_local,
            RotationMatrix: rotmat_rates_to_local,
            AngleAxis: self._angle_axis_forward,
            RotationVector: self._rotation_vector_forward,
            EulerAnglesXyz: self._euler_xyz_forward,
            EulerAnglesZyx: self._euler_zyx_forward,
        }
        """
        Maps each rotation class to the routine computing the active local angular velocity from (parameters, rates)
        """

        self._inverse: dict[type[RotationBase], _RATE_FUNCTION] = {
            RotationQuaternion: local_to_quaternion_rates,
            RotationMatrix: local_to_rotmat_rates,
            AngleAxis: self._angle_axis_inverse,
            RotationVector: self._rotation_vector_inverse,
            EulerAnglesXyz: self._euler_xyz_inverse,
            EulerAnglesZyx: self._euler_zyx_inverse,
        }
        """
        Maps each rotation class to the routine computing the rates from (parameters, active local angular velocity)
        """

    # forward and inverse routines for the representations that need the options

    def _angle_axis_forward(self, parameters: DOUBLE_ARRAY, rates: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return angle_axis_rates_to_local(parameters[0], parameters[1:], rates[0], rates[1:],
                                         self.small_angle_tolerance)

    def _angle_axis_inverse(self, parameters: DOUBLE_ARRAY, angular_velocity: DOUBLE_ARRAY) -> DOUBLE_ARRAY:

        if abs(np.sin(parameters[0] / 2)) < self.small_angle_tolerance:
            _LOGGER.debug('Angle-axis rates requested at the identity.  Only the bounded part of the axis rates is '
                          'kept')

        angle_rate, axis_rates = local_to_angle_axis_rates(parameters[0], parameters[1:], angular_velocity,
                                                           self.small_angle_tolerance)

        return np.hstack([angle_rate, axis_rates])

    def _rotation_vector_forward(self, parameters: DOUBLE_ARRAY, rates: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return rotvec_right_jacobian(parameters, self.small_angle_tolerance) @ rates

    def _rotation_vector_inverse(self, parameters: DOUBLE_ARRAY, angular_velocity: DOUBLE_ARRAY) -> DOUBLE_ARRAY:

        angle = np.linalg.norm(parameters)

        if angle >= self.small_angle_tolerance and abs(np.sin(angle / 2)) < self.singularity_tolerance:
            self._singular('rotation vector with angle {:.6g}'.format(angle))

            return np.linalg.pinv(rotvec_right_jacobian(parameters, self.small_angle_tolerance)) @ angular_velocity

        return rotvec_right_jacobian_inverse(parameters, self.small_angle_tolerance) @ angular_velocity

    @staticmethod
    def _euler_forward(rate_matrix: DOUBLE_ARRAY, rates: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return rate_matrix @ rates

    def _euler_inverse(self, rate_matrix: DOUBLE_ARRAY, angular_velocity: DOUBLE_ARRAY, name: str) -> DOUBLE_ARRAY:

        if abs(np.linalg.det(rate_matrix)) < self.singularity_tolerance:
            self._singular('{} Euler angles at gimbal lock'.format(name))

            return np.linalg.pinv(rate_matrix) @ angular_velocity

        return np.linalg.solve(rate_matrix, angular_velocity)

    def _euler_xyz_forward(self, parameters: DOUBLE_ARRAY, rates: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return self._euler_forward(euler_xyz_rate_matrix(parameters), rates)

    def _euler_xyz_inverse(self, parameters: DOUBLE_ARRAY, angular_velocity: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return self._euler_inverse(euler_xyz_rate_matrix(parameters), angular_velocity, 'x-y\'-z\'\'')

    def _euler_zyx_forward(self, parameters: DOUBLE_ARRAY, rates: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return self._euler_forward(euler_zyx_rate_matrix(parameters), rates)

    def _euler_zyx_inverse(self, parameters: DOUBLE_ARRAY, angular_velocity: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
        return self._euler_inverse(euler_zyx_rate_matrix(parameters), angular_velocity, 'z-y\'-x\'\'')

    def _singular(self, description: str):

        _LOGGER.debug('Singular configuration: {}'.format(description))

        if self.warn_on_singularity:
            warnings.warn('The kinematic map is singular for a {}.  The minimum norm rates are returned'.format(
                description), SingularConfigurationWarning)

    # dispatch

    def _lookup(self, table: dict[type[RotationBase], _RATE_FUNCTION], rotation: RotationBase) -> _RATE_FUNCTION:

        for cls in type(rotation).__mro__:
            if cls in table:
                return table[cls]

        raise TypeError('No kinematic equations are defined for {}'.format(type(rotation).__name__))

    def _active_local(self, rotation: RotationBase, diff: RotationDiffBase) -> DOUBLE_ARRAY:
        """
        Computes the angular velocity of the parameter rates under the active interpretation of the parameters.
        """

        if not isinstance(rotation, RotationBase):
            raise TypeError('Expected a rotation, not a {}'.format(type(rotation).__name__))

        if not isinstance(diff, RotationDiffBase):
            raise TypeError('Expected a rotation differential, not a {}'.format(type(diff).__name__))

        if not isinstance(rotation, diff.rotation_type):
            raise TypeError('A {} can only be used with a {}, not a {}'.format(type(diff).__name__,
                                                                               diff.rotation_type.__name__,
                                                                               type(rotation).__name__))

        parameters = rotation.to_implementation().astype(np.float64)
        rates = diff.to_implementation().astype(np.float64)

        return self._lookup(self._forward, rotation)(parameters, rates)

    def local_angular_velocity(self, rotation: RotationBase, diff: RotationDiffBase) -> LocalAngularVelocity:
        """
        Computes the angular velocity of the body frame, expressed in the body frame.

        :param rotation: The rotation the rates are taken at
        :param diff: The parameter rates, a differential of the representation of ``rotation``
        :return: The local angular velocity
        :raises TypeError: If diff is not a differential of the representation of rotation
        """

        omega = self._active_local(rotation, diff)

        if rotation.usage is RotationUsage.PASSIVE:
            omega = -rotation.as_matrix() @ omega

        return LocalAngularVelocity(omega, dtype=diff.dtype)

    def global_angular_velocity(self, rotation: RotationBase, diff: RotationDiffBase) -> GlobalAngularVelocity:
        """
        Computes the angular velocity of the body frame, expressed in the reference frame.

        See :meth:`local_angular_velocity`.
        """

        omega = self._active_local(rotation, diff)

        if rotation.usage is RotationUsage.PASSIVE:
            omega = -omega
        else:
            omega = rotation.as_matrix() @ omega

        return GlobalAngularVelocity(omega, dtype=diff.dtype)

    def rotation_diff(self, rotation: RotationBase,
                      angular_velocity: LocalAngularVelocity | GlobalAngularVelocity) -> RotationDiffBase:
        """
        Computes the parameter rates of a rotation that produce an angular velocity.

        :param rotation: The rotation to compute the rates at
        :param angular_velocity: The angular velocity, whose class decides the frame it is expressed in
        :return: The differential of the representation of ``rotation``
        :raises TypeError: If angular_velocity is not a :class:`.LocalAngularVelocity` or
                           :class:`.GlobalAngularVelocity`
        """

        if not isinstance(rotation, RotationBase):
            raise TypeError('Expected a rotation, not a {}'.format(type(rotation).__name__))

        omega = np.asarray(angular_velocity, dtype=np.float64)
        matrix = rotation.as_matrix()
        passive = rotation.usage is RotationUsage.PASSIVE

        if isinstance(angular_velocity, LocalAngularVelocity):
            active_local = -matrix.T @ omega if passive else omega

        elif isinstance(angular_velocity, GlobalAngularVelocity):
            active_local = -omega if passive else matrix.T @ omega

        else:
            raise TypeError('The angular velocity must be a LocalAngularVelocity or a GlobalAngularVelocity, '
                            'not a {}'.format(type(angular_velocity).__name__))

        parameters = rotation.to_implementation().astype(np.float64)

        rates = self._lookup(self._inverse, rotation)(parameters, active_local)

        return diff_type_for(rotation)(rates, dtype=rotation.dtype)

    def convert_diff(self, rotation: RotationBase, diff: RotationDiffBase,
                     diff_type: type[RotationDiffBase]) -> RotationDiffBase:
        """
        Converts a differential into the differential of another representation at the same rotation.

        The conversion goes through the local angular velocity, composing the forward map of the source
        representation with the inverse map of the target representation, so it is exact wherever both are
        defined.

        :param rotation: The rotation ``diff`` was taken at.  It must be a ``diff.rotation_type``
        :param diff: The differential to convert
        :param diff_type: The differential class to convert to
        :return: The differential of ``rotation`` converted to ``diff_type.rotation_type``
        :raises TypeError: If rotation is not a ``diff.rotation_type``
        """

        omega = self.local_angular_velocity(rotation, diff)

        if type(diff) is diff_type:
            return diff_type(diff)

        return self.rotation_diff(diff_type.rotation_type(rotation), omega)


_DEFAULT_MAPPER: AngularVelocityMapper | None = None


def get_default_mapper() -> AngularVelocityMapper:
    """
    Returns the mapper used when none is given, creating it with the default options on first use.
    """

    global _DEFAULT_MAPPER

    if _DEFAULT_MAPPER is None:
        _DEFAULT_MAPPER = AngularVelocityMapper()

    return _DEFAULT_MAPPER


def resolve_mapper(mapper: AngularVelocityMapper | None) -> AngularVelocityMapper:
    """
    Returns ``mapper``, or the default mapper if it is ``None``.
    """

    if mapper is None:
        return get_default_mapper()

    return mapper
