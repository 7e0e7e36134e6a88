# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import kindr.rotations.core
import kindr.rotations.rotation
import kindr.rotations.angular_velocity
import kindr.rotations.rotation_diff
import kindr.rotations.mapper

from kindr.rotations.core import *
from kindr.rotations.rotation import (RotationUsage, RotationBase, RotationQuaternion, RotationMatrix, AngleAxis,
                                      RotationVector, EulerAnglesXyz, EulerAnglesZyx)
from kindr.rotations.angular_velocity import LocalAngularVelocity, GlobalAngularVelocity
from kindr.rotations.rotation_diff import (RotationDiffBase, RotationQuaternionDiff, RotationMatrixDiff, AngleAxisDiff,
                                           RotationVectorDiff, EulerAnglesXyzDiff, EulerAnglesZyxDiff, diff_type_for)
from kindr.rotations.mapper import (AngularVelocityMapper, AngularVelocityMapperOptions, SingularConfigurationWarning,
                                    get_default_mapper, resolve_mapper)

__all__ = ['quaternion_to_rotvec', 'quaternion_to_rotmat', 'quaternion_to_angle_axis',
           'quaternion_to_euler_xyz', 'quaternion_to_euler_zyx',
           'rotvec_to_rotmat', 'rotvec_to_quaternion',
           'rotmat_to_quaternion', 'rotmat_to_rotvec', 'rotmat_to_euler_xyz', 'rotmat_to_euler_zyx',
           'angle_axis_to_quaternion', 'angle_axis_to_rotmat',
           'euler_xyz_to_rotmat', 'euler_zyx_to_rotmat', 'euler_xyz_to_quaternion', 'euler_zyx_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'skew', 'unskew',
           'quaternion_rates_to_local', 'local_to_quaternion_rates',
           'rotmat_rates_to_local', 'local_to_rotmat_rates',
           'rotvec_right_jacobian', 'rotvec_right_jacobian_inverse',
           'angle_axis_rates_to_local', 'local_to_angle_axis_rates',
           'euler_xyz_rate_matrix', 'euler_zyx_rate_matrix',
           'quaternion_normalize', 'quaternion_inverse', 'quaternion_multiplication',
           'RotationUsage', 'RotationBase', 'RotationQuaternion', 'RotationMatrix', 'AngleAxis', 'RotationVector',
           'EulerAnglesXyz', 'EulerAnglesZyx',
           'LocalAngularVelocity', 'GlobalAngularVelocity',
           'RotationDiffBase', 'RotationQuaternionDiff', 'RotationMatrixDiff', 'AngleAxisDiff', 'RotationVectorDiff',
           'EulerAnglesXyzDiff', 'EulerAnglesZyxDiff', 'diff_type_for',
           'AngularVelocityMapper', 'AngularVelocityMapperOptions', 'SingularConfigurationWarning',
           'get_default_mapper', 'resolve_mapper']


r"""
This package defines the rotation representations of kindr, the conversions between them, their time derivatives,
and the mapping between those derivatives and angular velocities.

The following rotation representations are provided:

.. _rotation-representation-summary:

==================  ====================================================================================================
Representation      Description
==================  ====================================================================================================
quaternion          A 4 element unit Hamilton quaternion of the form
                    :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                    \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                    \text{cos}(\frac{\theta}{2})\end{array}\right]`
                    (:class:`.RotationQuaternion`).  Note that :math:`\mathbf{q}` and :math:`-\mathbf{q}` represent
                    the same rotation.
rotation matrix     A :math:`3\times 3` proper orthonormal matrix (:class:`.RotationMatrix`).
angle-axis          An angle :math:`\theta` in radians and a unit axis :math:`\hat{\mathbf{x}}` (:class:`.AngleAxis`).
rotation vector     A 3 element vector :math:`\mathbf{v}=\theta\hat{\mathbf{x}}` (:class:`.RotationVector`).
euler angles        Three angles about intrinsic axes, either x-y'-z'' (:class:`.EulerAnglesXyz`) or z-y'-x''
                    (:class:`.EulerAnglesZyx`, also known as yaw, pitch, roll).
==================  ====================================================================================================

Every rotation is either active or passive (see :class:`.RotationUsage`).  Rotations compose with the ``*``
operator and apply to vectors with :meth:`.RotationBase.rotate`.

The time derivative of the parameters of each representation is held by the matching differential class (for
instance :class:`.RotationQuaternionDiff`), which is related to :class:`.LocalAngularVelocity` and
:class:`.GlobalAngularVelocity` by the :class:`.AngularVelocityMapper`.

The pure numpy routines underneath the classes live in :mod:`kindr.rotations.core` and are also exported here.
"""
