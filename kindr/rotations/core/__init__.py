"""
This module contains fundamental mathematical operations and utilities for rotation
calculations. It has no dependencies on other rotation modules to avoid circular imports.
All functions here are pure mathematical operations that can be used as building blocks
for higher-level rotation representations, conversions and differential kinematics.
"""

import kindr.rotations.core.conversions
import kindr.rotations.core.elementals
import kindr.rotations.core.kinematics
import kindr.rotations.core.quaternion_math

from kindr.rotations.core.conversions import (quaternion_to_rotvec, quaternion_to_rotmat, quaternion_to_angle_axis,
                                              quaternion_to_euler_xyz, quaternion_to_euler_zyx,
                                              rotvec_to_rotmat, rotvec_to_quaternion,
                                              rotmat_to_quaternion, rotmat_to_rotvec,
                                              rotmat_to_euler_xyz, rotmat_to_euler_zyx,
                                              angle_axis_to_quaternion, angle_axis_to_rotmat,
                                              euler_xyz_to_rotmat, euler_zyx_to_rotmat,
                                              euler_xyz_to_quaternion, euler_zyx_to_quaternion)

from kindr.rotations.core.elementals import rot_x, rot_y, rot_z, skew, unskew

from kindr.rotations.core.kinematics import (quaternion_rates_to_local, local_to_quaternion_rates,
                                             rotmat_rates_to_local, local_to_rotmat_rates,
                                             rotvec_right_jacobian, rotvec_right_jacobian_inverse,
                                             angle_axis_rates_to_local, local_to_angle_axis_rates,
                                             euler_xyz_rate_matrix, euler_zyx_rate_matrix)

from kindr.rotations.core.quaternion_math import quaternion_normalize, quaternion_inverse, quaternion_multiplication

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
           'quaternion_normalize', 'quaternion_inverse', 'quaternion_multiplication']
