# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
kindr: kinematics and dynamics for robotics

This package provides rotation representations with active or passive usage, exact conversions between them,
rotation differentials and their relation to angular velocities, and physically typed vectors that only allow
arithmetic that makes sense physically.
"""

from kindr import phys_quant, rotations, utilities, vectors

from kindr.phys_quant import PhysicalType
from kindr.vectors import *
from kindr.rotations import (RotationUsage, RotationQuaternion, RotationMatrix, AngleAxis, RotationVector,
                             EulerAnglesXyz, EulerAnglesZyx, LocalAngularVelocity, GlobalAngularVelocity,
                             RotationQuaternionDiff, RotationMatrixDiff, AngleAxisDiff, RotationVectorDiff,
                             EulerAnglesXyzDiff, EulerAnglesZyxDiff, AngularVelocityMapper,
                             AngularVelocityMapperOptions, SingularConfigurationWarning)


__version__ = '1.0.0'

__all__ = ['PhysicalType',
           'Vector', 'Position', 'Velocity', 'Acceleration', 'Force', 'Torque', 'Momentum',
           'AngularAcceleration', 'AngularMomentum',
           'RotationUsage', 'RotationQuaternion', 'RotationMatrix', 'AngleAxis', 'RotationVector',
           'EulerAnglesXyz', 'EulerAnglesZyx', 'LocalAngularVelocity', 'GlobalAngularVelocity',
           'RotationQuaternionDiff', 'RotationMatrixDiff', 'AngleAxisDiff', 'RotationVectorDiff',
           'EulerAnglesXyzDiff', 'EulerAnglesZyxDiff', 'AngularVelocityMapper', 'AngularVelocityMapperOptions',
           'SingularConfigurationWarning']
