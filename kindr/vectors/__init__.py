"""
This subpackage provides physically typed vectors.

Each vector class wraps a numpy array and tags it with the physical quantity it represents (see
:class:`.PhysicalType`) so that only meaningful arithmetic is permitted between vectors.
"""

from kindr.vectors.vector import (Vector, Position, Velocity, Acceleration, Force, Torque, Momentum,
                                  AngularAcceleration, AngularMomentum)

__all__ = ['Vector', 'Position', 'Velocity', 'Acceleration', 'Force', 'Torque', 'Momentum',
           'AngularAcceleration', 'AngularMomentum']
