"""
This module defines the physical quantities that vectors can be tagged with and the fixed table of cross products
between them.

The tag never changes numerical behavior.  It only decides which operations are allowed between two vectors (same
tag for addition and subtraction) and which tag the result of a cross product carries.
"""

from enum import Enum, auto


__all__ = ['PhysicalType', 'CROSS_PRODUCT_TABLE', 'cross_product_type']


class PhysicalType(Enum):
    """
    The physical quantity a :class:`.Vector` represents.
    """

    TYPELESS = auto()
    POSITION = auto()
    VELOCITY = auto()
    ACCELERATION = auto()
    FORCE = auto()
    TORQUE = auto()
    MOMENTUM = auto()
    ANGULAR_VELOCITY = auto()
    ANGULAR_ACCELERATION = auto()
    ANGULAR_MOMENTUM = auto()


CROSS_PRODUCT_TABLE: dict[tuple[PhysicalType, PhysicalType], PhysicalType] = {
    (PhysicalType.POSITION, PhysicalType.FORCE): PhysicalType.TORQUE,
    (PhysicalType.POSITION, PhysicalType.MOMENTUM): PhysicalType.ANGULAR_MOMENTUM,
    (PhysicalType.ANGULAR_VELOCITY, PhysicalType.POSITION): PhysicalType.VELOCITY,
    (PhysicalType.ANGULAR_VELOCITY, PhysicalType.VELOCITY): PhysicalType.ACCELERATION,
    (PhysicalType.ANGULAR_ACCELERATION, PhysicalType.POSITION): PhysicalType.ACCELERATION,
    (PhysicalType.ANGULAR_VELOCITY, PhysicalType.MOMENTUM): PhysicalType.FORCE,
    (PhysicalType.ANGULAR_VELOCITY, PhysicalType.ANGULAR_MOMENTUM): PhysicalType.TORQUE,
}
"""
The sanctioned cross products.  Swapping the operands only flips the sign of the result, so each pair is also valid
in the reverse order.
"""


def cross_product_type(left: PhysicalType, right: PhysicalType) -> PhysicalType:
    """
    Look up the physical type of ``left x right``.

    A typeless operand takes the type of the other operand.

    :param left: The type of the left operand
    :param right: The type of the right operand
    :return: The type of the cross product
    :raises TypeError: If the cross product of the two types is not in :data:`CROSS_PRODUCT_TABLE`
    """

    if left is PhysicalType.TYPELESS:
        return right

    if right is PhysicalType.TYPELESS:
        return left

    result = CROSS_PRODUCT_TABLE.get((left, right), CROSS_PRODUCT_TABLE.get((right, left)))

    if result is None:
        raise TypeError('The cross product of {} and {} is not defined'.format(left.name, right.name))

    return result
