# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
General purpose utilities used throughout kindr.
"""

from kindr.utilities.options import UserOptions
from kindr.utilities.mixin_classes import UserOptionConfigured

__all__ = ['UserOptions', 'UserOptionConfigured']
