"""
This module provides the :class:`UserOptions` abstract dataclass which is the base for all option containers in kindr.

Each configurable class ``Thing`` comes with a ``ThingOptions`` dataclass holding the defaults for its settings.  The
options are copied onto the instance as attributes with :meth:`UserOptions.apply_options`, typically through the
:class:`.UserOptionConfigured` mixin.
"""

from dataclasses import dataclass, fields

from typing import Any

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    The abstract base of the option dataclasses.

    Subclasses are dataclasses whose fields are the settings of the class they configure, with the defaults as the
    field defaults.  :class:`.AngularVelocityMapperOptions` is the one used in kindr itself::

        >>> from kindr.rotations import AngularVelocityMapperOptions
        >>> options = AngularVelocityMapperOptions(warn_on_singularity=False)
        >>> options.options_dict
        {'small_angle_tolerance': 1e-06, 'singularity_tolerance': 1e-08, 'warn_on_singularity': False}

    Only the dataclass fields count as options, so helper attributes and methods of a subclass are never copied onto
    the configured instance.
    """

    def override_options(self):
        """
        Hook to adjust the fields right before they are read, for instance to enforce a relationship between them.
        """

    def apply_options(self, target: object) -> None:
        """
        Sets each option as an attribute of ``target``.

        :param target: The instance to configure
        """

        for name, value in self.options_dict.items():
            setattr(target, name, value)

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        The options as a dictionary from field name to value, after :meth:`override_options` has run.
        """

        self.override_options()

        return {field.name: getattr(self, field.name) for field in fields(self)}
