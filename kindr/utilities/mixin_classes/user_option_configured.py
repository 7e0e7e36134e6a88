"""
This module provides the :class:`UserOptionConfigured` mixin, which configures a class from its options dataclass
and remembers that configuration so it can be restored later.

A configurable class inherits from the mixin (parametrized with its options dataclass) first and from the options
dataclass second, so that the options are also the documented attributes of the class::

    from dataclasses import dataclass

    from kindr.utilities.options import UserOptions
    from kindr.utilities.mixin_classes import UserOptionConfigured

    @dataclass
    class FilterOptions(UserOptions):
        gain: float = 0.5

    class Filter(UserOptionConfigured[FilterOptions], FilterOptions):
        def __init__(self, options: FilterOptions | None = None):
            super().__init__(FilterOptions, options=options)

    flt = Filter()
    flt.gain = 2
    flt.reset_settings()  # flt.gain is 0.5 again

:class:`.AngularVelocityMapper` is configured this way.
"""

import copy

from typing import Generic, TypeVar

from kindr.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
The options dataclass a configured class is parametrized with
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin that applies an options dataclass to the instance on initialization and can reset to it afterwards.

    A deep copy of the options is kept in :attr:`original_options`, so changing the options instance given to the
    initializer does not change what :meth:`reset_settings` restores.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The options dataclass of the configured class, instantiated with its defaults when
                             ``options`` is ``None``
        :param options: The options to configure the instance with
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        self._original_options: OptionsT = copy.deepcopy(options)
        """
        The configuration restored by :meth:`reset_settings`
        """

        self.reset_settings()

    def reset_settings(self) -> None:
        """
        Sets every option attribute back to its value in :attr:`original_options`.

        Attributes that are not options are left alone.
        """

        self._original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The configuration the instance was created with.

        Assigning a new options instance changes what :meth:`reset_settings` restores without applying it.
        """

        return self._original_options

    @original_options.setter
    def original_options(self, value: OptionsT) -> None:
        self._original_options = value
