"""
This module provides the :class:`UserOptions` abstract dataclass used to configure objects in rigid from a set of
defaults.
"""

import logging

from dataclasses import dataclass, fields

from typing import Any, Dict

from abc import ABCMeta


_LOGGER: logging.Logger = logging.getLogger(__name__)


DEFAULT_APPROX_EPSILON: float = 1e-5
"""
The default absolute tolerance used when comparing rotations and points with ``approx_eq``
"""


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set defaults for parameters used inside the associated class for the options.

    Custom objects built from this abstract class should follow the naming scheme <class_name>Options.  To apply the
    options to a target, the :meth:`apply_options` method should be invoked.  The target can be an instance or a class,
    in which case the options become class attributes that every instance (and subclass) sees.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     example_var : int = 1234

        >>> class Example:
        >>>     def __init__(self, options = None):
        >>>         if options is None:
        >>>             options = ExampleOptions()
        >>>         options.apply_options(self) #apply the options as attributes of self
        >>> my_example = Example()
        >>> print(my_example.example_var)
        ...     1234
    """

    def override_options(self):
        '''
        This method is used for special cases when certain options should be overwritten before being applied
        '''
        pass

    def apply_options(self, target: Any) -> None:
        """
        Set the options as attributes of the target.

        :param target: the instance or class that we are to update
        """

        for key, value in self.options_dict.items():
            setattr(target, key, value)

        _LOGGER.debug(f'Applied {type(self).__name__} to {getattr(target, "__name__", type(target).__name__)}')

    @property
    def options_dict(self) -> Dict[str, Any]:
        """
        Determine the options input to the dataclass.

        This property will ignore all internal attributes and functions
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
