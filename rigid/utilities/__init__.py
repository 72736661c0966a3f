"""
This package provides small utilities shared throughout rigid, currently the :class:`.UserOptions` dataclass base
used to configure classes from a set of defaults.
"""

from rigid.utilities.options import UserOptions, DEFAULT_APPROX_EPSILON

__all__ = ["UserOptions", "DEFAULT_APPROX_EPSILON"]
