"""
rigid provides rigid rotations in the plane and in space behind a single interface.

A rotation can be stored as an orthogonal matrix (:class:`.Basis2`, :class:`.Basis3`) or as a unit quaternion
(:class:`.Quaternion`).  Every representation rotates vectors, :class:`.Point` objects and :class:`.Ray` objects,
composes with other rotations of the same representation, and inverts, so code using a rotation does not need to know
how it is stored.  See :mod:`rigid.rotations` for details.
"""

from rigid.points import Point
from rigid.rays import Ray
from rigid.rotations import (Rotation, Rotation2, Rotation3, RotationOptions, Basis2, Basis3, Quaternion,
                             rotate_point, rotate_ray)

__all__ = ['Point', 'Ray', 'Rotation', 'Rotation2', 'Rotation3', 'RotationOptions', 'Basis2', 'Basis3',
           'Quaternion', 'rotate_point', 'rotate_ray']
