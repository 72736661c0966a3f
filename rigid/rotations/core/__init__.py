"""
This package contains the fundamental mathematical operations used to build rotations in rigid.

It has no dependencies on the rotation classes so that they can import it without circular imports.  All functions
here are pure operations on numpy arrays that return new arrays and can be used as building blocks for the higher
level rotation representations and conversions.
"""

from rigid.rotations.core.conversions import (quaternion_to_rotmat, rotmat_to_quaternion,
                                              axis_angle_to_rotmat, axis_angle_to_quaternion,
                                              euler_to_rotmat, look_at_rotmat)

from rigid.rotations.core.elementals import rot_2d, rot_x, rot_y, rot_z, skew

from rigid.rotations.core.quaternion_math import (quaternion_normalize, quaternion_conjugate, quaternion_magnitude2,
                                                  quaternion_inverse, quaternion_multiplication,
                                                  quaternion_rotate_vector)

__all__ = ['quaternion_to_rotmat', 'rotmat_to_quaternion',
           'axis_angle_to_rotmat', 'axis_angle_to_quaternion',
           'euler_to_rotmat', 'look_at_rotmat',
           'rot_2d', 'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_magnitude2', 'quaternion_inverse',
           'quaternion_multiplication', 'quaternion_rotate_vector']
