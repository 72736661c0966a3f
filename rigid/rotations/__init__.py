r"""
This package defines the rotation representations of rigid, the contract they share, and the numpy routines they are
built on.

There are a few different rotation representations used in this package and their format is described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
rotation matrix    A :math:`2\times 2` or :math:`3\times 3` orthonormal matrix with a determinant of +1 such that
                   :math:`\mathbf{T}\mathbf{y}` rotates the vector :math:`\mathbf{y}`.  Rotation matrices uniquely
                   represent a single rotation.
axis-angle         A 3 element axis :math:`\mathbf{x}` (normalized before use) and an angle :math:`\theta` in
                   radians to rotate about it following the right hand rule.
euler angles       A sequence of 3 angles corresponding to a rotation about 3 unit axes.  Mathematically they relate to
                   the rotation matrix as :math:`\mathbf{T}=\mathbf{R}_3(c)\mathbf{R}_2(b)\mathbf{R}_1(a)` where
                   :math:`\mathbf{R}_i(\theta)` represents a rotation about axis :math:`i` (either x, y, or z) by angle
                   :math:`\theta`, :math:`a` is the angle to rotate about the first axis, :math:`b` is angle to rotate
                   about the second axis, and :math:`c` is the angle to rotate about the third axis.
=================  =====================================================================================================

Three classes implement the :class:`.Rotation` contract: :class:`.Basis2` (a rotation matrix in the plane),
:class:`.Basis3` (a rotation matrix in space) and :class:`.Quaternion` (a unit quaternion in space).  Each can rotate
vectors, points and rays, be composed with another rotation of the same class using :meth:`~.Rotation.concat` or the
``*`` operator, and be inverted.  The 3D representations convert freely between each other with
:meth:`~.Rotation3.to_basis` and :meth:`~.Rotation3.to_quaternion`.
"""

from rigid.rotations.core import *
from rigid.rotations.rotation import (Rotation, Rotation2, Rotation3, RotationOptions, rotate_point, rotate_ray,
                                      DEFAULT_APPROX_EPSILON)
from rigid.rotations.basis import Basis2, Basis3
from rigid.rotations.quaternion import Quaternion

__all__ = ['quaternion_to_rotmat', 'rotmat_to_quaternion',
           'axis_angle_to_rotmat', 'axis_angle_to_quaternion',
           'euler_to_rotmat', 'look_at_rotmat',
           'rot_2d', 'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_magnitude2', 'quaternion_inverse',
           'quaternion_multiplication', 'quaternion_rotate_vector',
           'Rotation', 'Rotation2', 'Rotation3', 'RotationOptions', 'rotate_point', 'rotate_ray',
           'DEFAULT_APPROX_EPSILON', 'Basis2', 'Basis3', 'Quaternion']
