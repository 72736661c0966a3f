"""
This module provides :class:`Quaternion`, the unit quaternion rotation representation.

Quaternions are stored scalar last, ``[q_x, q_y, q_z, q_s]``, as described in the
:ref:`Rotation Representations <rotation-representation-table>` table.  A quaternion rotation composes and rotates
vectors directly with quaternion arithmetic, without forming a rotation matrix.
"""

from typing import Self

import numpy as np

from rigid.rotations.rotation import Rotation3
from rigid.rotations.basis import Basis3
from rigid.rotations.core import (quaternion_inverse, quaternion_multiplication, quaternion_normalize,
                                  quaternion_rotate_vector, quaternion_to_rotmat, axis_angle_to_quaternion,
                                  quaternion_magnitude2)
from rigid.rotations.core._helpers import _check_quaternion_array_and_shape

from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY


class Quaternion(Rotation3):
    """
    A rotation in space stored as a unit quaternion.

    The quaternion supplied to the constructor is used as is.  It is **not** normalized, so it is up to the caller to
    provide a unit quaternion; the results of every operation are undefined otherwise.  Use :meth:`normalized` if you
    need to renormalize a quaternion explicitly.

    Since :math:`\\mathbf{q}` and :math:`-\\mathbf{q}` represent the same rotation but are different quaternions, they
    are neither equal nor approximately equal under :meth:`__eq__` and :meth:`approx_eq`.

    For example::

        >>> from rigid.rotations import Quaternion
        >>> from numpy import pi
        >>> quarter_turn = Quaternion.from_axis_angle([0, 0, 1], pi/2)
        >>> (quarter_turn*quarter_turn).rotate_vec([1, 0, 0])
        array([-1.0000000e+00,  2.2204460e-16,  0.0000000e+00])
    """

    def __init__(self, data: ARRAY_LIKE | None = None):
        """
        :param data: The 4 element quaternion (scalar last).  If ``None`` then the identity quaternion is used
        :raises ValueError: If the data is not a 4 element vector
        """

        if data is None:
            data = [0, 0, 0, 1]

        self._quaternion = _check_quaternion_array_and_shape(data, return_copy=True)

    @classmethod
    def identity(cls) -> Self:
        return cls()

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: float) -> Self:
        """
        Create a rotation quaternion from a rotation around an arbitrary axis.

        :param axis: The axis to rotate about.  It is normalized before use
        :param angle: The angle to rotate by in radians
        :raises ValueError: If the axis has zero length
        """

        return cls(axis_angle_to_quaternion(axis, angle))

    @property
    def quaternion(self) -> DOUBLE_ARRAY:
        """
        A copy of the quaternion as a 4 element array (scalar last).
        """

        return self._quaternion.copy()

    @property
    def q_vector(self) -> DOUBLE_ARRAY:
        """
        A copy of the first three elements of the quaternion (the vector portion of the quaternion)
        """

        return self._quaternion[:3].copy()

    @property
    def q_scalar(self) -> float:
        """
        The last element of the quaternion (the scalar portion of the quaternion)
        """

        return float(self._quaternion[-1])

    @property
    def magnitude2(self) -> float:
        """
        The squared length of the quaternion
        """

        return quaternion_magnitude2(self._quaternion)

    @property
    def magnitude(self) -> float:
        """
        The length of the quaternion
        """

        return float(np.sqrt(self.magnitude2))

    def normalized(self) -> Self:
        """
        Returns the quaternion scaled to unit length with a non-negative scalar component.

        :raises ValueError: If the quaternion has zero length
        """

        return type(self)(quaternion_normalize(self._quaternion))

    def rotate_vec(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        return quaternion_rotate_vector(self._quaternion, vector)

    def concat(self, other: Self) -> Self:
        other = self._check_same_representation(other)

        return type(self)(quaternion_multiplication(self._quaternion, other._quaternion))

    def invert(self) -> Self:
        return type(self)(quaternion_inverse(self._quaternion))

    def _assign(self, other: Self):
        self._quaternion = other._quaternion

    def to_matrix(self) -> DOUBLE_ARRAY:
        return quaternion_to_rotmat(self._quaternion)

    def to_basis(self) -> Basis3:
        return Basis3._from_trusted(quaternion_to_rotmat(self._quaternion))

    def to_quaternion(self) -> Self:
        return type(self)(self._quaternion)

    def __eq__(self, other) -> bool:

        if type(other) is not type(self):
            return False

        return bool((self._quaternion == other._quaternion).all())

    def approx_eq(self, other: Self, epsilon: float | None = None) -> bool:

        if type(other) is not type(self):
            return False

        return bool(np.all(np.abs(self._quaternion - other._quaternion) <= self._epsilon(epsilon)))

    def __repr__(self) -> str:
        return '{0}({1!r})'.format(type(self).__name__, self._quaternion)

    def __str__(self) -> str:
        return str(self._quaternion)
