r"""
This module provides the orthogonal matrix rotation representations, :class:`Basis2` and :class:`Basis3`.

A basis wraps a :math:`2\times 2` or :math:`3\times 3` rotation matrix and only exposes the operations that keep the
matrix orthogonal (with a determinant of +1).  Because of this, inverting a basis is just a transpose.

Matrices supplied by users are checked when a basis is built from them with the class constructor, and accepted
matrices are projected onto the nearest rotation matrix (through a singular value decomposition) so that the transpose
is the inverse to rounding even when the input was only orthogonal to within the configured tolerance.  The builders
(:meth:`Basis3.from_axis_angle`, :meth:`Basis3.look_at`, ...) and the rotation operations construct orthogonal
matrices directly and skip the check.
"""

from typing import TYPE_CHECKING, Self

import numpy as np

from rigid.rotations.rotation import Rotation, Rotation2, Rotation3
from rigid.rotations.core import (rot_2d, rot_x, rot_y, rot_z, axis_angle_to_rotmat, euler_to_rotmat,
                                  look_at_rotmat, rotmat_to_quaternion)
from rigid.rotations.core._helpers import _check_matrix_array_and_shape, _check_vector_array_and_shape

from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY

if TYPE_CHECKING:
    from rigid.rotations.quaternion import Quaternion


class _Basis(Rotation):
    """
    The implementation shared by :class:`Basis2` and :class:`Basis3`.
    """

    _dimension: int = 3

    def __init__(self, matrix: ARRAY_LIKE):
        """
        :param matrix: The rotation matrix.  It must be orthogonal with a determinant of +1 (to within
                       :attr:`approx_epsilon`).  The stored matrix is the nearest exact rotation to it
        :raises ValueError: If the matrix is the wrong shape, is not orthogonal, or is a reflection
        """

        matrix = _check_matrix_array_and_shape(matrix, self._dimension, return_copy=True)

        if not np.all(np.abs(matrix.T @ matrix - np.eye(self._dimension)) <= self.approx_epsilon):
            raise ValueError('The matrix is not orthogonal')

        if np.linalg.det(matrix) < 0:
            raise ValueError('The matrix is a reflection, not a rotation')

        # project onto the nearest rotation so the transpose is the inverse to rounding
        left, _, right = np.linalg.svd(matrix)

        self._matrix = _freeze(left @ right)

    @classmethod
    def _from_trusted(cls, matrix: DOUBLE_ARRAY) -> Self:
        # matrix must already be orthogonal and unshared
        out = object.__new__(cls)
        out._matrix = _freeze(matrix)
        return out

    @classmethod
    def identity(cls) -> Self:
        return cls._from_trusted(np.eye(cls._dimension))

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The rotation matrix as a read only array.

        Use :meth:`to_matrix` for a copy that can be modified.
        """

        return self._matrix

    def to_matrix(self) -> DOUBLE_ARRAY:
        return self._matrix.copy()

    def rotate_vec(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        return self._matrix @ _check_vector_array_and_shape(vector, self._dimension)

    def concat(self, other: Self) -> Self:
        other = self._check_same_representation(other)

        return self._from_trusted(self._matrix @ other._matrix)

    def invert(self) -> Self:
        # the transpose of an orthogonal matrix is its inverse
        return self._from_trusted(self._matrix.T.copy())

    def _assign(self, other: Self):
        self._matrix = other._matrix

    def __setstate__(self, state: dict):
        # copies and unpickled instances get a new, writable array
        self.__dict__.update(state)
        self._matrix = _freeze(self._matrix)

    def __eq__(self, other) -> bool:

        if type(other) is not type(self):
            return False

        return bool((self._matrix == other._matrix).all())

    def approx_eq(self, other: Self, epsilon: float | None = None) -> bool:

        if type(other) is not type(self):
            return False

        return bool(np.all(np.abs(self._matrix - other._matrix) <= self._epsilon(epsilon)))

    def __repr__(self) -> str:
        return '{0}({1!r})'.format(type(self).__name__, np.asarray(self._matrix))

    def __str__(self) -> str:
        return str(self._matrix)


class Basis2(_Basis, Rotation2):
    """
    A rotation in the plane stored as a :math:`2\\times 2` orthogonal matrix.

    For example::

        >>> from rigid.rotations import Basis2
        >>> from numpy import pi
        >>> Basis2.from_angle(pi/2).rotate_vec([1, 0])
        array([6.123234e-17, 1.000000e+00])
    """

    _dimension = 2

    @classmethod
    def from_angle(cls, theta: float) -> Self:
        """
        Create a counter clockwise rotation by an angle.

        :param theta: The angle in radians
        """

        return cls._from_trusted(rot_2d(theta))

    @property
    def angle(self) -> float:
        """
        The counter clockwise rotation angle in radians in the range :math:`(-\\pi, \\pi]`.
        """

        return float(np.arctan2(self._matrix[1, 0], self._matrix[0, 0]))

    def to_basis(self) -> 'Basis2':
        return self._from_trusted(self._matrix.copy())


class Basis3(_Basis, Rotation3):
    """
    A rotation in space stored as a :math:`3\\times 3` orthogonal matrix.

    Use the class methods to build rotations about the principal axes, from euler angles, from an axis and angle or
    from a look direction::

        >>> from rigid.rotations import Basis3
        >>> from numpy import pi
        >>> quarter_turn = Basis3.from_angle_z(pi/2)
        >>> quarter_turn.rotate_vec([1, 0, 0])
        array([6.123234e-17, 1.000000e+00, 0.000000e+00])
        >>> (quarter_turn*quarter_turn).rotate_vec([1, 0, 0])
        array([-1.0000000e+00,  1.2246468e-16,  0.0000000e+00])
    """

    _dimension = 3

    @classmethod
    def look_at(cls, direction: ARRAY_LIKE, up: ARRAY_LIKE) -> Self:
        """
        Create the rotation whose forward (z) axis points along direction with roll fixed by up.

        See :func:`.look_at_rotmat` for details.

        :param direction: The direction to look along
        :param up: The approximate up direction (must not be parallel to direction)
        :raises ValueError: If direction is zero or parallel to up
        """

        return cls._from_trusted(look_at_rotmat(direction, up))

    @classmethod
    def from_angle_x(cls, theta: float) -> Self:
        """
        Create a rotation matrix from a rotation around the `x` axis (pitch).
        """

        return cls._from_trusted(rot_x(theta))

    @classmethod
    def from_angle_y(cls, theta: float) -> Self:
        """
        Create a rotation matrix from a rotation around the `y` axis (yaw).
        """

        return cls._from_trusted(rot_y(theta))

    @classmethod
    def from_angle_z(cls, theta: float) -> Self:
        """
        Create a rotation matrix from a rotation around the `z` axis (roll).
        """

        return cls._from_trusted(rot_z(theta))

    @classmethod
    def from_euler(cls, x: float, y: float, z: float) -> Self:
        """
        Create a rotation matrix from a set of euler angles.

        The rotations are applied about x first, then y, then z, so the result is
        ``from_angle_z(z) * from_angle_y(y) * from_angle_x(x)``.

        :param x: the angular rotation around the `x` axis (pitch) in radians
        :param y: the angular rotation around the `y` axis (yaw) in radians
        :param z: the angular rotation around the `z` axis (roll) in radians
        """

        return cls._from_trusted(euler_to_rotmat([x, y, z], order='xyz'))

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: float) -> Self:
        """
        Create a rotation matrix from a rotation around an arbitrary axis.

        :param axis: The axis to rotate about.  It is normalized before use
        :param angle: The angle to rotate by in radians
        :raises ValueError: If the axis has zero length
        """

        return cls._from_trusted(axis_angle_to_rotmat(axis, angle))

    def to_basis(self) -> 'Basis3':
        return self._from_trusted(self._matrix.copy())

    def to_quaternion(self) -> 'Quaternion':
        from rigid.rotations.quaternion import Quaternion

        return Quaternion(rotmat_to_quaternion(self._matrix))


def _freeze(matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    matrix.flags.writeable = False
    return matrix
