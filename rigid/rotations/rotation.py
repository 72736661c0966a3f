"""
This module defines the contract that every rotation representation in rigid satisfies.

The :class:`Rotation` abstract base class declares the primitive operations each representation implements
(:meth:`~Rotation.identity`, :meth:`~Rotation.rotate_vec`, :meth:`~Rotation.concat`, :meth:`~Rotation.invert` and the
equality checks) and provides the operations that follow from them.  Points and rays are rotated by the module level
:func:`rotate_point` and :func:`rotate_ray` functions, which work for anything implementing
:meth:`~Rotation.rotate_vec`, so the derived behavior is identical for every representation.

:class:`Rotation2` and :class:`Rotation3` refine the contract for rotations in the plane and in space by requiring
conversions to the matrix based representations (and, in 3D, to a quaternion).

Composition convention
----------------------

``a.concat(b)`` (equivalently ``a * b``) is the rotation that applies ``b`` first and then ``a``::

    a.concat(b).rotate_vec(v) == a.rotate_vec(b.rotate_vec(v))

This is the ordering of the matrix product ``A @ B`` and of the hamiltonian quaternion product, and it is used by
every representation.
"""

import copy

from abc import ABCMeta, abstractmethod

from dataclasses import dataclass

from typing import TYPE_CHECKING, ClassVar, Protocol, Self, TypeVar

from rigid.rays import Ray
from rigid.utilities.options import UserOptions, DEFAULT_APPROX_EPSILON

from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY

if TYPE_CHECKING:
    from rigid.rotations.basis import Basis2, Basis3
    from rigid.rotations.quaternion import Quaternion


@dataclass
class RotationOptions(UserOptions):
    """
    Options controlling the behavior of the rotation classes.

    Apply these through :meth:`.Rotation.configure`.
    """

    approx_epsilon: float = DEFAULT_APPROX_EPSILON
    """
    The absolute tolerance used by ``approx_eq`` when no tolerance is given, and by the orthogonality check performed
    when a :class:`.Basis2` or :class:`.Basis3` is built from a user supplied matrix.
    """


class PointLike(Protocol):
    """
    The interface a point must provide to be rotated by :func:`rotate_point`.
    """

    def to_vec(self) -> DOUBLE_ARRAY: ...

    @classmethod
    def from_vec(cls, vector: ARRAY_LIKE) -> Self: ...


class VectorRotator(Protocol):
    """
    The minimal interface needed by :func:`rotate_point` and :func:`rotate_ray`.
    """

    def rotate_vec(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY: ...


PointT = TypeVar('PointT', bound=PointLike)


def rotate_point(rotation: VectorRotator, point: PointT) -> PointT:
    """
    Rotates a point about the origin.

    The point is turned into its vector from the origin, the vector is rotated with ``rotation.rotate_vec`` and a
    point of the same type is rebuilt from the result.

    :param rotation: The rotation to apply
    :param point: The point to rotate
    :return: The rotated point as a new object of the same type as ``point``
    """

    return type(point).from_vec(rotation.rotate_vec(point.to_vec()))


def rotate_ray(rotation: VectorRotator, ray: Ray) -> Ray:
    """
    Rotates the direction of a ray, leaving its origin where it is.

    :param rotation: The rotation to apply
    :param ray: The ray to rotate
    :return: A new ray with a copy of the original origin and the rotated direction
    """

    return Ray(ray.origin.copy(), rotation.rotate_vec(ray.direction))


class Rotation(metaclass=ABCMeta):
    """
    The abstract base class for rotation representations in rigid.

    Subclasses implement :meth:`identity`, :meth:`rotate_vec`, :meth:`concat`, :meth:`invert`, :meth:`__eq__`,
    :meth:`approx_eq` and :meth:`_assign`.  Everything else is provided here in terms of those methods and should not
    be overridden.

    Equality is representation consistent: two rotations are equal only if they are the same representation and their
    underlying arrays are equal, not merely if they rotate vectors the same way.
    """

    approx_epsilon: ClassVar[float] = DEFAULT_APPROX_EPSILON
    """
    The default absolute tolerance for :meth:`approx_eq`.  Change it with :meth:`configure`.
    """

    @classmethod
    def configure(cls, options: RotationOptions | None = None):
        """
        Applies rotation options to this class (and any subclass which doesn't override them).

        Calling this on :class:`Rotation` changes the defaults for every representation, while calling it on a
        concrete representation only changes that representation.

        :param options: The options to apply.  If ``None`` then the default options are applied
        """

        if options is None:
            options = RotationOptions()

        options.apply_options(cls)

    @classmethod
    @abstractmethod
    def identity(cls) -> Self:
        """
        Returns the rotation that maps every vector to itself.
        """

    @abstractmethod
    def rotate_vec(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        Applies the rotation to a free vector.

        :param vector: The vector to rotate
        :return: The rotated vector as a new array
        """

    def rotate_point(self, point: PointT) -> PointT:
        """
        Rotates a point about the origin.  See :func:`rotate_point`.
        """

        return rotate_point(self, point)

    def rotate_ray(self, ray: Ray) -> Ray:
        """
        Rotates the direction of a ray.  See :func:`rotate_ray`.
        """

        return rotate_ray(self, ray)

    @abstractmethod
    def concat(self, other: Self) -> Self:
        """
        Composes this rotation with another of the same representation.

        The result applies ``other`` first and then ``self``.

        :param other: The rotation to apply first
        :return: The combined rotation
        :raises TypeError: if ``other`` is a different representation
        """

    @abstractmethod
    def invert(self) -> Self:
        """
        Returns the rotation which undoes this one.
        """

    def concat_self(self, other: Self):
        """
        Replaces self with ``self.concat(other)``.
        """

        self._assign(self.concat(other))

    def invert_self(self):
        """
        Replaces self with ``self.invert()``.
        """

        self._assign(self.invert())

    @abstractmethod
    def _assign(self, other: Self):
        """
        Overwrites the data of self with the data of other (which is a new, unshared value).
        """

    @abstractmethod
    def __eq__(self, other) -> bool:
        pass

    @abstractmethod
    def approx_eq(self, other: Self, epsilon: float | None = None) -> bool:
        """
        Checks whether the underlying data of two rotations of the same representation agree to within a tolerance.

        :param other: The rotation to compare to
        :param epsilon: The absolute tolerance.  If ``None`` then :attr:`approx_epsilon` is used
        """

    def _check_same_representation(self, other) -> Self:

        if type(other) is not type(self):
            raise TypeError(f'Cannot concatenate a {type(self).__name__} with a {type(other).__name__}.  '
                            f'Convert one of them first')

        return other

    def _epsilon(self, epsilon: float | None) -> float:

        return self.approx_epsilon if epsilon is None else epsilon

    def __mul__(self, other: Self) -> Self:

        if type(other) is type(self):
            return self.concat(other)

        return NotImplemented

    def copy(self) -> Self:
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)


class Rotation2(Rotation):
    """
    A rotation in the plane.

    In addition to the :class:`Rotation` contract a 2D rotation can be converted to a :math:`2\\times 2` matrix and to a
    :class:`.Basis2`.
    """

    @abstractmethod
    def to_matrix(self) -> DOUBLE_ARRAY:
        """
        Returns the rotation as a new :math:`2\\times 2` rotation matrix.
        """

    @abstractmethod
    def to_basis(self) -> 'Basis2':
        """
        Returns the rotation as a new :class:`.Basis2`.
        """


class Rotation3(Rotation):
    """
    A rotation in space.

    In addition to the :class:`Rotation` contract a 3D rotation can be converted to a :math:`3\\times 3` matrix, to a
    :class:`.Basis3` and to a :class:`.Quaternion`.
    """

    @abstractmethod
    def to_matrix(self) -> DOUBLE_ARRAY:
        """
        Returns the rotation as a new :math:`3\\times 3` rotation matrix.
        """

    @abstractmethod
    def to_basis(self) -> 'Basis3':
        """
        Returns the rotation as a new :class:`.Basis3`.
        """

    @abstractmethod
    def to_quaternion(self) -> 'Quaternion':
        """
        Returns the rotation as a new :class:`.Quaternion`.
        """
