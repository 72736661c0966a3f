"""
This module defines the :class:`Point` class used to represent locations in the plane or in space.

Points are kept distinct from free vectors (plain numpy arrays in rigid).  The difference of two points is a vector,
a point plus a vector is a point, and :meth:`Point.to_vec`/:meth:`Point.from_vec` move between a point and its
vector from the origin.  This is the interface that :func:`.rotate_point` relies on.
"""

from typing import ClassVar, Iterator, Self

import numpy as np

from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY
from rigid.utilities.options import DEFAULT_APPROX_EPSILON


class Point:
    """
    A location in 2 or 3 dimensional space.

    The coordinates are stored as a float64 numpy array that is owned by the point.  Arithmetic follows the usual
    affine rules::

        >>> from rigid import Point
        >>> Point([1, 2, 3]) - Point([1, 1, 1])
        array([0., 1., 2.])
        >>> Point([1, 1, 1]) + [0, 1, 2]
        Point(array([1., 2., 3.]))
    """

    approx_epsilon: ClassVar[float] = DEFAULT_APPROX_EPSILON
    """
    The default absolute tolerance for :meth:`approx_eq`.  It can be changed by applying a :class:`.RotationOptions`
    to this class with :meth:`~.UserOptions.apply_options`.
    """

    def __init__(self, coordinates: ARRAY_LIKE):
        """
        :param coordinates: The 2 or 3 coordinates of the point
        :raises ValueError: if the coordinates are not a 2 or 3 element vector
        """

        coordinates = np.array(coordinates, dtype=np.float64)

        if coordinates.shape not in ((2,), (3,)):
            raise ValueError(f'A point must have 2 or 3 coordinates, not shape {coordinates.shape}')

        self._coordinates = coordinates

    @classmethod
    def origin(cls, dimension: int = 3) -> Self:
        """
        Returns the origin of the space with the requested dimension.

        :param dimension: 2 or 3
        """

        return cls(np.zeros(dimension))

    @classmethod
    def from_vec(cls, vector: ARRAY_LIKE) -> Self:
        """
        Builds the point reached by moving from the origin along vector.

        :param vector: The vector from the origin to the point
        """

        return cls(vector)

    def to_vec(self) -> DOUBLE_ARRAY:
        """
        Returns the vector from the origin to this point as a new array.
        """

        return self._coordinates.copy()

    @property
    def coordinates(self) -> DOUBLE_ARRAY:
        """
        A read only view of the coordinates of the point.
        """

        view = self._coordinates.view()
        view.flags.writeable = False
        return view

    @property
    def dimension(self) -> int:
        """
        The number of coordinates of the point
        """

        return self._coordinates.size

    def __getitem__(self, item: int) -> float:
        return float(self._coordinates[item])

    def __iter__(self) -> Iterator[float]:
        return iter(self._coordinates.tolist())

    def __len__(self) -> int:
        return self.dimension

    def __sub__(self, other: 'Point') -> DOUBLE_ARRAY:

        if isinstance(other, Point):
            return self._coordinates - other._coordinates

        return NotImplemented

    def __add__(self, vector: ARRAY_LIKE) -> Self:

        if isinstance(vector, Point):
            return NotImplemented

        vector = np.asarray(vector, dtype=np.float64)

        if vector.shape != self._coordinates.shape:
            raise ValueError('The vector must have the same dimension as the point')

        return type(self)(self._coordinates + vector)

    def __eq__(self, other) -> bool:

        if not isinstance(other, Point):
            return NotImplemented

        return self._coordinates.shape == other._coordinates.shape and \
            bool((self._coordinates == other._coordinates).all())

    def approx_eq(self, other: 'Point', epsilon: float | None = None) -> bool:
        """
        Checks whether all coordinates of two points agree to within an absolute tolerance.

        Anything that is not a :class:`Point` is never approximately equal to a point.

        :param other: The point to compare to
        :param epsilon: The absolute tolerance.  If ``None`` then :attr:`approx_epsilon` is used
        """

        if not isinstance(other, Point):
            return False

        if epsilon is None:
            epsilon = self.approx_epsilon

        return self._coordinates.shape == other._coordinates.shape and \
            bool(np.all(np.abs(self._coordinates - other._coordinates) <= epsilon))

    def copy(self) -> Self:
        """
        Returns a copy of self which does not share storage with self.
        """

        return type(self)(self._coordinates)

    def __repr__(self) -> str:
        return 'Point({0!r})'.format(self._coordinates)

    def __str__(self) -> str:
        return str(self._coordinates)
