# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module defines a class for representing a ray in rigid.

Description
-----------

A :class:`.Ray` is a half line defined fully by an origin :class:`.Point` and a direction vector.  Rays can be
translated in place, and rotated through :func:`.rotate_ray` (or the ``rotate_ray`` method of any rotation), which
rotates the direction while leaving the origin untouched.
"""


from typing import Self

import numpy as np

from rigid.points import Point
from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY


class Ray:
    """
    A class to store/manipulate a single ray.

    The ray is defined by the :attr:`origin` point it starts at and the :attr:`direction` it travels in.  The
    direction does not need to be unit length.  Both are copied on input so a ray never shares storage with the data
    it was created from.
    """

    def __init__(self, origin: Point | ARRAY_LIKE, direction: ARRAY_LIKE):
        """
        :param origin: The start location of the ray as a :class:`.Point` or as an array of coordinates
        :param direction: The direction vector of the ray
        """

        self._origin = Point.origin()
        self._direction = np.zeros(3)

        self.origin = origin
        self.direction = direction

    @property
    def origin(self) -> Point:
        """
        The start location of the ray as a :class:`.Point`.

        When setting this property the value may be a :class:`.Point` or anything that can be turned into one.  The
        value is copied.
        """

        return self._origin

    @origin.setter
    def origin(self, val: Point | ARRAY_LIKE):

        if isinstance(val, Point):
            self._origin = val.copy()
        else:
            self._origin = Point(val)

    @property
    def direction(self) -> DOUBLE_ARRAY:
        """
        The direction vector of the ray.

        The direction must have the same dimension as the origin.  The value is copied when set.
        """

        return self._direction

    @direction.setter
    def direction(self, val: ARRAY_LIKE):

        val = np.array(val, dtype=np.float64)

        if val.shape != (self._origin.dimension,):
            raise ValueError(f'The direction must be a {self._origin.dimension} element vector')

        self._direction = val

    @property
    def dimension(self) -> int:
        """
        The dimension of the space the ray lives in.
        """

        return self._origin.dimension

    def translate(self, translation: ARRAY_LIKE):
        """
        Translates the origin of the ray in place.

        :param translation: the vector to move the origin by
        """

        self._origin = self._origin + translation

    def point_at(self, distance: float) -> Point:
        """
        Returns the point reached by travelling along the ray for distance times the direction vector.

        :param distance: The multiple of the direction to travel
        """

        return self._origin + distance * self._direction

    def __eq__(self, other) -> bool:

        if not isinstance(other, Ray):
            return NotImplemented

        return self._origin == other._origin and bool((self._direction == other._direction).all())

    def copy(self) -> Self:
        """
        Returns a copy of self which does not share storage with self.
        """

        return type(self)(self._origin, self._direction)

    def __repr__(self) -> str:
        return 'Ray(origin={0!r}, direction={1!r})'.format(self._origin, self._direction)
