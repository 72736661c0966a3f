# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between different rotation representations and for building
rotation matrices from geometric descriptions.  All routines are implemented purely on numpy arrays (or array like
objects) and always return new arrays.
"""


import logging

from typing import Sequence

import numpy as np

from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS

from rigid.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                           _check_vector_array_and_shape, _normalize_vector)
from rigid.rotations.core.elementals import rot_x, rot_y, rot_z, skew


__all__ = ['quaternion_to_rotmat', 'rotmat_to_quaternion',
           'axis_angle_to_rotmat', 'axis_angle_to_quaternion',
           'euler_to_rotmat', 'look_at_rotmat']


_LOGGER: logging.Logger = logging.getLogger(__name__)


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\mathbf{q}_v \\ q_s\end{array}\right] \\
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\mathbf{q}_v` is the vector portion of the quaternion, :math:`q_s` is the scalar portion of the
    quaternion, :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`skew`), and
    :math:`\mathbf{I}_{3\times 3}` is a :math:`3\times 3` identity matrix.  For example::

        >>> from rigid.rotations import quaternion_to_rotmat
        >>> from numpy import sqrt
        >>> quaternion_to_rotmat([0, 0, sqrt(2)/2, sqrt(2)/2])
        array([[ 0., -1.,  0.],
               [ 1.,  0.,  0.],
               [ 0.,  0.,  1.]])

    The result is only a rotation matrix when the quaternion has unit length.

    :param quaternion: The rotation quaternion to be converted to a rotation matrix
    :return: a numpy array containing the rotation matrix corresponding to the input quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    # extract the scalar and vector portion of the quaternion
    qs = quaternion[-1]
    qv = quaternion[:3]

    return (qs ** 2 - qv @ qv) * np.eye(3) + 2 * np.outer(qv, qv) + 2 * qs * skew(qv)


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    The conversion uses the trace based extraction (Shepperd's method).  Whichever of :math:`q_s^2, q_x^2, q_y^2,
    q_z^2` is largest is computed from the trace and the diagonal:

    .. math::
        4q_s^2 = 1+\text{Tr}(\mathbf{T}) \qquad 4q_x^2 = 1+t_{11}-t_{22}-t_{33} \\
        4q_y^2 = 1-t_{11}+t_{22}-t_{33} \qquad 4q_z^2 = 1-t_{11}-t_{22}+t_{33}

    and the remaining components are found from the sums and differences of the off diagonal terms, for instance

    .. math::
        q_x = \frac{t_{32}-t_{23}}{4q_s}\qquad q_y = \frac{t_{13}-t_{31}}{4q_s} \qquad q_z = \frac{t_{21}-t_{12}}{4q_s}

    where :math:`\text{Tr}(\bullet)` is the trace operator, :math:`\mathbf{T}` is the rotation matrix to be converted
    and :math:`t_{ij}` is the :math:`i, j` element of :math:`\mathbf{T}`.  Always dividing by the largest component
    keeps the extraction well conditioned, including for rotations near 180 degrees.

    Since :math:`\mathbf{q}` and :math:`-\mathbf{q}` represent the same rotation, the returned quaternion is chosen to
    have a non-negative scalar component.

    :param rotation_matrix: The rotation matrix to convert to a rotation quaternion
    :return: the rotation quaternion corresponding to the input rotation matrix
    """

    t = _check_matrix_array_and_shape(rotation_matrix)

    trace = np.trace(t)

    # largest of the squared components wins
    candidates = [trace, t[0, 0], t[1, 1], t[2, 2]]
    largest = int(np.argmax(candidates))

    if largest == 0:
        qs = 0.5 * np.sqrt(1 + trace)
        scale = 0.25 / qs
        quaternion = np.array([(t[2, 1] - t[1, 2]) * scale,
                               (t[0, 2] - t[2, 0]) * scale,
                               (t[1, 0] - t[0, 1]) * scale,
                               qs])

    elif largest == 1:
        qx = 0.5 * np.sqrt(max(1 + t[0, 0] - t[1, 1] - t[2, 2], 0))
        scale = 0.25 / qx
        quaternion = np.array([qx,
                               (t[0, 1] + t[1, 0]) * scale,
                               (t[0, 2] + t[2, 0]) * scale,
                               (t[2, 1] - t[1, 2]) * scale])

    elif largest == 2:
        qy = 0.5 * np.sqrt(max(1 - t[0, 0] + t[1, 1] - t[2, 2], 0))
        scale = 0.25 / qy
        quaternion = np.array([(t[0, 1] + t[1, 0]) * scale,
                               qy,
                               (t[1, 2] + t[2, 1]) * scale,
                               (t[0, 2] - t[2, 0]) * scale])

    else:
        qz = 0.5 * np.sqrt(max(1 - t[0, 0] - t[1, 1] + t[2, 2], 0))
        scale = 0.25 / qz
        quaternion = np.array([(t[0, 2] + t[2, 0]) * scale,
                               (t[1, 2] + t[2, 1]) * scale,
                               qz,
                               (t[1, 0] - t[0, 1]) * scale])

    # enforce a non-negative scalar to make the result unique
    if quaternion[-1] < 0:
        quaternion *= -1

    return quaternion


def axis_angle_to_rotmat(axis: ARRAY_LIKE, angle: float) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a rotation matrix using Rodrigues' formula.

    The resulting rotation matrix is returned as a numpy array and is computed according to:

    .. math::
        \hat{\mathbf{x}} = \frac{\mathbf{x}}{\left\|\mathbf{x}\right\|}\\
        \mathbf{T} = \text{cos}(\theta)\mathbf{I}_{3\times 3}+\text{sin}(\theta)\left[\hat{\mathbf{x}}\times\right]+
        (1-\text{cos}(\theta))\hat{\mathbf{x}}\hat{\mathbf{x}}^T

    where :math:`\mathbf{x}` is the rotation axis, :math:`\theta` is the rotation angle,
    :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`skew`), and
    :math:`\mathbf{I}_{3\times 3}` is a :math:`3\times 3` identity matrix.

    :param axis: The axis to rotate about.  It does not need to be unit length
    :param angle: The angle to rotate by in radians
    :return: The rotation matrix corresponding to the axis and angle
    :raises ValueError: if the axis has zero length
    """

    unit = _unit_axis(axis)

    ctheta = np.cos(angle)

    return ctheta * np.eye(3) + np.sin(angle) * skew(unit) + (1 - ctheta) * np.outer(unit, unit)


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: float) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a rotation quaternion.

    The quaternion is returned as a numpy array and is formed by:

    .. math::
        \hat{\mathbf{x}} = \frac{\mathbf{x}}{\left\|\mathbf{x}\right\|} \\
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    :param axis: The axis to rotate about.  It does not need to be unit length
    :param angle: The angle to rotate by in radians
    :return: the rotation quaternion corresponding to the axis and angle
    :raises ValueError: if the axis has zero length
    """

    unit = _unit_axis(axis)

    return np.hstack([np.sin(angle / 2) * unit, np.cos(angle / 2)])


def euler_to_rotmat(angles: Sequence[float] | DOUBLE_ARRAY, order: EULER_ORDERS = 'xyz') -> DOUBLE_ARRAY:
    """
    This function converts a sequence of 3 euler angles into a rotation matrix.

    The order of the rotations is specified using the `order` keyword argument which recognizes x, y, and z
    for axes of rotation.  For instance, say you have a rotation sequence of (1) rotate about x by xr, (2) rotate about
    y by yr, and (3) rotate about z by zr then you would specify order as 'xyz', and the angles as [xr, yr, zr] (order
    should correspond to the indices of angles).  The result for this example is
    ``rot_z(zr) @ rot_y(yr) @ rot_x(xr)``.

    :param angles: The euler angles in radians
    :param order: The order to apply the rotations in
    :return: The rotation matrix formed by the euler angles
    :raises ValueError: When the ``order`` string contains a character that is not x, y, or z or when the number of
                        angles does not match the length of the order
    """

    if len(angles) != len(order):
        raise ValueError('The number of angles must match the length of the order')

    elementals = {'x': rot_x, 'y': rot_y, 'z': rot_z}

    rotation = np.eye(3)

    # loop through the angles and their axes and update the total rotation matrix
    for angle, axis in zip(angles, order):

        try:
            update = elementals[axis.lower()](angle)
        except KeyError:
            raise ValueError('Order must only include x, y, and z.  You entered a {} character'.format(axis)) from None

        rotation = update @ rotation

    return rotation


def look_at_rotmat(direction: ARRAY_LIKE, up: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function builds the rotation matrix whose forward (z) axis points along `direction`.

    The columns of the matrix are an orthonormal basis formed by Gram-Schmidt style orthogonalization:

    .. math::
        \hat{\mathbf{f}} = \frac{\mathbf{d}}{\left\|\mathbf{d}\right\|}\\
        \hat{\mathbf{s}} = \frac{\mathbf{u}\times\hat{\mathbf{f}}}{\left\|\mathbf{u}\times\hat{\mathbf{f}}\right\|}\\
        \hat{\mathbf{u}} = \hat{\mathbf{f}}\times\hat{\mathbf{s}}\\
        \mathbf{T} = \left[\begin{array}{ccc}\hat{\mathbf{s}} & \hat{\mathbf{u}} & \hat{\mathbf{f}}\end{array}\right]

    where :math:`\mathbf{d}` is the look direction and :math:`\mathbf{u}` is the up vector which only needs to not be
    parallel to the direction (it is used to fix the roll about the look direction).  The result rotates the z axis
    onto the look direction and the y axis onto the component of up perpendicular to the look direction.

    :param direction: The direction to look along
    :param up: The approximate up direction
    :return: The rotation matrix
    :raises ValueError: If the direction has zero length or up is parallel to the direction
    """

    forward, _ = _normalize_vector(_check_vector_array_and_shape(direction), 'look direction')

    side = np.cross(_check_vector_array_and_shape(up), forward)

    side_length = np.linalg.norm(side)

    if side_length <= np.finfo(np.float64).eps:
        raise ValueError('The up vector must not be parallel to the look direction')

    side /= side_length

    return np.column_stack([side, np.cross(forward, side), forward])


def _unit_axis(axis: ARRAY_LIKE) -> DOUBLE_ARRAY:

    unit, length = _normalize_vector(_check_vector_array_and_shape(axis), 'rotation axis')

    if not np.isclose(length, 1):
        _LOGGER.debug(f'Normalizing rotation axis of length {length}')

    return unit
