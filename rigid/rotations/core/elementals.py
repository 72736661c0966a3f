import numpy as np

from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY
from rigid.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["rot_2d", "rot_x", "rot_y", "rot_z", "skew"]


def rot_2d(theta: float) -> DOUBLE_ARRAY:
    r"""
    This function forms the right handed (counter clockwise) rotation in the plane by angle theta.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}(\theta)=\left[\begin{array}{cc} \text{cos}(\theta) & -\text{sin}(\theta) \\
        \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle to rotate by in radians
    :return: The :math:`2\times 2` rotation matrix
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, -stheta],
                     [stheta, ctheta]], dtype=np.float64)


def rot_x(theta: float) -> DOUBLE_ARRAY:
    r"""
    This function forms a right handed rotation about the x axis by angle theta.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    For example::

        >>> from rigid.rotations import rot_x
        >>> rot_x(2)
        array([[ 1.        ,  0.        ,  0.        ],
               [ 0.        , -0.41614684, -0.90929743],
               [ 0.        ,  0.90929743, -0.41614684]])

    :param theta: The angle to rotate by in radians
    :return: The :math:`3\times 3` rotation matrix
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[1, 0, 0],
                     [0, ctheta, -stheta],
                     [0, stheta, ctheta]], dtype=np.float64)


def rot_y(theta: float) -> DOUBLE_ARRAY:
    r"""
    This function forms a right handed rotation about the y axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle to rotate by in radians
    :return: The :math:`3\times 3` rotation matrix
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, 0, stheta],
                     [0, 1, 0],
                     [-stheta, 0, ctheta]], dtype=np.float64)


def rot_z(theta: float) -> DOUBLE_ARRAY:
    r"""
    This function forms a right handed rotation about the z axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angle to rotate by in radians
    :return: The :math:`3\times 3` rotation matrix
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, -stheta, 0],
                     [stheta, ctheta, 0],
                     [0, 0, 1]], dtype=np.float64)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns a numpy array with the skew symmetric cross product matrix for vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    :param vector: The 3 element vector to compute a skew symmetric matrix for
    :return: The skew symmetric cross product matrix corresponding to the vector
    """

    vector = _check_vector_array_and_shape(vector)

    return np.array([[0, -vector[2], vector[1]],
                     [vector[2], 0, -vector[0]],
                     [-vector[1], vector[0], 0]], dtype=np.float64)
