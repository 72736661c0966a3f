import numpy as np

from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY

from rigid.rotations.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_conjugate", "quaternion_magnitude2", "quaternion_inverse",
           "quaternion_multiplication", "quaternion_rotate_vector"]


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Normalizes the quaternion such that the scalar term is non-negative and the length is 1

    :param quaternion: the quaternion to normalize
    :returns: The normalized quaternion as a new array
    :raises ValueError: if the quaternion has zero length
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    length = np.linalg.norm(work_quaternion)

    if length == 0:
        raise ValueError('Cannot normalize a zero length quaternion')

    sign = -1.0 if work_quaternion[-1] < 0 else 1.0

    work_quaternion *= sign / length

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns the conjugate of a quaternion, which negates the vector portion:

    .. math::
        \mathbf{q}^*=\left[\begin{array}{c}-\mathbf{q}_v\\ q_s\end{array}\right]

    :param quaternion: The quaternion to conjugate
    :return: The conjugate quaternion as a new array
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    quaternion[:3] *= -1

    return quaternion


def quaternion_magnitude2(quaternion: ARRAY_LIKE) -> float:
    """
    Returns the squared magnitude (the sum of the squared components) of a quaternion.

    :param quaternion: The quaternion
    :return: the squared magnitude
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return float(quaternion @ quaternion)


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the inverse of a quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion and
    :math:`\otimes` indicates quaternion multiplication.  It is computed as the conjugate divided by the squared
    magnitude:

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\mathbf{q}^T\mathbf{q}}

    For a unit rotation quaternion this is simply the conjugate.  Dividing by the squared magnitude removes the small
    drift in length that builds up from repeated multiplication.

    :param quaternion: The quaternion to be inverted
    :return: a numpy array representing the inverse quaternion
    :raises ValueError: if the quaternion has zero length
    """

    magnitude2 = quaternion_magnitude2(quaternion)

    if magnitude2 == 0:
        raise ValueError('A zero length quaternion has no inverse')

    return quaternion_conjugate(quaternion) / magnitude2


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    The multiplication is defined such that
    `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`, which is the same ordering as the
    product of the equivalent rotation matrices.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    :param quaternion_1_in: The first quaternion to multiply
    :param quaternion_2_in: The second quaternion to multiply
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[:3]

    return np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2),
                           [qs1 * qs2 - qv1 @ qv2]])


def quaternion_rotate_vector(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates a 3 element vector by a unit quaternion.

    This is the sandwich product :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^*` expanded so that no
    intermediate quaternions are formed:

    .. math::
        \mathbf{v}'=\mathbf{v}+2\mathbf{q}_v\times\left(\mathbf{q}_v\times\mathbf{v}+q_s\mathbf{v}\right)

    The expansion assumes a unit quaternion.

    :param quaternion: The unit rotation quaternion
    :param vector: The vector to rotate
    :return: The rotated vector
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)
    vector = _check_vector_array_and_shape(vector)

    qv = quaternion[:3]

    temp = np.cross(qv, vector) + quaternion[-1] * vector

    return vector + 2 * np.cross(qv, temp)
