import numpy as np

from rigid._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE, shape: tuple[int, ...], name: str,
                           return_copy: bool = False) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if in_shape != shape:
        raise ValueError(f'The {name} must have shape {shape}, not {in_shape}')

    # ensure the value is a float array, breaking mutability if requested
    if return_copy:
        return np.array(input, dtype=np.float64)

    return np.asarray(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, (4,), 'quaternion', return_copy)


def _check_vector_array_and_shape(vector: ARRAY_LIKE, dimension: int = 3, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, (dimension,), 'vector', return_copy)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE, dimension: int = 3, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, (dimension, dimension), 'matrix', return_copy)


def _normalize_vector(vector: DOUBLE_ARRAY, name: str) -> tuple[DOUBLE_ARRAY, float]:
    length = float(np.linalg.norm(vector))

    if length == 0:
        raise ValueError(f'The {name} must have a non-zero length')

    return vector / length, length
