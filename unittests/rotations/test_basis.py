from unittest import TestCase

import pickle

import numpy as np

from rigid.rotations import Basis2, Basis3, Quaternion, rot_x, rot_y, rot_z


class TestBasis3(TestCase):

    def test_creation(self):

        basis = Basis3(np.eye(3))

        np.testing.assert_array_almost_equal(basis.matrix, np.eye(3))

        basis = Basis3(rot_z(0.3).tolist())

        np.testing.assert_array_almost_equal(basis.matrix, rot_z(0.3))

        self.assertEqual(Basis3.identity(), basis.identity())

    def test_creation_copies_input(self):

        matrix = rot_x(0.5)

        basis = Basis3(matrix)

        matrix[:] = 0

        np.testing.assert_array_almost_equal(basis.matrix, rot_x(0.5))

    def test_creation_rejects_bad_matrices(self):

        bad_matrices = {'wrong shape': np.eye(2),
                        'not square': np.zeros((3, 2)),
                        'scaled': 2*np.eye(3),
                        'sheared': [[1, 0.5, 0], [0, 1, 0], [0, 0, 1]],
                        'reflection': np.diag([1, 1, -1])}

        for name, matrix in bad_matrices.items():

            with self.subTest(name):

                with self.assertRaises(ValueError):
                    Basis3(matrix)

    def test_matrix_is_read_only(self):

        basis = Basis3.from_angle_y(1.0)

        with self.assertRaises(ValueError):
            basis.matrix[0, 0] = 5

        matrix = basis.to_matrix()
        matrix[0, 0] = 5

        np.testing.assert_array_almost_equal(basis.matrix, rot_y(1.0))

    def test_copy_is_read_only(self):

        basis = Basis3.from_angle_z(0.3)

        copy = basis.copy()

        self.assertEqual(copy, basis)
        self.assertFalse(np.shares_memory(copy.matrix, basis.matrix))

        with self.assertRaises(ValueError):
            copy.matrix[0, 0] = 5

        np.testing.assert_array_equal(copy.matrix, rot_z(0.3))

    def test_pickle_is_read_only(self):

        basis = Basis3.from_euler(0.1, 0.2, 0.3)

        restored = pickle.loads(pickle.dumps(basis))

        self.assertEqual(restored, basis)

        with self.assertRaises(ValueError):
            restored.matrix[1, 1] = 5

    def test_nearly_orthogonal_matrix_is_projected(self):

        matrix = rot_z(0.3)
        matrix[0, 1] += 1e-7

        basis = Basis3(matrix)

        np.testing.assert_allclose(basis.matrix, matrix, atol=1e-6)

        # the stored matrix is orthogonal to rounding, so the transpose is the inverse
        np.testing.assert_allclose(basis.matrix.T @ basis.matrix, np.eye(3), rtol=0, atol=1e-12)
        np.testing.assert_allclose(basis.concat(basis.invert()).matrix, np.eye(3), rtol=0, atol=1e-12)

        self.assertAlmostEqual(np.linalg.det(basis.matrix), 1)

    def test_from_angle(self):

        np.testing.assert_array_equal(Basis3.from_angle_x(0.4).matrix, rot_x(0.4))
        np.testing.assert_array_equal(Basis3.from_angle_y(0.4).matrix, rot_y(0.4))
        np.testing.assert_array_equal(Basis3.from_angle_z(0.4).matrix, rot_z(0.4))

        np.testing.assert_array_almost_equal(Basis3.from_angle_x(np.pi/2).rotate_vec([0, 1, 0]), [0, 0, 1])
        np.testing.assert_array_almost_equal(Basis3.from_angle_y(np.pi/2).rotate_vec([0, 0, 1]), [1, 0, 0])
        np.testing.assert_array_almost_equal(Basis3.from_angle_z(np.pi/2).rotate_vec([1, 0, 0]), [0, 1, 0])

    def test_from_euler(self):

        euler = Basis3.from_euler(0.2, -1.1, 2.5)

        composed = Basis3.from_angle_z(2.5) * Basis3.from_angle_y(-1.1) * Basis3.from_angle_x(0.2)

        self.assertTrue(euler.approx_eq(composed, epsilon=1e-12))

        # x is applied first
        vector = [0.3, 1, -2]

        np.testing.assert_array_almost_equal(euler.rotate_vec(vector),
                                             rot_z(2.5) @ (rot_y(-1.1) @ (rot_x(0.2) @ vector)))

    def test_from_axis_angle(self):

        for theta in [-3, 0.1, 1.2]:

            with self.subTest(theta=theta):

                self.assertTrue(Basis3.from_axis_angle([0, 0, 1], theta).approx_eq(Basis3.from_angle_z(theta)))

                # non-unit axes are normalized
                self.assertTrue(Basis3.from_axis_angle([0, 0, 5], theta).approx_eq(Basis3.from_angle_z(theta)))

                self.assertTrue(Basis3.from_axis_angle([-2, 0, 0], theta).approx_eq(Basis3.from_angle_x(-theta)))

        # the axis itself doesn't move
        np.testing.assert_array_almost_equal(Basis3.from_axis_angle([1, 2, 3], 1.7).rotate_vec([1, 2, 3]),
                                             [1, 2, 3])

        with self.assertRaises(ValueError):
            Basis3.from_axis_angle([0, 0, 0], 1)

    def test_look_at(self):

        basis = Basis3.look_at([2, 0, 0], [0, 0, 1])

        np.testing.assert_array_almost_equal(basis.rotate_vec([0, 0, 1]), [1, 0, 0])
        np.testing.assert_array_almost_equal(basis.rotate_vec([0, 1, 0]), [0, 0, 1])

        basis = Basis3.look_at([1, 2, -1], [0, 1, 0])

        np.testing.assert_array_almost_equal(basis.rotate_vec([0, 0, 1]), np.array([1, 2, -1])/np.sqrt(6))

        matrix = basis.to_matrix()

        np.testing.assert_array_almost_equal(matrix.T @ matrix, np.eye(3))
        self.assertAlmostEqual(np.linalg.det(matrix), 1)

        with self.assertRaises(ValueError):
            Basis3.look_at([0, 1, 0], [0, 3, 0])

        with self.assertRaises(ValueError):
            Basis3.look_at([0, 0, 0], [0, 1, 0])

    def test_rotate_vec(self):

        basis = Basis3.from_angle_z(np.pi/2)

        np.testing.assert_array_almost_equal(basis.rotate_vec([1, 0, 0]), [0, 1, 0])

        with self.assertRaises(ValueError):
            basis.rotate_vec([1, 0])

    def test_invert(self):

        basis = Basis3.from_euler(0.5, 0.6, -0.7)

        np.testing.assert_array_equal(basis.invert().matrix, basis.matrix.T)

        # the inverse doesn't share the data of the original
        self.assertFalse(np.shares_memory(basis.invert().matrix, basis.matrix))

    def test_concat(self):

        a = Basis3.from_angle_x(0.3)
        b = Basis3.from_angle_y(-0.8)

        np.testing.assert_array_equal(a.concat(b).matrix, a.matrix @ b.matrix)

    def test_to_basis(self):

        basis = Basis3.from_angle_x(0.3)

        copy = basis.to_basis()

        self.assertEqual(copy, basis)
        self.assertIsNot(copy, basis)

    def test_to_quaternion(self):

        quaternion = Basis3.from_angle_z(np.pi/2).to_quaternion()

        self.assertIsInstance(quaternion, Quaternion)

        np.testing.assert_array_almost_equal(quaternion.quaternion, [0, 0, np.sqrt(2)/2, np.sqrt(2)/2])

    def test_half_turn_to_quaternion(self):

        quaternion = Basis3.from_axis_angle([0, 0, 1], np.pi).to_quaternion()

        self.assertAlmostEqual(quaternion.q_scalar, 0)

        np.testing.assert_array_almost_equal(np.abs(quaternion.q_vector), [0, 0, 1])

    def test_approx_eq(self):

        self.assertTrue(Basis3.from_angle_z(0.1).approx_eq(Basis3.from_angle_z(0.1 + 1e-7)))
        self.assertFalse(Basis3.from_angle_z(0.1).approx_eq(Basis3.from_angle_z(0.2)))
        self.assertTrue(Basis3.from_angle_z(0.1).approx_eq(Basis3.from_angle_z(0.2), epsilon=0.2))

        self.assertFalse(Basis3.identity().approx_eq(Basis2.identity()))

    def test_repr(self):

        basis = Basis3.from_angle_x(0.3)

        self.assertTrue(repr(basis).startswith('Basis3(array('))

        self.assertEqual(str(basis), str(basis.matrix))


class TestBasis2(TestCase):

    def test_creation(self):

        basis = Basis2([[0, -1], [1, 0]])

        np.testing.assert_array_almost_equal(basis.rotate_vec([1, 0]), [0, 1])

        with self.assertRaises(ValueError):
            Basis2(np.eye(3))

        with self.assertRaises(ValueError):
            Basis2([[1, 0], [0, -1]])

        with self.assertRaises(ValueError):
            Basis2([[1, 1], [0, 1]])

    def test_identity(self):

        np.testing.assert_array_equal(Basis2.identity().matrix, np.eye(2))

    def test_copy_and_pickle_are_read_only(self):

        basis = Basis2.from_angle(0.3)

        for copy in [basis.copy(), pickle.loads(pickle.dumps(basis))]:

            with self.subTest(copy=copy):

                self.assertEqual(copy, basis)

                with self.assertRaises(ValueError):
                    copy.matrix[0, 0] = 5

    def test_from_angle(self):

        np.testing.assert_array_almost_equal(Basis2.from_angle(np.pi/2).rotate_vec([1, 0]), [0, 1])

        np.testing.assert_array_almost_equal(Basis2.from_angle(0.7).matrix, rot_z(0.7)[:2, :2])

    def test_angle(self):

        for theta in [-3, -0.5, 0, 1.2, 3]:

            with self.subTest(theta=theta):

                self.assertAlmostEqual(Basis2.from_angle(theta).angle, theta)

        # angles wrap into (-pi, pi]
        self.assertAlmostEqual(Basis2.from_angle(2*np.pi + 0.1).angle, 0.1)

        self.assertAlmostEqual((Basis2.from_angle(2) * Basis2.from_angle(0.5)).angle, 2.5)

        self.assertAlmostEqual(Basis2.from_angle(0.4).invert().angle, -0.4)

    def test_rotate_vec(self):

        with self.assertRaises(ValueError):
            Basis2.identity().rotate_vec([1, 2, 3])

    def test_to_basis(self):

        basis = Basis2.from_angle(1.0)

        self.assertEqual(basis.to_basis(), basis)
        self.assertIsNot(basis.to_basis(), basis)

        np.testing.assert_array_equal(basis.to_matrix(), basis.matrix)
