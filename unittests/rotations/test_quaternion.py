from unittest import TestCase

import numpy as np

from rigid.rotations import Basis3, Quaternion, quaternion_to_rotmat


class TestQuaternion(TestCase):

    def test_creation(self):

        np.testing.assert_array_equal(Quaternion().quaternion, [0, 0, 0, 1])

        np.testing.assert_array_equal(Quaternion.identity().quaternion, [0, 0, 0, 1])

        # quaternions are not normalized on creation
        np.testing.assert_array_equal(Quaternion([1, 2, 3, 4]).quaternion, [1, 2, 3, 4])

        with self.assertRaises(ValueError):
            Quaternion([1, 2, 3])

        with self.assertRaises(ValueError):
            Quaternion(np.eye(4))

    def test_creation_copies_input(self):

        data = np.array([0, 0, 0, 1.])

        quaternion = Quaternion(data)

        data[0] = 3

        np.testing.assert_array_equal(quaternion.quaternion, [0, 0, 0, 1])

        quaternion.quaternion[0] = 3

        np.testing.assert_array_equal(quaternion.quaternion, [0, 0, 0, 1])

    def test_parts(self):

        quaternion = Quaternion([1, 2, 3, 4])

        np.testing.assert_array_equal(quaternion.q_vector, [1, 2, 3])
        self.assertEqual(quaternion.q_scalar, 4)

        self.assertEqual(quaternion.magnitude2, 30)
        self.assertAlmostEqual(quaternion.magnitude, np.sqrt(30))

    def test_normalized(self):

        normalized = Quaternion([0, 0, 0, -2]).normalized()

        np.testing.assert_array_equal(normalized.quaternion, [0, 0, 0, 1])

        normalized = Quaternion([1, 2, 3, 4]).normalized()

        self.assertAlmostEqual(normalized.magnitude, 1)
        np.testing.assert_array_almost_equal(normalized.quaternion, np.array([1, 2, 3, 4])/np.sqrt(30))

        with self.assertRaises(ValueError):
            Quaternion([0, 0, 0, 0]).normalized()

    def test_from_axis_angle(self):

        quaternion = Quaternion.from_axis_angle([0, 0, 3], np.pi/2)

        np.testing.assert_array_almost_equal(quaternion.quaternion, [0, 0, np.sqrt(2)/2, np.sqrt(2)/2])

        np.testing.assert_array_almost_equal(quaternion.rotate_vec([1, 0, 0]), [0, 1, 0])

        with self.assertRaises(ValueError):
            Quaternion.from_axis_angle([0, 0, 0], 1)

    def test_half_turn(self):

        quaternion = Quaternion.from_axis_angle([0, 0, 1], np.pi)

        self.assertAlmostEqual(quaternion.q_scalar, 0)
        np.testing.assert_array_almost_equal(quaternion.q_vector, [0, 0, 1])

        np.testing.assert_array_almost_equal(quaternion.rotate_vec([1, 2, 3]), [-1, -2, 3])

    def test_rotate_vec(self):

        quaternion = Quaternion([-0.25532186, -0.51064372, -0.76596558, 0.29555113])

        np.testing.assert_array_almost_equal(quaternion.rotate_vec([1, 2, 3]),
                                             quaternion_to_rotmat(quaternion.quaternion) @ [1, 2, 3])

        with self.assertRaises(ValueError):
            quaternion.rotate_vec([1, 2])

    def test_concat(self):

        x_turn = Quaternion.from_axis_angle([1, 0, 0], np.pi/2)
        y_turn = Quaternion.from_axis_angle([0, 1, 0], np.pi/2)

        np.testing.assert_array_almost_equal((x_turn * y_turn).quaternion, [0.5, 0.5, 0.5, 0.5])

        self.assertTrue((x_turn * y_turn).to_basis().approx_eq(x_turn.to_basis() * y_turn.to_basis()))

        np.testing.assert_array_almost_equal((x_turn * y_turn).rotate_vec([0, 0, 1]), [1, 0, 0])

    def test_invert(self):

        np.testing.assert_array_almost_equal(Quaternion([1, 2, 3, 4]).invert().quaternion,
                                             np.array([-1, -2, -3, 4])/30)

        quaternion = Quaternion.from_axis_angle([1, -1, 2], 0.9)

        np.testing.assert_array_almost_equal(quaternion.invert().quaternion,
                                             Quaternion.from_axis_angle([1, -1, 2], -0.9).quaternion)

        with self.assertRaises(ValueError):
            Quaternion([0, 0, 0, 0]).invert()

    def test_negated_quaternion_rotates_the_same(self):

        quaternion = Quaternion.from_axis_angle([1, 2, -1], 2.0)
        negated = Quaternion(-quaternion.quaternion)

        self.assertNotEqual(quaternion, negated)
        self.assertFalse(quaternion.approx_eq(negated))

        np.testing.assert_array_almost_equal(negated.rotate_vec([3, 1, 2]), quaternion.rotate_vec([3, 1, 2]))

        self.assertTrue(negated.to_basis().approx_eq(quaternion.to_basis()))

    def test_round_trip(self):

        for axis, angle in [([1, -2, 0.5], 2.5), ([0, 1, 0], 0.01), ([3, 1, 1], -2.0), ([1, 1, 1], 6.0)]:

            with self.subTest(axis=axis, angle=angle):

                quaternion = Quaternion.from_axis_angle(axis, angle)

                back = quaternion.to_basis().to_quaternion()

                # q and -q are the same rotation
                self.assertTrue(back.approx_eq(quaternion) or back.approx_eq(Quaternion(-quaternion.quaternion)))

                self.assertGreaterEqual(back.q_scalar, 0)

    def test_conversions(self):

        quaternion = Quaternion.from_axis_angle([1, 2, 3], 0.5)

        self.assertIsInstance(quaternion.to_basis(), Basis3)

        np.testing.assert_array_equal(quaternion.to_basis().matrix, quaternion.to_matrix())

        self.assertTrue(quaternion.to_basis().approx_eq(Basis3.from_axis_angle([1, 2, 3], 0.5)))

        copy = quaternion.to_quaternion()

        self.assertEqual(copy, quaternion)
        self.assertIsNot(copy, quaternion)

    def test_repr(self):

        quaternion = Quaternion([0, 0, 0, 1])

        self.assertEqual(repr(quaternion), 'Quaternion(array([0., 0., 0., 1.]))')

        self.assertEqual(str(quaternion), '[0. 0. 0. 1.]')

    def test_subclass_round_trips(self):

        class AttitudeQuaternion(Quaternion):
            pass

        attitude = AttitudeQuaternion.from_axis_angle([0, 1, 0], 0.4)

        for result in [attitude.normalized(), attitude.to_quaternion(), attitude.invert(), attitude * attitude,
                       AttitudeQuaternion.identity(), attitude.copy()]:

            with self.subTest(result=result):
                self.assertIs(type(result), AttitudeQuaternion)

        self.assertTrue(repr(attitude).startswith('AttitudeQuaternion(array('))
