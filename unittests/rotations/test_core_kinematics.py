from unittest import TestCase

import numpy as np

from kindr import rotations as at


STEP = 1e-6


def central_difference(function, step=STEP):
    """
    Central finite difference of a function of time at t=0
    """

    return (np.asarray(function(step)) - np.asarray(function(-step))) / (2 * step)


class KinematicsTestCase(TestCase):

    start_rotvecs = [np.array([0.3, -0.5, 0.8]), np.array([1, 2, 3]) / np.sqrt(14) * 2.5, np.array([0.1, 0, 0])]

    angular_velocities = [np.array([0.4, -1.2, 0.7]), np.array([0, 0, 2.0]), np.array([-3, 0.1, 0.5])]

    def cases(self):

        for start in self.start_rotvecs:
            for angular_velocity in self.angular_velocities:
                with self.subTest(start=start, angular_velocity=angular_velocity):
                    yield at.rotvec_to_rotmat(start), angular_velocity

    @staticmethod
    def trajectory(start_matrix, angular_velocity):
        """
        The body frame trajectory C(t) = C0 exp(w t) for a constant local angular velocity
        """

        return lambda t: start_matrix @ at.rotvec_to_rotmat(angular_velocity * t)


class TestQuaternionRates(KinematicsTestCase):

    def test_quaternion_rates(self):

        for start, angular_velocity in self.cases():

            path = self.trajectory(start, angular_velocity)

            quaternion = at.rotmat_to_quaternion(start)

            rates = central_difference(lambda t: at.rotmat_to_quaternion(path(t)))

            np.testing.assert_array_almost_equal(at.local_to_quaternion_rates(quaternion, angular_velocity), rates)

            np.testing.assert_array_almost_equal(at.quaternion_rates_to_local(quaternion, rates), angular_velocity)

    def test_rates_are_orthogonal(self):

        quaternion = at.rotvec_to_quaternion([0.3, -0.5, 0.8])

        rates = at.local_to_quaternion_rates(quaternion, [1, 2, 3])

        self.assertAlmostEqual(float(quaternion @ rates), 0)


class TestRotmatRates(KinematicsTestCase):

    def test_rotmat_rates(self):

        for start, angular_velocity in self.cases():

            rates = central_difference(self.trajectory(start, angular_velocity))

            np.testing.assert_array_almost_equal(at.local_to_rotmat_rates(start, angular_velocity), rates)

            np.testing.assert_array_almost_equal(at.rotmat_rates_to_local(start, rates), angular_velocity)


class TestRotvecJacobian(KinematicsTestCase):

    def test_right_jacobian(self):

        for start, angular_velocity in self.cases():

            path = self.trajectory(start, angular_velocity)

            rotvec = at.rotmat_to_rotvec(start)

            rates = central_difference(lambda t: at.rotmat_to_rotvec(path(t)))

            np.testing.assert_array_almost_equal(at.rotvec_right_jacobian(rotvec) @ rates, angular_velocity)

            np.testing.assert_array_almost_equal(at.rotvec_right_jacobian_inverse(rotvec) @ angular_velocity, rates)

    def test_inverse(self):

        for rotvec in [[0, 0, 0], [1e-8, 0, 0], [0.3, -0.5, 0.8], [1, 2, 3], [0, 0, 2 * np.pi - 0.1]]:
            with self.subTest(rotvec=rotvec):

                np.testing.assert_array_almost_equal(at.rotvec_right_jacobian(rotvec) @
                                                     at.rotvec_right_jacobian_inverse(rotvec), np.eye(3))

    def test_small_angle_continuity(self):

        axis = np.array([1, 2, 3]) / np.sqrt(14)

        below = axis * (1e-6 - 1e-12)
        above = axis * (1e-6 + 1e-12)

        np.testing.assert_array_almost_equal(at.rotvec_right_jacobian(below), at.rotvec_right_jacobian(above),
                                             decimal=9)
        np.testing.assert_array_almost_equal(at.rotvec_right_jacobian_inverse(below),
                                             at.rotvec_right_jacobian_inverse(above), decimal=9)

        np.testing.assert_array_equal(at.rotvec_right_jacobian([0, 0, 0]), np.eye(3))


class TestAngleAxisRates(KinematicsTestCase):

    def test_angle_axis_rates(self):

        for start, angular_velocity in self.cases():

            path = self.trajectory(start, angular_velocity)

            angle, axis = at.quaternion_to_angle_axis(at.rotmat_to_quaternion(start))

            def angle_axis(t):
                return np.hstack(at.quaternion_to_angle_axis(at.rotmat_to_quaternion(path(t))))

            rates = central_difference(angle_axis)

            np.testing.assert_array_almost_equal(at.angle_axis_rates_to_local(angle, axis, rates[0], rates[1:]),
                                                 angular_velocity)

            angle_rate, axis_rates = at.local_to_angle_axis_rates(angle, axis, angular_velocity)

            self.assertAlmostEqual(angle_rate, rates[0])
            np.testing.assert_array_almost_equal(axis_rates, rates[1:])

            # the axis stays of unit length
            self.assertAlmostEqual(float(axis @ axis_rates), 0)

    def test_zero_angle(self):

        angle_rate, axis_rates = at.local_to_angle_axis_rates(0, [1, 0, 0], [1, 2, 3])

        self.assertEqual(angle_rate, 1)
        np.testing.assert_array_almost_equal(axis_rates, [0, -1.5, 1])

        np.testing.assert_array_almost_equal(at.angle_axis_rates_to_local(0, [1, 0, 0], 1, [0, -1.5, 1]), [1, 0, 0])


class TestEulerRateMatrices(KinematicsTestCase):

    conversions = {'xyz': (at.rotmat_to_euler_xyz, at.euler_xyz_rate_matrix),
                   'zyx': (at.rotmat_to_euler_zyx, at.euler_zyx_rate_matrix)}

    def test_rate_matrices(self):

        for start, angular_velocity in self.cases():

            path = self.trajectory(start, angular_velocity)

            for order, (from_rotmat, rate_matrix) in self.conversions.items():

                with self.subTest(order=order):

                    angles = from_rotmat(start)

                    rates = central_difference(lambda t: from_rotmat(path(t)))

                    np.testing.assert_array_almost_equal(rate_matrix(angles) @ rates, angular_velocity)

    def test_determinant(self):

        for pitch in [0, 0.4, -1.1, np.pi / 2]:
            with self.subTest(pitch=pitch):

                self.assertAlmostEqual(np.linalg.det(at.euler_xyz_rate_matrix([0.2, pitch, -0.7])), np.cos(pitch))
                self.assertAlmostEqual(np.linalg.det(at.euler_zyx_rate_matrix([0.2, pitch, -0.7])), -np.cos(pitch))
