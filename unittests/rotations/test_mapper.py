import warnings

from unittest import TestCase

import numpy as np

from kindr import rotations as at
from kindr.rotations import (AngularVelocityMapper, AngularVelocityMapperOptions, SingularConfigurationWarning,
                             get_default_mapper, resolve_mapper, RotationQuaternion, RotationMatrix, AngleAxis,
                             RotationVector, EulerAnglesXyz, EulerAnglesZyx, RotationQuaternionDiff, AngleAxisDiff,
                             RotationVectorDiff, EulerAnglesXyzDiff, EulerAnglesZyxDiff, LocalAngularVelocity,
                             GlobalAngularVelocity)
from kindr.vectors import Vector


class TestOptions(TestCase):

    def test_defaults(self):

        options = AngularVelocityMapperOptions()

        self.assertEqual(options.small_angle_tolerance, 1e-6)
        self.assertEqual(options.singularity_tolerance, 1e-8)
        self.assertTrue(options.warn_on_singularity)

        mapper = AngularVelocityMapper()

        self.assertEqual(mapper.small_angle_tolerance, 1e-6)
        self.assertEqual(mapper.singularity_tolerance, 1e-8)
        self.assertTrue(mapper.warn_on_singularity)

    def test_custom_options(self):

        options = AngularVelocityMapperOptions(singularity_tolerance=1e-4, warn_on_singularity=False)

        mapper = AngularVelocityMapper(options=options)

        self.assertEqual(mapper.singularity_tolerance, 1e-4)
        self.assertFalse(mapper.warn_on_singularity)

        options.singularity_tolerance = 1

        self.assertEqual(mapper.original_options.singularity_tolerance, 1e-4)
        self.assertEqual(mapper.singularity_tolerance, 1e-4)

    def test_reset_settings(self):

        mapper = AngularVelocityMapper()

        mapper.warn_on_singularity = False
        mapper.small_angle_tolerance = 1e-3

        mapper.reset_settings()

        self.assertTrue(mapper.warn_on_singularity)
        self.assertEqual(mapper.small_angle_tolerance, 1e-6)

    def test_default_mapper(self):

        self.assertIs(get_default_mapper(), get_default_mapper())
        self.assertIsInstance(get_default_mapper(), AngularVelocityMapper)

    def test_resolve_mapper(self):

        self.assertIs(resolve_mapper(None), get_default_mapper())

        mapper = AngularVelocityMapper(options=AngularVelocityMapperOptions(warn_on_singularity=False))

        self.assertIs(resolve_mapper(mapper), mapper)

        # an explicit mapper is used by the differentials and the angular velocities
        rotation = EulerAnglesXyz(0.1, np.pi / 2, 0.2)
        rates = EulerAnglesXyzDiff(0.3, -0.2, 0.1)

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            rates.to_local_angular_velocity(rotation, mapper)
            LocalAngularVelocity.from_rotation_diff(rotation, rates, mapper)
            GlobalAngularVelocity.from_rotation_diff(rotation, rates, mapper)
            EulerAnglesXyzDiff.from_angular_velocity(rotation, LocalAngularVelocity(1, 2, 3), mapper)

        with self.assertWarns(SingularConfigurationWarning):
            EulerAnglesXyzDiff.from_angular_velocity(rotation, LocalAngularVelocity(1, 2, 3))


class TestSingularities(TestCase):

    angular_velocity = np.array([1, 2, 3.0])

    def test_gimbal_lock_xyz(self):

        rotation = EulerAnglesXyz(0.1, np.pi / 2, 0.2)

        expected = np.linalg.pinv(at.euler_xyz_rate_matrix([0.1, np.pi / 2, 0.2])) @ self.angular_velocity

        with self.assertLogs('kindr.rotations.mapper', level='DEBUG') as logs:
            with self.assertWarns(SingularConfigurationWarning):
                rates = EulerAnglesXyzDiff.from_angular_velocity(rotation, LocalAngularVelocity(self.angular_velocity))

        self.assertIn('gimbal lock', logs.output[0])

        np.testing.assert_array_almost_equal(rates.to_implementation(), expected)

    def test_gimbal_lock_zyx(self):

        rotation = EulerAnglesZyx(0.4, -np.pi / 2, 0)

        expected = np.linalg.pinv(at.euler_zyx_rate_matrix([0.4, -np.pi / 2, 0])) @ self.angular_velocity

        with self.assertWarns(SingularConfigurationWarning):
            rates = EulerAnglesZyxDiff.from_angular_velocity(rotation, LocalAngularVelocity(self.angular_velocity))

        np.testing.assert_array_almost_equal(rates.to_implementation(), expected)

    def test_pseudo_inverse_reproduces_reachable_velocity(self):

        rotation = EulerAnglesZyx(0.4, np.pi / 2, 0)

        # rotation about the second axis is always reachable
        velocity = LocalAngularVelocity(at.euler_zyx_rate_matrix([0.4, np.pi / 2, 0]) @ [0, 1, 0])

        with self.assertWarns(SingularConfigurationWarning):
            rates = EulerAnglesZyxDiff.from_angular_velocity(rotation, velocity)

        self.assertTrue(rates.to_local_angular_velocity(rotation).is_similar_to(velocity, 1e-9))

    def test_rotation_vector_full_turn(self):

        rotation = RotationVector(0, 0, 2 * np.pi)

        expected = np.linalg.pinv(at.rotvec_right_jacobian([0, 0, 2 * np.pi])) @ self.angular_velocity

        with self.assertLogs('kindr.rotations.mapper', level='DEBUG') as logs:
            with self.assertWarns(SingularConfigurationWarning):
                rates = RotationVectorDiff.from_angular_velocity(rotation, LocalAngularVelocity(self.angular_velocity))

        self.assertIn('rotation vector with angle', logs.output[0])

        np.testing.assert_array_almost_equal(rates.to_implementation(), expected)

    def test_no_warning_away_from_singularities(self):

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            EulerAnglesXyzDiff.from_angular_velocity(EulerAnglesXyz(0.1, 1.2, 0.2),
                                                     LocalAngularVelocity(self.angular_velocity))
            RotationVectorDiff.from_angular_velocity(RotationVector(0, 0, 0),
                                                     LocalAngularVelocity(self.angular_velocity))
            RotationVectorDiff.from_angular_velocity(RotationVector(0, 0, np.pi),
                                                     LocalAngularVelocity(self.angular_velocity))

    def test_warning_disabled(self):

        mapper = AngularVelocityMapper(options=AngularVelocityMapperOptions(warn_on_singularity=False))

        rotation = EulerAnglesXyz(0.1, np.pi / 2, 0.2)

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            rates = EulerAnglesXyzDiff.from_angular_velocity(rotation, LocalAngularVelocity(self.angular_velocity),
                                                             mapper=mapper)

        expected = np.linalg.pinv(at.euler_xyz_rate_matrix([0.1, np.pi / 2, 0.2])) @ self.angular_velocity

        np.testing.assert_array_almost_equal(rates.to_implementation(), expected)

    def test_singularity_tolerance(self):

        rotation = EulerAnglesZyx(0, np.pi / 2 - 1e-5, 0)

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            EulerAnglesZyxDiff.from_angular_velocity(rotation, LocalAngularVelocity(self.angular_velocity))

        mapper = AngularVelocityMapper(options=AngularVelocityMapperOptions(singularity_tolerance=1e-4))

        with self.assertWarns(SingularConfigurationWarning):
            EulerAnglesZyxDiff.from_angular_velocity(rotation, LocalAngularVelocity(self.angular_velocity),
                                                     mapper=mapper)


class TestAngleAxisIdentity(TestCase):

    def test_zero_angle(self):

        with self.assertLogs('kindr.rotations.mapper', level='DEBUG') as logs:
            rates = AngleAxisDiff.from_angular_velocity(AngleAxis(0, 1, 0, 0), LocalAngularVelocity(1, 2, 3))

        self.assertIn('identity', logs.output[0])

        np.testing.assert_array_almost_equal(rates.to_implementation(), [1, 0, -1.5, 1])

    def test_small_angle_tolerance(self):

        rotation = AngleAxis(1e-4, 0, 0, 1)

        velocity = LocalAngularVelocity(1, 0, 0)

        mapper = AngularVelocityMapper(options=AngularVelocityMapperOptions(small_angle_tolerance=1e-3))

        rates = AngleAxisDiff.from_angular_velocity(rotation, velocity, mapper=mapper)

        np.testing.assert_array_almost_equal(rates.to_implementation(), [0, 0, 0.5, 0])

        # with the default tolerance the unbounded part is kept
        rates = AngleAxisDiff.from_angular_velocity(rotation, velocity)

        self.assertGreater(rates.axis[0], 1e3)
        self.assertAlmostEqual(rates.axis[1], 0.5)


class TestMapping(TestCase):

    def test_frames(self):

        mapper = AngularVelocityMapper()

        quarter_turn = AngleAxis(np.pi / 2, 0, 0, 1)

        rates = mapper.rotation_diff(quarter_turn, LocalAngularVelocity(1, 0, 0))

        self.assertIsInstance(rates, AngleAxisDiff)

        np.testing.assert_array_almost_equal(mapper.local_angular_velocity(quarter_turn, rates)[:], [1, 0, 0])
        np.testing.assert_array_almost_equal(mapper.global_angular_velocity(quarter_turn, rates)[:], [0, 1, 0])

        passive = quarter_turn.get_passive()

        rates = mapper.rotation_diff(passive, GlobalAngularVelocity(0, 1, 0))

        np.testing.assert_array_almost_equal(mapper.local_angular_velocity(passive, rates)[:], [1, 0, 0])
        np.testing.assert_array_almost_equal(mapper.global_angular_velocity(passive, rates)[:], [0, 1, 0])

    def test_dtype_follows_diff(self):

        mapper = AngularVelocityMapper()

        rotation = RotationQuaternion()

        velocity = mapper.local_angular_velocity(rotation, RotationQuaternionDiff(0.5, 0, 0, 0, dtype=np.float32))

        self.assertEqual(velocity.dtype, np.float32)
        np.testing.assert_array_almost_equal(velocity[:], [1, 0, 0])

    def test_convert_same_type(self):

        mapper = AngularVelocityMapper()

        rates = RotationVectorDiff(1, 2, 3)

        converted = mapper.convert_diff(RotationVector(0.1, 0.2, 0.3), rates, RotationVectorDiff)

        self.assertEqual(converted, rates)
        self.assertIsNot(converted, rates)

    def test_subclass_dispatch(self):

        class ShiftedQuaternion(RotationQuaternion):
            pass

        rotation = ShiftedQuaternion(AngleAxis(0.3, 0, 1, 0))

        rates = RotationQuaternionDiff.from_angular_velocity(rotation, LocalAngularVelocity(0, 0, 2))

        self.assertIsInstance(rates, RotationQuaternionDiff)
        np.testing.assert_array_almost_equal(rates.to_local_angular_velocity(rotation)[:], [0, 0, 2])

    def test_type_errors(self):

        mapper = AngularVelocityMapper()

        with self.assertRaises(TypeError):
            mapper.rotation_diff(RotationQuaternion(), Vector(1, 2, 3))

        with self.assertRaises(TypeError):
            mapper.rotation_diff(RotationQuaternion(), np.array([1, 2, 3]))

        with self.assertRaises(TypeError):
            mapper.rotation_diff(np.eye(3), LocalAngularVelocity(1, 2, 3))

        with self.assertRaises(TypeError):
            mapper.local_angular_velocity(RotationMatrix(), RotationQuaternionDiff())

        with self.assertRaises(TypeError):
            mapper.global_angular_velocity(RotationQuaternion(), np.zeros(4))

        with self.assertRaises(TypeError):
            mapper.convert_diff(RotationMatrix(), RotationQuaternionDiff(), RotationVectorDiff)
