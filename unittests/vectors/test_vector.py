from unittest import TestCase

import numpy as np

from kindr.phys_quant import PhysicalType, cross_product_type
from kindr.rotations import AngleAxis, RotationMatrix, LocalAngularVelocity
from kindr.vectors import (Vector, Position, Velocity, Acceleration, Force, Torque, Momentum, AngularAcceleration,
                           AngularMomentum)


class TestVector(TestCase):
    """
    Checks the vector behavior shared by every physical type, in double and single precision.
    """

    classes = [Vector, Force, Position]

    dtypes = [np.float64, np.float32]

    tol = 1e-6

    vec1 = [10, 20, 30, 40, 50]
    vec2 = [1, 2, 3, 4, 5]

    def cases(self):

        for cls in self.classes:
            for dtype in self.dtypes:
                with self.subTest(cls=cls.__name__, dtype=dtype.__name__):
                    yield cls, dtype

    def test_construction(self):

        for cls, dtype in self.cases():

            default = cls()
            np.testing.assert_array_equal(default[:], [0, 0, 0])

            from_values = cls(*self.vec1, dtype=dtype)
            np.testing.assert_array_equal(from_values[:], self.vec1)
            self.assertEqual(from_values.dtype, dtype)

            from_array = cls(np.array(self.vec1, dtype=dtype))
            np.testing.assert_array_equal(from_array[:], self.vec1)
            self.assertEqual(from_array.dtype, dtype)

            from_vector = cls(from_array)
            np.testing.assert_array_equal(from_vector[:], self.vec1)
            self.assertEqual(from_vector.dtype, dtype)

            # copies do not share data
            from_vector[0] = -1
            self.assertEqual(from_array[0], 10)

            zero = cls.zero(5, dtype=dtype)
            np.testing.assert_array_equal(zero[:], np.zeros(5))

            zero = cls(*self.vec1, dtype=dtype).set_zero()
            np.testing.assert_array_equal(zero[:], np.zeros(5))

    def test_construction_errors(self):

        with self.assertRaises(TypeError):
            Force(Position(1, 2, 3))

        with self.assertRaises(ValueError):
            Position(1, 2, 3, dtype=np.int64)

        with self.assertRaises(ValueError):
            LocalAngularVelocity(1, 2)

        # a typeless vector can always be made from a typed one
        np.testing.assert_array_equal(Vector(Position(1, 2, 3))[:], [1, 2, 3])

    def test_unit_vectors(self):

        for cls, dtype in self.cases():

            np.testing.assert_array_equal(cls.unit_x(dtype=dtype)[:], [1, 0, 0])
            np.testing.assert_array_equal(cls.unit_y(dtype=dtype)[:], [0, 1, 0])
            np.testing.assert_array_equal(cls.unit_z(dtype=dtype)[:], [0, 0, 1])

    def test_xyz(self):

        position = Position(1, 2, 3)

        self.assertEqual(position.x, 1)
        self.assertEqual(position.y, 2)
        self.assertEqual(position.z, 3)

        position.x = 4
        position.y = 5
        position.z = 6

        np.testing.assert_array_equal(position[:], [4, 5, 6])

    def test_to_implementation(self):

        for cls, dtype in self.cases():

            vector = cls(*self.vec1, dtype=dtype)

            column = vector.to_implementation()

            self.assertEqual(column.shape, (5, 1))

            for index, value in enumerate(self.vec1):
                self.assertEqual(column[index, 0], value)

            # the column is a view of the data
            column[0, 0] = 0
            self.assertEqual(vector[0], 0)

    def test_arithmetic(self):

        for cls, dtype in self.cases():

            vector1 = cls(self.vec1, dtype=dtype)
            vector2 = cls(self.vec2, dtype=dtype)

            np.testing.assert_array_equal((vector1 + vector2)[:], [11, 22, 33, 44, 55])
            np.testing.assert_array_equal((vector1 - vector2)[:], [9, 18, 27, 36, 45])
            np.testing.assert_array_equal((-vector1)[:], [-10, -20, -30, -40, -50])
            np.testing.assert_array_equal((vector2 * 2)[:], [2, 4, 6, 8, 10])
            np.testing.assert_array_equal((2 * vector2)[:], [2, 4, 6, 8, 10])
            np.testing.assert_array_equal((vector1 / 10)[:], self.vec2)

            self.assertIsInstance(vector1 + vector2, cls)
            self.assertEqual((vector1 + vector2).dtype, dtype)

            added = cls(self.vec1, dtype=dtype)
            result = added
            added += vector2
            self.assertIs(added, result)
            np.testing.assert_array_equal(added[:], [11, 22, 33, 44, 55])

            subtracted = cls(self.vec1, dtype=dtype)
            subtracted -= vector2
            np.testing.assert_array_equal(subtracted[:], [9, 18, 27, 36, 45])

            self.assertEqual(vector1, cls(self.vec1, dtype=dtype))
            self.assertNotEqual(vector1, vector2)

    def test_mixed_types(self):

        with self.assertRaises(TypeError):
            _ = Position(1, 2, 3) + Force(1, 2, 3)

        with self.assertRaises(TypeError):
            _ = Position(1, 2, 3) - Vector(1, 2, 3)

        with self.assertRaises(TypeError):
            position = Position(1, 2, 3)
            position += Velocity(1, 2, 3)

        with self.assertRaises(TypeError):
            _ = Position(1, 2, 3) + np.array([1, 2, 3])

        with self.assertRaises(TypeError):
            _ = np.array([1, 2, 3]) + Position(1, 2, 3)

        with self.assertRaises(TypeError):
            _ = Position(1, 2, 3) * Position(1, 2, 3)

        with self.assertRaises(ValueError):
            _ = Vector(1, 2, 3) + Vector(1, 2)

        self.assertNotEqual(Position(1, 2, 3), Force(1, 2, 3))

    def test_element_access(self):

        for cls, dtype in self.cases():

            vector = cls(self.vec2, dtype=dtype)

            vector[0] = 7

            self.assertEqual(vector[0], 7)
            self.assertEqual(len(vector), 5)
            self.assertEqual(list(vector), [7, 2, 3, 4, 5])

    def test_norm(self):

        for cls, dtype in self.cases():

            vector = cls(self.vec2, dtype=dtype)

            self.assertAlmostEqual(vector.norm(), np.sqrt(55), delta=self.tol)

            expected = np.array(self.vec2) / np.sqrt(55)

            normalized = vector.normalized()

            np.testing.assert_allclose(normalized[:], expected, atol=self.tol)
            np.testing.assert_array_equal(vector[:], self.vec2)

            result = vector.normalize()

            self.assertIs(result, vector)
            np.testing.assert_allclose(vector[:], expected, atol=self.tol)
            self.assertTrue(vector.is_similar_to(cls(expected, dtype=dtype), self.tol))
            self.assertFalse(vector.is_similar_to(cls(self.vec2, dtype=dtype), self.tol))

    def test_reductions(self):

        for cls, dtype in self.cases():

            vector = cls(self.vec1, dtype=dtype)

            self.assertEqual(vector.sum(), 150)
            self.assertEqual(vector.max(), 50)
            self.assertEqual(vector.min(), 10)
            self.assertEqual(vector.mean(), 30)
            self.assertAlmostEqual(vector.dot(vector), 5500, delta=self.tol)

    def test_elementwise(self):

        for cls, dtype in self.cases():

            vector1 = cls(self.vec1, dtype=dtype)
            other = Vector(self.vec2, dtype=dtype)

            product = vector1.elementwise_multiplication(other)
            quotient = vector1.elementwise_division(other)

            self.assertIsInstance(product, cls)
            np.testing.assert_array_equal(product[:], [10, 40, 90, 160, 250])
            np.testing.assert_array_equal(quotient[:], [10, 10, 10, 10, 10])

            np.testing.assert_array_equal(vector1.elementwise_multiplication(self.vec2)[:], [10, 40, 90, 160, 250])

        with self.assertRaises(TypeError):
            Position(1, 2, 3).elementwise_multiplication(Force(1, 2, 3))

    def test_vector_space_laws(self):

        scale = Vector(0.5, 2, -4, 0.25, 8)

        vec3 = [0.3, -1.7, 2.9, 0.01, -5.5]

        for cls, dtype in self.cases():

            for values in [self.vec1, self.vec2, vec3]:

                vector = cls(values, dtype=dtype)
                other = cls(vec3, dtype=dtype)

                self.assertEqual(vector + cls.zero(len(values), dtype=dtype), vector)
                self.assertEqual(-(-vector), vector)
                self.assertTrue(((vector + other) - other).is_similar_to(vector, self.tol * 100))
                self.assertTrue(vector.elementwise_multiplication(scale).elementwise_division(scale).is_similar_to(
                    vector, self.tol))

    def test_head_tail_segment(self):

        for cls, dtype in self.cases():

            vector = cls(self.vec1, dtype=dtype)

            head_and_tail = vector.head(2) + vector.tail(2)

            self.assertIsInstance(head_and_tail, cls)
            np.testing.assert_array_equal(head_and_tail[:], [50, 70])

            segment = vector.segment(1, 3)

            self.assertIsInstance(segment, cls)
            np.testing.assert_array_equal(segment[:], [20, 30, 40])

            with self.assertRaises(IndexError):
                vector.segment(3, 3)

            for out_of_range in [lambda: vector.head(6), lambda: vector.head(-1), lambda: vector.tail(10),
                                 lambda: vector.tail(-1), lambda: vector.segment(-1, 2)]:
                with self.assertRaises(IndexError):
                    out_of_range()

            self.assertEqual(vector.head(5), vector)
            self.assertEqual(vector.tail(5), vector)

        # fixed dimension vectors fall back to typeless vectors
        head = LocalAngularVelocity(1, 2, 3).head(2)
        self.assertIs(type(head), Vector)
        np.testing.assert_array_equal(head[:], [1, 2])

    def test_cross(self):

        torque = Position(1, 2, 3).cross(Force(3, 2, 1))

        self.assertIsInstance(torque, Torque)
        np.testing.assert_allclose(torque[:], [-4, 8, -4], atol=self.tol)

        self.assertIsInstance(Force(3, 2, 1).cross(Position(1, 2, 3)), Torque)
        self.assertIsInstance(Position(1, 2, 3).cross(Momentum(1, 0, 0)), AngularMomentum)
        self.assertIsInstance(LocalAngularVelocity(0, 0, 1).cross(Position(1, 0, 0)), Velocity)
        self.assertIsInstance(LocalAngularVelocity(0, 0, 1).cross(Velocity(1, 0, 0)), Acceleration)
        self.assertIsInstance(AngularAcceleration(0, 0, 1).cross(Position(1, 0, 0)), Acceleration)
        self.assertIsInstance(Vector(0, 0, 1).cross(Position(1, 0, 0)), Position)
        self.assertIsInstance(Position(1, 0, 0).cross(Vector(0, 0, 1)), Position)
        self.assertIs(type(Vector(0, 0, 1).cross(Vector(1, 0, 0))), Vector)

        np.testing.assert_allclose(LocalAngularVelocity(0, 0, 1).cross(Position(1, 0, 0))[:], [0, 1, 0])

        with self.assertRaises(TypeError):
            Position(1, 2, 3).cross(Position(3, 2, 1))

        with self.assertRaises(TypeError):
            Force(1, 2, 3).cross(Velocity(3, 2, 1))

        with self.assertRaises(ValueError):
            Vector(1, 2, 3, 4).cross(Vector(1, 2, 3, 4))

    def test_cross_product_type(self):

        self.assertIs(cross_product_type(PhysicalType.POSITION, PhysicalType.FORCE), PhysicalType.TORQUE)
        self.assertIs(cross_product_type(PhysicalType.FORCE, PhysicalType.POSITION), PhysicalType.TORQUE)
        self.assertIs(cross_product_type(PhysicalType.TYPELESS, PhysicalType.FORCE), PhysicalType.FORCE)
        self.assertIs(cross_product_type(PhysicalType.ANGULAR_VELOCITY, PhysicalType.ANGULAR_MOMENTUM),
                      PhysicalType.TORQUE)

        with self.assertRaises(TypeError):
            cross_product_type(PhysicalType.TORQUE, PhysicalType.TORQUE)

    def test_rotate(self):

        for dtype in self.dtypes:
            with self.subTest(dtype=dtype.__name__):

                length = Position(1, 2, 3, dtype=dtype)

                rotation = RotationMatrix(AngleAxis(np.pi, 0, 0, 1))

                result = rotation.rotate(length)

                self.assertIsInstance(result, Position)
                self.assertEqual(result.dtype, dtype)
                np.testing.assert_allclose(result[:], [-1, -2, 3], atol=self.tol)

                result = length.rotate(AngleAxis(np.pi / 2, 0, 0, 1))

                np.testing.assert_allclose(result[:], [-2, 1, 3], atol=self.tol)

                result = length.rotate(AngleAxis(np.pi / 2, 0, 0, 1)).inverse_rotate(AngleAxis(np.pi / 2, 0, 0, 1))

                np.testing.assert_allclose(result[:], [1, 2, 3], atol=self.tol)

    def test_repr(self):

        self.assertEqual(repr(Position(1, 2, 3)), 'Position(array([1., 2., 3.]))')
