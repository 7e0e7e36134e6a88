from dataclasses import dataclass

from unittest import TestCase

from kindr.utilities.options import UserOptions
from kindr.utilities.mixin_classes import UserOptionConfigured


@dataclass
class ExampleOptions(UserOptions):

    tolerance: float = 1e-6

    iterations: int = 10

    label: str = 'example'


class Example(UserOptionConfigured[ExampleOptions], ExampleOptions):

    def __init__(self, options: ExampleOptions | None = None):
        super().__init__(ExampleOptions, options=options)

        self.internal = 'kept'


@dataclass
class OverriddenOptions(UserOptions):

    iterations: int = 10

    def override_options(self):
        self.iterations = max(self.iterations, 1)


class TestUserOptions(TestCase):

    def test_options_dict(self):

        options = ExampleOptions(iterations=3)

        self.assertEqual(options.options_dict, {'tolerance': 1e-6, 'iterations': 3, 'label': 'example'})

    def test_apply_options(self):

        class Target:
            pass

        target = Target()

        ExampleOptions(label='applied').apply_options(target)

        self.assertEqual(target.tolerance, 1e-6)
        self.assertEqual(target.iterations, 10)
        self.assertEqual(target.label, 'applied')

    def test_override_options(self):

        options = OverriddenOptions(iterations=-5)

        self.assertEqual(options.options_dict, {'iterations': 1})


class TestUserOptionConfigured(TestCase):

    def test_defaults(self):

        example = Example()

        self.assertEqual(example.tolerance, 1e-6)
        self.assertEqual(example.iterations, 10)
        self.assertEqual(example.label, 'example')
        self.assertEqual(example.original_options, ExampleOptions())

    def test_options(self):

        options = ExampleOptions(tolerance=1e-3, label='custom')

        example = Example(options=options)

        self.assertEqual(example.tolerance, 1e-3)
        self.assertEqual(example.label, 'custom')

        # the original options are a copy
        self.assertIsNot(example.original_options, options)

        options.tolerance = 5

        self.assertEqual(example.original_options.tolerance, 1e-3)

    def test_reset_settings(self):

        example = Example(options=ExampleOptions(iterations=4))

        example.iterations = 20
        example.label = 'changed'
        example.internal = 'changed'

        example.reset_settings()

        self.assertEqual(example.iterations, 4)
        self.assertEqual(example.label, 'example')
        self.assertEqual(example.internal, 'changed')

    def test_replace_original_options(self):

        example = Example()

        example.original_options = ExampleOptions(iterations=7)

        self.assertEqual(example.iterations, 10)

        example.reset_settings()

        self.assertEqual(example.iterations, 7)
