import dataclasses
import unittest

from bool_circuit.config import Config


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        config = Config()
        self.assertEqual(config.max_enum_inputs, 20)
        self.assertEqual(config.input_prefix, "I")
        self.assertEqual(config.output_label, "O1")
        self.assertEqual(config.column_width, 4)
        self.assertEqual(config.max_enum_rows, 2 ** 20)

    def test_frozen(self):
        config = Config()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.max_enum_inputs = 3

    def test_counter_width_limit(self):
        Config(max_enum_inputs=0)
        Config(max_enum_inputs=62)
        with self.assertRaises(ValueError):
            Config(max_enum_inputs=63)
        with self.assertRaises(ValueError):
            Config(max_enum_inputs=-1)

    def test_column_width(self):
        with self.assertRaises(ValueError):
            Config(column_width=1)


if __name__ == "__main__":
    unittest.main()
