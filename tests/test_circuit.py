import itertools
import unittest
from collections.abc import Sequence

import numpy as np

from bool_circuit.core.circuit import Circuit, validate, evaluate
from bool_circuit.core.errors import CircuitError, InputCountError, InputOutOfBoundsError
from bool_circuit.core.node import Node, input_ref, not_, or_, and_, xor


class RecordingAssignment(Sequence):
    """Assignment that remembers which slots were read."""

    def __init__(self, values):
        self.values = list(values)
        self.reads = []

    def __len__(self):
        return len(self.values)

    def __getitem__(self, i):
        self.reads.append(i)
        return self.values[i]


def reference_root() -> Node:
    return and_([input_ref(0), or_([input_ref(1), input_ref(2)]), not_(input_ref(3))])


class TestValidate(unittest.TestCase):

    def test_in_bounds(self):
        validate(reference_root(), 4)
        validate(reference_root(), 10)

    def test_out_of_bounds_reports_index_and_count(self):
        node = or_([input_ref(0), input_ref(5)])
        with self.assertRaises(InputOutOfBoundsError) as ctx:
            validate(node, 2)
        self.assertEqual(ctx.exception.index, 5)
        self.assertEqual(ctx.exception.input_count, 2)

    def test_index_equal_to_count_fails(self):
        with self.assertRaises(InputOutOfBoundsError):
            validate(input_ref(2), 2)

    def test_negative_index_fails(self):
        with self.assertRaises(InputOutOfBoundsError) as ctx:
            validate(not_(input_ref(-1)), 2)
        self.assertEqual(ctx.exception.index, -1)

    def test_non_integer_index_rejected(self):
        for bad in (0.5, 1.0, "0"):
            with self.assertRaises(TypeError):
                validate(or_([input_ref(1), input_ref(bad)]), 2)
        with self.assertRaises(TypeError):
            Circuit(2, and_([input_ref(0.5), input_ref(1)]))

    def test_bool_index_rejected(self):
        with self.assertRaises(TypeError):
            Circuit(2, not_(input_ref(True)))

    def test_numpy_integer_index_accepted(self):
        circuit = Circuit(2, and_([input_ref(np.int64(0)), input_ref(np.int32(1))]))
        self.assertTrue(circuit.evaluate([True, True]))
        with self.assertRaises(InputOutOfBoundsError):
            Circuit(2, input_ref(np.int64(2)))

    def test_deep_tree_validates(self):
        root = input_ref(0)
        for _ in range(5000):
            root = not_(root)
        circuit = Circuit(1, root)
        self.assertEqual(circuit.input_count, 1)
        bad = input_ref(3)
        for _ in range(5000):
            bad = not_(bad)
        with self.assertRaises(InputOutOfBoundsError) as ctx:
            Circuit(1, bad)
        self.assertEqual(ctx.exception.index, 3)

    def test_first_violation_wins(self):
        node = and_([input_ref(0), not_(input_ref(7)), input_ref(9)])
        with self.assertRaises(InputOutOfBoundsError) as ctx:
            validate(node, 3)
        self.assertEqual(ctx.exception.index, 7)

    def test_fails_iff_some_index_out_of_range(self):
        for indices in itertools.product(range(4), repeat=3):
            node = xor([input_ref(i) for i in indices])
            for input_count in range(5):
                should_fail = max(indices) >= input_count
                if should_fail:
                    with self.assertRaises(InputOutOfBoundsError):
                        validate(node, input_count)
                else:
                    validate(node, input_count)


class TestCircuit(unittest.TestCase):

    def test_construction_validates(self):
        with self.assertRaises(InputOutOfBoundsError) as ctx:
            Circuit(2, and_([input_ref(0), input_ref(5)]))
        self.assertEqual((ctx.exception.index, ctx.exception.input_count), (5, 2))

    def test_bounds_error_is_circuit_error(self):
        with self.assertRaises(CircuitError):
            Circuit(1, input_ref(1))

    def test_zero_inputs_never_valid(self):
        with self.assertRaises(InputOutOfBoundsError):
            Circuit(0, input_ref(0))

    def test_str(self):
        circuit = Circuit(2, xor([input_ref(0), input_ref(1)]))
        self.assertEqual(str(circuit), "Circuit(2, XOR(I0, I1))")


class TestEvaluate(unittest.TestCase):

    def setUp(self):
        self.circuit = Circuit(4, reference_root())

    def test_reference_scenario(self):
        self.assertTrue(evaluate(self.circuit, [True, False, True, False]))
        self.assertFalse(evaluate(self.circuit, [True, False, False, False]))
        self.assertFalse(self.circuit.evaluate([False, True, True, False]))
        self.assertFalse(self.circuit.evaluate([True, True, True, True]))

    def test_length_mismatch(self):
        circuit = Circuit(2, and_([input_ref(0), input_ref(1)]))
        with self.assertRaises(InputCountError) as ctx:
            circuit.evaluate([True, False, True])
        self.assertEqual(ctx.exception.supplied, 3)
        self.assertEqual(ctx.exception.expected, 2)
        with self.assertRaises(InputCountError):
            circuit.evaluate([True])

    def test_length_checked_before_traversal(self):
        circuit = Circuit(2, and_([input_ref(0), input_ref(1)]))
        assignment = RecordingAssignment([True, True, True])
        with self.assertRaises(InputCountError):
            circuit.evaluate(assignment)
        self.assertEqual(assignment.reads, [])

    def test_deterministic(self):
        for bits in itertools.product([False, True], repeat=4):
            first = self.circuit.evaluate(list(bits))
            for _ in range(3):
                self.assertEqual(self.circuit.evaluate(list(bits)), first)

    def test_returns_python_bool(self):
        result = self.circuit.evaluate(np.array([1, 0, 1, 0], dtype=bool))
        self.assertIs(result, True)
        self.assertIs(Circuit(1, input_ref(0)).evaluate([1]), True)

    def test_assignment_not_mutated(self):
        assignment = [True, False, True, False]
        self.circuit.evaluate(assignment)
        self.assertEqual(assignment, [True, False, True, False])


class TestGateSemantics(unittest.TestCase):

    def _two(self, ctor):
        return Circuit(2, ctor([input_ref(0), input_ref(1)]))

    def test_not(self):
        circuit = Circuit(1, not_(input_ref(0)))
        self.assertFalse(circuit.evaluate([True]))
        self.assertTrue(circuit.evaluate([False]))

    def test_double_not(self):
        circuit = Circuit(1, not_(not_(input_ref(0))))
        for a in (False, True):
            self.assertEqual(circuit.evaluate([a]), a)

    def test_and_or_xor_two_inputs(self):
        and_c, or_c, xor_c = self._two(and_), self._two(or_), self._two(xor)
        for a, b in itertools.product([False, True], repeat=2):
            self.assertEqual(and_c.evaluate([a, b]), a and b)
            self.assertEqual(or_c.evaluate([a, b]), a or b)
            self.assertEqual(xor_c.evaluate([a, b]), a != b)

    def test_xor_is_one_hot(self):
        circuit = Circuit(3, xor([input_ref(0), input_ref(1), input_ref(2)]))
        for bits in itertools.product([False, True], repeat=3):
            self.assertEqual(circuit.evaluate(list(bits)), sum(bits) == 1, bits)
        # Parity XOR would give True here
        self.assertFalse(circuit.evaluate([True, True, True]))

    def test_xor_short_circuits_on_second_true(self):
        circuit = Circuit(3, xor([input_ref(0), input_ref(1), input_ref(2)]))
        assignment = RecordingAssignment([True, True, False])
        self.assertFalse(circuit.evaluate(assignment))
        self.assertEqual(assignment.reads, [0, 1])

    def test_or_short_circuits_on_first_true(self):
        circuit = Circuit(3, or_([input_ref(0), input_ref(1), input_ref(2)]))
        assignment = RecordingAssignment([False, True, False])
        self.assertTrue(circuit.evaluate(assignment))
        self.assertEqual(assignment.reads, [0, 1])

    def test_and_short_circuits_on_first_false(self):
        circuit = Circuit(3, and_([input_ref(0), input_ref(1), input_ref(2)]))
        assignment = RecordingAssignment([False, True, True])
        self.assertFalse(circuit.evaluate(assignment))
        self.assertEqual(assignment.reads, [0])

    def test_nested_gates(self):
        # XOR(AND(I0, I1), OR(I1, NOT(I2)))
        circuit = Circuit(3, xor([
            and_([input_ref(0), input_ref(1)]),
            or_([input_ref(1), not_(input_ref(2))]),
        ]))
        for a, b, c in itertools.product([False, True], repeat=3):
            expected = (a and b) != (b or not c)
            self.assertEqual(circuit.evaluate([a, b, c]), expected)

    def test_input_read_multiple_times(self):
        circuit = Circuit(1, and_([input_ref(0), not_(input_ref(0))]))
        self.assertFalse(circuit.evaluate([True]))
        self.assertFalse(circuit.evaluate([False]))


if __name__ == "__main__":
    unittest.main()
