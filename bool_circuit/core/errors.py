"""Recoverable circuit errors.

Only conditions a caller can reasonably react to live here.  Mistakes in
building a circuit (a gate with too few operands, an enumeration far beyond
the configured limit) raise ValueError instead and are not CircuitErrors.
"""

from __future__ import annotations


class CircuitError(Exception):
    """Base class for recoverable circuit errors."""


class InputOutOfBoundsError(CircuitError):
    """An input reference points outside the declared input width."""

    def __init__(self, index: int, input_count: int):
        self.index = index
        self.input_count = input_count
        super().__init__(f"Input index {index} out of bounds for input_count={input_count}")


class InputCountError(CircuitError):
    """An assignment's length differs from the circuit's input count."""

    def __init__(self, supplied: int, expected: int):
        self.supplied = supplied
        self.expected = expected
        super().__init__(f"Assignment has {supplied} values, circuit expects {expected}")
