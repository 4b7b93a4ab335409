"""Exhaustive enumeration of a circuit into a truth table.

Row i of a truth table is the assignment obtained by reading i as an
input_count-bit binary number, most significant bit first: input index j
holds bit (input_count - 1 - j) of i.  For 3 inputs:

  row 0 -> [0, 0, 0]
  row 1 -> [0, 0, 1]
  row 4 -> [1, 0, 0]
  row 6 -> [1, 1, 0]

This row order is part of the output contract and is what
format_truth_table prints.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..config import Config
from .circuit import Circuit

log = logging.getLogger(__name__)


def input_matrix(input_count: int) -> np.ndarray:
    """Return the (2**input_count, input_count) bool matrix of all assignments.

    Row i is the assignment for truth-table row i (MSB-first, see module
    docstring).  With input_count == 0 the result has one empty row.
    """
    rows = np.arange(1 << input_count, dtype=np.int64)
    shifts = np.arange(input_count - 1, -1, -1, dtype=np.int64)
    return ((rows[:, None] >> shifts) & 1).astype(bool)


def assignment_for_row(row: int, input_count: int) -> Tuple[bool, ...]:
    """Return the assignment of a single truth-table row."""
    if row < 0 or row >= (1 << input_count):
        raise ValueError(f"Row {row} out of range for input_count={input_count}")
    return tuple(bool((row >> (input_count - 1 - j)) & 1) for j in range(input_count))


@dataclass(frozen=True, eq=False)
class TruthTable:
    """Outputs of a circuit for every assignment, in canonical row order.

    Attributes:
        input_count: Number of circuit inputs (N).
        outputs:     Read-only bool array of length 2**N; outputs[i] is the
                     circuit's value for assignment_for_row(i, N).
    """

    input_count: int
    outputs: np.ndarray

    def __post_init__(self):
        outputs = np.array(self.outputs, dtype=bool)
        if outputs.shape != (1 << self.input_count,):
            raise ValueError(
                f"Expected {1 << self.input_count} outputs for "
                f"input_count={self.input_count}, got shape {outputs.shape}"
            )
        outputs.setflags(write=False)
        object.__setattr__(self, "outputs", outputs)

    def __len__(self) -> int:
        return len(self.outputs)

    def __getitem__(self, row: int) -> bool:
        return bool(self.outputs[row])

    def __eq__(self, other) -> bool:
        if not isinstance(other, TruthTable):
            return NotImplemented
        return self.input_count == other.input_count and np.array_equal(self.outputs, other.outputs)

    def __str__(self) -> str:
        return format_truth_table(self)

    @property
    def inputs(self) -> np.ndarray:
        """All assignments as a (2**N, N) bool matrix, aligned with outputs."""
        return input_matrix(self.input_count)

    def assignment(self, row: int) -> Tuple[bool, ...]:
        return assignment_for_row(row, self.input_count)

    def rows(self) -> Iterator[Tuple[Tuple[bool, ...], bool]]:
        """Yield (assignment, output) pairs in row order."""
        for row, output in enumerate(self.outputs.tolist()):
            yield self.assignment(row), output

    def minterms(self) -> List[int]:
        """Row indices whose output is true."""
        return np.flatnonzero(self.outputs).tolist()


def evaluate_all(circuit: Circuit, config: Optional[Config] = None) -> TruthTable:
    """Evaluate `circuit` for every possible assignment.

    Args:
        circuit: A validated Circuit.
        config:  Supplies max_enum_inputs; None means Config().

    Returns:
        A TruthTable with 2**circuit.input_count rows in counting order.

    Raises:
        ValueError: circuit.input_count exceeds config.max_enum_inputs.  This
                    is a misuse, not a recoverable CircuitError.
    """
    config = config or Config()
    n = circuit.input_count
    if n > config.max_enum_inputs:
        raise ValueError(
            f"Too many inputs to emulate all possible states: "
            f"{n} > max_enum_inputs={config.max_enum_inputs}"
        )

    count = 1 << n
    log.debug("Enumerating %d assignments of %s", count, circuit)
    outputs = np.empty(count, dtype=bool)
    for row, assignment in enumerate(input_matrix(n).tolist()):
        outputs[row] = circuit.evaluate(assignment)
    table = TruthTable(n, outputs)
    log.debug("Enumeration done: %d of %d rows true", int(outputs.sum()), count)
    return table


def format_truth_table(table: TruthTable, config: Optional[Config] = None) -> str:
    """Render a truth table as aligned text.

    A header with one label per input (I0, I1, ...) and the output label,
    then one line per row showing each input bit and the output bit as 0/1.
    With the default config:

        I0  I1  O1
        0   0   0
        0   1   1
        1   0   1
        1   1   0
    """
    config = config or Config()
    width = config.column_width
    header = "".join(
        f"{config.input_prefix}{j}".ljust(width - 1) + " " for j in range(table.input_count)
    )
    lines = [header + config.output_label]
    for assignment, output in table.rows():
        cells = "".join(("1" if bit else "0").ljust(width) for bit in assignment)
        lines.append(cells + ("1" if output else "0"))
    return "\n".join(lines) + "\n"


def equivalent(a: Circuit, b: Circuit, config: Optional[Config] = None) -> bool:
    """Return True iff both circuits read the same inputs and agree on every row."""
    if a.input_count != b.input_count:
        return False
    return evaluate_all(a, config) == evaluate_all(b, config)
