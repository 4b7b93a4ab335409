"""Validated circuit handle and single-assignment evaluation.

A Circuit pairs a root Node with the number of external input slots it
declares.  Bounds are checked once, when the Circuit is built; after that
every input reference is known to be in range and evaluation never
rechecks it.

  validate  — walk the tree, raise on the first out-of-range input
  evaluate  — compute the root's value for one assignment

validate walks the tree iteratively.  evaluate (like str(node)) recurses
once per tree level, so trees deeper than about sys.getrecursionlimit()
levels can be built but raise RecursionError when evaluated.

Usage:
    circuit = Circuit(2, xor([input_ref(0), input_ref(1)]))
    circuit.evaluate([True, False])   # True
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from .errors import InputCountError, InputOutOfBoundsError
from .node import OP_AND, OP_INPUT, OP_NOT, OP_OR, OP_XOR, Node, iter_nodes

if TYPE_CHECKING:
    from ..config import Config
    from .truth_table import TruthTable

log = logging.getLogger(__name__)


def validate(node: Node, input_count: int) -> None:
    """Check that every input reference under `node` is below `input_count`.

    Stops at the first offending leaf (pre-order, left to right) and raises
    InputOutOfBoundsError naming it.  Negative indices are rejected as well,
    since Python sequences would silently accept them.

    An index that is not an integer (a float, a string, or a bool) raises
    TypeError: that is a mistake in building the tree, not a bounds problem.
    Integer-like objects such as numpy integers are accepted.

    The walk is iterative, so tree depth is not limited by the recursion limit.
    """
    for current in iter_nodes(node):
        if current.op == OP_INPUT:
            index = current.index
            if isinstance(index, bool):
                raise TypeError(f"Input index must be an integer, got bool {index!r}")
            try:
                index = operator.index(index)
            except TypeError:
                raise TypeError(
                    f"Input index must be an integer, got {type(index).__name__} {index!r}"
                ) from None
            if index < 0 or index >= input_count:
                raise InputOutOfBoundsError(index, input_count)
        elif current.op not in (OP_NOT, OP_OR, OP_AND, OP_XOR):
            raise ValueError(f"Unknown op {current.op}")


def _eval_node(node: Node, assignment: Sequence[bool]) -> bool:
    op = node.op
    if op == OP_INPUT:
        return bool(assignment[node.index])
    if op == OP_NOT:
        return not _eval_node(node.operands[0], assignment)
    if op == OP_OR:
        for operand in node.operands:
            if _eval_node(operand, assignment):
                return True
        return False
    if op == OP_AND:
        for operand in node.operands:
            if not _eval_node(operand, assignment):
                return False
        return True
    if op == OP_XOR:
        # One-hot: a second true operand decides the result
        seen_true = False
        for operand in node.operands:
            if _eval_node(operand, assignment):
                if seen_true:
                    return False
                seen_true = True
        return seen_true
    raise ValueError(f"Unknown op {op}")


@dataclass(frozen=True)
class Circuit:
    """An immutable, bounds-checked boolean circuit.

    Attributes:
        input_count: Number of external input slots every assignment must fill.
        root:        Root node of the circuit tree.

    Construction raises InputOutOfBoundsError if any input reference in
    `root` is outside [0, input_count), so an invalid Circuit never exists.
    """

    input_count: int
    root: Node

    def __post_init__(self):
        validate(self.root, self.input_count)
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "Built circuit with %d inputs and %d nodes (root %s)",
                self.input_count, sum(1 for _ in iter_nodes(self.root)), self.root.op,
            )

    def evaluate(self, assignment: Sequence[bool]) -> bool:
        """Evaluate the circuit for one assignment (see module `evaluate`)."""
        return evaluate(self, assignment)

    def evaluate_all(self, config: Optional[Config] = None) -> TruthTable:
        """Enumerate every assignment into a TruthTable."""
        from .truth_table import evaluate_all

        return evaluate_all(self, config)

    def __str__(self) -> str:
        return f"Circuit({self.input_count}, {self.root})"


def evaluate(circuit: Circuit, assignment: Sequence[bool]) -> bool:
    """Compute the circuit's output for one assignment.

    Args:
        circuit:    A validated Circuit.
        assignment: One boolean per input slot, index-addressed.  Any sequence
                    works, including a numpy bool array.

    Returns:
        The root's boolean value.

    Raises:
        InputCountError: len(assignment) != circuit.input_count.  Checked
                         before the tree is touched.
    """
    if len(assignment) != circuit.input_count:
        raise InputCountError(len(assignment), circuit.input_count)
    return _eval_node(circuit.root, assignment)
