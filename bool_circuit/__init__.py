"""Boolean circuit trees: validation, evaluation and truth tables."""

from .config import Config
from .core import (
    Node, OP_INPUT, OP_NOT, OP_OR, OP_AND, OP_XOR, GATE_OPS, ALL_OPS,
    input_ref, not_, or_, and_, xor, iter_nodes, input_indices,
    CircuitError, InputOutOfBoundsError, InputCountError,
    Circuit, validate, evaluate,
    TruthTable, evaluate_all, format_truth_table, equivalent,
    input_matrix, assignment_for_row,
)
from .analysis import (
    to_networkx, CircuitStats, circuit_stats,
    input_symbols, exactly_one, to_sympy, simplify,
)

__version__ = "0.1.0"
