from .node import (
    Node, OP_INPUT, OP_NOT, OP_OR, OP_AND, OP_XOR, GATE_OPS, ALL_OPS,
    input_ref, not_, or_, and_, xor, iter_nodes, input_indices,
)
from .errors import CircuitError, InputOutOfBoundsError, InputCountError
from .circuit import Circuit, validate, evaluate
from .truth_table import (
    TruthTable, evaluate_all, format_truth_table, equivalent,
    input_matrix, assignment_for_row,
)
