"""NetworkX export and structural statistics for boolean circuits.

The circuit tree becomes a directed graph with one graph node per tree node
(input references are not merged, since the tree shares no structure) and
one edge per child -> parent link.  Graph node ids are pre-order positions,
so the root is always 0.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

import networkx as nx

from ..core.circuit import Circuit
from ..core.node import OP_AND, OP_INPUT, OP_NOT, OP_OR, OP_XOR, Node, input_indices


def _label(node: Node) -> str:
    if node.op == OP_INPUT:
        return f"I{node.index}"
    if node.op in (OP_NOT, OP_OR, OP_AND, OP_XOR):
        return node.op
    raise ValueError(f"Unknown op {node.op}")


def to_networkx(circuit: Union[Circuit, Node]) -> nx.DiGraph:
    """Build a DiGraph of the circuit tree.

    Node attributes: op, label, index (INPUT nodes only).
    Edge attributes: position — the child's place in its parent's operands.
    """
    root = circuit.root if isinstance(circuit, Circuit) else circuit
    G = nx.DiGraph()

    # (node, parent graph id, operand position); parent is None for the root
    stack: List[Tuple[Node, int | None, int]] = [(root, None, 0)]
    while stack:
        node, parent_id, position = stack.pop()
        node_id = G.number_of_nodes()
        attrs = {"op": node.op, "label": _label(node)}
        if node.op == OP_INPUT:
            attrs["index"] = node.index
        G.add_node(node_id, **attrs)
        if parent_id is not None:
            G.add_edge(node_id, parent_id, position=position)
        for pos in range(len(node.operands) - 1, -1, -1):
            stack.append((node.operands[pos], node_id, pos))
    return G


@dataclass(frozen=True)
class CircuitStats:
    """Summary statistics of a circuit, used for reporting."""

    input_count: int
    n_nodes: int                    # all tree nodes, input references included
    n_gates: int                    # NOT/OR/AND/XOR nodes
    depth: int                      # longest leaf-to-root path in edges
    op_counts: Dict[str, int]
    inputs_used: Tuple[int, ...]    # distinct input indices actually read


def circuit_stats(circuit: Circuit) -> CircuitStats:
    """Compute summary statistics for a circuit."""
    G = to_networkx(circuit)
    op_counts = Counter(op for _, op in G.nodes(data="op"))
    return CircuitStats(
        input_count=circuit.input_count,
        n_nodes=G.number_of_nodes(),
        n_gates=G.number_of_nodes() - op_counts.get(OP_INPUT, 0),
        depth=nx.dag_longest_path_length(G),
        op_counts=dict(op_counts),
        inputs_used=input_indices(circuit.root),
    )
