"""Boolean circuit node dataclass and free constructors.

A Node is one vertex of a boolean circuit tree.  Nodes are built bottom-up
by composition and are never mutated after construction, so a tree is
always finite and acyclic.

Op types and their fields:
  INPUT  index = i, operands = ()        — reads slot i of the assignment
  NOT    operands = (x,)                 — logical negation of x
  OR     operands = (x0, x1, ...)        — true iff any operand is true
  AND    operands = (x0, x1, ...)        — true iff all operands are true
  XOR    operands = (x0, x1, ...)        — true iff exactly one operand is true

OR/AND/XOR need at least two operands.  Violations raise ValueError: they
are mistakes of whoever builds the circuit, not runtime conditions.

Usage:
    root = and_([input_ref(0), or_([input_ref(1), input_ref(2)]), not_(input_ref(3))])
    str(root)   # 'AND(I0, OR(I1, I2), NOT(I3))'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

# Operation type constants — used as node.op values.
OP_INPUT = "INPUT"
OP_NOT = "NOT"
OP_OR = "OR"
OP_AND = "AND"
OP_XOR = "XOR"

GATE_OPS = (OP_OR, OP_AND, OP_XOR)
ALL_OPS = (OP_INPUT, OP_NOT) + GATE_OPS


@dataclass(frozen=True)
class Node:
    """One node in the boolean circuit tree.

    Attributes:
        op:        Operation type: one of ALL_OPS.
        index:     Assignment slot read by an INPUT node; None for gates.
                   Range-checked only when the tree is wrapped in a Circuit.
        operands:  Child nodes in order (empty for INPUT).
    """

    op: str
    index: Optional[int] = None
    operands: Tuple[Node, ...] = ()

    def __post_init__(self):
        if self.op == OP_INPUT:
            if self.index is None or self.operands:
                raise ValueError("INPUT node takes an index and no operands")
            return
        if self.op not in ALL_OPS:
            raise ValueError(f"Unknown op {self.op}")
        if self.index is not None:
            raise ValueError(f"{self.op} node does not take an index")
        for operand in self.operands:
            if not isinstance(operand, Node):
                raise TypeError(f"{self.op} operand must be a Node, got {type(operand).__name__}")
        if self.op == OP_NOT and len(self.operands) != 1:
            raise ValueError("NOT gate requires exactly one input")
        if self.op in GATE_OPS and len(self.operands) < 2:
            raise ValueError(f"{self.op} gate requires at least two inputs")

    def __str__(self) -> str:
        if self.op == OP_INPUT:
            return f"I{self.index}"
        return f"{self.op}({', '.join(str(x) for x in self.operands)})"


def input_ref(index: int) -> Node:
    """Return a leaf reading slot `index` of the assignment."""
    return Node(OP_INPUT, index=index)


def not_(node: Node) -> Node:
    """Return the negation of `node`."""
    return Node(OP_NOT, operands=(node,))


def or_(nodes: Iterable[Node]) -> Node:
    """Return an OR gate over two or more nodes."""
    return Node(OP_OR, operands=tuple(nodes))


def and_(nodes: Iterable[Node]) -> Node:
    """Return an AND gate over two or more nodes."""
    return Node(OP_AND, operands=tuple(nodes))


def xor(nodes: Iterable[Node]) -> Node:
    """Return a one-hot XOR gate over two or more nodes.

    The gate is true iff exactly one operand is true.  This is not the
    parity XOR: xor([a, b, c]) is false when all three are true.
    """
    return Node(OP_XOR, operands=tuple(nodes))


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield every node of the tree rooted at `node` in pre-order."""
    stack: List[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        # Reversed so operands come out left to right
        stack.extend(reversed(current.operands))


def input_indices(node: Node) -> Tuple[int, ...]:
    """Return the sorted distinct input indices read anywhere in the tree."""
    return tuple(sorted({n.index for n in iter_nodes(node) if n.op == OP_INPUT}))
