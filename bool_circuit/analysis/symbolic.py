"""SymPy export of boolean circuits.

Each input slot j becomes the symbol I<j>.  NOT/OR/AND map to the sympy
connectives directly.  XOR is one-hot in this package, so it is expressed as
"at least one" AND "no two together" rather than with sympy.Xor, which is
parity:

  xor([a, b, c])  ->  (a | b | c) & ~(a & b) & ~(a & c) & ~(b & c)
"""

from __future__ import annotations

from itertools import combinations
from typing import Optional, Sequence, Tuple

from sympy import And, Not, Or, Symbol, simplify_logic, symbols

from ..core.circuit import Circuit
from ..core.node import OP_AND, OP_INPUT, OP_NOT, OP_OR, OP_XOR, Node


def input_symbols(input_count: int) -> Tuple[Symbol, ...]:
    """Return the symbols I0 .. I{input_count-1}."""
    if input_count <= 0:
        return ()
    return tuple(symbols(f"I0:{input_count}"))


def exactly_one(args: Sequence):
    """One-hot constraint over sympy boolean expressions."""
    pairwise = [Not(And(a, b)) for a, b in combinations(args, 2)]
    return And(Or(*args), *pairwise)


def _to_expr(node: Node, syms: Sequence[Symbol]):
    op = node.op
    if op == OP_INPUT:
        return syms[node.index]
    if op == OP_NOT:
        return Not(_to_expr(node.operands[0], syms))
    args = [_to_expr(x, syms) for x in node.operands]
    if op == OP_OR:
        return Or(*args)
    if op == OP_AND:
        return And(*args)
    if op == OP_XOR:
        return exactly_one(args)
    raise ValueError(f"Unknown op {op}")


def to_sympy(circuit: Circuit, syms: Optional[Sequence[Symbol]] = None):
    """Convert a circuit to a sympy boolean expression.

    Args:
        circuit: A validated Circuit.
        syms:    One symbol per input slot; defaults to input_symbols().
    """
    if syms is None:
        syms = input_symbols(circuit.input_count)
    if len(syms) != circuit.input_count:
        raise ValueError(f"Expected {circuit.input_count} symbols, got {len(syms)}")
    return _to_expr(circuit.root, syms)


def simplify(circuit: Circuit, form: Optional[str] = None):
    """Return a simplified sympy expression equivalent to the circuit.

    `form` is passed to sympy.simplify_logic: None, "cnf" or "dnf".
    """
    if form not in (None, "cnf", "dnf"):
        raise ValueError(f"Unknown form {form}")
    return simplify_logic(to_sympy(circuit), form=form)
