#!/usr/bin/env python3
"""Print the truth table of the reference circuit AND(I0, OR(I1, I2), NOT(I3)).

Usage:
    # Full truth table
    python scripts/truth_table.py

    # Evaluate one assignment (one 0/1 character per input, I0 first)
    python scripts/truth_table.py --assign 1010

    # Structure and simplified expression
    python scripts/truth_table.py --stats --simplify dnf
"""

import argparse
import logging
import sys

from bool_circuit import (
    Circuit, CircuitError, Config,
    and_, circuit_stats, input_ref, not_, or_, simplify,
)


def reference_circuit() -> Circuit:
    return Circuit(4, and_([input_ref(0), or_([input_ref(1), input_ref(2)]), not_(input_ref(3))]))


def bit_string(value: str):
    if not value or any(c not in "01" for c in value):
        raise argparse.ArgumentTypeError(f"expected a string of 0/1 characters, got {value!r}")
    return [c == "1" for c in value]


def main():
    parser = argparse.ArgumentParser(description="Evaluate the reference boolean circuit")
    parser.add_argument("--assign", type=bit_string, default=None,
                        help="Evaluate a single assignment, e.g. 1010")
    parser.add_argument("--stats", action="store_true", help="Print circuit statistics")
    parser.add_argument("--simplify", choices=["auto", "cnf", "dnf"], default=None,
                        help="Print the simplified boolean expression")
    parser.add_argument("--max_enum_inputs", type=int, default=20,
                        help="Largest input count to enumerate exhaustively")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = Config(max_enum_inputs=args.max_enum_inputs)
    circuit = reference_circuit()
    print(f"Circuit: {circuit.root}")

    if args.stats:
        stats = circuit_stats(circuit)
        print(f"Inputs:  {stats.input_count} (used: {list(stats.inputs_used)})")
        print(f"Nodes:   {stats.n_nodes}  |  Gates: {stats.n_gates}  |  Depth: {stats.depth}")

    if args.simplify is not None:
        form = None if args.simplify == "auto" else args.simplify
        print(f"Simplified: {simplify(circuit, form=form)}")

    try:
        if args.assign is not None:
            result = circuit.evaluate(args.assign)
            print(f"Output:  {int(result)}")
        else:
            print(circuit.evaluate_all(config), end="")
    except CircuitError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
