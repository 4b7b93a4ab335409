from .graph import to_networkx, CircuitStats, circuit_stats
from .symbolic import input_symbols, exactly_one, to_sympy, simplify
