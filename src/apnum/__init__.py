"""
APNum — arbitrary precision natural and integer numbers.

Subpackages:
- math:      sign-free digit vector engine (add, sub, mul, Algorithm D, radix)
- domain:    immutable value types BigNat / BigInt and machine-width interop
- contracts: JSON Schema contracts for serialized values
"""
