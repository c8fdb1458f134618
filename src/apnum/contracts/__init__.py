"""
Contract Validation Module

JSON Schema контракты сериализованных BigNat / BigInt.
"""

from .validators import (
    Contract,
    load_schema,
    validate_bigint,
    validate_bignat,
)

__all__ = [
    # Contracts
    "Contract",
    # Functions
    "load_schema",
    "validate_bignat",
    "validate_bigint",
]
