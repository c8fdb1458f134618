"""
Domain models and value objects.

Immutable arbitrary precision numbers (BigNat, BigInt) and the machine
integer width layer used for interop and narrowing conversions.
"""

from src.apnum.domain.bigint import BigInt
from src.apnum.domain.bignat import BigNat
from src.apnum.domain.widths import (
    IntWidth,
    check_fits,
    fits_single_digit,
    is_machine_int,
)
from src.apnum.math.radix import APNumParseError, ParseErrorKind
from src.apnum.math.sign import Sign

__all__ = [
    # Value types
    "BigNat",
    "BigInt",
    "Sign",
    # Parse errors
    "APNumParseError",
    "ParseErrorKind",
    # Machine widths
    "IntWidth",
    "check_fits",
    "fits_single_digit",
    "is_machine_int",
]
