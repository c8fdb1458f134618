"""
Math modules для APNum

Движок Digit Vector: беззнаковые модули в основании 2^32 и алгоритмы над ними.
"""

# Digit Vector
from src.apnum.math.digits import (
    # Constants
    BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    DIGIT_MAX,
    # Exceptions
    ArithmeticInvariantError,
    # Functions
    compare,
    compare_digit,
    from_digits,
    from_int,
    is_canonical,
    normalize,
    to_int,
)

# Magnitude Arithmetic Engine
from src.apnum.math.magnitude import add, mul, mul_digit, sub

# Division Engine
from src.apnum.math.division import divmod_digits, long_divmod, short_divmod

# Radix Conversion
from src.apnum.math.radix import (
    DECIMAL_RADIX,
    APNumParseError,
    ParseErrorKind,
    format_integer,
    format_natural,
    parse_integer,
    parse_natural,
)

# Sign
from src.apnum.math.sign import Sign

__all__ = [
    # Digit Vector: Constants
    "BASE",
    "DIGIT_BITS",
    "DIGIT_MASK",
    "DIGIT_MAX",
    # Digit Vector: Exceptions
    "ArithmeticInvariantError",
    # Digit Vector: Functions
    "compare",
    "compare_digit",
    "from_digits",
    "from_int",
    "is_canonical",
    "normalize",
    "to_int",
    # Magnitude
    "add",
    "mul",
    "mul_digit",
    "sub",
    # Division
    "divmod_digits",
    "long_divmod",
    "short_divmod",
    # Radix: Constants
    "DECIMAL_RADIX",
    # Radix: Exceptions
    "APNumParseError",
    "ParseErrorKind",
    # Radix: Functions
    "format_integer",
    "format_natural",
    "parse_integer",
    "parse_natural",
    # Sign
    "Sign",
]
