"""
Core math modules

Десятичная арифметика и расписание точности кодека.
"""

# Fixed Point
from src.core.math.fixed_point import (
    DECIMAL_CONTEXT,
    DECIMAL_PRECISION,
    Numeric,
    clamp,
    floor_digit,
    to_decimal,
)

# Precision
from src.core.math.precision import (
    CODE_ALPHABET,
    CODE_PRECISION_EXTRA,
    CODE_PRECISION_NORMAL,
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    INITIAL_PRECISION,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_CODE_LENGTH,
    MIN_CODE_LENGTH,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
    compute_latitude_precision,
    compute_longitude_precision,
    digit_char,
    digit_value,
    validate_code_length,
)

__all__ = [
    # Fixed Point
    "DECIMAL_CONTEXT",
    "DECIMAL_PRECISION",
    "Numeric",
    "clamp",
    "floor_digit",
    "to_decimal",
    # Precision: Constants
    "CODE_ALPHABET",
    "CODE_PRECISION_EXTRA",
    "CODE_PRECISION_NORMAL",
    "ENCODING_BASE",
    "GRID_COLUMNS",
    "GRID_ROWS",
    "INITIAL_PRECISION",
    "LATITUDE_MAX",
    "LONGITUDE_MAX",
    "MAX_CODE_LENGTH",
    "MIN_CODE_LENGTH",
    "PADDING_CHARACTER",
    "PAIR_CODE_LENGTH",
    "SEPARATOR",
    "SEPARATOR_POSITION",
    # Precision: Functions
    "compute_latitude_precision",
    "compute_longitude_precision",
    "digit_char",
    "digit_value",
    "validate_code_length",
]
