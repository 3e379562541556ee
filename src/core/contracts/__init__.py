"""
Contract Validation Module

Грамматика кода и JSON Schema контракт декодированной области.
"""

from .grammar import (
    CodeGrammar,
    CodeKind,
    classify_code,
    is_valid_code,
    validate_code,
)
from .validators import (
    CodeAreaValidator,
    ContractValidator,
    SchemaLoader,
    validate_code_area,
)

__all__ = [
    # Grammar
    "CodeGrammar",
    "CodeKind",
    "classify_code",
    "is_valid_code",
    "validate_code",
    # JSON Schema
    "SchemaLoader",
    "ContractValidator",
    "CodeAreaValidator",
    "validate_code_area",
]
