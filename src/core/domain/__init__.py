"""
Domain models and value objects.

Contains the code value object and the decoded code area.
"""

from src.core.domain.code import Code
from src.core.domain.code_area import CodeArea

__all__ = [
    "Code",
    "CodeArea",
]
