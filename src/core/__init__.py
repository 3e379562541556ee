"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the codec:
decimal fixed-point arithmetic, the precision schedule, the code grammar
and the immutable Code / CodeArea models.
"""
