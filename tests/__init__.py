"""
Test suite for the Open Location Code codec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
