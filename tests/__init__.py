"""
Test suite for the fixed-point adder

Contains:
- tests/unit/          : Unit tests for individual modules
"""
