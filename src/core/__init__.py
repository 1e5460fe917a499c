"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the fixed-point
adder that are independent of any caller.
"""
