"""
Core domain models, mathematical primitives, and contracts.

This module contains the building blocks of the calculator that are
independent of input/output: operations, diagnostics, arithmetic and
JSON contracts.
"""
