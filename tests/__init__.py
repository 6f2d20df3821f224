"""
Test suite for linecalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
