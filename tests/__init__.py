"""
Test suite for the radix conversion engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
