"""
Core domain models, digit-string arithmetic, and configuration contracts.

This module contains the foundational building blocks of the radix
conversion engine that are independent of any input/output surface.
"""
