"""
Core domain models, calculation primitives, and invariants.

This module contains the dough calculation engine: yeast model, ingredient
mass balance and fermentation timeline. It performs no I/O.
"""
