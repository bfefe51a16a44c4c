"""
Test suite for the dough planner

Contains:
- tests/unit/          : Unit tests for the core math, domain models, contracts and planner
"""
