"""
Test suite for expnum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
