"""
Test suite for distrs

Contains:
- tests/unit/          : Unit tests for individual modules and properties
"""
