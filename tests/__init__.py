"""
Test suite for word256

Contains:
- tests/unit/          : Unit tests for individual modules
"""
