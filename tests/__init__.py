"""
Test suite for unit converters

Contains:
- tests/unit/          : Unit tests for individual modules
"""
