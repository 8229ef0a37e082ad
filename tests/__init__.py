"""
Test suite for friendly_numbers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
