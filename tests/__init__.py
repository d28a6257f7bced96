"""
Test suite for ach_utils

Contains:
- tests/unit/          : Unit tests for individual modules
"""
