"""
Test suite for linalg

Contains:
- tests/unit/          : Unit tests for individual modules
"""
