"""
Test suite for subscription pricing

Contains:
- tests/unit/          : Unit tests for individual modules
"""
