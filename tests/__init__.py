"""
Test suite for APNum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
