"""
Test suite for the fractal escape-time engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
