"""
Test suite for math-notes

Contains:
- tests/unit/          : Unit tests for the expression pipeline, notes and login
"""
