"""
Test suite for mul-div-normal

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI entry point
"""
