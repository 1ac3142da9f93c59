"""
Test suite for archcalc

Contains:
- tests/unit/          : Unit tests for core, parser, contracts and shell
"""
