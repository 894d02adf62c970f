"""
Test suite for Timewave Zero

Contains:
- tests/unit/          : Unit tests for individual modules and the pipeline
"""
