"""
Core domain models, mathematical primitives, and invariants.

This module contains the deterministic numeric pipeline, independent
of any presentation layer (charts, date pickers, descriptive text).
"""
