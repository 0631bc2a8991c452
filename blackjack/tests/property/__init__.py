"""
Property-based tests.

Hypothesis checks the hand evaluation invariants over generated hands.
"""
