"""Blackjack test suite."""
