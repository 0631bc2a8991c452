"""User interfaces for the blackjack game."""
