"""Integration tests driving the console game end to end."""
