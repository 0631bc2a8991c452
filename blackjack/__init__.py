"""
Terminal Blackjack

A single-player blackjack simulator for the console: a shuffling dealer,
hand evaluation and a betting loop against a scripted dealer.
"""

__version__ = "1.0.0"
__author__ = "Terminal Blackjack Development Team"
