"""Splendor game pieces: tokens, cards, decks, players, networking, widgets and logging."""

__version__ = "0.1.0"