"""Development helpers for the game."""
