"""Game configuration package."""
