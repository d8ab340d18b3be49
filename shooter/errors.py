"""Exceptions raised by the game."""


class AssetLoadError(RuntimeError):
    """An asset file is missing or could not be decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load asset {path}: {reason}")
        self.path = path
        self.reason = reason
