"""Actor/component engine, math toolkit, Targa loading and level logic for a brick-breaking game."""

__version__ = "0.1.0"

__all__ = [
    "actor",
    "camera",
    "entities",
    "game",
    "inputstate",
    "mathutil",
    "matrices",
    "models",
    "rng",
    "sprite",
    "texture",
]