"""Who? - round setup and lifecycle engine for a pass-the-device word game."""

__version__ = "0.1.0"
