"""
player.py - Player identity for Connect Four

A Player is only an identity token. The engine compares players by identity
to decide whose turn it is, who owns a cell and who won; the colour and name
are carried along for the presentation layer.
"""

from typing import Optional


class Player:
    """
    One of the two participants of a game.

    Two players constructed with the same colour are still different
    players. Instances are immutable.
    """

    __slots__ = ("color", "name")

    def __init__(self, color: str, name: Optional[str] = None):
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "name", name)

    def __setattr__(self, key, value):
        raise AttributeError(f"Player is immutable (tried to set {key!r})")

    def __delattr__(self, key):
        raise AttributeError(f"Player is immutable (tried to delete {key!r})")

    @property
    def label(self) -> str:
        """Name if one was given, otherwise the colour."""
        return self.name or self.color

    def __repr__(self) -> str:
        if self.name:
            return f"Player(color={self.color!r}, name={self.name!r})"
        return f"Player(color={self.color!r})"
