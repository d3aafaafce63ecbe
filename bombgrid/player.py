"""The player's position, lives and bomb supply."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """The player: position, lives, bombs carried and blast range."""

    x: int = 1
    y: int = 1
    lives: int = 3
    blast_range: int = 1
    bombs: int = 1
    deployed: int = 0
    hittable: bool = True

    def change_lives(self, delta):
        """Add delta to the lives if the player is hittable and stays non-negative.

        Returns whether the change was applied.
        """
        if self.lives + delta >= 0 and self.hittable:
            self.lives += delta
            return True
        return False

    def move(self, dx, dy):
        """Shift the player's position."""
        self.x += dx
        self.y += dy

    def make_immune(self):
        """Make the player ignore life changes."""
        self.hittable = False

    def make_vulnerable(self):
        """Make the player take life changes again."""
        self.hittable = True