from .player_core import Player

__all__ = ['Player']
