"""
avatar_arena
------------
Pygame arena of wandering, keyboard-driven avatars.
"""

__version__ = "0.1.0"
