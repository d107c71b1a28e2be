"""
game_settings.py
----------------
Centralized constants for all arena systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 960
    HEIGHT: int = 640
    FPS: int = 60
    CAPTION: str = "Avatar Arena"

    # Logical-to-pixel scale applied on resize (browser devicePixelRatio)
    PIXEL_RATIO: float = 1.0

    BACKGROUND_COLOR = (235, 235, 235)


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DIR: str = "assets/fonts"
    DEFAULT: str = "Minecraftia-Regular.ttf"
    FALLBACK: str = None
    LABEL_SIZE: int = 12
    LABEL_COLOR = (0, 0, 0)
    LABEL_OFFSET: int = 20


# ===========================================================
# Arena Layout
# ===========================================================

class Arena:
    """Spawn placement and boundary margins."""
    SAFE_DISTANCE: float = 60
    SPAWN_PADDING: float = 40
    MAX_SPAWN_ATTEMPTS: int = 50

    # Gap kept between an entity's edge and the surface boundary
    EDGE_PADDING: float = 10


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    """Per-entity movement and render defaults."""
    RADIUS: int = 20
    SPEED: float = 2
    FRICTION: float = 0.9
    VELOCITY_EPSILON: float = 0.01
    NAME_PREFIX: str = "bro"
    NAME_RANGE: int = 10000


# ===========================================================
# Autonomous Movement
# ===========================================================

class Wander:
    """Random walk timing."""
    INTERVAL_MS: float = 100
    TURN_CHANCE: float = 0.2


# ===========================================================
# Sprite Sheet
# ===========================================================

class Sprite:
    """Character sheet layout: one row per facing, FRAME_COUNT columns."""
    SIZE: int = 128
    FRAME_COUNT: int = 4
    FRAME_DELAY: int = 5
    DEFAULT_PATH: str = "assets/player-asset-1.png"
    ROWS = {"down": 0, "right": 1, "left": 2, "up": 3}


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    SHOW_HUD: bool = False
    FRAME_TIME_WARNING: float = 16.67
    HUD_FONT: str = "consolas"
    HUD_FONT_SIZE: int = 14
