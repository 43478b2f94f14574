"""
settings.py
-----------
Centralized constants for the playback runtime.
"""

import pygame


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration for the demo runtime."""
    WIDTH: int = 400
    HEIGHT: int = 400
    FPS: int = 60
    CAPTION: str = "SceneReel"


# ===========================================================
# Playback Timing
# ===========================================================

class Timing:
    """Tick timing shared by every animator."""
    TICK_PERIOD: int = 25       # milliseconds between ticks
    MAX_FRAME_TIME: int = 100   # frames slower than this log a warning (ms)


# ===========================================================
# Controls
# ===========================================================

class Controls:
    """Keyboard bindings for the runtime loop."""
    PLAY: int = pygame.K_p
    PAUSE: int = pygame.K_SPACE
    LOOP: int = pygame.K_l
    RESET: int = pygame.K_s
    QUIT: int = pygame.K_ESCAPE


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Runtime debug toggles -- not related to logging."""
    SHOW_FPS_IN_CAPTION: bool = False
