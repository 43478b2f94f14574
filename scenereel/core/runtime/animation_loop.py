"""
animation_loop.py
-----------------
Defines the AnimationLoop class that hosts an Animator in a pygame window.

Responsibilities
----------------
- Initialize pygame and open the display surface
- Own the pygame timer tick source and feed it timer events
- Map key presses to play / pause / loop / reset
- Flip the display once per frame until the window is closed
"""

import pygame

from scenereel.core.debug.debug_logger import DebugLogger
from scenereel.core.runtime.settings import Controls, Debug, Display, Timing
from scenereel.graphics.animations.animator import Animator
from scenereel.graphics.animations.tick_source import PygameTimerTickSource


class AnimationLoop:
    """Runtime controller: window, event pump and animator controls."""

    def __init__(self, width: int = Display.WIDTH, height: int = Display.HEIGHT,
                 tick_period: int = Timing.TICK_PERIOD, fps: int = Display.FPS,
                 caption: str = Display.CAPTION):
        """Initialize pygame, the window and an Animator bound to it."""
        DebugLogger.section("Initializing AnimationLoop")

        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(caption)
        DebugLogger.init_entry("Pygame")

        self.screen = pygame.display.set_mode((width, height))
        DebugLogger.init_sub(f"Display {width}x{height}")

        self.tick_source = PygameTimerTickSource()
        self.animator = Animator(self.screen, tick_source=self.tick_source,
                                 tick_period=tick_period)
        DebugLogger.init_entry("Animator")
        DebugLogger.init_sub(f"Tick period {tick_period}ms", level=1)

        self.clock = pygame.time.Clock()
        self.fps = fps
        self.caption = caption
        self.running = True

        self.key_actions = {
            Controls.PLAY: self.animator.play,
            Controls.PAUSE: self.animator.pause,
            Controls.LOOP: self.animator.loop,
            Controls.RESET: self.animator.reset,
        }

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self, loop: bool = True):
        """
        Start playback and pump events until the window closes.

        Args:
            loop: Start in looping mode (otherwise play once)
        """
        DebugLogger.section("Animation Loop")

        if loop:
            self.animator.loop()
        else:
            self.animator.play()

        try:
            while self.running:
                frame_time = self.clock.tick(self.fps)
                if frame_time > Timing.MAX_FRAME_TIME:
                    DebugLogger.warn(f"Slow frame: {frame_time}ms", category="render")

                for event in pygame.event.get():
                    self.handle_event(event)

                if Debug.SHOW_FPS_IN_CAPTION:
                    pygame.display.set_caption(f"{self.caption} ({self.clock.get_fps():.0f} FPS)")

                pygame.display.flip()
        finally:
            self.shutdown()

    def shutdown(self):
        """Stop playback, disarm timers and quit pygame."""
        self.animator.reset()
        self.tick_source.cancel_all()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================
    def handle_event(self, event) -> bool:
        """
        Route one pygame event.

        Returns:
            True if the event was consumed
        """
        if event.type == pygame.QUIT:
            self.running = False
            DebugLogger.action("Quit signal received", category="input")
            return True

        if self.tick_source.dispatch(event):
            return True

        if event.type == pygame.KEYDOWN:
            if event.key == Controls.QUIT:
                self.running = False
                DebugLogger.action("Quit key pressed", category="input")
                return True

            action = self.key_actions.get(event.key)
            if action is not None:
                DebugLogger.action(f"Key -> {action.__name__}()", category="input")
                action()
                return True

        return False
