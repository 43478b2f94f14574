"""
__main__.py
-----------
Command-line entry point: ``python -m scenereel``.

Usage:
    python -m scenereel                      # Loop the demo scenes
    python -m scenereel --no-loop            # Play them once
    python -m scenereel --config demo.json   # Override display / timing
    python -m scenereel --verbose            # Trace every tick
"""

import argparse
import sys

from scenereel.core.debug.debug_logger import DebugLogger, LoggerConfig
from scenereel.core.errors import ConfigurationError
from scenereel.core.runtime.animation_loop import AnimationLoop
from scenereel.core.runtime.settings import Display, Timing
from scenereel.core.services.config_manager import load_config
from scenereel.demo.demo_scenes import build_demo_scenes


DEFAULT_CONFIG = {
    "display": {
        "width": Display.WIDTH,
        "height": Display.HEIGHT,
        "fps": Display.FPS,
        "caption": Display.CAPTION,
    },
    "timing": {
        "tick_period": Timing.TICK_PERIOD,
    },
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scenereel", description="SceneReel demo player")
    parser.add_argument("--config", help="JSON file overriding display/timing settings")
    parser.add_argument("--no-loop", action="store_true",
                        help="Play the scene list once instead of looping")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable per-tick trace logging")
    return parser


def enable_verbose_logging():
    """
    Switch the logger to per-tick tracing.

    Returns:
        Callable that restores the previous level and category table
    """
    saved_level = LoggerConfig.LOG_LEVEL
    saved_categories = dict(LoggerConfig.CATEGORIES)

    LoggerConfig.LOG_LEVEL = "VERBOSE"
    LoggerConfig.CATEGORIES = {**saved_categories, "tick": True}

    def restore():
        LoggerConfig.LOG_LEVEL = saved_level
        LoggerConfig.CATEGORIES = saved_categories

    return restore


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    restore_logging = enable_verbose_logging() if args.verbose else None
    try:
        return run_demo(args)
    finally:
        if restore_logging is not None:
            restore_logging()


def run_demo(args) -> int:
    """Load settings, open the window and play the demo scenes."""
    try:
        config = (load_config(args.config, DEFAULT_CONFIG, strict=True)
                  if args.config else load_config("scenereel.json", DEFAULT_CONFIG))
    except ConfigurationError as e:
        DebugLogger.fail(str(e))
        return 2

    display = config["display"]
    try:
        runtime = AnimationLoop(
            width=display["width"],
            height=display["height"],
            tick_period=config["timing"]["tick_period"],
            fps=display["fps"],
            caption=display["caption"],
        )
    except ConfigurationError as e:
        DebugLogger.fail(str(e))
        return 2

    runtime.animator.add_scenes(*build_demo_scenes())
    runtime.run(loop=not args.no_loop)
    return 0


if __name__ == "__main__":
    sys.exit(main())
