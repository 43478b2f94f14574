"""
Runtime configuration exports.

Provides playback-wide constants. All exports are lightweight class
constants with no initialization overhead.
"""

from scenereel.core.runtime.settings import (
    Display,
    Timing,
    Controls,
    Debug,
)

__all__ = [
    'Display',
    'Timing',
    'Controls',
    'Debug',
]
