"""
Scene exports.

Provides the Scene container and its factory.
"""

from scenereel.scenes.scene import Scene, create_scene

__all__ = [
    'Scene',
    'create_scene',
]
