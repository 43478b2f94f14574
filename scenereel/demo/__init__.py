"""
Demo scene exports.
"""

from scenereel.demo.demo_scenes import (
    build_demo_scenes,
    build_orbit_scene,
    build_title_scene,
)

__all__ = [
    'build_demo_scenes',
    'build_orbit_scene',
    'build_title_scene',
]
