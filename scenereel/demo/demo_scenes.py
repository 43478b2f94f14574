"""
demo_scenes.py
--------------
Sample scenes for the demo window.

Scenes
------
- Orbit scene: dark background with three circles orbiting the center.
- Title scene: green background, centered title and a growing progress line.

Every element is a plain function taking the AnimatorView; positions are
derived from ``view.time_elapsed`` and ``view.duration`` so the drawing is a
pure function of scene time.
"""

import math

import pygame

from scenereel.scenes.scene import Scene, create_scene


ORBIT_SCENE_DURATION = 3000
TITLE_SCENE_DURATION = 2000
ORBIT_RADIUS = 150


# ===========================================================
# Shared Elements
# ===========================================================

def draw_background(color):
    """Element that fills the whole surface with ``color``."""
    fill = pygame.Color(color)

    def element(view):
        view.surface.fill(fill)

    return element


def coords_from_angle(radius: float, angle: float):
    """Offset of a point ``radius`` away at ``angle`` degrees."""
    rads = math.radians(angle)
    return radius * math.cos(rads), radius * math.sin(rads)


def surface_center(surface):
    """Integer center of ``surface``, whatever size the window was opened at."""
    width, height = surface.get_size()
    return width // 2, height // 2


# ===========================================================
# Orbit Scene
# ===========================================================

def make_orbiting_circle(start_angle: float, end_angle: float, circle_radius: int, color):
    """
    Element drawing a circle that sweeps from ``start_angle`` to ``end_angle``
    (degrees) around the surface center over the scene's duration.
    """
    fill = pygame.Color(color)
    sweep = end_angle - start_angle

    def element(view):
        angle = start_angle + sweep * view.progress
        dx, dy = coords_from_angle(ORBIT_RADIUS, angle)
        cx, cy = surface_center(view.surface)
        center = (cx + round(dx), cy + round(dy))
        pygame.draw.circle(view.surface, fill, center, circle_radius)

    return element


def build_orbit_scene() -> Scene:
    scene = create_scene(duration=ORBIT_SCENE_DURATION)
    scene.add_element(draw_background("#080808"))
    scene.add_element(make_orbiting_circle(180, 540, 50, "#D2EC4C"))
    scene.add_element(make_orbiting_circle(0, 360, 40, "#4CCDED"))
    # Faster inner circle
    scene.add_element(make_orbiting_circle(90, 810, 30, "#F39B3E"))
    return scene


# ===========================================================
# Title Scene
# ===========================================================

def make_title_text(text: str, size: int = 60, color="#FFFFFF"):
    """Element rendering ``text`` centered on the surface."""
    fill = pygame.Color(color)
    cache = {}

    def element(view):
        if "surface" not in cache:
            font = pygame.font.Font(None, size)
            cache["surface"] = font.render(text, True, fill)
        rendered = cache["surface"]
        rect = rendered.get_rect(center=surface_center(view.surface))
        view.surface.blit(rendered, rect)

    return element


def make_progress_line(y: int = 350, width: int = 5, color="#515F4D"):
    """Element drawing a line that grows across the surface as the scene runs."""
    fill = pygame.Color(color)

    def element(view):
        x_end = round(view.surface.get_width() * view.progress)
        if x_end > 0:
            pygame.draw.line(view.surface, fill, (0, y), (x_end, y), width)

    return element


def build_title_scene(text: str = "SCENE 2") -> Scene:
    scene = create_scene(duration=TITLE_SCENE_DURATION)
    scene.add_elements(
        draw_background("#95E681"),
        make_title_text(text),
        make_progress_line(),
    )
    return scene


def build_demo_scenes():
    """Scenes in demo play order."""
    return [build_orbit_scene(), build_title_scene()]
