"""
test_animator_view.py
---------------------
Unit tests for the read-only AnimatorView handed to element callbacks.
"""

import pytest

from scenereel.graphics.animations.animator_view import AnimatorView
from scenereel.scenes.scene import Scene


def test_view_without_current_scene(animator):
    view = AnimatorView(animator)
    assert view.current_scene is None
    assert view.time_elapsed == 0
    assert view.duration == 0
    assert view.tick_period == 25


def test_view_tracks_current_scene(animator):
    scene = Scene(200)
    animator.add_scene(scene)
    animator.play()
    scene.time_elapsed = 50

    assert animator.view.time_elapsed == 50
    assert animator.view.duration == 200
    assert animator.view.progress == pytest.approx(0.25)


def test_progress_is_clamped(animator):
    scene = Scene(30)
    animator.add_scene(scene)
    animator.play()
    scene.time_elapsed = 50

    assert animator.view.progress == 1.0


def test_progress_for_zero_duration(animator):
    animator.add_scene(Scene(0))
    animator.play()
    assert animator.view.progress == 1.0


def test_view_has_no_setters(animator):
    with pytest.raises(AttributeError):
        animator.view.surface = object()
