import numpy as np
import pytest

from mathanim.animation.animation import Animation, AnimationState, FadeIn, FadeOut
from mathanim.animation.creation import ShowCreation, Uncreate, Write
from mathanim.core.math3d import smooth
from mathanim.mobject.geometry import Square
from mathanim.mobject.mobject import Mobject
from mathanim.mobject.vmobject import VGroup


class RecordingAnimation(Animation):
    def setup_mobject(self):
        self.alphas = []

    def interpolate_mobject(self, alpha):
        self.alphas.append(alpha)


def test_lifecycle():
    anim = RecordingAnimation(Mobject())
    assert anim.state is AnimationState.UNSTARTED
    anim.begin()
    assert anim.state is AnimationState.ACTIVE
    anim.interpolate(0.5)
    anim.finish()
    assert anim.is_finished()
    assert anim.alphas == [0.5, 1.0]


def test_begin_twice_fails():
    anim = RecordingAnimation(Mobject())
    anim.begin()
    with pytest.raises(RuntimeError):
        anim.begin()


def test_interpolate_before_begin_fails():
    with pytest.raises(RuntimeError):
        RecordingAnimation(Mobject()).interpolate(0.5)


def test_interpolate_after_finish_fails():
    anim = RecordingAnimation(Mobject())
    anim.begin()
    anim.finish()
    with pytest.raises(RuntimeError):
        anim.interpolate(0.5)


def test_finish_twice_is_noop():
    anim = RecordingAnimation(Mobject())
    anim.begin()
    anim.finish()
    anim.finish()
    assert anim.alphas == [1.0]


def test_alpha_is_clamped_and_eased():
    anim = RecordingAnimation(Mobject(), rate_func=smooth)
    anim.begin()
    anim.interpolate(-1.0)
    anim.interpolate(0.25)
    anim.interpolate(2.0)
    assert anim.alphas == [0.0, smooth(0.25), 1.0]


def test_fade_in():
    square = Square()
    anim = FadeIn(square)
    anim.begin()
    assert square.get_opacity() == 0.0
    np.testing.assert_allclose(square.get_rgbas()[:, 3], 0.0)

    anim.interpolate(0.5)
    assert square.get_opacity() == 0.5
    assert square.stroke_opacity == 0.5

    anim.finish()
    assert square.get_opacity() == 1.0
    assert square.stroke_opacity == 1.0
    np.testing.assert_allclose(square.get_rgbas()[:, 3], 1.0)


def test_fade_in_restores_each_member_opacity():
    child = Square(fill_opacity=0.6)
    child.set_opacity(0.4)
    group = VGroup(child)
    anim = FadeIn(group)
    anim.begin()
    assert child.fill_opacity == 0.0
    anim.finish()
    assert child.get_opacity() == 0.4
    assert child.fill_opacity == 0.6


def test_fade_out():
    square = Square()
    anim = FadeOut(square)
    assert anim.remover
    anim.begin()
    assert square.get_opacity() == 1.0
    anim.interpolate(0.25)
    assert square.get_opacity() == 0.75
    anim.finish()
    assert square.get_opacity() == 0.0
    assert square.stroke_opacity == 0.0


def test_show_creation():
    square = Square()
    original = square.get_points().copy()
    anim = ShowCreation(square)
    anim.begin()
    np.testing.assert_allclose(square.get_start(), square.get_end())

    anim.interpolate(0.5)
    np.testing.assert_allclose(square.get_end(), original[4])

    anim.finish()
    np.testing.assert_allclose(square.get_points(), original)


def test_uncreate():
    square = Square()
    original = square.get_points().copy()
    anim = Uncreate(square)
    assert anim.remover
    anim.begin()
    np.testing.assert_allclose(square.get_points(), original)
    anim.finish()
    np.testing.assert_allclose(square.get_start(), square.get_end())


def test_write():
    square = Square(fill_opacity=0.8)
    original = square.get_points().copy()
    anim = Write(square)
    anim.begin()
    assert square.fill_opacity == 0.0

    anim.interpolate(0.25)
    assert square.fill_opacity == 0.0
    np.testing.assert_allclose(square.get_end(), original[4])

    anim.interpolate(0.75)
    np.testing.assert_allclose(square.get_points(), original)
    assert abs(square.fill_opacity - 0.4) < 1e-12

    anim.finish()
    assert square.fill_opacity == 0.8
