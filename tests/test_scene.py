import logging

import pytest

from mathanim.animation.animation import Animation, FadeIn, FadeOut
from mathanim.animation.creation import ShowCreation
from mathanim.core.config import SceneConfig
from mathanim.core.signal import (
    SIGNAL_FRAME,
    SIGNAL_MOBJECT_ADDED,
    SIGNAL_MOBJECT_REMOVED,
    SIGNAL_PLAY_BEGIN,
    SIGNAL_PLAY_END,
    SignalBridge,
)
from mathanim.mobject.geometry import Circle, Square
from mathanim.mobject.mobject import Group, Mobject
from mathanim.scene.scene import Scene


def make_scene(frame_rate=60.0):
    scene = Scene(SceneConfig(frame_rate=frame_rate))
    bridge = SignalBridge()
    scene.bind_bridge(bridge)
    return scene, bridge


def test_play_advances_clock_by_run_time():
    scene, _ = make_scene()
    square = Square()
    scene.play(FadeIn(square))
    assert scene.time == 1.0
    assert scene.frame_count == 60
    assert square.get_opacity() == 1.0
    assert square in scene.mobjects


def test_play_uses_longest_run_time():
    scene, bridge = make_scene()
    short, long = Square(), Circle()
    held = []

    def on_frame(state):
        if 0.6 < state.t < 0.9:
            held.append(short.get_opacity())

    bridge.connect(SIGNAL_FRAME, on_frame)
    scene.play(FadeIn(short, run_time=0.5), FadeIn(long, run_time=1.0))

    assert scene.time == 1.0
    assert held and all(opacity == 1.0 for opacity in held)
    assert long.get_opacity() == 1.0


def test_play_clips_last_step():
    scene, bridge = make_scene(frame_rate=4.0)
    states = []
    bridge.connect(SIGNAL_FRAME, states.append)
    scene.play(FadeIn(Square(), run_time=0.6))
    assert [s.frame_id for s in states] == [1, 2, 3]
    assert states[-1].t == 0.6
    assert states[-1].is_last
    assert states[-1].progress == 1.0
    assert not states[0].is_last
    assert states[0].progress == 0.25 / 0.6
    assert abs(states[-1].dt - 0.1) < 1e-12


@pytest.mark.parametrize("run_time", [0, -1, float("nan"), float("inf"), 1000.0])
def test_play_with_only_invalid_run_times_is_noop(run_time, caplog):
    scene, _ = make_scene()
    square = Square()
    anim = FadeIn(square, run_time=run_time)
    with caplog.at_level(logging.WARNING):
        scene.play(anim)
    assert scene.time == 0.0
    assert scene.frame_count == 0
    assert scene.mobjects == []
    assert not anim.is_finished()
    assert "no valid animations" in caplog.text


def test_play_with_mixed_run_times(caplog):
    scene, _ = make_scene()
    good, bad = Square(), Circle()
    bad_anim = FadeIn(bad, run_time=-2)
    with caplog.at_level(logging.WARNING):
        scene.play(FadeIn(good, run_time=0.5), bad_anim)
    assert scene.time == 0.5
    assert bad_anim.is_finished()
    assert bad.get_opacity() == 1.0
    assert "invalid run_time" in caplog.text


def test_play_without_animations():
    scene, _ = make_scene()
    scene.play()
    assert scene.time == 0.0


def test_remover_leaves_scene():
    scene, _ = make_scene()
    square = Square()
    scene.add(square)
    scene.play(FadeOut(square))
    assert square not in scene.mobjects
    assert square.get_opacity() == 0.0


def test_animations_reach_final_state():
    scene, _ = make_scene(frame_rate=7.0)
    square = Square()
    original = square.get_points().copy()
    scene.play(ShowCreation(square, run_time=0.3))
    assert (square.get_points() == original).all()


def test_animation_cannot_be_replayed():
    scene, _ = make_scene()
    anim = FadeIn(Square())
    scene.play(anim)
    with pytest.raises(RuntimeError):
        scene.play(anim)


def test_wait():
    scene, _ = make_scene()
    scene.wait(0.5)
    assert scene.time == 0.5
    assert scene.frame_count == 30


def test_wait_invalid_duration(caplog):
    scene, _ = make_scene()
    with caplog.at_level(logging.WARNING):
        scene.wait(-1)
    assert scene.time == 0.0
    assert "Scene.wait" in caplog.text


def test_updaters_run_once_per_step():
    scene, _ = make_scene(frame_rate=10.0)
    shared = Mobject()
    calls = []
    shared.add_updater(lambda m, dt: calls.append(dt))
    # Reachable both directly and through a group
    scene.add(shared, Group(shared))
    scene.wait(1.0)
    assert len(calls) == 10
    assert abs(sum(calls) - 1.0) < 1e-9


def test_updaters_run_during_play():
    scene, _ = make_scene(frame_rate=10.0)
    square = Square()
    ticks = []
    square.add_updater(lambda m, dt: ticks.append(dt))
    scene.play(FadeIn(square))
    assert len(ticks) == 10


def test_add_and_remove_emit_signals():
    scene, bridge = make_scene()
    added, removed = [], []
    bridge.connect(SIGNAL_MOBJECT_ADDED, added.append)
    bridge.connect(SIGNAL_MOBJECT_REMOVED, removed.append)

    square = Square()
    scene.add(square, square)
    assert scene.get_mobjects() == [square]
    assert added == [square]

    scene.remove(square)
    scene.remove(square)
    assert scene.mobjects == []
    assert removed == [square]


def test_play_signals():
    scene, bridge = make_scene()
    events = []
    bridge.connect(SIGNAL_PLAY_BEGIN, lambda anims, run_time: events.append(("begin", run_time)))
    bridge.connect(SIGNAL_PLAY_END, lambda anims: events.append(("end", len(anims))))
    scene.play(FadeIn(Square(), run_time=2.0))
    assert events == [("begin", 2.0), ("end", 1)]


def test_clear():
    scene, _ = make_scene()
    scene.add(Square(), Circle())
    scene.clear()
    assert scene.mobjects == []


def test_construct_runs_through_run():
    class Demo(Scene):
        def construct(self):
            self.square = Square()
            self.play(FadeIn(self.square, run_time=0.25))

    scene = Demo().run()
    assert scene.time == 0.25
    assert scene.square in scene.mobjects


def test_scene_without_bridge_still_plays():
    scene = Scene()
    scene.play(Animation(Mobject(), run_time=0.1))
    assert scene.time == 0.1
