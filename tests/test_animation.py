import pytest

from dinorun.animation import MAX_FRAMES, Animation
from dinorun.geometry import Rect


def make(count, **options):
    animation = Animation(**options)
    frames = [Rect(i * 10, 0, 10, 10) for i in range(count)]
    for frame in frames:
        animation.push_back(frame)
    return animation, frames


def test_starts_on_first_frame():
    animation, frames = make(3)
    assert animation.current_frame() == frames[0]


def test_empty_animation_gives_empty_rect():
    assert Animation().current_frame() == Rect()


def test_looping_animation_wraps_around():
    animation, f = make(3)
    seen = []
    for _ in range(6):
        animation.update()
        seen.append(animation.current_frame())
    assert seen == [f[1], f[2], f[0], f[1], f[2], f[0]]


def test_looping_animation_never_finishes():
    animation, _ = make(3)
    for _ in range(20):
        animation.update()
    assert not animation.has_finished()


def test_non_looping_animation_stops_on_last_frame():
    animation, frames = make(3, loop=False)
    animation.update()
    animation.update()
    assert not animation.has_finished()
    for _ in range(5):
        animation.update()
    assert animation.has_finished()
    assert animation.current_frame() == frames[-1]


def test_fractional_speed_needs_several_updates():
    animation, frames = make(3, speed=0.5)
    animation.update()
    assert animation.current_frame() == frames[0]
    animation.update()
    assert animation.current_frame() == frames[1]


def test_pingpong_runs_backwards_after_wrap():
    animation, frames = make(3, loop=False, pingpong=True)
    for _ in range(3):
        animation.update()
    assert animation.current_frame() == Rect()
    animation.update()
    assert animation.current_frame() == frames[2]
    animation.update()
    assert animation.current_frame() == frames[1]
    assert not animation.has_finished()


def test_reset_rewinds_and_clears_finish():
    animation, frames = make(2, loop=False)
    for _ in range(4):
        animation.update()
    assert animation.has_finished()
    animation.reset()
    assert not animation.has_finished()
    assert animation.current_frame() == frames[0]


def test_reset_turns_off_pingpong():
    animation, _ = make(2, pingpong=True)
    animation.reset()
    assert animation.pingpong is False


def test_frame_limit():
    animation, _ = make(MAX_FRAMES)
    assert len(animation.frames) == MAX_FRAMES
    with pytest.raises(IndexError):
        animation.push_back(Rect())