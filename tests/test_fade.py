import pytest

from dinorun.fade import FadeStep, FadeToBlack


class FakeModule:
    def __init__(self, active):
        self.active = active
        self.calls = []

    def init(self):
        self.calls.append("init")
        self.active = True

    def start(self):
        self.calls.append("start")

    def clean_up(self):
        self.calls.append("clean_up")
        self.active = False


@pytest.fixture
def modules():
    return FakeModule(True), FakeModule(False)


def test_idle_alpha_is_zero():
    fade = FadeToBlack()
    fade.update()
    assert fade.step == FadeStep.NONE
    assert fade.alpha() == 0


def test_fade_reaches_black_and_swaps(modules):
    old, new = modules
    fade = FadeToBlack()
    assert fade.fade_to_black(old, new, 3) is True
    assert fade.step == FadeStep.TO_BLACK
    fade.update()
    fade.update()
    assert old.calls == [] and new.calls == []
    fade.update()
    assert fade.step == FadeStep.FROM_BLACK
    assert old.calls == ["clean_up"]
    assert new.calls == ["init", "start"]
    assert fade.alpha() == 255


def test_alpha_rises_monotonically(modules):
    fade = FadeToBlack()
    fade.fade_to_black(*modules, 10)
    values = []
    for _ in range(10):
        fade.update()
        values.append(fade.alpha())
    assert values == sorted(values)
    assert values[-1] == 255


def test_fade_returns_to_none(modules):
    fade = FadeToBlack()
    fade.fade_to_black(*modules, 3)
    for _ in range(3):
        fade.update()
    for _ in range(3):
        fade.update()
    assert fade.step == FadeStep.NONE
    assert fade.alpha() == 0


def test_active_target_not_restarted():
    old, new = FakeModule(True), FakeModule(True)
    fade = FadeToBlack()
    fade.fade_to_black(old, new, 1)
    fade.update()
    assert new.calls == []
    assert old.calls == ["clean_up"]


def test_second_request_keeps_length(modules):
    fade = FadeToBlack()
    fade.fade_to_black(*modules, 4)
    fade.update()
    fade.fade_to_black(*modules, 100)
    assert fade.max_fade_frames == 4
    assert fade.frame_count == 0


def test_clean_up_forgets_modules(modules):
    fade = FadeToBlack()
    fade.fade_to_black(*modules, 4)
    fade.clean_up()
    assert fade.to_disable is None and fade.to_enable is None and fade.last_level is None