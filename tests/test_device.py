from __future__ import annotations

import pytest

from space_flappy.device import TouchDetector, is_touch_primary


@pytest.mark.parametrize("width, expected", [(800, False), (769, False), (768, True), (400, True)])
def test_breakpoint(width: int, expected: bool) -> None:
    assert is_touch_primary(width, environ={}) is expected


def test_android_host_is_touch_primary() -> None:
    assert is_touch_primary(1920, environ={"ANDROID_ARGUMENT": "/data/app"})
    assert is_touch_primary(1920, environ={"ANDROID_PRIVATE": "/data/data"})


def test_override_wins() -> None:
    assert is_touch_primary(1920, override=True, environ={})
    assert not is_touch_primary(320, override=False, environ={"ANDROID_ARGUMENT": "x"})


def test_detector_follows_resizes() -> None:
    detector = TouchDetector(800, override=None)
    assert detector.touch_primary is False
    assert detector.on_resize(600) is True
    assert detector.touch_primary is True
    assert detector.on_resize(1024) is False


def test_detector_respects_override() -> None:
    detector = TouchDetector(400, override=False)
    assert detector.touch_primary is False
    assert detector.on_resize(300) is False
