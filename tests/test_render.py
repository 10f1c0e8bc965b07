import math
import xml.etree.ElementTree as ET

from dinorun.geometry import Rect
from dinorun.render import Camera, WindowConfig, WindowFlag, circle_points


def test_camera_save_load_round_trip():
    root = ET.Element("renderer")
    Camera(x=-120, y=45).save_state(root)
    loaded = Camera()
    loaded.load_state(root)
    assert (loaded.x, loaded.y) == (-120, 45)


def test_camera_save_updates_existing_child():
    root = ET.fromstring('<renderer><camera x="1" y="2"/></renderer>')
    Camera(x=7, y=8).save_state(root)
    assert len(root.findall("camera")) == 1
    assert root.find("camera").get("x") == "7"


def test_camera_load_defaults_to_zero():
    camera = Camera(x=5, y=5)
    camera.load_state(ET.Element("renderer"))
    assert (camera.x, camera.y) == (0, 0)


def test_destination_rect_follows_camera():
    camera = Camera(x=-100, y=30)
    rect = camera.destination_rect(10, 20, 16, 8)
    assert rect == Rect(-90, 50, 16, 8)


def test_destination_rect_speed_zero_ignores_camera():
    camera = Camera(x=-100, y=30)
    assert camera.destination_rect(10, 20, 16, 8, speed=0.0) == Rect(10, 20, 16, 8)


def test_destination_rect_scales_size():
    camera = Camera()
    small = camera.destination_rect(3, 4, 16, 8, scale=1)
    big = camera.destination_rect(3, 4, 16, 8, scale=2)
    assert (big.w, big.h) == (small.w * 2, small.h * 2)
    assert (big.x, big.y) == (small.x * 2, small.y * 2)


def test_screen_rect_without_camera_unchanged():
    rect = Rect(1, 2, 3, 4)
    assert Camera(x=50, y=60).screen_rect(rect, scale=2, use_camera=False) == rect


def test_screen_rect_with_camera():
    rect = Rect(1, 2, 3, 4)
    assert Camera(x=50, y=60).screen_rect(rect) == Rect(51, 62, 3, 4)


def test_window_config_defaults():
    config = WindowConfig.from_xml(ET.Element("window"))
    assert (config.width, config.height, config.scale) == (640, 480, 1)
    assert config.fullscreen_window is False
    assert config.flags() == WindowFlag.SHOWN | WindowFlag.RESIZABLE


def test_window_config_reads_values():
    element = ET.fromstring(
        "<window>"
        '<resolution width="1315" height="740" scale="2"/>'
        '<fullscreen value="yes"/>'
        '<fullscreen_window value="true"/>'
        '<borderless value="0"/>'
        "</window>"
    )
    config = WindowConfig.from_xml(element)
    assert (config.width, config.height, config.scale) == (1315, 740, 2)
    assert config.fullscreen is True
    assert config.borderless is False
    assert WindowFlag.FULLSCREEN_DESKTOP in config.flags()


def test_window_flags_ignore_borderless_setting():
    config = WindowConfig(borderless=True)
    assert WindowFlag.BORDERLESS not in config.flags()