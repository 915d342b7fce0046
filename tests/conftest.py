import pytest

from softraster.errors import DeviceError
from softraster.renderer import Renderer
from softraster.screen import Screen


class MemoryScreen(Screen):
    """Keeps a copy of every displayed color grid."""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.frames = []

    def display(self, frame_buffer):
        self.frames.append(frame_buffer.pixels.copy())


class BrokenScreen(Screen):
    def display(self, frame_buffer):
        raise DeviceError('broken', 'no surface')


def painted(frame_buffer):
    """Coordinates whose color differs from the background."""
    return {(x, y)
            for y in range(frame_buffer.height)
            for x in range(frame_buffer.width)
            if frame_buffer.get_pixel(x, y) != frame_buffer.background}


@pytest.fixture
def screen():
    return MemoryScreen(20, 20)


@pytest.fixture
def renderer(screen):
    return Renderer(screen, shaders=())
