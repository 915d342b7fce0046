from math import isinf, pi

import pytest

from conftest import BrokenScreen, MemoryScreen, painted
from softraster.color import BLACK, GRAY, RED, WHITE
from softraster.errors import DeviceError
from softraster.geometry import Point, Transform, Triangle
from softraster.renderer import Renderer
from softraster.shader import AmbientShader, DiffuseShader


def _front_triangle():
    # normal (0, 0, -1), centroid (4, 6, 5)
    return Triangle(Point(2.0, 2.0, 5.0),
                    Point(2.0, 8.0, 5.0),
                    Point(8.0, 8.0, 5.0))


def _back_triangle():
    t = _front_triangle()
    return Triangle(t.p1, t.p3, t.p2)


def test_bresenham_literal(renderer):
    renderer.clear()
    renderer.draw_line(Point(0.0, 0.0, 0.0), Point(5.0, 3.0, 0.0))
    assert painted(renderer.frame_buffer) == {(0, 0), (1, 1), (2, 1),
                                              (3, 2), (4, 2), (5, 3)}


@pytest.mark.parametrize('a, b', [
    ((3, 17), (15, 2)),
    ((10, 10), (2, 12)),
    ((5, 1), (7, 15)),
    ((0, 19), (19, 0)),
    ((4, 4), (4, 4)),
    ((12, 3), (12, 9)),
    ((19, 6), (1, 6)),
])
def test_line_paints_both_endpoints(renderer, a, b):
    renderer.draw_line(Point(a[0], a[1], 0.0), Point(b[0], b[1], 0.0))
    pixels = painted(renderer.frame_buffer)
    assert a in pixels
    assert b in pixels
    assert len(pixels) == max(abs(b[0] - a[0]), abs(b[1] - a[1])) + 1


def test_line_depth_is_interpolated(renderer):
    renderer.draw_line(Point(0.0, 0.0, 0.0), Point(4.0, 0.0, -4.0))
    fb = renderer.frame_buffer
    assert [fb.get_depth(x, 0) for x in range(5)] == [0.0, 1.0, 2.0, 3.0,
                                                      4.0]


def test_line_uses_current_transform(renderer):
    renderer.translate(Point(10.0, 10.0, 0.0))
    renderer.draw_line(Point(0.0, 0.0, 0.0), Point(2.0, 0.0, 0.0))
    assert painted(renderer.frame_buffer) == {(10, 10), (11, 10), (12, 10)}


def test_draw_point_paints_square(renderer):
    renderer.set_color(RED)
    renderer.draw_point(Point(10.0, 10.0, -2.0))
    pixels = painted(renderer.frame_buffer)
    assert pixels == {(x, y) for x in range(7, 14) for y in range(7, 14)}
    assert renderer.frame_buffer.get_pixel(10, 10) == RED
    assert renderer.frame_buffer.get_depth(13, 13) == 2.0


def test_draw_point_is_clipped(renderer):
    renderer.draw_point(Point(0.0, 0.0, 0.0))
    assert painted(renderer.frame_buffer) == {(x, y) for x in range(4)
                                              for y in range(4)}


def test_draw_point_with_perspective(renderer):
    renderer.perspective()
    renderer.draw_point(Point(20.0, 20.0, 2.0))
    assert renderer.frame_buffer.get_pixel(10, 10) == WHITE
    assert renderer.frame_buffer.get_depth(10, 10) == -0.5


def test_back_facing_triangle_is_culled(renderer):
    renderer.fill_triangle(_back_triangle())
    fb = renderer.frame_buffer
    assert painted(fb) == set()
    assert all(isinf(d) for d in fb.depths.tolist())


def test_collinear_triangle_is_culled(renderer):
    renderer.fill_triangle(Triangle(Point(0.0, 0.0, 5.0),
                                    Point(5.0, 5.0, 5.0),
                                    Point(10.0, 10.0, 5.0)))
    assert painted(renderer.frame_buffer) == set()


def test_flat_bottom_triangle_fill(renderer):
    renderer.set_color(RED)
    renderer.fill_triangle(_front_triangle())
    fb = renderer.frame_buffer
    pixels = painted(fb)

    # row y spans x = 2..y
    assert pixels == {(x, y) for y in range(2, 9) for x in range(2, y + 1)}
    assert fb.get_pixel(2, 2) == RED
    assert fb.get_pixel(8, 8) == RED
    assert fb.get_depth(5, 8) == -5.0


def test_flat_bottom_scanline_count(renderer):
    renderer.fill_bottom_flat_triangle(Point(10.0, 3.0, 0.0),
                                       Point(4.0, 11.0, 0.0),
                                       Point(16.0, 11.0, 0.0))
    rows = {y for _, y in painted(renderer.frame_buffer)}
    assert rows == set(range(3, 12))
    assert len(rows) == 11 - 3 + 1


def test_flat_top_scanline_count(renderer):
    renderer.fill_top_flat_triangle(Point(16.0, 3.0, 0.0),
                                    Point(4.0, 3.0, 0.0),
                                    Point(10.0, 11.0, 0.0))
    fb = renderer.frame_buffer
    rows = {y for _, y in painted(fb)}
    assert rows == set(range(3, 12))
    assert {x for x, y in painted(fb) if y == 3} == set(range(4, 17))


def test_flat_fill_interpolates_edge_depth(renderer):
    renderer.fill_bottom_flat_triangle(Point(5.0, 0.0, 0.0),
                                       Point(1.0, 4.0, -4.0),
                                       Point(9.0, 4.0, -4.0))
    fb = renderer.frame_buffer
    assert fb.get_depth(5, 0) == 0.0
    assert fb.get_depth(5, 2) == 2.0
    assert fb.get_depth(1, 4) == 4.0


def test_general_triangle_fill(renderer):
    renderer.fill_triangle(Triangle(Point(2.0, 2.0, 5.0),
                                    Point(2.0, 10.0, 5.0),
                                    Point(10.0, 6.0, 5.0)))
    expected = set()
    for y in range(2, 11):
        right = 2 + 2 * (y - 2) if y <= 6 else 10 - 2 * (y - 6)
        expected.update((x, y) for x in range(2, right + 1))
    assert painted(renderer.frame_buffer) == expected


def test_lighting_scales_fill_color(screen):
    renderer = Renderer(screen, shaders=(DiffuseShader(),),
                        background=GRAY)
    renderer.set_light_pos(Point(4.0, 6.0, 0.0))
    renderer.fill_triangle(_front_triangle())
    assert renderer.frame_buffer.get_pixel(2, 2) == WHITE

    renderer.clear()
    renderer.set_light_pos(Point(4.0, 6.0, 10.0))
    renderer.fill_triangle(_front_triangle())
    assert renderer.frame_buffer.get_pixel(2, 2) == BLACK


def test_shaders_are_summed(screen):
    renderer = Renderer(screen, shaders=(AmbientShader(0.5),
                                         DiffuseShader()))
    renderer.set_light_pos(Point(4.0, 6.0, 10.0))
    renderer.fill_triangle(_front_triangle())
    assert renderer.frame_buffer.get_pixel(2, 2) == (127, 127, 127)


def test_fill_keeps_draw_color(screen):
    renderer = Renderer(screen)
    renderer.set_color(RED)
    renderer.fill_triangle(_front_triangle())
    assert renderer.color == RED


def test_transform_mutations_apply_earliest_first(renderer):
    renderer.translate(Point(1.0, 2.0, 0.0))
    renderer.rotate_z(pi / 2)
    p = Point(1.0, 0.0, 0.0).apply(renderer.transform)
    assert p.isclose(Point(-2.0, 2.0, 0.0))


def test_scale_and_rotations_compose(renderer):
    renderer.scale(2.0, 2.0, 2.0)
    renderer.rotate_x(pi)
    renderer.rotate_y(pi)
    p = Point(1.0, 1.0, 1.0).apply(renderer.transform)
    assert p.isclose(Point(-2.0, -2.0, 2.0))


def test_set_and_clear_transform(renderer):
    t = Transform.scale(3.0, 3.0, 3.0)
    renderer.set_transform(t)
    assert renderer.transform == t
    renderer.clear_transform()
    assert renderer.transform == Transform.identity()


def test_transformed_restores_on_error(renderer):
    renderer.translate(Point(1.0, 0.0, 0.0))
    before = renderer.transform
    with pytest.raises(RuntimeError):
        with renderer.transformed(Transform.scale(2.0, 2.0, 2.0)):
            assert renderer.transform == Transform.scale(2.0, 2.0, 2.0)
            raise RuntimeError('boom')
    assert renderer.transform == before


def test_draw_with_transform_helpers(renderer):
    t = Transform.translate(Point(10.0, 10.0, 0.0))
    renderer.draw_line_with_transform(Point(0.0, 0.0, 0.0),
                                      Point(1.0, 0.0, 0.0), t)
    assert painted(renderer.frame_buffer) == {(10, 10), (11, 10)}

    renderer.clear()
    renderer.draw_point_with_transform(Point(0.0, 0.0, 0.0), t)
    assert (10, 10) in painted(renderer.frame_buffer)
    assert renderer.transform == Transform.identity()


def test_clear_and_display(screen, renderer):
    renderer.draw_point(Point(5.0, 5.0, 0.0))
    renderer.display()
    renderer.clear()
    renderer.display()

    assert len(screen.frames) == 2
    assert tuple(screen.frames[0][5 * 20 + 5]) == WHITE
    assert not screen.frames[1].any()


def test_display_propagates_device_error():
    renderer = Renderer(BrokenScreen(4, 4))
    with pytest.raises(DeviceError):
        renderer.display()


def test_frame_buffer_is_sized_by_screen():
    renderer = Renderer(MemoryScreen(7, 3))
    assert renderer.frame_buffer.width == 7
    assert renderer.frame_buffer.height == 3


def _count_calls(monkeypatch, obj, name):
    calls = []
    original = getattr(obj, name)

    def wrapper(*args):
        calls.append(args)
        return original(*args)

    monkeypatch.setattr(obj, name, wrapper)
    return calls


def test_tall_flat_bottom_fill_only_visits_visible_rows(renderer,
                                                        monkeypatch):
    fb = renderer.frame_buffer
    rows = _count_calls(monkeypatch, fb, 'set_row')
    # apex far above the buffer, right edge slope 2 ** -16
    renderer.fill_bottom_flat_triangle(Point(0.0, 16.0 - 2 ** 20, 0.0),
                                       Point(0.0, 16.0, 0.0),
                                       Point(16.0, 16.0, 0.0))

    expected = {(x, y) for y in range(16) for x in range(16)}
    expected.update((x, 16) for x in range(17))
    assert painted(fb) == expected
    assert len(rows) == 17


def test_tall_flat_top_fill_only_visits_visible_rows(renderer, monkeypatch):
    fb = renderer.frame_buffer
    rows = _count_calls(monkeypatch, fb, 'set_row')
    renderer.fill_top_flat_triangle(Point(0.0, 4.0, 0.0),
                                    Point(16.0, 4.0, 0.0),
                                    Point(0.0, 4.0 + 2 ** 20, 0.0))

    expected = {(x, 4) for x in range(17)}
    expected.update((x, y) for y in range(5, 20) for x in range(16))
    assert painted(fb) == expected
    assert len(rows) == 16


def test_tall_triangle_fill_is_bounded_by_buffer_height(renderer,
                                                        monkeypatch):
    fb = renderer.frame_buffer
    rows = _count_calls(monkeypatch, fb, 'set_row')
    renderer.fill_triangle(Triangle(Point(2.0, -2e7, 5.0),
                                    Point(2.0, 2e7, 5.0),
                                    Point(10.0, 6.0, 5.0)))

    pixels = painted(fb)
    assert {y for _, y in pixels} == set(range(20))
    assert all(2 <= x <= 10 for x, _ in pixels)
    assert len(rows) <= 2 * fb.height


def test_long_line_stops_at_buffer_edge(renderer, monkeypatch):
    fb = renderer.frame_buffer
    pixels = _count_calls(monkeypatch, fb, 'set_pixel')
    renderer.draw_line(Point(0.0, 0.0, 0.0), Point(1e7, 3.0, 0.0))

    assert painted(fb) == {(x, 0) for x in range(20)}
    assert len(pixels) <= fb.width + 1
