#!/usr/bin/env python
# -*- coding: utf-8 -*-

from contextlib import contextmanager
import logging

from softraster import color as colors
from softraster.framebuffer import FrameBuffer
from softraster.geometry import FillKind, Point, Transform
from softraster.shader import DiffuseShader


_LOG = logging.getLogger(__name__)

# draw_point で描く正方形の一辺
POINT_SIZE = 7


def _leaving(v, step, size):
    """主軸の座標が画面外に出て, さらに遠ざかっていくかどうか"""
    return (step > 0 and size <= v) or (step < 0 and v < 0)


class Renderer(object):
    def __init__(self, screen, shaders=(DiffuseShader(),), z_buffering=False,
                 background=colors.BLACK):
        """
        :param softraster.screen.Screen screen: 出力デバイス
        :param shaders: ポリゴンの色を計算するシェーダの列
        (空のときは描画色をそのまま使う)
        :param bool z_buffering: Z バッファを有効にするかどうか
        """
        self.screen = screen
        self.shaders = tuple(shaders)
        self.frame_buffer = FrameBuffer(screen.width, screen.height,
                                        background=background,
                                        z_buffering=z_buffering)

        self._transform = Transform.identity()
        self._color = colors.WHITE
        self._light = Point(0.0, 0.0, 0.0)

    @property
    def transform(self):
        return self._transform

    @property
    def color(self):
        return self._color

    @property
    def light(self):
        return self._light

    # 描画状態

    def set_color(self, color):
        self._color = tuple(color)

    def set_light_pos(self, pos):
        self._light = pos

    def set_transform(self, transform):
        self._transform = transform

    def clear_transform(self):
        self._transform = Transform.identity()

    def _append(self, transform):
        # 先に指定された変換ほど元の点の近くで適用される
        self._transform = self._transform.compose(transform)

    def translate(self, p):
        self._append(Transform.translate(p))

    def rotate_x(self, theta):
        self._append(Transform.rotate_x(theta))

    def rotate_y(self, theta):
        self._append(Transform.rotate_y(theta))

    def rotate_z(self, theta):
        self._append(Transform.rotate_z(theta))

    def scale(self, x, y, z):
        self._append(Transform.scale(x, y, z))

    def perspective(self, focus=1.0):
        self._append(Transform.perspective(focus))

    @contextmanager
    def transformed(self, transform):
        """一時的に変換を差し替える

        with renderer.transformed(t):
            renderer.draw_point(p)
        """
        old = self._transform
        self._transform = transform
        try:
            yield self
        finally:
            self._transform = old

    @contextmanager
    def colored(self, color):
        """一時的に描画色を差し替える"""
        old = self._color
        self._color = tuple(color)
        try:
            yield self
        finally:
            self._color = old

    # 描画

    def draw_point(self, p):
        """点を一辺 POINT_SIZE の正方形として描画する処理"""
        p = p.apply(self._transform)
        x = int(p.x)
        y = int(p.y)
        half = POINT_SIZE // 2
        for row in range(POINT_SIZE):
            self.frame_buffer.set_row(x - half, x + half, y + row - half,
                                      -p.z, -p.z, self._color)

    def draw_point_with_transform(self, p, transform):
        with self.transformed(transform):
            self.draw_point(p)

    def draw_line(self, p1, p2):
        """線分を描画する処理 (ブレゼンハムのアルゴリズム)"""
        p1 = p1.apply(self._transform)
        p2 = p2.apply(self._transform)
        x1, y1 = int(p1.x), int(p1.y)
        x2, y2 = int(p2.x), int(p2.y)

        dx = x2 - x1
        dy = y2 - y1
        adx = abs(dx)
        ady = abs(dy)
        x_step = 1 if x2 > x1 else -1
        y_step = 1 if y2 > y1 else -1
        x_major = adx >= ady
        length = adx if x_major else ady
        d1 = -p1.z
        d2 = -p2.z

        x = x1
        y = y1
        error = 0
        i = 0
        while True:
            if x_major:
                if 2 * error > adx:
                    y += y_step
                    error -= adx
                error += ady
            else:
                if 2 * error > ady:
                    x += x_step
                    error -= ady
                error += adx

            # 奥行きは主軸方向の進み具合で線形補間
            t = i / float(length) if length else 0.0
            self.frame_buffer.set_pixel(x, y, d1 * (1.0 - t) + d2 * t,
                                        self._color)

            if x_major:
                if x == x2:
                    break
                x += x_step
                if _leaving(x, x_step, self.frame_buffer.width):
                    break
            else:
                if y == y2:
                    break
                y += y_step
                if _leaving(y, y_step, self.frame_buffer.height):
                    break
            i += 1

    def draw_line_with_transform(self, p1, p2, transform):
        with self.transformed(transform):
            self.draw_line(p1, p2)

    def _light_intensity(self, t, centroid):
        """光源方向と面の法線ベクトルの内積 (負の値は 0)"""
        light_dir = (self._light - centroid).normalized()
        return max(light_dir.dot(t.normal()), 0.0)

    def _shade(self, intensity):
        if not self.shaders:
            return self._color
        return colors.to_pixel(sum(s.calc(self._color, intensity)
                                   for s in self.shaders))

    def fill_triangle(self, t):
        """ポリゴンを塗りつぶす処理"""
        centroid = t.centroid()
        ct = t.apply(self._transform)

        # 裏向き (法線がゼロベクトルのものを含む) のポリゴンは描画しない
        if ct.normal().dot(centroid) >= 0.0:
            _LOG.debug('culled %r', t)
            return

        parts = ct.decompose()
        if not parts:
            _LOG.debug('degenerate %r', ct)
            return

        color = self._shade(self._light_intensity(t, centroid))
        with self.colored(color):
            for kind, part in parts:
                if kind is FillKind.flat_top:
                    self.fill_top_flat_triangle(*part.points)
                else:
                    self.fill_bottom_flat_triangle(*part.points)

    def _set_span(self, x1, x2, y, d1, d2):
        # 頂点付近で誤差により左右が入れ替わることがある
        if x1 > x2:
            x1, x2, d1, d2 = x2, x1, d2, d1
        self.frame_buffer.set_row(int(x1), int(x2), y, d1, d2, self._color)

    def _rows(self, y1, y2):
        """[y1, y2] のうち画面内の行"""
        return range(max(y1, 0), min(y2, self.frame_buffer.height - 1) + 1)

    def fill_bottom_flat_triangle(self, top, left, right):
        """底辺が水平な三角形を塗りつぶす処理

        top から底辺 (left, right) までの各行を描画する
        """
        if left.x > right.x:
            left, right = right, left
        dy = left.y - top.y
        if dy == 0.0:
            return
        invslope1 = (left.x - top.x) / dy
        invslope2 = (right.x - top.x) / dy
        rows = self._rows(int(top.y), int(left.y))
        # 画面外の行は飛ばし, 最初に描く行の x から始める
        skipped = rows.start - int(top.y)
        curx1 = top.x + skipped * invslope1
        curx2 = top.x + skipped * invslope2

        for y in rows:
            s = min(max((y - top.y) / dy, 0.0), 1.0)
            z_left = top.z * (1.0 - s) + left.z * s
            z_right = top.z * (1.0 - s) + right.z * s
            self._set_span(curx1, curx2, y, -z_left, -z_right)
            curx1 += invslope1
            curx2 += invslope2

    def fill_top_flat_triangle(self, left, right, bot):
        """上辺が水平な三角形を塗りつぶす処理

        上辺 (left, right) から bot までの各行を描画する
        """
        if left.x > right.x:
            left, right = right, left
        dy = bot.y - left.y
        if dy == 0.0:
            return
        invslope1 = (bot.x - left.x) / dy
        invslope2 = (bot.x - right.x) / dy
        rows = self._rows(int(left.y), int(bot.y))
        skipped = rows.start - int(left.y)
        curx1 = left.x + skipped * invslope1
        curx2 = right.x + skipped * invslope2

        for y in rows:
            s = min(max((y - left.y) / dy, 0.0), 1.0)
            z_left = left.z * (1.0 - s) + bot.z * s
            z_right = right.z * (1.0 - s) + bot.z * s
            self._set_span(curx1, curx2, y, -z_left, -z_right)
            curx1 += invslope1
            curx2 += invslope2

    # フレーム

    def clear(self):
        self.frame_buffer.clear()

    def display(self):
        """フレームを出力デバイスに渡す処理

        :raises softraster.errors.DeviceError: 出力デバイスが表示に失敗したとき
        """
        self.screen.display(self.frame_buffer)
