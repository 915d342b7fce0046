#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

from softraster import color as colors


DOUBLE = np.float64


class FrameBuffer(object):
    """1フレーム分の描画先

    画素ごとに色と奥行きを1つずつ持つ
    インデックスは y * width + x (行優先)
    奥行きは大きいほど手前, -inf は何も描かれていないことを表す
    """

    def __init__(self, width, height, background=colors.BLACK,
                 z_buffering=False):
        """
        :param int width:
        :param int height:
        :param tuple background: clear() で塗りつぶす色
        :param bool z_buffering: Z バッファを有効にするかどうか
        """
        self.width = width
        self.height = height
        self.background = tuple(background)
        self.z_buffering = z_buffering

        self.pixels = np.empty((width * height, 3), dtype=np.uint8)
        self.depths = np.empty(width * height, dtype=DOUBLE)
        self.clear()

    @property
    def data(self):
        """画像出力用の (height, width * 3) の配列"""
        return self.pixels.reshape((self.height, self.width * 3))

    def index(self, x, y):
        return y * self.width + x

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x, y):
        return tuple(int(c) for c in self.pixels[self.index(x, y)])

    def get_depth(self, x, y):
        return float(self.depths[self.index(x, y)])

    def set_pixel(self, x, y, depth, color):
        """画素を描画する処理

        範囲外の座標は何もしない
        """
        if not self.in_bounds(x, y):
            return
        self.set_pixel_nocheck(x, y, depth, color)

    def set_pixel_nocheck(self, x, y, depth, color):
        i = self.index(x, y)
        # Z バッファでテスト
        if self.z_buffering and depth < self.depths[i]:
            return
        self.depths[i] = depth
        self.pixels[i] = color

    def set_row(self, x1, x2, y, d1, d2, color):
        """水平な1行 [x1, x2] を描画する処理

        奥行きは x1 で d1, x2 で d2 となるように線形補間する
        """
        if y < 0 or self.height <= y:
            return
        if x2 < 0 or self.width <= x1:
            return

        start = min(max(x1, 0), self.width - 1)
        end = min(max(x2, 0), self.width - 1)
        if end < start:
            return

        xs = np.arange(start, end + 1)
        if x1 == x2:
            depths = np.full(len(xs), d1, dtype=DOUBLE)
        else:
            t = (xs - x1) / float(x2 - x1)
            depths = d1 * (1.0 - t) + d2 * t

        row = self.index(0, y)
        indexes = row + xs
        if self.z_buffering:
            mask = self.depths[indexes] <= depths
            indexes = indexes[mask]
            depths = depths[mask]
        self.depths[indexes] = depths
        self.pixels[indexes] = color

    def set_all_pixels(self, color):
        """色だけを塗りつぶす (奥行きはそのまま)"""
        self.pixels[:] = color

    def clear(self):
        self.pixels[:] = self.background
        self.depths.fill(float('-inf'))

    def to_text(self):
        """画素ごとに1文字で表した文字列"""
        bar = '-' * (self.width * 2 + 3)
        lines = [bar]
        for y in range(self.height):
            row = self.pixels[self.index(0, y):self.index(0, y + 1)]
            lines.append('| ' + ''.join(colors.as_char(p) + ' '
                                        for p in row) + '|')
        lines.append(bar)
        return '\n'.join(lines) + '\n'

    def __str__(self):
        return self.to_text()
