#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np


BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)

# 暗い -> 明るい
GLYPHS = ' .:-=+*#%@'


def to_pixel(rgb):
    """浮動小数点の (r, g, b) を 0-255 の整数の組に変換する処理

    範囲外の値は飽和させる

    :param rgb: (r, g, b)
    :rtype: tuple
    """
    clipped = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 255.0)
    return tuple(int(c) for c in clipped)


def luminance(color):
    """相対輝度 (0.0-1.0)"""
    r, g, b = color
    return (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255.0


def as_char(color):
    """色を表示用の1文字に変換する処理"""
    i = int(round(luminance(color) * (len(GLYPHS) - 1)))
    return GLYPHS[max(0, min(i, len(GLYPHS) - 1))]
