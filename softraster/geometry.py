#!/usr/bin/env python
# -*- coding: utf-8 -*-

from enum import Enum
from math import cos, sin

import numpy as np


DOUBLE = np.float64


class Point(object):
    """3次元の座標を表す値型

    モデル座標, ワールド座標, スクリーン座標のいずれかは文脈で決まる
    """
    __slots__ = ('_v',)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        v = np.array((x, y, z), dtype=DOUBLE)
        v.flags.writeable = False
        self._v = v

    @classmethod
    def from_array(cls, array):
        """
        :param numpy.ndarray array: 長さ 3 以上の配列 (先頭 3 要素を使う)
        :rtype: Point
        """
        return cls(array[0], array[1], array[2])

    @property
    def x(self):
        return float(self._v[0])

    @property
    def y(self):
        return float(self._v[1])

    @property
    def z(self):
        return float(self._v[2])

    @property
    def array(self):
        return self._v

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other):
        return Point.from_array(self._v + other.array)

    def __sub__(self, other):
        return Point.from_array(self._v - other.array)

    def __mul__(self, k):
        return Point.from_array(self._v * k)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._v, other.array))

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return 'Point({0!r}, {1!r}, {2!r})'.format(self.x, self.y, self.z)

    def dot(self, other):
        return float(np.dot(self._v, other.array))

    def cross(self, other):
        return Point.from_array(np.cross(self._v, other.array))

    def norm(self):
        return float(np.linalg.norm(self._v))

    def normalized(self):
        """単位ベクトルを求める処理

        ゼロベクトルの単位ベクトルは計算不能なので, ゼロベクトルを返す
        :rtype: Point
        """
        n = np.linalg.norm(self._v)
        if n == 0.0:
            return Point()
        return Point.from_array(self._v / n)

    def isclose(self, other, tol=1e-9):
        return bool(np.allclose(self._v, other.array, rtol=0.0, atol=tol))

    def apply(self, transform):
        """座標変換を適用する処理

        行ベクトル (x, y, z, 1) に右から変換行列を掛け, w で割る
        (w が 0 または 1 のときは割らない)

        :param Transform transform: 座標変換
        :rtype: Point
        """
        h = np.dot(np.append(self._v, 1.0), transform.array)
        w = h[3]
        if w != 0.0 and w != 1.0:
            h = h / w
        return Point.from_array(h)


class Transform(object):
    """4x4 の変換行列

    点は行ベクトルとして p' = p · M で変換する
    """
    __slots__ = ('array',)

    def __init__(self, array):
        """
        :param numpy.ndarray array: 4x4 の行列
        """
        self.array = np.array(array, dtype=DOUBLE).reshape((4, 4))

    @classmethod
    def identity(cls):
        return cls(np.identity(4, dtype=DOUBLE))

    @classmethod
    def translate(cls, p):
        """平行移動

        :param Point p: 移動量 (x, y, z)
        """
        return cls((
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (p.x, p.y, p.z, 1.0)
        ))

    @classmethod
    def rotate_x(cls, theta):
        """x 軸の周りの回転 (theta [rad])"""
        c = cos(theta)
        s = sin(theta)
        return cls((
            (1.0, 0.0, 0.0, 0.0),
            (0.0,   c,   s, 0.0),
            (0.0,  -s,   c, 0.0),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @classmethod
    def rotate_y(cls, theta):
        """y 軸の周りの回転 (theta [rad])"""
        c = cos(theta)
        s = sin(theta)
        return cls((
            (  c, 0.0,  -s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (  s, 0.0,   c, 0.0),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @classmethod
    def rotate_z(cls, theta):
        """z 軸の周りの回転 (theta [rad])"""
        c = cos(theta)
        s = sin(theta)
        return cls((
            (  c,   s, 0.0, 0.0),
            ( -s,   c, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @classmethod
    def scale(cls, sx, sy, sz):
        return cls((
            ( sx, 0.0, 0.0, 0.0),
            (0.0,  sy, 0.0, 0.0),
            (0.0, 0.0,  sz, 0.0),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @classmethod
    def perspective(cls, focus=1.0):
        """透視変換

        (x, y, z) -> (focus * x / z, focus * y / z, 1 / z)
        z が大きいほど (遠いほど) 奥行きの値は小さくなる

        :param float focus: 焦点距離
        """
        return cls((
            (focus,   0.0, 0.0, 0.0),
            (  0.0, focus, 0.0, 0.0),
            (  0.0,   0.0, 0.0, 1.0),
            (  0.0,   0.0, 1.0, 0.0)
        ))

    def compose(self, other):
        """self を適用した後に other を適用する変換を求める処理

        :param Transform other: 後から適用する変換
        :rtype: Transform
        """
        return Transform(np.dot(self.array, other.array))

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self.array, other.array))

    __hash__ = None

    def __repr__(self):
        return 'Transform({0!r})'.format(self.array.tolist())


class FillKind(Enum):
    flat_top = 0
    flat_bottom = 1


class Triangle(object):
    """3点からなるポリゴン

    法線や重心はキャッシュせず, 必要になるたびに計算する
    """
    __slots__ = ('p1', 'p2', 'p3')

    def __init__(self, p1, p2, p3):
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3

    @property
    def points(self):
        return self.p1, self.p2, self.p3

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return 'Triangle({0!r}, {1!r}, {2!r})'.format(*self.points)

    def apply(self, transform):
        return Triangle(*[p.apply(transform) for p in self.points])

    def centroid(self):
        return Point.from_array(
            (self.p1.array + self.p2.array + self.p3.array) / 3.0)

    def normal(self):
        """面の法線ベクトルを求める処理

        (p2 - p1) x (p3 - p1) を正規化したもの
        3点が一直線上にあるとき (面積0) はゼロベクトル
        """
        return (self.p2 - self.p1).cross(self.p3 - self.p1).normalized()

    def sorted_by_y(self):
        """y の昇順に並べた3点 (同じ y の点は元の順序を保つ)"""
        return tuple(sorted(self.points, key=lambda p: p.y))

    def decompose(self):
        """底辺または上辺が水平な三角形 (最大2つ) に分割する処理

        flat_top の三角形は (left, right, bot),
        flat_bottom の三角形は (top, left, right) の順で頂点を持つ

        :rtype: list of (FillKind, Triangle)
        """
        top, middle, bot = self.sorted_by_y()

        # 3点の y 座標が同じであれば分割できない
        if top.y == bot.y:
            return []
        if top.y == middle.y:
            return [(FillKind.flat_top, Triangle(top, middle, bot))]
        if middle.y == bot.y:
            return [(FillKind.flat_bottom, Triangle(top, middle, bot))]

        # top -> bot の辺上で middle と同じ高さの点を求める
        r = (middle.y - top.y) / (bot.y - top.y)
        v4 = Point(top.x + r * (bot.x - top.x),
                   middle.y,
                   top.z + r * (bot.z - top.z))
        return [(FillKind.flat_bottom, Triangle(top, middle, v4)),
                (FillKind.flat_top, Triangle(middle, v4, bot))]
