#!/usr/bin/env python
# -*- coding: utf-8 -*-

from random import randint

from softraster.geometry import Point, Triangle


def random_color():
    """ランダムな色を生成する処理

    :rtype: tuple
    """
    return tuple(randint(0, 255) for _ in range(3))


def random_point(width, height):
    """画面内のランダムな座標を生成する処理

    :rtype: softraster.geometry.Point
    """
    return Point(randint(0, width - 1), randint(0, height - 1),
                 randint(1, 10))


def random_triangles(n, width, height):
    """ランダムなポリゴンのリストを生成する処理

    :rtype: list
    """
    return [Triangle(*[random_point(width, height) for _ in range(3)])
            for _ in range(n)]
