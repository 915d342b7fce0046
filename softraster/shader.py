#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np


DOUBLE = np.float64


def _rgb(color):
    return np.asarray(color, dtype=DOUBLE)


class ConstantShader(object):
    """描画色をそのまま返すシェーダ"""
    def calc(self, color, _):
        return _rgb(color)


class AmbientShader(object):
    """環境光を計算するシェーダ"""
    def __init__(self, intensity):
        """
        :param float intensity: 環境光係数 0.0-1.0
        """
        self.intensity = intensity

    def calc(self, color, _):
        return self.intensity * _rgb(color)


class DiffuseShader(object):
    """拡散反射を計算するシェーダ"""
    def __init__(self, luminance=1.0):
        """
        :param float luminance: 入射光の強さ
        """
        self.luminance = luminance

    def calc(self, color, intensity):
        """
        :param tuple color: 描画色 (r, g, b)
        :param float intensity: 光源方向と法線ベクトルの内積 (0.0 以上)
        """
        return (self.luminance * intensity) * _rgb(color)
