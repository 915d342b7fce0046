#!/usr/bin/env python
# -*- coding: utf-8 -*-

from softraster.errors import ConfigError


class Config(object):
    """描画の設定 (生成時に固定)"""

    def __init__(self, width=20, height=20, target_fps=60):
        """
        :param int width: 画像の横の画素数
        :param int height: 画像の縦の画素数
        :param int target_fps: 目標フレームレート
        """
        for name, value in (('width', width), ('height', height),
                            ('target_fps', target_fps)):
            if value <= 0:
                raise ConfigError(
                    '{0} must be positive: {1!r}'.format(name, value))
        self.width = width
        self.height = height
        self.target_fps = target_fps

    @property
    def frame_length(self):
        """1フレームの長さ [s]"""
        return 1.0 / self.target_fps

    def __repr__(self):
        return 'Config(width={0!r}, height={1!r}, target_fps={2!r})'.format(
            self.width, self.height, self.target_fps)

    @staticmethod
    def add_arguments(parser):
        """argparse のパーサにオプションを追加する処理"""
        parser.add_argument('--width', type=int, default=20,
                            help='Raster columns')
        parser.add_argument('--height', type=int, default=20,
                            help='Raster rows')
        parser.add_argument('--fps', type=int, default=60,
                            dest='target_fps', help='Target frame rate')

    @classmethod
    def from_args(cls, args):
        """
        :param argparse.Namespace args: add_arguments で追加したオプション
        :rtype: Config
        """
        return cls(width=args.width, height=args.height,
                   target_fps=args.target_fps)
