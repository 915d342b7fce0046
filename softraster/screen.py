#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import sys

from softraster.errors import DeviceError
from softraster.ppm import PpmImage


_LOG = logging.getLogger(__name__)


class Screen(object):
    """フレームバッファを表示する出力デバイス"""

    def __init__(self, width, height):
        self.width = width
        self.height = height

    def display(self, frame_buffer):
        """フレームを表示する処理

        :param softraster.framebuffer.FrameBuffer frame_buffer:
        :raises softraster.errors.DeviceError: 表示に失敗したとき
        """
        raise NotImplementedError


class TextScreen(Screen):
    """画素を文字で表して出力するデバイス"""

    def __init__(self, title, width, height, stream=None):
        super().__init__(width, height)
        self.title = title
        self.stream = sys.stdout if stream is None else stream

    def display(self, frame_buffer):
        try:
            self.stream.write(self.title + '\n')
            self.stream.write(frame_buffer.to_text())
            self.stream.flush()
        except OSError as e:
            raise DeviceError(self.title, e) from e


class PpmScreen(Screen):
    """フレームごとに PPM ファイルを書き出すデバイス"""

    def __init__(self, name, width, height, path, binary=False):
        """
        :param str path: 出力先 ('{frame}' はフレーム番号に置き換える)
        """
        super().__init__(width, height)
        self.name = name
        self.path = path
        self.binary = binary
        self.frame = 0

    def display(self, frame_buffer):
        path = self.path.format(frame=self.frame)
        image = PpmImage(self.name, frame_buffer, binary=self.binary)
        try:
            with open(path, 'wb' if self.binary else 'w') as f:
                image.dump(f)
        except OSError as e:
            raise DeviceError(path, e) from e
        _LOG.debug('wrote frame %d to %s', self.frame, path)
        self.frame += 1
