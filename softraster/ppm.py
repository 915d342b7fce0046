#!/usr/bin/env python
# -*- coding: utf-8 -*-


class PpmImage(object):
    """フレームバッファを PPM 画像として書き出すクラス"""

    def __init__(self, name, frame_buffer, binary=False):
        """
        :param str name: ヘッダのコメントに書く名前
        :param softraster.framebuffer.FrameBuffer frame_buffer:
        :param bool binary: True なら P6, False なら P3 で書き出す
        """
        self.name = name
        self.frame_buffer = frame_buffer
        self.binary = binary

    @property
    def magic(self):
        return 'P6' if self.binary else 'P3'

    def header(self):
        fb = self.frame_buffer
        return '{0}\n# {1}\n{2:d} {3:d}\n255\n'.format(
            self.magic, self.name, fb.width, fb.height)

    def dump(self, fp):
        """ファイルに画像データを書き込む処理

        binary が True のときはバイナリモードで開いたファイルを渡す
        """
        if self.binary:
            fp.write(self.header().encode('ascii'))
            fp.write(self.frame_buffer.pixels.tobytes())
            return

        fp.write(self.header())
        # 1行に1画素
        for r, g, b in self.frame_buffer.pixels.tolist():
            fp.write('{0:3d} {1:3d} {2:3d}\n'.format(r, g, b))
