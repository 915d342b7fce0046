#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import time


_LOG = logging.getLogger(__name__)


class FrameLoop(object):
    """clear -> 描画 -> display を一定のフレームレートで繰り返すループ"""

    def __init__(self, renderer, config, draw,
                 clock=time.monotonic, sleep=time.sleep):
        """
        :param softraster.renderer.Renderer renderer:
        :param softraster.config.Config config:
        :param draw: draw(renderer, frame) を呼び出して1フレームを描く
        """
        self.renderer = renderer
        self.config = config
        self.draw = draw
        self.clock = clock
        self.sleep = sleep
        self._running = False

    def stop(self):
        """次のフレームの前にループを終了させる"""
        self._running = False

    def run(self, max_frames=None):
        """
        :param int max_frames: 描画するフレーム数の上限 (None なら stop() まで)
        :return: 描画したフレーム数
        """
        budget = self.config.frame_length
        frame = 0
        self._running = True
        _LOG.info('frame loop started (%.1f fps)', self.config.target_fps)
        while self._running and (max_frames is None or frame < max_frames):
            start = self.clock()

            self.renderer.clear()
            self.draw(self.renderer, frame)
            self.renderer.display()
            frame += 1

            # フレームの残り時間だけ待つ
            elapsed = self.clock() - start
            if elapsed < budget:
                self.sleep(budget - elapsed)
            else:
                _LOG.debug('frame %d overran by %.4f s', frame - 1,
                           elapsed - budget)
        self._running = False
        _LOG.info('frame loop stopped after %d frames', frame)
        return frame
