#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import logging
import sys

from softraster.config import Config
from softraster.errors import SoftrasterError
from softraster.frame_loop import FrameLoop
from softraster.geometry import Point
from softraster.renderer import Renderer
from softraster.screen import PpmScreen, TextScreen
from softraster.utils import random_color, random_triangles


def main(args):
    config = Config.from_args(args)
    if args.o is not None:
        screen = PpmScreen('softraster', config.width, config.height, args.o)
    else:
        screen = TextScreen('softraster', config.width, config.height)
    renderer = Renderer(screen)
    renderer.set_light_pos(Point(0.0, 0.0, -10.0))

    # フレームごとに同じポリゴンを描く
    triangles = [(random_color(), t) for t in
                 random_triangles(args.triangles, config.width, config.height)]

    def draw(r, frame):
        for color, t in triangles:
            with r.colored(color):
                r.fill_triangle(t)
        r.draw_line(Point(0.0, 0.0, 0.0), Point(5.0, 3.0, 0.0))

    FrameLoop(renderer, config, draw).run(max_frames=args.frames)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Software rasterizer demo')
    Config.add_arguments(parser)
    parser.add_argument('-o', type=str, metavar='path', default=None,
                        help='Write frames to PPM <path> ({frame} is replaced '
                             'with the frame number)')
    parser.add_argument('-n', '--frames', type=int, default=1,
                        help='Number of frames')
    parser.add_argument('-t', '--triangles', type=int, default=0,
                        help='Number of random triangles')
    parser.add_argument('-v', action='store_true', help='Verbose logging')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.v else logging.WARNING)
    try:
        main(args)
    except SoftrasterError as e:
        print('error: {0}'.format(e), file=sys.stderr)
        sys.exit(1)
