#!/usr/bin/env python
# -*- coding: utf-8 -*-


class SoftrasterError(Exception):
    """softraster の例外の基底クラス"""


class DeviceError(SoftrasterError):
    """出力デバイスがフレームを表示できなかったときの例外"""

    def __init__(self, device, message):
        super().__init__('{0}: {1}'.format(device, message))
        self.device = device


class ConfigError(SoftrasterError, ValueError):
    """設定値が不正なときの例外"""
