#!/usr/bin/env python

from logging import Logger as PythonLogger


class TbcPayLogger(PythonLogger):
    def __init__(self, name: str):
        super().__init__(name)

    def network(self, log_msg: str, *args, **kwargs):
        from . import NETWORK

        self.log(NETWORK, log_msg, *args, **kwargs)
