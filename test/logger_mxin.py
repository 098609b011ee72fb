import logging
from logging import Handler, LogRecord
from typing import List, Union

from tbcpay.logger import TbcPayLogger


class TestLoggerMixin(Handler):
    """
    Test logger mixin class that can be used to capture log records during testing.

    Example usage:
    ```python
    class MyTestCase(unittest.TestCase, TestLoggerMixin):
        def test_something(self):
            self.set_loggers([SomeComponent.logger()])
            ...
            self.assertTrue(self.is_logged("INFO", "Testing..."))
    ```
    """
    level: Union[int, str] = logging.NOTSET

    def set_loggers(self, loggers: List[TbcPayLogger]):
        # __init__() is not called when the class is used as a mixin
        self.log_records: List[LogRecord] = []
        for logger in loggers:
            if logger is not None:
                logger.setLevel(1)
                logger.addHandler(self)

    def handle(self, record: LogRecord):
        self.log_records.append(record)

    @staticmethod
    def _to_loglevel(log_level: Union[str, int]) -> str:
        if isinstance(log_level, int):
            log_level = logging.getLevelName(log_level)
        return log_level

    def is_logged(self, log_level: Union[str, int], message: str) -> bool:
        log_level = self._to_loglevel(log_level)
        return any(record.getMessage() == message and record.levelname == log_level for record in self.log_records)

    def is_partially_logged(self, log_level: Union[str, int], message: str) -> bool:
        log_level = self._to_loglevel(log_level)
        return any(message in record.getMessage() and record.levelname == log_level for record in self.log_records)
