import io
import logging
import logging.config
from os import PathLike
from typing import Dict, Optional, Union

from ruamel.yaml import YAML

from .logger import TbcPayLogger

NOTSET = logging.NOTSET
DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL
NETWORK = DEBUG + 6

logging.addLevelName(NETWORK, "NETWORK")
logging.setLoggerClass(TbcPayLogger)


def init_logging(conf_path: Union[str, PathLike], override_log_level: Optional[str] = None):
    """
    Configures the python logging module from a dictConfig style YAML file.

    :param conf_path: path to the logging configuration file, e.g. conf/tbcpay_logs.yml
    :param override_log_level: when given, replaces the level of every logger declared in the file
    """
    yaml_parser: YAML = YAML()
    with open(conf_path) as fd:
        yml_source: str = fd.read()
    io_stream: io.StringIO = io.StringIO(yml_source)
    config_dict: Dict = yaml_parser.load(io_stream)
    if override_log_level is not None and "loggers" in config_dict:
        for logger in config_dict["loggers"]:
            config_dict["loggers"][logger]["level"] = override_log_level
    logging.config.dictConfig(config_dict)


__all__ = [
    "TbcPayLogger",
    "NETWORK",
    "init_logging",
]
