import io
import logging
from os import PathLike
from typing import Any, Dict, Union

from ruamel.yaml import YAML

from tbcpay.client.config.gateway_config_map import TbcGatewayConfigMap

# Use ruamel.yaml to preserve order and comments in .yml file
yaml_parser = YAML()


def read_yml_file(file_path: Union[str, PathLike]) -> Dict[str, Any]:
    with open(file_path) as fd:
        yml_source: str = fd.read()
    data = yaml_parser.load(io.StringIO(yml_source)) or {}
    return dict(data)


def load_gateway_config_map(file_path: Union[str, PathLike]) -> TbcGatewayConfigMap:
    """
    Reads and validates a gateway configuration file, see conf/conf_tbc_gateway_TEMPLATE.yml
    """
    config_data = read_yml_file(file_path)
    config_map = TbcGatewayConfigMap(**config_data)
    logging.getLogger(__name__).info(f"Loaded gateway configuration from {file_path}.")
    return config_map
