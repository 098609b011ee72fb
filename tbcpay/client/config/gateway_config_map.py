from typing import Optional

from pydantic import Field, SecretStr, field_validator

from tbcpay.client.config.config_data_types import BaseClientModel
from tbcpay.client.config.config_validators import validate_ip_address, validate_timeout
from tbcpay.connector.tbc import tbc_constants as CONSTANTS


class TbcGatewayConfigMap(BaseClientModel):
    cert_path: str = Field(default=...)
    cert_pass: SecretStr = Field(default=SecretStr(""))
    client_ip_addr: str = Field(default=...)
    submit_url: str = Field(default=CONSTANTS.SUBMIT_URL)
    timeout: Optional[float] = Field(default=None)

    @field_validator("cert_pass", mode="before")
    @classmethod
    def validate_cert_pass(cls, v):
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("client_ip_addr", mode="before")
    @classmethod
    def validate_client_ip_addr(cls, v: str):
        v = str(v).strip()
        ret = validate_ip_address(v)
        if ret is not None:
            raise ValueError(ret)
        return v

    @field_validator("timeout")
    @classmethod
    def validate_request_timeout(cls, v: Optional[float]):
        ret = validate_timeout(v)
        if ret is not None:
            raise ValueError(ret)
        return v
