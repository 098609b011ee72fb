from typing import Any, Dict, Optional

from tbcpay.connector.tbc import tbc_constants as CONSTANTS


def build_command_params(command: str, config: Optional[Any], client_ip_addr: Optional[str]) -> Dict[str, Any]:
    """
    Builds the parameters of a gateway command from its template.

    The key set depends on the command code only. Template fields the config does not provide are kept with a
    None value, and the config fields outside the template are ignored.

    :param command: the one letter command code
    :param config: the operation configuration, None when the caller gave none
    :param client_ip_addr: the client IP address of the merchant
    :returns: the parameters in the order the gateway documents them
    """
    if command not in CONSTANTS.COMMAND_TEMPLATES:
        raise ValueError(f"Unsupported gateway command {command!r}")
    fixed_fields = CONSTANTS.FIXED_FIELDS.get(command, {})
    params: Dict[str, Any] = {}
    for field_name in CONSTANTS.COMMAND_TEMPLATES[command]:
        if field_name == "command":
            params[field_name] = command
        elif field_name == CONSTANTS.CLIENT_IP_ADDR_FIELD:
            params[field_name] = client_ip_addr
        elif field_name in fixed_fields:
            params[field_name] = fixed_fields[field_name]
        else:
            params[field_name] = getattr(config, field_name, None)
    return params


def encode_form(params: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """
    Converts command parameters into form fields. Absent values are sent as empty strings.
    """
    return {key: "" if value is None else str(value) for key, value in (params or {}).items()}


def parse_response_fields(body: str) -> Dict[str, str]:
    """
    Splits a gateway response body made of "KEY: value" lines into a dictionary, e.g.
    "RESULT: OK\\nRESULT_CODE: 000" -> {"RESULT": "OK", "RESULT_CODE": "000"}.
    Lines without a separator are skipped.
    """
    fields: Dict[str, str] = {}
    for line in body.splitlines():
        key, separator, value = line.partition(":")
        if separator and key.strip():
            fields[key.strip()] = value.strip()
    return fields
