"""
Validator functions used by the tbcpay config maps. Each one takes the raw value and returns an error message,
or None when the value is valid.
"""

import ipaddress
from typing import Optional


def validate_ip_address(value: str) -> Optional[str]:
    """
    The gateway accepts a client IP address of up to 15 characters
    """
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return f"{value} is not a valid IP address."
    if len(value) > 15:
        return f"{value} is longer than 15 characters."


def validate_timeout(value: Optional[float]) -> Optional[str]:
    if value is not None and value <= 0:
        return f"{value} must be a positive number of seconds."
