"""
Exceptions used in the tbcpay codebase.
"""
from typing import Optional


class TbcPayBaseException(Exception):
    """
    Most errors raised in tbcpay should inherit this class so we can
    differentiate them from errors that come from dependencies.
    """


class TransportError(TbcPayBaseException):
    """
    The request never got an answer from the gateway: the certificate could not be read, the TLS handshake
    failed, or the network call failed or timed out. The underlying error is always chained as __cause__.
    """


class GatewayError(TbcPayBaseException):
    """
    The gateway answered at the HTTP level but rejected the request with a non-2xx status
    """

    def __init__(self, status: int, body: str, url: Optional[str] = None):
        self.status = status
        self.body = body
        self.url = url
        body_text = "N/A" if "<html" in body else body
        super().__init__(f"Error on POST {url}. HTTP status is {status}. Error: {body_text}")
