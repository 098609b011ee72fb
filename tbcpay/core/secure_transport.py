import asyncio
import logging
import os
from typing import Any, Dict, Optional, Union

import aiohttp

from tbcpay.connector.tbc import tbc_constants as CONSTANTS
from tbcpay.connector.tbc.tbc_web_utils import encode_form
from tbcpay.core.utils.ssl_cert_loader import load_ssl_context
from tbcpay.exceptions import GatewayError, TransportError
from tbcpay.logger import TbcPayLogger


class SecureTransport:
    """
    Sends one form encoded POST per call to the gateway over mutually authenticated TLS.

    The certificate is read again and a new session is opened for every request, so nothing is shared between
    calls and a rotated certificate is used from the next request on.
    """

    _st_logger: Optional[TbcPayLogger] = None

    @classmethod
    def logger(cls) -> TbcPayLogger:
        if cls._st_logger is None:
            cls._st_logger = logging.getLogger(__name__)
        return cls._st_logger

    def __init__(
        self,
        cert: Union[str, bytes, os.PathLike],
        cert_pass: Optional[str],
        submit_url: str = CONSTANTS.SUBMIT_URL,
        timeout: Optional[float] = None,
    ):
        self._cert = cert
        self._cert_pass = cert_pass
        self._submit_url = submit_url
        self._timeout = timeout

    @property
    def submit_url(self) -> str:
        return self._submit_url

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    async def send(self, params: Optional[Dict[str, Any]] = None) -> str:
        """
        Posts the command parameters and waits for the gateway answer.

        :param params: the command parameters
        :returns: the response body, unmodified
        :raises TransportError: the certificate could not be loaded, or the connection failed or timed out
        :raises GatewayError: the gateway answered with a non-2xx HTTP status
        """
        url = self._submit_url
        try:
            ssl_ctx = load_ssl_context(self._cert, self._cert_pass)
        except TransportError:
            self.logger().network(f"Unable to load the certificate used to reach {url}.", exc_info=True)
            raise
        client_timeout = aiohttp.ClientTimeout(total=self._timeout)
        try:
            async with aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(ssl=ssl_ctx), timeout=client_timeout
            ) as client:
                async with client.post(url, data=encode_form(params), allow_redirects=False) as response:
                    status = response.status
                    body = await response.text()
        except asyncio.TimeoutError as e:
            self.logger().network(f"The network call to {url} has timed out.")
            raise TransportError(f"The network call to {url} has timed out.") from e
        except (aiohttp.ClientError, OSError) as e:
            self.logger().network(f"Call to {url} failed.", exc_info=True)
            raise TransportError(f"Call to {url} failed: {e}") from e

        if not 200 <= status < 300:
            self.logger().network(f"The gateway rejected the request to {url} with HTTP status {status}.")
            raise GatewayError(status, body, url)
        return body
