#!/usr/bin/env python

import os
import re
import ssl
import tempfile
from typing import Optional, Union

from tbcpay.exceptions import TransportError

CertificateSource = Union[str, bytes, os.PathLike]

PEM_CERTIFICATE_PATTERN = re.compile(rb"-----BEGIN CERTIFICATE-----.+?-----END CERTIFICATE-----", re.DOTALL)


def read_certificate(source: CertificateSource) -> bytes:
    """
    Returns the PEM bytes of the merchant certificate. Raw bytes are returned as they are, a path is read from disk.
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    try:
        with open(source, "rb") as fd:
            return fd.read()
    except (OSError, TypeError) as e:
        raise TransportError(f"Unable to read the certificate {source!r}.") from e


def create_mutual_tls_context(cert_data: bytes, passphrase: Optional[str] = None) -> ssl.SSLContext:
    """
    Builds the SSL context used to reach the gateway. The merchant PEM holds the certificate and its private key,
    and the same certificate is trusted as the CA of the gateway's self-signed certificate. Hostname and
    certificate verification stay enabled.

    :param cert_data: PEM bytes holding the certificate and the private key
    :param passphrase: passphrase of the private key
    :returns: the client SSL context
    """
    # bag attributes written by openssl pkcs12 may hold non ASCII text, only the certificates are trusted
    certificate_blocks = PEM_CERTIFICATE_PATTERN.findall(cert_data)
    if not certificate_blocks:
        raise TransportError("Unable to load the certificate: no PEM certificate found.")
    try:
        ca_data = "\n".join(block.decode("ascii") for block in certificate_blocks)
        ssl_ctx = ssl.create_default_context(cadata=ca_data)
        # load_cert_chain only reads from files
        with tempfile.TemporaryDirectory() as tmp_dir:
            cert_file = os.path.join(tmp_dir, "merchant.pem")
            with open(cert_file, "wb") as fd:
                fd.write(cert_data)
            ssl_ctx.load_cert_chain(certfile=cert_file, password=passphrase or "")
    except (ssl.SSLError, ValueError, OSError) as e:
        raise TransportError(f"Unable to load the certificate: {e}") from e
    return ssl_ctx


def load_ssl_context(source: CertificateSource, passphrase: Optional[str] = None) -> ssl.SSLContext:
    return create_mutual_tls_context(read_certificate(source), passphrase)
