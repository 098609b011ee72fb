from tbcpay.connector.tbc.tbc_payment_gateway import TbcPaymentGateway
from tbcpay.exceptions import GatewayError, TbcPayBaseException, TransportError

__all__ = [
    "TbcPaymentGateway",
    "TbcPayBaseException",
    "TransportError",
    "GatewayError",
]
