"""
Client of the TBC bank card processing gateway (Card Suite Processing RTPS).

There are two types of transaction within this system: SMS and DMS.
SMS is a direct payment, the money is charged in one event.
DMS is delayed and requires two events: the first one blocks the money on the card, the second one takes it,
for example once the product is shipped to the customer.

Every 24 hours the merchant must send a request to the gateway to close the business day.
"""
import logging
import os
from typing import TYPE_CHECKING, Any, Dict, Optional, Type, Union

from tbcpay.connector.tbc import tbc_constants as CONSTANTS
from tbcpay.connector.tbc.tbc_data_types import (
    CreditConfig,
    DmsCaptureConfig,
    RefundConfig,
    ReversalConfig,
    SubscriptionConfig,
    SubscriptionPaymentConfig,
    SubscriptionWithoutPaymentConfig,
    TransactionConfig,
    TransactionResultConfig,
)
from tbcpay.connector.tbc.tbc_web_utils import build_command_params
from tbcpay.core.secure_transport import SecureTransport
from tbcpay.logger import TbcPayLogger

if TYPE_CHECKING:
    from tbcpay.client.config.gateway_config_map import TbcGatewayConfigMap


class TbcPaymentGateway:
    _tpg_logger: Optional[TbcPayLogger] = None

    @classmethod
    def logger(cls) -> TbcPayLogger:
        if cls._tpg_logger is None:
            cls._tpg_logger = logging.getLogger(__name__)
        return cls._tpg_logger

    def __init__(
        self,
        cert: Union[str, bytes, os.PathLike],
        cert_pass: Optional[str],
        client_ip_addr: str,
        submit_url: str = CONSTANTS.SUBMIT_URL,
        timeout: Optional[float] = None,
        transport: Optional[SecureTransport] = None,
    ):
        """
        :param cert: path to the merchant PEM certificate, or its content
        :param cert_pass: certificate passphrase
        :param client_ip_addr: client IP address, mandatory (up to 15 characters)
        :param submit_url: gateway endpoint
        :param timeout: optional total timeout of a request, in seconds
        :param transport: the transport used to reach the gateway, built from the certificate when not given
        """
        self._cert = cert
        self._cert_pass = cert_pass
        self._client_ip_addr = client_ip_addr
        self._transport = transport or SecureTransport(
            cert=cert, cert_pass=cert_pass, submit_url=submit_url, timeout=timeout
        )

    @classmethod
    def from_config_map(cls, config_map: "TbcGatewayConfigMap") -> "TbcPaymentGateway":
        return cls(
            cert=config_map.cert_path,
            cert_pass=config_map.cert_pass.get_secret_value(),
            client_ip_addr=config_map.client_ip_addr,
            submit_url=config_map.submit_url,
            timeout=config_map.timeout,
        )

    @property
    def cert(self) -> Union[str, bytes, os.PathLike]:
        return self._cert

    @property
    def cert_pass(self) -> Optional[str]:
        return self._cert_pass

    @property
    def client_ip_addr(self) -> str:
        return self._client_ip_addr

    @property
    def transport(self) -> SecureTransport:
        return self._transport

    @staticmethod
    def _parse_api_result(result: Any) -> Any:
        return result

    async def _process(self, command: str, config: Optional[Any] = None, config_class: Optional[Type] = None) -> Any:
        if config_class is not None:
            if config is None:
                config = config_class()
            elif not isinstance(config, config_class):
                raise TypeError(f"Command {command} expects a {config_class.__name__}, got {type(config).__name__}.")
        params: Dict[str, Any] = build_command_params(command, config, self._client_ip_addr)
        self.logger().debug(f"Sending command {command} to the gateway.")
        result = await self._transport.send(params)
        return self._parse_api_result(result)

    async def sms_start_transaction(self, config: Optional[TransactionConfig] = None) -> Any:
        """
        Registers an SMS transaction, the simplest form that charges the customer instantly.

        :returns: TRANSACTION_ID - transaction identifier (28 characters in base64 encoding)
                  error          - in case of an error
        """
        return await self._process(CONSTANTS.SMS_START_TRANSACTION, config, TransactionConfig)

    async def dms_start_authorization(self, config: Optional[TransactionConfig] = None) -> Any:
        """
        Registers a DMS authorization. The amount is only blocked, dms_make_transaction charges it later.

        :returns: TRANSACTION_ID or error
        """
        return await self._process(CONSTANTS.DMS_START_AUTHORIZATION, config, TransactionConfig)

    async def dms_make_transaction(self, config: Optional[DmsCaptureConfig] = None) -> Any:
        """
        Executes a DMS transaction.

        :returns: RESULT        - OK: successful transaction, FAILED: failed transaction
                  RESULT_CODE   - transaction result code returned from Card Suite Processing RTPS (3 digits)
                  BRN           - retrieval reference number returned from Card Suite Processing RTPS (12 characters)
                  APPROVAL_CODE - approval code returned from Card Suite Processing RTPS (max 6 characters)
                  CARD_NUMBER   - masked card number
                  error         - in case of an error
        """
        return await self._process(CONSTANTS.DMS_MAKE_TRANSACTION, config, DmsCaptureConfig)

    async def get_transaction_result(self, config: Optional[TransactionResultConfig] = None) -> Any:
        """
        Queries the status of a transaction. Every call is a new request, nothing is cached.

        :returns: RESULT              - OK, FAILED, CREATED, PENDING, DECLINED, REVERSED, AUTOREVERSED or TIMEOUT
                  RESULT_PS           - FINISHED, CANCELLED, RETURNED or ACTIVE, the Payment Server interpretation
                                        (shown only if configured to return ECOMM2 specific details)
                  RESULT_CODE         - transaction result code returned from Card Suite Processing RTPS (3 digits)
                  3DSECURE            - AUTHENTICATED, DECLINED, NOTPARTICIPATED, NO_RANGE, ATTEMPTED, UNAVAILABLE,
                                        ERROR, SYSERROR or UNKNOWNSCHEME
                  RRN                 - retrieval reference number returned from Card Suite Processing RTPS
                  APPROVAL_CODE       - approval code returned from Card Suite Processing RTPS (max 6 characters)
                  CARD_NUMBER         - masked card number
                  AAV                 - FAILED when the verification of the AAV hash failed
                  RECC_PMNT_ID        - regular payment identification in Payment Server (if available)
                  RECC_PMNT_EXPIRY    - regular payment expiry date in Payment Server, YYMM (if available)
                  MRCH_TRANSACTION_ID - merchant transaction identifier (if sent on registration)
                  error               - in case of an error
                  warning             - in case of a warning (reserved for future use)
        RESULT_CODE and 3DSECURE are informative only and may be missing. RRN and APPROVAL_CODE appear for
        successful transactions only.
        """
        return await self._process(CONSTANTS.GET_TRANSACTION_RESULT, config, TransactionResultConfig)

    async def reverse_transaction(self, config: Optional[ReversalConfig] = None) -> Any:
        """
        Reverses a transaction, fully when no amount is given.

        :returns: RESULT      - OK: successful reversal, REVERSED: already reversed,
                                FAILED: failed to reverse (transaction status remains as it was)
                  RESULT_CODE - reversal result code returned from Card Suite Processing RTPS (3 digits)
                  error       - in case of an error
        """
        return await self._process(CONSTANTS.REVERSE_TRANSACTION, config, ReversalConfig)

    async def refund_transaction(self, config: Optional[RefundConfig] = None) -> Any:
        """
        Refunds a completed transaction, fully when no amount is given.

        :returns: RESULT          - OK or FAILED
                  RESULT_CODE     - result code returned from Card Suite Processing RTPS (3 digits)
                  REFUND_TRANS_ID - refund transaction identifier, used to get the refund details or to reverse it
                  error           - in case of an error
        """
        return await self._process(CONSTANTS.REFUND_TRANSACTION, config, RefundConfig)

    async def credit_transaction(self, config: Optional[CreditConfig] = None) -> Any:
        """
        :returns: RESULT          - OK or FAILED
                  RESULT_CODE     - result code returned from Card Suite Processing RTPS (3 digits)
                  REFUND_TRANS_ID - credit transaction identifier, used to get the credit details or to reverse it
                  error           - in case of an error
        """
        return await self._process(CONSTANTS.CREDIT_TRANSACTION, config, CreditConfig)

    async def close_day(self) -> Any:
        """
        Closes the business day. Needs to run once every 24 hours: the bank then processes all the successful
        transactions of the day, and for DMS only the confirmed ones.

        :returns: RESULT      - OK or FAILED
                  RESULT_CODE - end of business day code returned from Card Suite Processing RTPS (3 digits)
                  FLD_075     - number of credit reversals (up to 10 digits)
                  FLD_076     - number of debit transactions (up to 10 digits)
                  FLD_087     - total amount of credit reversals (up to 16 digits)
                  FLD_088     - total amount of debit transactions (up to 16 digits)
        The FLD fields are shown only if RESULT_CODE begins with 5.
        """
        return await self._process(CONSTANTS.CLOSE_DAY)

    async def sms_start_transaction_with_subscription(self, config: Optional[SubscriptionConfig] = None) -> Any:
        """
        Registers a regular payment and charges the first one.
        """
        return await self._process(CONSTANTS.SMS_START_TRANSACTION_WITH_SUBSCRIPTION, config, SubscriptionConfig)

    async def dms_start_authorization_with_subscription(self, config: Optional[SubscriptionConfig] = None) -> Any:
        return await self._process(CONSTANTS.DMS_START_AUTHORIZATION_WITH_SUBSCRIPTION, config, SubscriptionConfig)

    async def subscribe_without_first_payment(
        self, config: Optional[SubscriptionWithoutPaymentConfig] = None
    ) -> Any:
        return await self._process(CONSTANTS.SUBSCRIBE_WITHOUT_FIRST_PAYMENT, config, SubscriptionWithoutPaymentConfig)

    async def execute_subscription_payment(self, config: Optional[SubscriptionPaymentConfig] = None) -> Any:
        """
        Every subscription cycle the merchant charges the customer saved under biller_client_id.
        """
        return await self._process(CONSTANTS.EXECUTE_SUBSCRIPTION_PAYMENT, config, SubscriptionPaymentConfig)
