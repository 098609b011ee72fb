from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

Amount = Union[int, str]


@dataclass(frozen=True)
class TransactionConfig:
    """
    Registers an SMS transaction or a DMS authorization.

    :param amount: amount in fractional units, up to 12 digits (100 = 1 GEL)
    :param currency: ISO 4217 numeric currency code, 3 digits (981 = GEL)
    :param description: transaction details, up to 125 characters
    :param language: authorization language identifier, up to 32 characters (EN, GE)
    :param biller: text shown on the account statement, up to 99 latin characters
    """
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    biller: Optional[str] = None


@dataclass(frozen=True)
class DmsCaptureConfig:
    """
    Charges a previously authorized DMS transaction identified by trans_id
    """
    trans_id: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None


@dataclass(frozen=True)
class TransactionResultConfig:
    trans_id: Optional[str] = None


@dataclass(frozen=True)
class ReversalConfig:
    """
    An empty amount reverses the whole transaction. For DMS authorizations only full reversals are
    accepted by the gateway. suspected_fraud should be set to "yes" when the reversal is caused by
    suspected fraud, in which case only full reversals are allowed.
    """
    trans_id: Optional[str] = None
    amount: Amount = ""
    suspected_fraud: str = ""


@dataclass(frozen=True)
class RefundConfig:
    """
    An empty amount refunds the whole transaction
    """
    trans_id: Optional[str] = None
    amount: Amount = ""


@dataclass(frozen=True)
class CreditConfig:
    trans_id: Optional[str] = None
    amount: Optional[Amount] = None


@dataclass(frozen=True)
class SubscriptionConfig:
    """
    Registers a regular payment together with its first charge (SMS) or authorization (DMS).

    :param biller_client_id: subscriber identifier generated by the merchant
    :param perspayee_expiry: expiry of the regular payment in DDMM format, e.g. 0822
    """
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    biller_client_id: Optional[str] = None
    perspayee_expiry: Optional[str] = None


@dataclass(frozen=True)
class SubscriptionWithoutPaymentConfig:
    currency: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    biller_client_id: Optional[str] = None
    perspayee_expiry: Optional[str] = None


@dataclass(frozen=True)
class SubscriptionPaymentConfig:
    """
    Charges the customer registered under biller_client_id for one subscription cycle
    """
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    biller_client_id: Optional[str] = None


class OperationResult(Enum):
    """
    RESULT of capture, refund, credit and close day commands
    """
    OK = "OK"
    FAILED = "FAILED"


class ReversalResult(Enum):
    OK = "OK"
    REVERSED = "REVERSED"  # already reversed
    FAILED = "FAILED"  # transaction status remains as it was


class TransactionResult(Enum):
    """
    RESULT of a transaction status query
    """
    OK = "OK"
    FAILED = "FAILED"
    CREATED = "CREATED"
    PENDING = "PENDING"
    DECLINED = "DECLINED"
    REVERSED = "REVERSED"
    AUTOREVERSED = "AUTOREVERSED"
    TIMEOUT = "TIMEOUT"


class PaymentServerResult(Enum):
    """
    RESULT_PS of a transaction status query, only returned when the merchant is configured for ECOMM2 details
    """
    FINISHED = "FINISHED"
    CANCELLED = "CANCELLED"
    RETURNED = "RETURNED"
    ACTIVE = "ACTIVE"


class ThreeDSecureResult(Enum):
    AUTHENTICATED = "AUTHENTICATED"
    DECLINED = "DECLINED"
    NOTPARTICIPATED = "NOTPARTICIPATED"
    NO_RANGE = "NO_RANGE"
    ATTEMPTED = "ATTEMPTED"
    UNAVAILABLE = "UNAVAILABLE"
    ERROR = "ERROR"
    SYSERROR = "SYSERROR"
    UNKNOWNSCHEME = "UNKNOWNSCHEME"
