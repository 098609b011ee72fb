from typing import Any, Dict, Tuple

DEFAULT_DOMAIN = "securepay.ufc.ge"

SUBMIT_URL = f"https://{DEFAULT_DOMAIN}:18443/ecomm2/MerchantHandler"

# Command codes
SMS_START_TRANSACTION = "v"
DMS_START_AUTHORIZATION = "a"
DMS_MAKE_TRANSACTION = "t"
GET_TRANSACTION_RESULT = "c"
REVERSE_TRANSACTION = "r"
REFUND_TRANSACTION = "k"
CREDIT_TRANSACTION = "g"
CLOSE_DAY = "b"
SMS_START_TRANSACTION_WITH_SUBSCRIPTION = "z"
DMS_START_AUTHORIZATION_WITH_SUBSCRIPTION = "d"
SUBSCRIBE_WITHOUT_FIRST_PAYMENT = "p"
EXECUTE_SUBSCRIPTION_PAYMENT = "e"

# Message types
MSG_TYPE_SMS = "SMS"
MSG_TYPE_DMS = "DMS"
MSG_TYPE_AUTH = "AUTH"

# Marks a command as the one generating a regular payment (perspayee) record
PERSPAYEE_GEN = 1

CLIENT_IP_ADDR_FIELD = "client_ip_addr"

_REGISTRATION_FIELDS = (
    "command", "amount", "currency", CLIENT_IP_ADDR_FIELD, "description", "language", "biller", "msg_type",
)
_SUBSCRIPTION_FIELDS = (
    "command", "amount", "currency", CLIENT_IP_ADDR_FIELD, "language", "description",
    "biller_client_id", "perspayee_expiry", "perspayee_gen", "msg_type",
)

# Every field the gateway expects for a command, in the order it is sent. A field missing from a template
# is never sent for that command, a field present in a template is always sent.
COMMAND_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    SMS_START_TRANSACTION: _REGISTRATION_FIELDS,
    DMS_START_AUTHORIZATION: _REGISTRATION_FIELDS,
    DMS_MAKE_TRANSACTION: (
        "command", "trans_id", "amount", "currency", CLIENT_IP_ADDR_FIELD, "description", "language", "msg_type",
    ),
    GET_TRANSACTION_RESULT: ("command", "trans_id", CLIENT_IP_ADDR_FIELD),
    REVERSE_TRANSACTION: ("command", "trans_id", "amount", "suspected_fraud"),
    REFUND_TRANSACTION: ("command", "trans_id", "amount"),
    CREDIT_TRANSACTION: ("command", "trans_id", "amount"),
    CLOSE_DAY: ("command",),
    SMS_START_TRANSACTION_WITH_SUBSCRIPTION: _SUBSCRIPTION_FIELDS,
    DMS_START_AUTHORIZATION_WITH_SUBSCRIPTION: _SUBSCRIPTION_FIELDS,
    SUBSCRIBE_WITHOUT_FIRST_PAYMENT: (
        "command", "currency", CLIENT_IP_ADDR_FIELD, "language", "description",
        "biller_client_id", "perspayee_expiry", "perspayee_gen", "msg_type",
    ),
    EXECUTE_SUBSCRIPTION_PAYMENT: (
        "command", "amount", "currency", CLIENT_IP_ADDR_FIELD, "description", "biller_client_id",
    ),
}

# Values that do not depend on the caller
FIXED_FIELDS: Dict[str, Dict[str, Any]] = {
    SMS_START_TRANSACTION: {"msg_type": MSG_TYPE_SMS},
    DMS_START_AUTHORIZATION: {"msg_type": MSG_TYPE_DMS},
    DMS_MAKE_TRANSACTION: {"msg_type": MSG_TYPE_DMS},
    SMS_START_TRANSACTION_WITH_SUBSCRIPTION: {"perspayee_gen": PERSPAYEE_GEN, "msg_type": MSG_TYPE_SMS},
    DMS_START_AUTHORIZATION_WITH_SUBSCRIPTION: {"perspayee_gen": PERSPAYEE_GEN, "msg_type": MSG_TYPE_DMS},
    SUBSCRIBE_WITHOUT_FIRST_PAYMENT: {"perspayee_gen": PERSPAYEE_GEN, "msg_type": MSG_TYPE_AUTH},
}
