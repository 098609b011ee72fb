import unittest

from tbcpay.connector.tbc import tbc_constants as CONSTANTS, tbc_web_utils as web_utils
from tbcpay.connector.tbc.tbc_data_types import (
    DmsCaptureConfig,
    ReversalConfig,
    SubscriptionConfig,
    SubscriptionWithoutPaymentConfig,
    TransactionConfig,
)


class TbcWebUtilsTests(unittest.TestCase):
    client_ip_addr = "192.168.100.1"

    def test_build_params_for_sms_start_transaction(self):
        config = TransactionConfig(amount=100, currency="981", description="order-1", language="EN", biller="Shop")

        params = web_utils.build_command_params(CONSTANTS.SMS_START_TRANSACTION, config, self.client_ip_addr)

        self.assertEqual(
            {
                "command": "v",
                "amount": 100,
                "currency": "981",
                "client_ip_addr": self.client_ip_addr,
                "description": "order-1",
                "language": "EN",
                "biller": "Shop",
                "msg_type": "SMS",
            },
            params,
        )
        self.assertEqual(list(CONSTANTS.COMMAND_TEMPLATES["v"]), list(params.keys()))

    def test_build_params_without_config_keeps_every_template_field(self):
        for command, template in CONSTANTS.COMMAND_TEMPLATES.items():
            params = web_utils.build_command_params(command, None, self.client_ip_addr)

            self.assertEqual(set(template), set(params.keys()))
            self.assertEqual(command, params["command"])

    def test_build_params_ignores_fields_outside_the_template(self):
        config = TransactionConfig(amount=100, currency="981", biller="Shop")

        params = web_utils.build_command_params(CONSTANTS.DMS_MAKE_TRANSACTION, config, self.client_ip_addr)

        self.assertNotIn("biller", params)
        self.assertIsNone(params["trans_id"])
        self.assertEqual(100, params["amount"])

    def test_build_params_uses_fixed_values_over_config(self):
        config = SubscriptionConfig(amount=100, biller_client_id="123", perspayee_expiry="0122")

        params = web_utils.build_command_params(
            CONSTANTS.DMS_START_AUTHORIZATION_WITH_SUBSCRIPTION, config, self.client_ip_addr
        )

        self.assertEqual(1, params["perspayee_gen"])
        self.assertEqual("DMS", params["msg_type"])
        self.assertEqual("123", params["biller_client_id"])
        self.assertEqual("0122", params["perspayee_expiry"])

    def test_build_params_for_subscription_without_payment_has_no_amount(self):
        params = web_utils.build_command_params(
            CONSTANTS.SUBSCRIBE_WITHOUT_FIRST_PAYMENT, SubscriptionWithoutPaymentConfig(currency="981"), "10.0.0.1"
        )

        self.assertNotIn("amount", params)
        self.assertEqual("AUTH", params["msg_type"])
        self.assertEqual("10.0.0.1", params["client_ip_addr"])

    def test_build_params_for_reversal_does_not_send_client_ip(self):
        params = web_utils.build_command_params(
            CONSTANTS.REVERSE_TRANSACTION, ReversalConfig(trans_id="1"), self.client_ip_addr
        )

        self.assertEqual({"command": "r", "trans_id": "1", "amount": "", "suspected_fraud": ""}, params)

    def test_build_params_for_close_day(self):
        config = DmsCaptureConfig(trans_id="1", amount=100)

        params = web_utils.build_command_params(CONSTANTS.CLOSE_DAY, config, self.client_ip_addr)

        self.assertEqual({"command": "b"}, params)

    def test_build_params_for_unknown_command_raises(self):
        with self.assertRaises(ValueError):
            web_utils.build_command_params("x", None, self.client_ip_addr)

    def test_command_codes_are_unique(self):
        self.assertEqual(12, len(CONSTANTS.COMMAND_TEMPLATES))
        for command, template in CONSTANTS.COMMAND_TEMPLATES.items():
            self.assertEqual("command", template[0])
            self.assertEqual(len(template), len(set(template)))

    def test_encode_form(self):
        form = web_utils.encode_form({"command": "v", "amount": 100, "currency": None, "perspayee_gen": 1})

        self.assertEqual({"command": "v", "amount": "100", "currency": "", "perspayee_gen": "1"}, form)
        self.assertEqual({}, web_utils.encode_form(None))

    def test_parse_response_fields(self):
        body = "RESULT: OK\nRESULT_CODE: 000\n3DSECURE: AUTHENTICATED\nRRN: 123456789012\n\ngarbage line\n"

        fields = web_utils.parse_response_fields(body)

        self.assertEqual(
            {"RESULT": "OK", "RESULT_CODE": "000", "3DSECURE": "AUTHENTICATED", "RRN": "123456789012"},
            fields,
        )

    def test_parse_response_fields_keeps_error_lines(self):
        fields = web_utils.parse_response_fields("error: wrong transaction id: abc")

        self.assertEqual({"error": "wrong transaction id: abc"}, fields)

    def test_parse_response_fields_keeps_base64_padding(self):
        fields = web_utils.parse_response_fields("TRANSACTION_ID: rDuBaXD2zyE5cRZwjhl6BvNu0Ns=\n")

        self.assertEqual("rDuBaXD2zyE5cRZwjhl6BvNu0Ns=", fields["TRANSACTION_ID"])
