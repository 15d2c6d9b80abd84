import logging
import unittest
from unittest import mock

from apps.common.logger import AppLogger, get_logger


class AppLoggerTests(unittest.TestCase):
    def setUp(self):
        self.stdlib = mock.Mock(spec=logging.Logger)
        self.stdlib.isEnabledFor.return_value = True
        self.log = AppLogger("tests", _logger=self.stdlib)

    def test_bind_merges_context_without_touching_parent(self):
        child = self.log.bind(component="carts").bind(layer="service")
        self.assertEqual(child.context, {"component": "carts", "layer": "service"})
        self.assertEqual(self.log.context, {})

    def test_message_carries_key_value_suffix(self):
        self.log.bind(component="carts").info("Cart read", user_id=7)
        level, message = self.stdlib.log.call_args[0]
        self.assertEqual(level, logging.INFO)
        self.assertEqual(message, "Cart read | component=carts user_id=7")

    def test_non_scalar_values_are_repr(self):
        self.log.warning("Failed", failing=["db"])
        _, message = self.stdlib.log.call_args[0]
        self.assertEqual(message, "Failed | failing=['db']")

    def test_exception_attaches_traceback(self):
        self.log.exception("Boom")
        self.assertTrue(self.stdlib.log.call_args[1]["exc_info"])

    def test_disabled_level_skips_formatting(self):
        self.stdlib.isEnabledFor.return_value = False
        self.log.debug("Quiet", value=object())
        self.stdlib.log.assert_not_called()

    def test_get_logger_accepts_initial_context(self):
        log = get_logger("tests", component="api")
        self.assertEqual(log.context, {"component": "api"})
