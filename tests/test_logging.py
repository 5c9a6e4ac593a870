# -------------------------------------------------------------------------------
# (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import capycra
from capycra import configure_logging, get_logger
from tests.test_base import TestBase


class TestLogging(TestBase):
    DEBUG_MSG = "Debug message"
    INFO_MSG = "Info message"
    WARING_MSG = "Warning message"
    ERROR_MSG = "Error message"
    CRITICAL_MSG = "Critical message"

    def tearDown(self) -> None:
        configure_logging(1)

    def create_output(self) -> None:
        LOG = configure_logging(2)
        LOG.debug(self.DEBUG_MSG)
        LOG.info(self.INFO_MSG)
        LOG.warning(self.WARING_MSG)
        LOG.error(self.ERROR_MSG)
        LOG.critical(self.CRITICAL_MSG)

    def create_quiet_output(self) -> None:
        LOG = configure_logging(0)
        LOG.debug(self.DEBUG_MSG)
        LOG.info(self.INFO_MSG)
        LOG.warning(self.WARING_MSG)

    def test_error_critical(self) -> None:
        out = self.capture_stderr(self.create_output)
        self.assertTrue(self.CRITICAL_MSG in out)
        self.assertTrue(self.ERROR_MSG in out)
        self.assertTrue(self.WARING_MSG in out)
        self.assertFalse(self.INFO_MSG in out)
        self.assertFalse(self.DEBUG_MSG in out)

    def test_info_debug(self) -> None:
        out = self.capture_stdout(self.create_output)
        self.assertFalse(self.CRITICAL_MSG in out)
        self.assertFalse(self.ERROR_MSG in out)
        self.assertTrue(self.WARING_MSG in out)
        self.assertTrue(self.INFO_MSG in out)
        self.assertTrue(self.DEBUG_MSG in out)

    def test_warnings_only(self) -> None:
        out = self.capture_stdout(self.create_quiet_output)
        self.assertTrue(self.WARING_MSG in out)
        self.assertFalse(self.INFO_MSG in out)
        self.assertFalse(self.DEBUG_MSG in out)

    def test_verbosity_is_clamped(self) -> None:
        configure_logging(7)
        self.assertEqual(2, capycra.VERBOSITY_LEVEL)
        self.assertTrue(capycra.is_debug_logging_enabled())

        configure_logging(-2)
        self.assertEqual(0, capycra.VERBOSITY_LEVEL)
        self.assertFalse(capycra.is_debug_logging_enabled())

    def test_get_logger(self) -> None:
        configure_logging(2)
        logger = get_logger("capycra.test")
        self.assertTrue(logger.isEnabledFor(10))

        configure_logging(1)
        logger = get_logger("capycra.test")
        self.assertFalse(logger.isEnabledFor(10))

    def test_debug_output_has_details(self) -> None:
        out = self.capture_stdout(self.create_output)
        self.assertTrue(":DEBUG:capycra: " + self.DEBUG_MSG in out)

    def test_info_output_is_plain(self) -> None:
        def log_info() -> None:
            configure_logging(1).info(self.INFO_MSG)

        out = self.capture_stdout(log_info)
        self.assertFalse(":INFO:" in out)
        self.assertTrue(self.INFO_MSG in out)
