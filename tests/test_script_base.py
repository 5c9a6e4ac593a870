# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import os

import responses

from capycra.common.script_base import ScriptBase
from capycra.main.exceptions import (
    AuthenticationError,
    CaPyCraException,
    InvalidArgumentError,
    NotFoundError,
    RequestProcessingError,
)
from capycra.main.result_codes import ResultCode
from tests.test_base import TestBase


class TestScriptBase(TestBase):
    def test_login_no_url(self) -> None:
        sut = ScriptBase()

        old_url = os.environ.pop("SW360ServerUrl", None)
        try:
            sut.login(token=self.MYTOKEN)
            self.assertTrue(False, "Failed to report missing URL")
        except SystemExit as ex:
            self.assertEqual(ResultCode.RESULT_ERROR_ACCESSING_SW360, ex.code)
        finally:
            if old_url:
                os.environ["SW360ServerUrl"] = old_url

    @responses.activate
    def test_login(self) -> None:
        sut = ScriptBase()
        self.add_login_response()

        self.assertTrue(sut.login(token=self.MYTOKEN, url=self.MYURL.rstrip("/")))
        self.assertIsNotNone(sut.client)
        self.assertEqual(self.MYURL, sut.sw360_url)

        api = sut.create_access_api()
        self.assertEqual(self.MYURL + "resource/api/", api.links.root())

    def test_create_access_api_without_login(self) -> None:
        sut = ScriptBase()

        try:
            sut.create_access_api()
            self.assertTrue(False, "Failed to report missing client")
        except SystemExit as ex:
            self.assertEqual(ResultCode.RESULT_ERROR_ACCESSING_SW360, ex.code)

    def test_exit_on_error(self) -> None:
        expected = [
            (NotFoundError("x"), ResultCode.RESULT_CLEARING_REQUEST_NOT_FOUND),
            (InvalidArgumentError("x"), ResultCode.RESULT_INVALID_ARGUMENT),
            (AuthenticationError("x"), ResultCode.RESULT_AUTH_ERROR),
            (RequestProcessingError("x"), ResultCode.RESULT_ERROR_ACCESSING_SW360),
            (CaPyCraException("x"), ResultCode.RESULT_ERROR_ACCESSING_SW360),
        ]
        for ex, code in expected:
            try:
                self.capture_stdout(ScriptBase.exit_on_error, ex)
                self.assertTrue(False, "We must not arrive here")
            except SystemExit as sysex:
                self.assertEqual(code, sysex.code)

    def test_write_output_error(self) -> None:
        try:
            self.capture_stdout(ScriptBase.write_output, {"a": 1}, os.path.join("no_such_dir", "x", "out.json"))
            self.assertTrue(False, "We must not arrive here")
        except SystemExit as sysex:
            self.assertEqual(ResultCode.RESULT_ERROR_WRITING_FILE, sysex.code)
