# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import os
from unittest.mock import patch

from capycra.main.result_codes import ResultCode
from capycra.rest.serve import run_serve_command
from tests.test_base import AppArguments, TestBase


class TestServe(TestBase):
    def test_show_help(self) -> None:
        args = AppArguments()
        args.command = ["serve"]
        args.help = True

        out = self.capture_stdout(run_serve_command, args)
        self.assertTrue("usage: CaPyCRA serve" in out)

    def test_no_sw360_url(self) -> None:
        args = AppArguments()
        args.command = ["serve"]

        old_url = os.environ.pop("SW360ServerUrl", None)
        try:
            self.capture_stdout(run_serve_command, args)
            self.assertTrue(False, "Failed to report missing URL")
        except SystemExit as ex:
            self.assertEqual(ResultCode.RESULT_ERROR_ACCESSING_SW360, ex.code)
        finally:
            if old_url:
                os.environ["SW360ServerUrl"] = old_url

    @patch("capycra.rest.serve.uvicorn.run")
    def test_serve(self, run_mock) -> None:  # type: ignore
        args = AppArguments()
        args.command = ["serve"]
        args.sw360_url = self.MYURL
        args.port = 9090
        args.base_path = "/cra"

        out = self.capture_stdout(run_serve_command, args)

        self.assertTrue("Listening on http://127.0.0.1:9090/cra" in out)
        run_mock.assert_called_once()
        app = run_mock.call_args[0][0]
        self.assertEqual("/cra", app.state.settings.base_path)
        self.assertEqual(9090, run_mock.call_args[1]["port"])
        self.assertEqual("info", run_mock.call_args[1]["log_level"])
