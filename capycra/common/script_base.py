# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""
Base class for the command line commands.
"""

import os
import sys
from typing import Any, Dict, NoReturn, Optional

from sw360 import SW360

from capycra.clearing import sw360_services
from capycra.clearing.access_api import ClearingRequestAccessAPI
from capycra.common.json_support import write_json_to_file
from capycra.common.print import print_red
from capycra.hal.hal_resource import LinkBuilder
from capycra.main.exceptions import (
    AuthenticationError,
    CaPyCraException,
    InvalidArgumentError,
    NotFoundError,
)
from capycra.main.result_codes import ResultCode


class ScriptBase:
    """Base class for the command line commands."""

    def __init__(self) -> None:
        self.client: Optional[SW360] = None
        self.sw360_url = os.environ.get("SW360ServerUrl", None)

    def login(self, token: str = "", url: str = "", oauth2: bool = False) -> bool:
        """Login to SW360"""
        self.sw360_url = os.environ.get("SW360ServerUrl", None)
        sw360_api_token = os.environ.get("SW360ProductionToken", None)

        if token:
            sw360_api_token = token

        if url:
            self.sw360_url = url

        if not self.sw360_url:
            print_red("  No SW360 server URL specified!")
            sys.exit(ResultCode.RESULT_ERROR_ACCESSING_SW360)

        if self.sw360_url[-1] != "/":
            self.sw360_url += "/"

        if not sw360_api_token:
            print_red("  No SW360 API token specified!")
            sys.exit(ResultCode.RESULT_AUTH_ERROR)

        try:
            self.client = sw360_services.login(self.sw360_url, sw360_api_token, oauth2)
        except CaPyCraException as ex:
            self.exit_on_error(ex)

        return True

    def create_access_api(self) -> ClearingRequestAccessAPI:
        """The clearing request access API working on the SW360 we are logged in to."""
        if not self.client:
            print_red("  No client!")
            sys.exit(ResultCode.RESULT_ERROR_ACCESSING_SW360)

        collaborators = sw360_services.Sw360Collaborators(self.client)
        return ClearingRequestAccessAPI(
            collaborators.user_context,
            collaborators.cr_service,
            collaborators.project_service,
            LinkBuilder(str(self.sw360_url) + "resource/api/"))

    @staticmethod
    def exit_on_error(ex: CaPyCraException) -> NoReturn:
        """Show the error and exit with the matching result code."""
        print_red("  " + ex.message)
        if isinstance(ex, NotFoundError):
            sys.exit(ResultCode.RESULT_CLEARING_REQUEST_NOT_FOUND)
        if isinstance(ex, InvalidArgumentError):
            sys.exit(ResultCode.RESULT_INVALID_ARGUMENT)
        if isinstance(ex, AuthenticationError):
            sys.exit(ResultCode.RESULT_AUTH_ERROR)
        sys.exit(ResultCode.RESULT_ERROR_ACCESSING_SW360)

    @staticmethod
    def write_output(data: Dict[str, Any], filename: str) -> None:
        try:
            write_json_to_file(data, filename)
        except CaPyCraException as ex:
            print_red("  " + ex.message)
            sys.exit(ResultCode.RESULT_ERROR_WRITING_FILE)
