# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import sys
from typing import Any

import uvicorn

import capycra
from capycra.common.print import print_red, print_text
from capycra.main.result_codes import ResultCode
from capycra.rest.app import create_app
from capycra.rest.settings import DEFAULT_BASE_PATH, DEFAULT_HOST, DEFAULT_PORT, ServiceSettings


def show_help() -> None:
    print("usage: CaPyCRA serve [-h] [-url SW360_URL] [-host HOST] [-port PORT] [-base BASE_PATH]")
    print("")
    print("optional arguments:")
    print("    -h, --help            show this help message and exit")
    print("    -url SW360_URL        SW360 server the requests are forwarded to")
    print("    -host HOST            host name or address to listen on (default: " + DEFAULT_HOST + ")")
    print("    -port PORT            port to listen on (default: " + str(DEFAULT_PORT) + ")")
    print("    -base BASE_PATH       base path of the REST API (default: " + DEFAULT_BASE_PATH + ")")
    print("    -public-url URL       external URL of the REST API, used for links")
    print("    -X                    enable debug output")


def run_serve_command(args: Any) -> None:
    command = args.command[0].lower()
    if command != "serve":
        return

    print_text(
        "\n" + capycra.get_app_signature() +
        " - Clearing request REST service\n")

    if args.help:
        show_help()
        return

    settings = ServiceSettings.from_args(args)
    if not settings.sw360_url:
        print_red("  No SW360 server URL specified!")
        sys.exit(ResultCode.RESULT_ERROR_ACCESSING_SW360)

    print_text("  Forwarding to " + settings.sw360_url)
    print_text("  Listening on http://{}:{}{}".format(settings.host, settings.port, settings.base_path))

    log_level = "debug" if args.debug else "info"
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=log_level)
