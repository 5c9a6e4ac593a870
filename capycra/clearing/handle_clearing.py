# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import sys
from typing import Any

import capycra.clearing.show_clearing_request
from capycra.common.print import print_red
from capycra.main.result_codes import ResultCode


def run_clearing_request_command(args: Any) -> None:
    command = args.command[0].lower()
    if command != "clearingrequest":
        return

    if len(args.command) < 2:
        print_red("No subcommand specified!")
        print()

        # display `clearingrequest` related help
        print("clearingrequest - clearing request related sub-commands")
        print("    Show              show a clearing request")
        print("    Project           show the clearing request of a project")
        print("    List              list all clearing requests visible to you")
        print("    Comments          show the comments of a clearing request")
        return

    subcommand = args.command[1].lower()
    if subcommand == "show":
        """Show a clearing request."""
        app = capycra.clearing.show_clearing_request.ShowClearingRequest()
        app.run(args)
        return

    if subcommand == "project":
        """Show the clearing request of a project."""
        app2 = capycra.clearing.show_clearing_request.ShowClearingRequest(by_project=True)
        app2.run(args)
        return

    if subcommand == "list":
        """List all clearing requests visible to the user."""
        app3 = capycra.clearing.show_clearing_request.ListClearingRequests()
        app3.run(args)
        return

    if subcommand == "comments":
        """Show the comments of a clearing request."""
        app4 = capycra.clearing.show_clearing_request.ShowComments()
        app4.run(args)
        return

    print_red("Unknown sub-command: " + subcommand)
    sys.exit(ResultCode.RESULT_COMMAND_ERROR)
