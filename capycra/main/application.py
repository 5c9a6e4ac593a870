# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Module containing the application logic for CaPyCRA."""

import sys
import time
from typing import Any, List, Optional

import capycra
from capycra.clearing import handle_clearing
from capycra.common.print import print_red
from capycra.main import options
from capycra.main.result_codes import ResultCode
from capycra.rest import serve

LOG = capycra.get_logger(__name__)

DEBUG_LOGGING = False


class Application(object):
    def __init__(self, program: str = "CaPyCRA", version: str = capycra.get_app_version()) -> None:
        """Initialize our application."""

        #: The timestamp when the Application instance was instantiated.
        self.start_time = time.time()
        #: The name of the program being run
        self.program = program
        #: The version of the program being run
        self.version = version

        #: The user-supplied options parsed into an instance of
        #: :class:`argparse.Namespace`
        self.options: Any = None

    def check_for_version_display(self, argv: List[str]) -> bool:
        """Check for --version option"""
        for arg in argv:
            if arg == "--version":
                print(
                    "\n" + capycra.APP_NAME +
                    " - SW360 Clearing Request Access\n")
                print("version", capycra.get_app_version())
                return True

        return False

    def check_for_global_help(self, argv: List[str]) -> bool:
        """Check for -h option without any command"""
        if len(argv) != 1:
            # it must be a single help parameter
            return False

        return argv[0] in ("-h", "--help")

    def has_debug_switch(self, argv: List[str]) -> bool:
        for arg in argv:
            if arg.lower() == "-x":
                return True

        return False

    def initialize(self, argv: List[str]) -> None:
        if self.has_debug_switch(argv):
            capycra.configure_logging(2)
            global DEBUG_LOGGING
            DEBUG_LOGGING = True
        else:
            capycra.configure_logging(1)

    def emit_exit_code(self, system_exit_exception: Optional[SystemExit]) -> None:
        if system_exit_exception is None:
            if self.options and self.options.ex:
                print("Exit code = 0")
            return

        if isinstance(system_exit_exception.code, str):
            print(system_exit_exception.code)

        if isinstance(system_exit_exception.code, int):
            if self.options and self.options.ex:
                print("Exit code =", system_exit_exception.code)
            sys.exit(system_exit_exception.code)

        if self.options and self.options.ex:
            print("Exit code = 1")
        sys.exit(ResultCode.RESULT_GENERAL_ERROR)

    def _run(self, argv: List[str]) -> None:
        self.initialize(argv)

        cmdline = options.CommandlineSupport()

        # --version
        if self.check_for_version_display(argv):
            return

        # --help / -h
        if self.check_for_global_help(argv):
            cmdline.parser.print_help()
            return

        if len(argv) < 1:
            LOG.error("No command specified!")
            cmdline.parser.print_help()
            return

        self.options = cmdline.process_commandline(argv)

        command = self.options.command[0].lower()
        if command == "serve":
            serve.run_serve_command(self.options)
        elif command == "clearingrequest":
            handle_clearing.run_clearing_request_command(self.options)
        else:
            print_red("Unknown command: " + command)
            sys.exit(ResultCode.RESULT_COMMAND_ERROR)

    def run(self, argv: List[str]) -> None:
        """Run our application.
        This method will also handle KeyboardInterrupt exceptions for the
        entirety of the CaPyCRA application.
        """

        system_exit_exception = None
        try:
            self._run(argv)
        except KeyboardInterrupt:
            print("... stopped")
            LOG.critical("Caught keyboard interrupt from user")
        except SystemExit as sysex:
            system_exit_exception = sysex

        self.emit_exit_code(system_exit_exception)
