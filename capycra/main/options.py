# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Contains the logic for all of the default options for CaPyCRA."""

import os
from typing import Any, Dict

import tomli

import capycra
from capycra.main.argument_parser import ArgumentParser

LOG = capycra.get_logger(__name__)


class CommandlineSupport():
    CONFIG_FILE_NAME = ".capycra.cfg"
    CONFIG_SECTION = "capycra"

    # common naming mistakes in config files => argument name
    CONFIG_ALIASES = {
        "url": "sw360_url",
        "token": "sw360_token",
        "oa": "oauth2",
        "base": "base_path",
        "public-url": "public_url",
    }

    def __init__(self) -> None:
        custom_prog = capycra.get_app_signature()
        custom_usage = "CaPyCRA command subcommand [options]"
        command_help = """Commands and Sub-Commands
    serve               run the clearing request REST service

    clearingrequest     clearing request specific commands
        Show              show a clearing request
        Project           show the clearing request of a project
        List              list all clearing requests visible to you
        Comments          show the comments of a clearing request

    Note that each command has also its own help display, i.e. if you enter
    `capycra clearingrequest list -h` you will get a help that only shows the options
    for this specific sub-command.
        """
        self.parser = ArgumentParser(
            prog=custom_prog,
            usage=custom_usage,
            description="SW360 Clearing Request Access, version " + capycra.get_app_version())
        self.parser.add_command_help(command_help)

        # store all positional argument in command
        self.parser.add_argument(
            "command",
            nargs="+",
            help="command and subcommand to process")

        self.parser.add_argument(
            "-h",
            "--help",
            help="show a help message and exit",
            action="store_true",
        )

        self.register_options()

    def register_options(self) -> None:
        self.parser.add_argument(
            "-t",
            "--token",
            dest="sw360_token",
            help="use this token for access to SW360",
        )

        self.parser.add_argument(
            "-oa",
            "--oauth2",
            help="this is an oauth2 token",
            action="store_true",
        )

        self.parser.add_argument(
            "-url",
            dest="sw360_url",
            help="use this URL for access to SW360"
        )

        # used by clearingrequest commands
        self.parser.add_argument(
            "-id",
            dest="id",
            help="SW360 id of the clearing request or project"
        )

        # used by clearingrequest list
        self.parser.add_argument(
            "-state",
            dest="state",
            help="only show clearing requests in this state"
        )

        # used by clearingrequest comments
        self.parser.add_argument(
            "-page",
            dest="page",
            type=int,
            help="zero based page index"
        )

        # used by clearingrequest comments
        self.parser.add_argument(
            "-size",
            dest="size",
            type=int,
            help="page size"
        )

        self.parser.add_argument(
            "-o",
            "--outputfile",
            dest="outputfile",
            help="output file to write to",
        )

        # used by serve
        self.parser.add_argument(
            "-host",
            dest="host",
            help="host name or address to listen on"
        )

        # used by serve
        self.parser.add_argument(
            "-port",
            dest="port",
            type=int,
            help="port to listen on"
        )

        # used by serve
        self.parser.add_argument(
            "-base",
            dest="base_path",
            help="base path of the REST API"
        )

        # used by serve
        self.parser.add_argument(
            "-public-url",
            dest="public_url",
            help="external URL of the REST API, used for links"
        )

        self.parser.add_argument(
            "-ex",
            help="show exit code",
            action="store_true",
        )

        self.parser.add_argument(
            "-X",
            dest="debug", action="store_true",
            help="Enable debug output")

    def read_config(self, filename: str = "", config_string: str = "") -> Dict[str, Any]:
        """
        Read configuration from string or config file.
        """

        toml_dict = None
        try:
            if config_string:
                toml_dict = tomli.loads(config_string)
            elif filename:
                with open(filename, "rb") as f:
                    toml_dict = tomli.load(f)
            else:
                if os.path.isfile(self.CONFIG_FILE_NAME):
                    with open(self.CONFIG_FILE_NAME, "rb") as f:
                        toml_dict = tomli.load(f)

            if not toml_dict:
                return {}

            if self.CONFIG_SECTION not in toml_dict:
                return {}

            return toml_dict[self.CONFIG_SECTION]
        except tomli.TOMLDecodeError as tex:
            LOG.warning("Config file has invalid format: " + repr(tex))
        except OSError as ex:
            LOG.warning("Error reading config file: " + repr(ex))

        return {}

    def update_args_from_config(self, args: Any, cfg: Dict[str, Any]) -> Any:
        """Only arguments that have not been given on the command line are updated."""
        for key in cfg:
            args_key = self.CONFIG_ALIASES.get(key, key)
            if hasattr(args, args_key) and not getattr(args, args_key):
                setattr(args, args_key, cfg[key])

        return args

    def process_commandline(self, argv: Any) -> Any:
        """Reads the command line arguments"""
        args = self.parser.parse_args(argv)
        cfg = self.read_config()
        if cfg:
            self.update_args_from_config(args, cfg)

        return args
