# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Argument parser with a help display that also lists the commands."""

import argparse
import textwrap
from typing import Any, Dict, List, Optional


class ArgumentParser(argparse.ArgumentParser):
    """Custom argument parser."""
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.options: List[Dict[str, Any]] = []
        super(ArgumentParser, self).__init__(*args, **kwargs, add_help=False)  # type: ignore
        self.program = {key: kwargs[key] for key in kwargs}
        self.command_help: Optional[str] = None

    def add_command_help(self, command_help: str) -> None:
        self.command_help = command_help

    def add_argument(self, *args: Any, **kwargs: Any) -> Any:
        action = super(ArgumentParser, self).add_argument(*args, **kwargs)
        option: Dict[str, Any] = {"flags": list(args)}
        option.update(kwargs)
        self.options.append(option)
        return action

    @staticmethod
    def _format_flags(option: Dict[str, Any]) -> str:
        flags = []
        for item in option["flags"]:
            if "metavar" in option:
                flags.append("%s %s" % (item, option["metavar"]))
            elif "dest" in option and option.get("action") != "store_true":
                flags.append("%s %s" % (item, option["dest"].upper()))
            else:
                flags.append(item)
        return ", ".join(flags)

    @staticmethod
    def _format_option_help(option: Dict[str, Any]) -> str:
        text = option.get("help", "")
        if "default" in option:
            default = option["default"]
            if isinstance(default, str):
                text += " (default: '%s')" % default
            else:
                text += " (default: %s)" % str(default)
        return text.strip()

    def print_help(self, file: Any = None) -> None:
        wrapper = textwrap.TextWrapper(width=120)

        print("Usage: %s" % self.program.get("usage", self.prog))
        print()

        if "description" in self.program:
            print(self.program["description"])
            print()

        if self.command_help:
            print(self.command_help)
            print()

        print("Options:")
        flags = [self._format_flags(option) for option in self.options]
        maxlen = max([len(f) for f in flags], default=0)
        for option, flag_text in zip(self.options, flags):
            wrapper.initial_indent = ("  %-" + str(maxlen) + "s  ") % flag_text
            wrapper.subsequent_indent = len(wrapper.initial_indent) * " "
            help_text = self._format_option_help(option)
            if help_text:
                print(wrapper.fill(help_text))
            else:
                print(wrapper.initial_indent)
