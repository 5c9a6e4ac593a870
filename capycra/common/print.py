# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import datetime
from typing import Any

from colorama import Fore, Style

import capycra


def _get_debug_prefix() -> str:
    """Returns a prefix similar to the one from logging."""
    d = datetime.datetime.now()
    ms = d.strftime("%f")[:3]
    return d.strftime("%Y-%m-%d %H:%M:%S,") + ms + ":TEXT:CaPyCRA: "


def _print_colored(color: str, *args: Any, **kwargs: Any) -> None:
    if capycra.is_debug_logging_enabled():
        print(_get_debug_prefix(), end="")
    print(color, end="")
    print(*args, **kwargs, end="")
    print(Style.RESET_ALL)


def print_red(*args: Any, **kwargs: Any) -> None:
    """Print the given text in red color."""
    _print_colored(Fore.LIGHTRED_EX, *args, **kwargs)


def print_yellow(*args: Any, **kwargs: Any) -> None:
    """Print the given text in yellow color."""
    _print_colored(Fore.LIGHTYELLOW_EX, *args, **kwargs)


def print_text(*args: Any, **kwargs: Any) -> None:
    """Print the given text."""
    if capycra.is_debug_logging_enabled():
        print(_get_debug_prefix(), end="")
    print(*args, **kwargs)
