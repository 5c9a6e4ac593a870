# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: (c) 2025 Siemens
# -------------------------------------------------------------------------------

"""Top-level module for CaPyCRA.

This module
- initializes logging for the clearing request service
- tracks the version of the package
- provides a way to configure logging for the service and the command-line tool
"""

import importlib.metadata
import logging
import sys
from typing import Any

import tomli
from colorama import Fore, Style, init

APP_NAME = "CaPyCRA"
VERBOSITY_LEVEL = 1


def is_debug_logging_enabled() -> bool:
    return VERBOSITY_LEVEL > 1


def _get_project_meta() -> Any:
    """Read version information from the project configuration file."""
    try:
        with open('pyproject.toml', mode='rb') as pyproject:
            return tomli.load(pyproject)['project']
    except Exception:
        # ignore all errors
        pass


def get_app_version() -> str:
    """Get the version string of this application"""
    version = ""
    try:
        # this will only work when the package has been installed
        version = importlib.metadata.version("capycra")
    except importlib.metadata.PackageNotFoundError:
        pass

    if not version:
        pkg_meta = _get_project_meta()
        if pkg_meta and 'version' in pkg_meta:
            version = str(pkg_meta['version'])

    if not version:
        version = "0.0.0-no-version"

    return version


def get_app_signature() -> str:
    """Get the signature of this application."""
    version = get_app_version()
    return f"{APP_NAME}, {version}"


_VERBOSITY_TO_LOG_LEVEL = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}

init()


class ConsoleHandler(logging.Handler):
    """Handler that write to stderr for errors and warnings and to stdout
    for other logging records."""
    def emit(self, record: logging.LogRecord) -> None:
        """Emit a record."""
        try:
            msg = self.format(record)
            if record.levelno >= logging.WARNING:
                sys.stderr.write(msg + "\n")
            if record.levelno < logging.ERROR:
                print(msg)
        except Exception:
            self.handleError(record)


class ColorFormatter(logging.Formatter):
    """
    A logging formatter for color console output.
    Critical messages and errors are displayed in red.
    Warnings are displayed in yellow.
    Infos are displayed in white.
    Debug messages are displayed in blue.
    """
    def __init__(self, verbosity: int) -> None:
        super().__init__()
        self.fmt = "%(message)s"
        if verbosity > 1:
            self.fmt = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"

    def get_color_format(self, levelno: int, fmt: str) -> Any:
        if levelno >= logging.ERROR:
            color = Fore.LIGHTRED_EX
        elif levelno >= logging.WARNING:
            color = Fore.LIGHTYELLOW_EX
        elif levelno >= logging.INFO:
            color = Fore.LIGHTWHITE_EX
        else:
            color = Fore.LIGHTBLUE_EX

        return color + fmt + Style.RESET_ALL

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.get_color_format(record.levelno, self.fmt)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


class ColoredLogger(logging.Logger):
    """
    A color console logger that uses ColorFormatter
    to display colored log messages and uses ConsoleHandler
    to output critical messages, errors and warnings to stderr.
    Infos and debug messages will be sent to stdout.
    """
    def __init__(self, name: str):
        logging.Logger.__init__(self, name, logging.DEBUG)

        self.propagate = False
        self.setVerbosity(1)

    def setVerbosity(self, value: int) -> None:
        console = ConsoleHandler()
        console.setFormatter(ColorFormatter(value))
        self.handlers.clear()
        self.addHandler(console)


def _clamp_verbosity(verbosity: int) -> int:
    return max(0, min(verbosity, max(_VERBOSITY_TO_LOG_LEVEL)))


def configure_logging(verbosity: int) -> logging.Logger:
    """
    Configure logging.

    :param int verbosity:
        How verbose to be in logging information.
    """
    logging.setLoggerClass(ColoredLogger)

    global VERBOSITY_LEVEL
    VERBOSITY_LEVEL = _clamp_verbosity(verbosity)

    log_level = _VERBOSITY_TO_LOG_LEVEL[VERBOSITY_LEVEL]
    logging.basicConfig(level=log_level)

    logger = logging.getLogger(__name__)
    logger.setVerbosity(VERBOSITY_LEVEL)  # type: ignore
    logger.setLevel(log_level)

    global LOG
    LOG = logger

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get one of our colored loggers for the specified name."""
    logger = logging.getLogger(name)
    if isinstance(logger, ColoredLogger):
        logger.setVerbosity(VERBOSITY_LEVEL)
    log_level = _VERBOSITY_TO_LOG_LEVEL[VERBOSITY_LEVEL]
    logger.setLevel(log_level)
    return logger


# Initialize logging
LOG = configure_logging(1)
