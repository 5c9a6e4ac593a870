# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Exceptions for CaPyCRA.

Every exception carries the HTTP status code it is reported with."""


class CaPyCraException(Exception):
    status_code = 500
    reason = "Internal Server Error"

    def __init__(self, msg: str = "") -> None:
        super().__init__(msg)
        self.message = msg


class NotFoundError(CaPyCraException):
    """The requested item does not exist or is not visible to the caller."""
    status_code = 404
    reason = "Not Found"


class InvalidArgumentError(CaPyCraException):
    """A request parameter has an invalid value."""
    status_code = 400
    reason = "Bad Request"


class AuthenticationError(CaPyCraException):
    """The caller could not be identified."""
    status_code = 401
    reason = "Unauthorized"


class RequestProcessingError(CaPyCraException):
    """Any other failure while processing a request."""
    status_code = 500
    reason = "Internal Server Error"
