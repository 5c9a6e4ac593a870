# -------------------------------------------------------------------------------
# Copyright 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

class ResultCode(object):
    # application result codes

    # default
    RESULT_OPERATION_SUCCEEDED = 0

    # general errors as defined in https://tldp.org/LDP/abs/html/exitcodes.html
    RESULT_GENERAL_ERROR = 1

    # predefined errors from /usr/include/sysexits.h
    RESULT_COMMAND_ERROR = 64  # command was used incorrectly
    RESULT_INVALID_ARGUMENT = 65  # input data was incorrect
    RESULT_ERROR_WRITING_FILE = 73  # output file cannot be created
    RESULT_AUTH_ERROR = 77  # insufficient permission to perform some operation, SW360 login failed

    # use 80-113 for our exit codes, see https://tldp.org/LDP/abs/html/exitcodes.html

    # custom result codes
    RESULT_CLEARING_REQUEST_NOT_FOUND = 94
    RESULT_ERROR_ACCESSING_SW360 = 95
