# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import json
from typing import Any, Dict

from capycra.main.exceptions import CaPyCraException


def write_json_to_file(data: Dict[str, Any], filename: str) -> None:
    """Write the data a JSON file"""
    try:
        with open(filename, "w", encoding="utf-8") as outfile:
            json.dump(data, outfile, indent=2, separators=(',', ': '))
    except OSError as exp:
        raise CaPyCraException("Error writing JSON file: " + str(exp))

