# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: (c) 2025 Siemens
# -------------------------------------------------------------------------------

"""Module allowing for ``python -m capycra ...``."""
from capycra.main import cli

cli.main()
