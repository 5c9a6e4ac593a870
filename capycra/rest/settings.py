# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import os
from typing import Any

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8090
DEFAULT_BASE_PATH = "/api"


class ServiceSettings:
    """Settings of the clearing request service."""
    def __init__(self, sw360_url: str = "", host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                 base_path: str = DEFAULT_BASE_PATH, public_url: str = "") -> None:
        self.sw360_url = sw360_url or os.environ.get("SW360ServerUrl", "")
        self.host = host
        self.port = port
        self.base_path = self.normalize_base_path(base_path)
        self.public_url = public_url

    @staticmethod
    def normalize_base_path(base_path: str) -> str:
        if not base_path or base_path == "/":
            return ""
        if not base_path.startswith("/"):
            base_path = "/" + base_path
        return base_path.rstrip("/")

    @classmethod
    def from_args(cls, args: Any) -> "ServiceSettings":
        """Create the settings from the command line arguments."""
        return cls(
            sw360_url=args.sw360_url or "",
            host=args.host or DEFAULT_HOST,
            port=int(args.port or DEFAULT_PORT),
            base_path=args.base_path if args.base_path is not None else DEFAULT_BASE_PATH,
            public_url=args.public_url or "")
