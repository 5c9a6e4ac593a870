# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Per request wiring of the clearing request access API."""

from typing import Optional

from fastapi import Header, Request

from capycra.clearing.access_api import ClearingRequestAccessAPI
from capycra.clearing.sw360_services import Sw360Collaborators, split_authorization_header
from capycra.hal.hal_resource import LinkBuilder
from capycra.rest.settings import ServiceSettings


def get_settings(request: Request) -> ServiceSettings:
    return request.app.state.settings


def get_link_builder(request: Request) -> LinkBuilder:
    settings = get_settings(request)
    if settings.public_url:
        return LinkBuilder(settings.public_url)
    return LinkBuilder(str(request.base_url).rstrip("/") + settings.base_path)


def get_access_api(request: Request, authorization: Optional[str] = Header(None)) -> ClearingRequestAccessAPI:
    """Login to SW360 with the token of the caller."""
    settings = get_settings(request)
    token, oauth2 = split_authorization_header(authorization)
    collaborators = Sw360Collaborators.connect(settings.sw360_url, token, oauth2)
    return ClearingRequestAccessAPI(
        collaborators.user_context,
        collaborators.cr_service,
        collaborators.project_service,
        get_link_builder(request))
