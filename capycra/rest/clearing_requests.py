# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Clearing request endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

import capycra
from capycra.clearing.access_api import ClearingRequestAccessAPI
from capycra.hal.pagination import DEFAULT_PAGE_SIZE, PageRequest
from capycra.hal.render import render_collection, render_resource
from capycra.rest.dependencies import get_access_api

LOG = capycra.get_logger(__name__)

HAL_MEDIA_TYPE = "application/hal+json"

router = APIRouter(tags=["ClearingRequest"])


def hal_response(content: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(content=content, media_type=HAL_MEDIA_TYPE)


@router.get("/")
def get_api_root(api: ClearingRequestAccessAPI = Depends(get_access_api)) -> JSONResponse:
    links = {relation: {"href": href} for relation, href in api.api_root_links().items()}
    return hal_response({"_links": links})


@router.get("/clearingrequest/project/{project_id}")
def get_clearing_request_by_project_id(
        project_id: str,
        api: ClearingRequestAccessAPI = Depends(get_access_api)) -> Response:
    """Get the clearing request of a project."""
    user = api.current_user()
    LOG.debug("%s requests clearing request of project %s", user.email, project_id)
    resource = api.get_by_project_id(project_id, user)
    if resource is None:
        return Response(status_code=204)
    return hal_response(render_resource(resource))


@router.get("/clearingrequest/{cr_id}")
def get_clearing_request_by_id(
        cr_id: str,
        api: ClearingRequestAccessAPI = Depends(get_access_api)) -> Response:
    """Get a clearing request by id."""
    user = api.current_user()
    LOG.debug("%s requests clearing request %s", user.email, cr_id)
    resource = api.get_by_id(cr_id, user)
    if resource is None:
        return Response(status_code=204)
    return hal_response(render_resource(resource))


@router.get("/clearingrequests")
def get_my_clearing_requests(
        state: Optional[str] = Query(None, description="The clearing request state of the request."),
        api: ClearingRequestAccessAPI = Depends(get_access_api)) -> Response:
    """Get all the clearing requests visible to the user."""
    user = api.current_user()
    LOG.debug("%s lists clearing requests, state = %s", user.email, state)
    return hal_response(render_collection(api.list_mine(user, state)))


@router.get("/clearingrequest/{cr_id}/comments")
def get_comments_by_clearing_request_id(
        cr_id: str,
        page: int = Query(0, description="zero based page index"),
        size: int = Query(DEFAULT_PAGE_SIZE, description="page size"),
        api: ClearingRequestAccessAPI = Depends(get_access_api)) -> Response:
    """Get the comments of a clearing request, newest first."""
    user = api.current_user()
    LOG.debug("%s requests comments of clearing request %s", user.email, cr_id)
    return hal_response(render_collection(api.list_comments(cr_id, user, PageRequest(page, size))))
