# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""FastAPI application of the clearing request service."""

import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

import capycra
from capycra.main.exceptions import CaPyCraException
from capycra.rest import clearing_requests
from capycra.rest.settings import ServiceSettings

LOG = capycra.get_logger(__name__)


def error_response(status_code: int, reason: str, message: str) -> JSONResponse:
    """Error body in the format of the SW360 REST API."""
    return JSONResponse(
        status_code=status_code,
        content={
            "timestamp": int(time.time() * 1000),
            "status": status_code,
            "error": reason,
            "message": message,
        })


def handle_capycra_exception(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, CaPyCraException):
        raise exc

    if exc.status_code >= 500:
        LOG.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        LOG.debug("%s %s => %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.reason, exc.message)


def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    """Invalid path or query parameters."""
    if not isinstance(exc, RequestValidationError):
        raise exc

    message = "; ".join(
        ".".join(str(part) for part in error.get("loc", ())) + ": " + str(error.get("msg", ""))
        for error in exc.errors())
    LOG.debug("%s %s => 400: %s", request.method, request.url.path, message)
    return error_response(400, "Bad Request", message or "Invalid request")


def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    LOG.error("%s %s failed: %s", request.method, request.url.path, repr(exc), exc_info=exc)
    return error_response(500, "Internal Server Error", str(exc) or repr(exc))


def create_app(settings: Optional[ServiceSettings] = None) -> FastAPI:
    """Create the application and register the routers."""
    if settings is None:
        settings = ServiceSettings()

    app = FastAPI(
        title=capycra.APP_NAME,
        description="Read access to SW360 clearing requests",
        version=capycra.get_app_version())
    app.state.settings = settings
    app.include_router(clearing_requests.router, prefix=settings.base_path)
    app.add_exception_handler(CaPyCraException, handle_capycra_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_exception)

    LOG.debug("Clearing request API mounted at '%s'", settings.base_path or "/")
    return app
