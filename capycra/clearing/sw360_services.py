# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""
Collaborators backed by a SW360 server.

All of them share one SW360 client that has been logged in with the token
of the caller, so SW360 decides what the caller is allowed to see.
"""

import json
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests
from sw360 import SW360, SW360Error

import capycra
from capycra.clearing.model import ClearingRequest, ClearingRequestState, ReleaseClearingStateSummary, User
from capycra.clearing.services import ClearingRequestService, ProjectService, UserContext
from capycra.main.exceptions import (
    AuthenticationError,
    CaPyCraException,
    NotFoundError,
    RequestProcessingError,
)

LOG = capycra.get_logger(__name__)


def get_error_message(swex: SW360Error) -> str:
    """Display a useful error message for a SW360Error exception"""
    if swex.response is None:
        return repr(swex)
    elif swex.response.status_code == requests.codes["forbidden"]:
        return "You are not authorized!"
    else:
        if not swex.response.content:
            return repr(swex)

        try:
            jcontent = json.loads(swex.response.content.decode("UTF8"))
            return "Error=" + str(jcontent["error"]) + "(" + \
                str(jcontent["status"]) + "): " + str(jcontent["message"])
        except (ValueError, KeyError, TypeError):
            return repr(swex)


def translate_sw360_error(swex: SW360Error, what: str) -> CaPyCraException:
    """Map a SW360 error to our exceptions."""
    status_code = swex.response.status_code if swex.response is not None else None
    if status_code == requests.codes["not_found"]:
        return NotFoundError(what + " not found")
    if status_code in (requests.codes["unauthorized"], requests.codes["forbidden"]):
        return AuthenticationError(get_error_message(swex))

    LOG.warning("SW360 error accessing %s: %s", what, get_error_message(swex))
    return RequestProcessingError(get_error_message(swex))


def translate_request_error(ex: requests.exceptions.RequestException, what: str) -> RequestProcessingError:
    """SW360 did not answer or kept failing (retries exhausted, connection lost)."""
    LOG.warning("Error accessing %s: %s", what, repr(ex))
    return RequestProcessingError("Unable to access " + what + " on SW360: " + repr(ex))


def split_authorization_header(header: Optional[str]) -> Tuple[str, bool]:
    """'Token xyz' or 'Bearer xyz' => (token, is oauth2 token)"""
    if not header or not header.strip():
        raise AuthenticationError("No authorization header specified!")

    parts = header.strip().split(" ", 1)
    if len(parts) != 2 or not parts[1].strip():
        raise AuthenticationError("Invalid authorization header!")

    scheme = parts[0].lower()
    if scheme == "token":
        return parts[1].strip(), False
    if scheme == "bearer":
        return parts[1].strip(), True

    raise AuthenticationError("Unsupported authorization scheme: " + parts[0])


def login(url: str, token: str, oauth2: bool = False) -> SW360:
    """Login to SW360"""
    if not url:
        raise RequestProcessingError("No SW360 server URL specified!")
    if not token:
        raise AuthenticationError("No SW360 API token specified!")

    if url[-1] != "/":
        url += "/"

    client = SW360(url, token, oauth2)
    try:
        if not client.login_api(token):
            raise AuthenticationError("SW360 login failed!")
    except SW360Error as swex:
        if (swex.response is not None) and (swex.response.status_code == requests.codes["unauthorized"]):
            raise AuthenticationError("You are not authorized!")
        raise RequestProcessingError("Error authorizing user: " + get_error_message(swex))
    except requests.exceptions.ConnectionError as ex:
        raise RequestProcessingError("Unable to connect to SW360: " + repr(ex))
    except requests.exceptions.RequestException as ex:
        raise RequestProcessingError("Error authorizing user: " + repr(ex))

    return client


class Sw360UserContext(UserContext):
    def __init__(self, client: SW360) -> None:
        self.client = client

    def get_current_user(self) -> User:
        try:
            data = self.client.api_get(self.client.url + "resource/api/users/profile")
        except SW360Error as swex:
            exception = translate_sw360_error(swex, "User profile")
            if isinstance(exception, NotFoundError):
                raise AuthenticationError("Unable to determine the current user!")
            raise exception
        except requests.exceptions.RequestException as ex:
            raise translate_request_error(ex, "User profile")

        if not data:
            raise AuthenticationError("Unable to determine the current user!")
        return User.from_json(data)

    def get_user_by_email(self, email: str) -> Optional[User]:
        try:
            data = self.client.api_get(self.client.url + "resource/api/users/" + quote(email, safe=""))
        except SW360Error as swex:
            exception = translate_sw360_error(swex, "User " + email)
            if isinstance(exception, NotFoundError):
                return None
            raise exception
        except requests.exceptions.RequestException as ex:
            raise translate_request_error(ex, "User " + email)

        if not data:
            return None
        return User.from_json(data)


class Sw360ClearingRequestService(ClearingRequestService):
    def __init__(self, client: SW360) -> None:
        self.client = client

    def to_clearing_request(self, data: Dict[str, Any]) -> ClearingRequest:
        cr = ClearingRequest.from_json(data)
        if not cr.id:
            href = data.get("_links", {}).get("self", {}).get("href", "")
            if href:
                cr.id = self.client.get_id_from_href(href)
        return cr

    def get_by_id(self, cr_id: str, user: User) -> ClearingRequest:
        try:
            data = self.client.get_clearing_request(cr_id)
        except SW360Error as swex:
            raise translate_sw360_error(swex, "Clearing request " + cr_id)
        except requests.exceptions.RequestException as ex:
            raise translate_request_error(ex, "Clearing request " + cr_id)

        if not data:
            raise NotFoundError("Clearing request " + cr_id + " not found")
        return self.to_clearing_request(data)

    def get_by_project_id(self, project_id: str, user: User) -> ClearingRequest:
        try:
            data = self.client.get_clearing_request_for_project(project_id)
        except SW360Error as swex:
            raise translate_sw360_error(swex, "Clearing request for project " + project_id)
        except requests.exceptions.RequestException as ex:
            raise translate_request_error(ex, "Clearing request for project " + project_id)

        if not data:
            raise NotFoundError("No clearing request for project " + project_id)
        return self.to_clearing_request(data)

    def list_visible(self, user: User, state: Optional[ClearingRequestState] = None) -> List[ClearingRequest]:
        url = self.client.url + "resource/api/clearingrequests"
        if state:
            url += "?state=" + state.value

        try:
            data = self.client.api_get(url)
        except SW360Error as swex:
            exception = translate_sw360_error(swex, "Clearing requests")
            if isinstance(exception, NotFoundError):
                return []
            raise exception
        except requests.exceptions.RequestException as ex:
            raise translate_request_error(ex, "Clearing requests")

        if not data:
            return []

        items = data.get("_embedded", {}).get("sw360:clearingRequests", [])
        return [self.to_clearing_request(item) for item in items]


class Sw360ProjectService(ProjectService):
    def __init__(self, client: SW360) -> None:
        self.client = client

    def get_for_user(self, project_id: str, user: User) -> Dict[str, Any]:
        try:
            project = self.client.get_project(project_id)
        except SW360Error as swex:
            raise translate_sw360_error(swex, "Project " + project_id)
        except requests.exceptions.RequestException as ex:
            raise translate_request_error(ex, "Project " + project_id)

        if not project:
            raise NotFoundError("Project " + project_id + " not found")
        return project

    def get_clearing_info(self, project: Dict[str, Any], user: User) -> ReleaseClearingStateSummary:
        """Count the releases of the project per clearing state."""
        summary = ReleaseClearingStateSummary()
        releases = project.get("_embedded", {}).get("sw360:releases", [])
        for release in releases:
            href = release["_links"]["self"]["href"]
            try:
                release_details = self.client.get_release_by_url(href)
            except SW360Error as swex:
                raise translate_sw360_error(swex, "Release " + href)
            except requests.exceptions.RequestException as ex:
                raise translate_request_error(ex, "Release " + href)

            if not release_details:
                raise NotFoundError("Release " + href + " not found")
            summary.add(release_details.get("clearingState", "NEW_CLEARING"))

        return summary


class Sw360Collaborators:
    """The SW360 based collaborators for one caller."""
    def __init__(self, client: SW360) -> None:
        self.client = client
        self.user_context = Sw360UserContext(client)
        self.cr_service = Sw360ClearingRequestService(client)
        self.project_service = Sw360ProjectService(client)

    @classmethod
    def connect(cls, url: str, token: str, oauth2: bool = False) -> "Sw360Collaborators":
        return cls(login(url, token, oauth2))
