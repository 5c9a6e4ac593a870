# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""
Read access to clearing requests.

Clearing requests and their comments are fetched from the collaborating
services and turned into HAL resources with embedded users, project and
release information.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sortedcontainers import SortedSet

import capycra
from capycra.clearing.model import (
    ClearingRequest,
    Comment,
    ReleaseClearingStateSummary,
    User,
    parse_clearing_request_state,
)
from capycra.clearing.services import ClearingRequestService, ProjectService, UserContext
from capycra.hal.hal_resource import HalCollection, HalResource, LinkBuilder
from capycra.hal.pagination import PageRequest, Paginator
from capycra.main.exceptions import InvalidArgumentError, NotFoundError, RequestProcessingError

LOG = capycra.get_logger(__name__)


def format_epoch_date(epoch_millis: int) -> str:
    """Epoch milliseconds => yyyy-mm-dd (UTC)"""
    return datetime.fromtimestamp(epoch_millis / 1000, tz=timezone.utc).strftime("%Y-%m-%d")


class ClearingRequestAccessAPI:
    """Clearing request endpoints, independent of the web framework."""
    RELATION_CLEARING_REQUESTS = "sw360:clearingRequests"
    RELATION_COMMENTS = "sw360:comments"
    RELATION_PROJECTS = "sw360:projects"

    # project properties kept in the embedded project summary
    SLIM_PROJECT_FIELDS = ["name", "version", "projectType", "visibility", "businessUnit", "clearingState"]

    def __init__(self, user_context: UserContext, cr_service: ClearingRequestService,
                 project_service: ProjectService, links: LinkBuilder,
                 paginator: Optional[Paginator] = None) -> None:
        self.user_context = user_context
        self.cr_service = cr_service
        self.project_service = project_service
        self.links = links
        self.paginator = paginator or Paginator()

    def current_user(self) -> User:
        return self.user_context.get_current_user()

    def get_by_id(self, cr_id: str, user: User) -> Optional[HalResource]:
        """The clearing request with the given id, None if there is none."""
        if not cr_id:
            raise InvalidArgumentError("No clearing request id specified!")

        try:
            cr = self.cr_service.get_by_id(cr_id, user)
        except NotFoundError:
            LOG.debug("Clearing request %s not found", cr_id)
            return None

        return self.create_hal_clearing_request(cr, user, True)

    def get_by_project_id(self, project_id: str, user: User) -> Optional[HalResource]:
        """The clearing request of the given project, None if there is none."""
        if not project_id:
            raise InvalidArgumentError("No project id specified!")

        try:
            cr = self.cr_service.get_by_project_id(project_id, user)
        except NotFoundError:
            LOG.debug("No clearing request for project %s", project_id)
            return None

        return self.create_hal_clearing_request(cr, user, True)

    def list_mine(self, user: User, state: Optional[str] = None) -> HalCollection:
        """All clearing requests visible to the user, optionally
        restricted to a single state."""
        parsed = parse_clearing_request_state(state)
        if not parsed.ok:
            raise InvalidArgumentError(parsed.error_message())

        clearing_requests = SortedSet(self.cr_service.list_visible(user, parsed.state))
        LOG.debug("%d clearing requests visible to %s", len(clearing_requests), user.email)

        resources = []
        for cr in clearing_requests:
            resources.append(self.create_hal_clearing_request(cr.to_embedded(), user, False))

        collection = HalCollection(self.RELATION_CLEARING_REQUESTS, resources)
        href = self.links.clearing_requests()
        if parsed.state:
            href = LinkBuilder.with_query(href, state=parsed.state.value)
        collection.add_link("self", href)
        return collection

    def list_comments(self, cr_id: str, user: User, page_request: PageRequest) -> HalCollection:
        """One page of the comments of a clearing request, newest first.

        NotFoundError and InvalidArgumentError are passed on, all other
        failures are reported as RequestProcessingError."""
        try:
            cr = self.cr_service.get_by_id(cr_id, user)
            comments = sorted(cr.comments, key=lambda c: c.commented_on, reverse=True)
            result = self.paginator.create_pagination_result(comments, page_request)

            resources = [self.create_hal_comment(c.to_embedded()) for c in result.resources]
            href = self.links.comments(cr_id)
            if not resources:
                return self.paginator.empty_page_resource(self.RELATION_COMMENTS, result, href)
            return self.paginator.generate_pages_resource(result, resources, self.RELATION_COMMENTS, href)
        except (NotFoundError, InvalidArgumentError):
            raise
        except Exception as ex:
            LOG.error("Error reading comments of clearing request %s: %s", cr_id, repr(ex))
            raise RequestProcessingError(str(ex)) from ex

    def api_root_links(self) -> Dict[str, str]:
        return {"clearingRequests": self.links.root() + LinkBuilder.CLEARING_REQUEST_URL}

    def create_hal_clearing_request(self, cr: ClearingRequest, user: User,
                                    is_single_request: bool) -> HalResource:
        resource = HalResource(cr.to_json())
        resource.add_link("self", self.links.clearing_request(cr.id))

        if cr.project_id:
            project = self.project_service.get_for_user(cr.project_id, user)
            clearing_info = self.project_service.get_clearing_info(project, user)
            self.add_embedded_release_details(resource, clearing_info)
            self.add_embedded_project(resource, project, cr.project_id)

        self.add_embedded_user(resource, cr.requesting_user, "requestingUser")
        if is_single_request:
            self.add_embedded_user(resource, cr.clearing_team, "clearingTeam")

        if cr.clearing_state.is_decided():
            self.add_embedded_timestamp_of_decision(resource, cr)

        self.add_embedded_dates(resource, cr, is_single_request)
        return resource

    def create_hal_comment(self, comment: Comment) -> HalResource:
        resource = HalResource(comment.to_json())
        self.add_embedded_user(resource, comment.commented_by, "commentingUser")
        return resource

    def create_embedded_user(self, user: User) -> HalResource:
        resource = HalResource({
            "email": user.email,
            "fullName": user.full_name,
            "deactivated": user.deactivated,
        })
        resource.add_link("self", self.links.user(user.email))
        return resource

    def add_embedded_user(self, resource: HalResource, email: str, relation: str) -> None:
        if not email:
            return

        user = self.user_context.get_user_by_email(email)
        if not user:
            LOG.debug("Unknown user %s", email)
            user = User(email)
        resource.add_embedded(relation, self.create_embedded_user(user))

    def add_embedded_project(self, resource: HalResource, project: Dict[str, Any], project_id: str) -> None:
        slim: Dict[str, Any] = {"id": project_id}
        for field in self.SLIM_PROJECT_FIELDS:
            if field in project:
                slim[field] = project[field]
        embedded = HalResource(slim)
        embedded.add_link("self", self.links.project(project_id))
        resource.add_embedded(self.RELATION_PROJECTS, embedded)

    @staticmethod
    def add_embedded_release_details(resource: HalResource, clearing_info: ReleaseClearingStateSummary) -> None:
        resource.add_embedded("totalReleaseCount", clearing_info.total)
        resource.add_embedded("approvedReleaseCount", clearing_info.approved)
        resource.add_embedded("openReleaseCount", clearing_info.open)
        resource.add_embedded("releaseClearingStateSummary", clearing_info.to_json())

    @staticmethod
    def add_embedded_timestamp_of_decision(resource: HalResource, cr: ClearingRequest) -> None:
        # older requests have no decision timestamp, the last modification is the decision then
        timestamp = cr.timestamp_of_decision or cr.modified_on
        if timestamp:
            resource.add_embedded("lastClosedOn", format_epoch_date(timestamp))

    @staticmethod
    def add_embedded_dates(resource: HalResource, cr: ClearingRequest, is_single_request: bool) -> None:
        if is_single_request and cr.timestamp:
            resource.add_embedded("createdOn", format_epoch_date(cr.timestamp))
        if cr.modified_on:
            resource.add_embedded("lastUpdatedOn", format_epoch_date(cr.modified_on))
