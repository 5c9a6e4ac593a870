# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

import capycra
from capycra.common.print import print_red, print_text, print_yellow
from capycra.common.script_base import ScriptBase
from capycra.hal.pagination import DEFAULT_PAGE_SIZE, PageRequest
from capycra.hal.render import render_collection, render_resource
from capycra.main.exceptions import CaPyCraException
from capycra.main.result_codes import ResultCode

LOG = capycra.get_logger(__name__)


def _embedded_email(data: Dict[str, Any], relation: str) -> str:
    user = data.get("_embedded", {}).get(relation, {})
    if isinstance(user, dict):
        name = user.get("fullName", "")
        email = user.get("email", "")
        if name:
            return f"{name} <{email}>"
        return email
    return ""


def _suppress_http_logging(args: Any) -> None:
    if not args.debug:
        # suppress (debug) log output from requests and urllib
        logging.getLogger("requests").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)


class ShowClearingRequest(ScriptBase):
    """Show a single clearing request, either by id or by project."""
    def __init__(self, by_project: bool = False) -> None:
        super().__init__()
        self.by_project = by_project

    def show_clearing_request(self, data: Dict[str, Any]) -> None:
        embedded = data.get("_embedded", {})
        print_text("  Clearing request: " + data.get("id", ""))
        print_text("  State: " + data.get("clearingState", ""))
        projects = embedded.get("sw360:projects", None)
        if isinstance(projects, dict):
            print_text("  Project: " + projects.get("name", "") + ", " + projects.get("version", ""))
        print_text("  Requesting user: " + _embedded_email(data, "requestingUser"))
        print_text("  Clearing team: " + _embedded_email(data, "clearingTeam"))
        if "createdOn" in embedded:
            print_text("  Created on: " + embedded["createdOn"])
        if "lastUpdatedOn" in embedded:
            print_text("  Last updated on: " + embedded["lastUpdatedOn"])
        if "lastClosedOn" in embedded:
            print_text("  Decision on: " + embedded["lastClosedOn"])
        if "totalReleaseCount" in embedded:
            print_text("  Releases: {} total, {} approved, {} open".format(
                embedded["totalReleaseCount"],
                embedded.get("approvedReleaseCount", 0),
                embedded.get("openReleaseCount", 0)))

    def run(self, args: Any) -> None:
        """Main method()"""
        _suppress_http_logging(args)
        what = "project" if self.by_project else "show"

        print_text(
            "\n" + capycra.get_app_signature() +
            " - Show clearing request\n")

        if args.help:
            print("usage: CaPyCRA clearingrequest " + what + " [-h] -t TOKEN -id ID [-o OUTPUTFILE]")
            print("")
            print("optional arguments:")
            print("    -h, --help            show this help message and exit")
            if self.by_project:
                print("    -id PROJECT_ID        SW360 id of the project")
            else:
                print("    -id CR_ID             SW360 id of the clearing request")
            print("    -t SW360_TOKEN        use this token for access to SW360")
            print("    -oa,                  this is an oauth2 token")
            print("    -url SW360_URL        use this URL for access to SW360")
            print("    -o OUTPUTFILE         output file to write the clearing request to")
            return

        if not args.id:
            print_red("No id specified!")
            sys.exit(ResultCode.RESULT_COMMAND_ERROR)

        self.login(token=args.sw360_token, url=args.sw360_url, oauth2=args.oauth2)

        api = self.create_access_api()
        try:
            user = api.current_user()
            if self.by_project:
                resource = api.get_by_project_id(args.id, user)
            else:
                resource = api.get_by_id(args.id, user)
        except CaPyCraException as ex:
            self.exit_on_error(ex)

        if not resource:
            print_yellow("  No clearing request found")
            sys.exit(ResultCode.RESULT_CLEARING_REQUEST_NOT_FOUND)

        data = render_resource(resource)
        self.show_clearing_request(data)
        if args.outputfile:
            self.write_output(data, args.outputfile)


class ListClearingRequests(ScriptBase):
    """List all clearing requests visible to the user."""
    def run(self, args: Any) -> None:
        """Main method()"""
        _suppress_http_logging(args)

        print_text(
            "\n" + capycra.get_app_signature() +
            " - List clearing requests\n")

        if args.help:
            print("usage: CaPyCRA clearingrequest list [-h] -t TOKEN [-state STATE] [-o OUTPUTFILE]")
            print("")
            print("optional arguments:")
            print("    -h, --help            show this help message and exit")
            print("    -state STATE          only show clearing requests in this state")
            print("    -t SW360_TOKEN        use this token for access to SW360")
            print("    -oa,                  this is an oauth2 token")
            print("    -url SW360_URL        use this URL for access to SW360")
            print("    -o OUTPUTFILE         output file to write the clearing requests to")
            return

        self.login(token=args.sw360_token, url=args.sw360_url, oauth2=args.oauth2)

        api = self.create_access_api()
        try:
            user = api.current_user()
            collection = api.list_mine(user, args.state)
        except CaPyCraException as ex:
            self.exit_on_error(ex)

        data = render_collection(collection)
        items = data["_embedded"][collection.relation]
        if not items:
            print_yellow("  No clearing requests found")
        for item in items:
            print_text("  " + item.get("id", "") + ": " + item.get("clearingState", "") +
                       ", requested by " + _embedded_email(item, "requestingUser"))

        if args.outputfile:
            self.write_output(data, args.outputfile)


class ShowComments(ScriptBase):
    """Show the comments of a clearing request."""
    def run(self, args: Any) -> None:
        """Main method()"""
        _suppress_http_logging(args)

        print_text(
            "\n" + capycra.get_app_signature() +
            " - Show clearing request comments\n")

        if args.help:
            print("usage: CaPyCRA clearingrequest comments [-h] -t TOKEN -id CR_ID [-page PAGE] [-size SIZE]")
            print("")
            print("optional arguments:")
            print("    -h, --help            show this help message and exit")
            print("    -id CR_ID             SW360 id of the clearing request")
            print("    -page PAGE            zero based page index")
            print("    -size SIZE            page size")
            print("    -t SW360_TOKEN        use this token for access to SW360")
            print("    -oa,                  this is an oauth2 token")
            print("    -url SW360_URL        use this URL for access to SW360")
            print("    -o OUTPUTFILE         output file to write the comments to")
            return

        if not args.id:
            print_red("No clearing request id specified!")
            sys.exit(ResultCode.RESULT_COMMAND_ERROR)

        self.login(token=args.sw360_token, url=args.sw360_url, oauth2=args.oauth2)

        page_request = PageRequest(
            args.page if args.page is not None else 0,
            args.size if args.size is not None else DEFAULT_PAGE_SIZE)
        api = self.create_access_api()
        try:
            user = api.current_user()
            collection = api.list_comments(args.id, user, page_request)
        except CaPyCraException as ex:
            self.exit_on_error(ex)

        data = render_collection(collection)
        page = data.get("page", {})
        print_text("  Page {} of {}, {} comments".format(
            page.get("number", 0) + 1, page.get("totalPages", 0), page.get("totalElements", 0)))
        for item in data["_embedded"][collection.relation]:
            commented_on = datetime.fromtimestamp(item["commentedOn"] / 1000, tz=timezone.utc)
            print_text("\n  " + commented_on.strftime("%Y-%m-%d %H:%M") + ", " +
                       _embedded_email(item, "commentingUser"))
            print_text("    " + item.get("text", ""))

        if args.outputfile:
            self.write_output(data, args.outputfile)
