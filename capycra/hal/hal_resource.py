# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""
HAL resources: a primary object plus named links and embedded resources.
Turning them into JSON is done by capycra.hal.render.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlencode


class HalResource:
    """A primary object with links and embedded sub-resources."""
    def __init__(self, content: Dict[str, Any]) -> None:
        self.content = content
        self.links: Dict[str, str] = {}
        self.embedded: Dict[str, Any] = {}

    def add_link(self, relation: str, href: str) -> None:
        self.links[relation] = href

    def add_embedded(self, relation: str, resource: Any) -> None:
        """Embed a resource. Embedding a second resource with the same
        relation turns the relation into a list."""
        if relation not in self.embedded:
            self.embedded[relation] = resource
        elif isinstance(self.embedded[relation], list):
            self.embedded[relation].append(resource)
        else:
            self.embedded[relation] = [self.embedded[relation], resource]

    def get_embedded(self, relation: str) -> Any:
        return self.embedded.get(relation, None)


class PageMetadata:
    def __init__(self, size: int, total_elements: int, total_pages: int, number: int) -> None:
        self.size = size
        self.total_elements = total_elements
        self.total_pages = total_pages
        self.number = number


class HalCollection:
    """A list of resources embedded under a single relation,
    optionally with paging information."""
    def __init__(self, relation: str, resources: Optional[List[HalResource]] = None,
                 page: Optional[PageMetadata] = None) -> None:
        self.relation = relation
        self.resources: List[HalResource] = resources or []
        self.links: Dict[str, str] = {}
        self.page = page

    def add_link(self, relation: str, href: str) -> None:
        self.links[relation] = href

    def __len__(self) -> int:
        return len(self.resources)


class LinkBuilder:
    """Builds absolute links below the API base URL."""
    CLEARING_REQUEST_URL = "clearingrequest"
    CLEARING_REQUESTS_URL = "clearingrequests"

    def __init__(self, base_url: str) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url

    def root(self) -> str:
        return self.base_url

    def clearing_request(self, cr_id: str) -> str:
        return self.base_url + self.CLEARING_REQUEST_URL + "/" + quote(cr_id, safe="")

    def clearing_requests(self) -> str:
        return self.base_url + self.CLEARING_REQUESTS_URL

    def comments(self, cr_id: str) -> str:
        return self.clearing_request(cr_id) + "/comments"

    def project(self, project_id: str) -> str:
        return self.base_url + "projects/" + quote(project_id, safe="")

    def user(self, email: str) -> str:
        # SW360 expects the email to be encoded twice
        return self.base_url + "users/byid/" + quote(quote(email, safe=""), safe="")

    @staticmethod
    def with_query(href: str, **params: Any) -> str:
        return href + "?" + urlencode(params)
