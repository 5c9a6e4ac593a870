# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Paging of in-memory result lists."""

import math
from typing import Any, List

from capycra.hal.hal_resource import HalCollection, HalResource, LinkBuilder, PageMetadata
from capycra.main.exceptions import InvalidArgumentError

DEFAULT_PAGE_SIZE = 20


class PageRequest:
    """Zero based page index and page size."""
    def __init__(self, page: int = 0, size: int = DEFAULT_PAGE_SIZE) -> None:
        self.page = page
        self.size = size

    def __repr__(self) -> str:
        return f"PageRequest(page={self.page}, size={self.size})"


class PaginationResult:
    def __init__(self, resources: List[Any], total_count: int, page_request: PageRequest) -> None:
        self.resources = resources
        self.total_count = total_count
        self.page_request = page_request

    @property
    def total_pages(self) -> int:
        return int(math.ceil(self.total_count / self.page_request.size))

    def metadata(self) -> PageMetadata:
        return PageMetadata(
            size=self.page_request.size,
            total_elements=self.total_count,
            total_pages=self.total_pages,
            number=self.page_request.page)


class Paginator:
    def create_pagination_result(self, items: List[Any], page_request: PageRequest) -> PaginationResult:
        """Cut the requested page out of the given list."""
        if page_request.page < 0:
            raise InvalidArgumentError("page must not be negative")
        if page_request.size < 1:
            raise InvalidArgumentError("size must be greater than zero")

        start = page_request.page * page_request.size
        if items and start >= len(items):
            raise InvalidArgumentError(
                f"page {page_request.page} is out of range, "
                f"there are only {int(math.ceil(len(items) / page_request.size))} pages")

        return PaginationResult(items[start:start + page_request.size], len(items), page_request)

    def empty_page_resource(self, relation: str, result: PaginationResult, href: str) -> HalCollection:
        collection = HalCollection(relation, [], result.metadata())
        collection.add_link("self", LinkBuilder.with_query(
            href, page=result.page_request.page, size=result.page_request.size))
        return collection

    def generate_pages_resource(self, result: PaginationResult, resources: List[HalResource],
                                relation: str, href: str) -> HalCollection:
        """Wrap a page of resources and add first/prev/self/next/last links."""
        collection = HalCollection(relation, resources, result.metadata())
        size = result.page_request.size
        page = result.page_request.page
        last = max(result.total_pages - 1, 0)

        collection.add_link("first", LinkBuilder.with_query(href, page=0, size=size))
        if page > 0:
            collection.add_link("prev", LinkBuilder.with_query(href, page=page - 1, size=size))
        collection.add_link("self", LinkBuilder.with_query(href, page=page, size=size))
        if page < last:
            collection.add_link("next", LinkBuilder.with_query(href, page=page + 1, size=size))
        collection.add_link("last", LinkBuilder.with_query(href, page=last, size=size))
        return collection
