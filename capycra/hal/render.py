# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Convert HAL resources and collections to JSON compatible dictionaries."""

from typing import Any, Dict

from capycra.hal.hal_resource import HalCollection, HalResource


def _render_links(links: Dict[str, str]) -> Dict[str, Any]:
    return {relation: {"href": href} for relation, href in links.items()}


def _render_value(value: Any) -> Any:
    if isinstance(value, HalResource):
        return render_resource(value)
    if isinstance(value, HalCollection):
        return render_collection(value)
    if isinstance(value, list):
        return [_render_value(item) for item in value]
    return value


def render_resource(resource: HalResource) -> Dict[str, Any]:
    data = dict(resource.content)
    if resource.links:
        data["_links"] = _render_links(resource.links)
    if resource.embedded:
        data["_embedded"] = {
            relation: _render_value(value) for relation, value in resource.embedded.items()}
    return data


def render_collection(collection: HalCollection) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "_embedded": {
            collection.relation: [render_resource(r) for r in collection.resources]
        }
    }
    if collection.links:
        data["_links"] = _render_links(collection.links)
    if collection.page:
        data["page"] = {
            "size": collection.page.size,
            "totalElements": collection.page.total_elements,
            "totalPages": collection.page.total_pages,
            "number": collection.page.number,
        }
    return data
