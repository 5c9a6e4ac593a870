# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Clearing requests, comments and users as read from SW360."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional


class ClearingRequestState(str, Enum):
    NEW = "NEW"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    IN_QUEUE = "IN_QUEUE"
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"
    AWAITING_RESPONSE = "AWAITING_RESPONSE"
    ON_HOLD = "ON_HOLD"
    SANITY_CHECK = "SANITY_CHECK"
    PENDING_INPUT = "PENDING_INPUT"

    @classmethod
    def names(cls) -> List[str]:
        return [item.value for item in cls]

    def is_decided(self) -> bool:
        """CLOSED and REJECTED are the only states with a decision timestamp."""
        return self in (ClearingRequestState.CLOSED, ClearingRequestState.REJECTED)


class StateParseResult:
    """Outcome of parsing a clearing request state filter."""
    def __init__(self, value: str, state: Optional[ClearingRequestState] = None, ok: bool = True) -> None:
        self.value = value
        self.state = state
        self.ok = ok

    def error_message(self) -> str:
        return "Invalid ClearingRequest state '{}', possible values are: [{}]".format(
            self.value, ", ".join(ClearingRequestState.names()))


def parse_clearing_request_state(value: Optional[str]) -> StateParseResult:
    """Case-insensitive lookup of a state name.
    An empty value is valid and means 'no filter'."""
    if not value or not value.strip():
        return StateParseResult("")

    name = value.strip().upper()
    for state in ClearingRequestState:
        if state.value == name:
            return StateParseResult(value, state)

    return StateParseResult(value, ok=False)


class User:
    def __init__(self, email: str, full_name: str = "", deactivated: bool = False,
                 department: str = "") -> None:
        self.email = email
        self.full_name = full_name
        self.deactivated = deactivated
        self.department = department

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> User:
        return cls(
            email=data.get("email", ""),
            full_name=data.get("fullName", ""),
            deactivated=bool(data.get("deactivated", False)),
            department=data.get("department", ""))

    def __repr__(self) -> str:
        return f"User({self.email})"


class Comment:
    def __init__(self, text: str = "", commented_by: str = "", commented_on: int = 0,
                 auto_generated: bool = False) -> None:
        self.text = text
        self.commented_by = commented_by
        self.commented_on = commented_on
        self.auto_generated = auto_generated

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> Comment:
        return cls(
            text=data.get("text", ""),
            commented_by=data.get("commentedBy", ""),
            commented_on=int(data.get("commentedOn", 0) or 0),
            auto_generated=bool(data.get("autoGenerated", False)))

    def to_embedded(self) -> Comment:
        return Comment(self.text, self.commented_by, self.commented_on, self.auto_generated)

    def to_json(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "commentedBy": self.commented_by,
            "commentedOn": self.commented_on,
            "autoGenerated": self.auto_generated,
        }

    def __repr__(self) -> str:
        return f"Comment({self.commented_by}, {self.commented_on})"


class ClearingRequest:
    """A request for the legal clearing of the components of a project.

    Equality and ordering only look at the id, so sorted sets of
    clearing requests never contain the same request twice."""

    # fields that are passed through unchanged, SW360 JSON name first
    _PLAIN_FIELDS = [
        ("requestingUserComment", "requesting_user_comment"),
        ("requestedClearingDate", "requested_clearing_date"),
        ("agreedClearingDate", "agreed_clearing_date"),
        ("priority", "priority"),
        ("clearingType", "clearing_type"),
        ("projectBU", "project_bu"),
    ]

    def __init__(self, id: str, clearing_state: ClearingRequestState = ClearingRequestState.NEW,
                 project_id: str = "", requesting_user: str = "", clearing_team: str = "") -> None:
        self.id = id
        self.clearing_state = clearing_state
        self.project_id = project_id
        self.requesting_user = requesting_user
        self.clearing_team = clearing_team
        self.timestamp_of_decision: int = 0
        self.timestamp: int = 0
        self.modified_on: int = 0
        self.comments: List[Comment] = []
        self.requesting_user_comment = ""
        self.requested_clearing_date = ""
        self.agreed_clearing_date = ""
        self.priority = ""
        self.clearing_type = ""
        self.project_bu = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> ClearingRequest:
        result = parse_clearing_request_state(data.get("clearingState", ""))
        cr = cls(
            id=data.get("id", ""),
            clearing_state=result.state or ClearingRequestState.NEW,
            project_id=data.get("projectId", ""),
            requesting_user=data.get("requestingUser", ""),
            clearing_team=data.get("clearingTeam", ""))
        cr.timestamp_of_decision = int(data.get("timestampOfDecision", 0) or 0)
        cr.timestamp = int(data.get("timestamp", 0) or 0)
        cr.modified_on = int(data.get("modifiedOn", 0) or 0)
        cr.comments = [Comment.from_json(c) for c in data.get("comments", [])]
        for json_name, attr in cls._PLAIN_FIELDS:
            setattr(cr, attr, data.get(json_name, ""))
        return cr

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "clearingState": self.clearing_state.value,
            "requestingUser": self.requesting_user,
            "clearingTeam": self.clearing_team,
        }
        if self.project_id:
            data["projectId"] = self.project_id
        for json_name, attr in self._PLAIN_FIELDS:
            value = getattr(self, attr)
            if value:
                data[json_name] = value
        if self.timestamp_of_decision:
            data["timestampOfDecision"] = self.timestamp_of_decision
        if self.timestamp:
            data["timestamp"] = self.timestamp
        if self.modified_on:
            data["modifiedOn"] = self.modified_on
        if self.comments:
            data["comments"] = [c.to_json() for c in self.comments]
        return data

    def to_embedded(self) -> ClearingRequest:
        """Slim copy used in lists: no comments."""
        cr = ClearingRequest(self.id, self.clearing_state, self.project_id,
                             self.requesting_user, self.clearing_team)
        cr.timestamp_of_decision = self.timestamp_of_decision
        cr.timestamp = self.timestamp
        cr.modified_on = self.modified_on
        for _, attr in self._PLAIN_FIELDS:
            setattr(cr, attr, getattr(self, attr))
        return cr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClearingRequest):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: ClearingRequest) -> bool:
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"ClearingRequest({self.id}, {self.clearing_state.value})"


class ReleaseClearingStateSummary:
    """Number of project releases per release clearing state."""

    # SW360 release clearing state => attribute
    _STATE_MAP = {
        "NEW_CLEARING": "new_release",
        "SENT_TO_CLEARING_TOOL": "sent_to_clearing_tool",
        "UNDER_CLEARING": "under_clearing",
        "REPORT_AVAILABLE": "report_available",
        "SCAN_AVAILABLE": "scan_available",
        "INTERNAL_USE_SCAN_AVAILABLE": "scan_available",
        "APPROVED": "approved",
    }

    def __init__(self) -> None:
        self.new_release = 0
        self.sent_to_clearing_tool = 0
        self.under_clearing = 0
        self.report_available = 0
        self.scan_available = 0
        self.approved = 0
        self.total = 0

    def add(self, release_clearing_state: str) -> None:
        attr = self._STATE_MAP.get(release_clearing_state, "new_release")
        setattr(self, attr, getattr(self, attr) + 1)
        self.total += 1

    @property
    def open(self) -> int:
        return self.total - self.approved

    def to_json(self) -> Dict[str, int]:
        return {
            "newRelease": self.new_release,
            "sentToClearingTool": self.sent_to_clearing_tool,
            "underClearing": self.under_clearing,
            "reportAvailable": self.report_available,
            "scanAvailable": self.scan_available,
            "approved": self.approved,
        }
