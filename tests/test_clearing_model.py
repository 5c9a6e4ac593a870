# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

from sortedcontainers import SortedSet

from capycra.clearing.model import (
    ClearingRequest,
    ClearingRequestState,
    Comment,
    ReleaseClearingStateSummary,
    User,
    parse_clearing_request_state,
)
from tests.test_base import TestBase


class TestClearingRequestState(TestBase):
    def test_parse_empty(self) -> None:
        for value in [None, "", "   "]:
            result = parse_clearing_request_state(value)
            self.assertTrue(result.ok)
            self.assertIsNone(result.state)

    def test_parse_is_case_insensitive(self) -> None:
        self.assertEqual(ClearingRequestState.IN_PROGRESS, parse_clearing_request_state("in_progress").state)
        self.assertEqual(ClearingRequestState.CLOSED, parse_clearing_request_state("Closed").state)
        self.assertEqual(ClearingRequestState.NEW, parse_clearing_request_state(" NEW ").state)

    def test_parse_invalid(self) -> None:
        result = parse_clearing_request_state("INVALID_VALUE")

        self.assertFalse(result.ok)
        self.assertIsNone(result.state)
        self.assertEqual(
            "Invalid ClearingRequest state 'INVALID_VALUE', possible values are: "
            "[NEW, ACCEPTED, REJECTED, IN_QUEUE, IN_PROGRESS, CLOSED, AWAITING_RESPONSE, "
            "ON_HOLD, SANITY_CHECK, PENDING_INPUT]",
            result.error_message())

    def test_is_decided(self) -> None:
        decided = [s for s in ClearingRequestState if s.is_decided()]
        self.assertEqual([ClearingRequestState.REJECTED, ClearingRequestState.CLOSED], decided)


class TestClearingRequest(TestBase):
    def test_from_json(self) -> None:
        cr = ClearingRequest.from_json(self.get_clearing_request_for_test())

        self.assertEqual("CR-1", cr.id)
        self.assertEqual(ClearingRequestState.IN_PROGRESS, cr.clearing_state)
        self.assertEqual(self.MYEMAIL, cr.requesting_user)
        self.assertEqual("2023-04-01", cr.requested_clearing_date)
        self.assertEqual("SI", cr.project_bu)
        self.assertEqual(self.MODIFIED_ON, cr.modified_on)
        self.assertEqual(0, cr.timestamp_of_decision)
        self.assertEqual(["first", "third", "second"], [c.text for c in cr.comments])
        self.assertTrue(cr.comments[2].auto_generated)

    def test_from_json_unknown_state(self) -> None:
        cr = ClearingRequest.from_json({"id": "CR-7", "clearingState": "SOMETHING_ELSE"})
        self.assertEqual(ClearingRequestState.NEW, cr.clearing_state)

    def test_to_json(self) -> None:
        data = ClearingRequest.from_json(self.get_clearing_request_for_test()).to_json()

        self.assertEqual("IN_PROGRESS", data["clearingState"])
        self.assertEqual("p001", data["projectId"])
        self.assertEqual("DEEP", data["clearingType"])
        self.assertEqual(3, len(data["comments"]))
        self.assertNotIn("timestampOfDecision", data)
        self.assertNotIn("_links", data)

    def test_to_embedded_drops_comments(self) -> None:
        cr = ClearingRequest.from_json(self.get_clearing_request_for_test())

        embedded = cr.to_embedded()

        self.assertEqual([], embedded.comments)
        self.assertNotIn("comments", embedded.to_json())
        self.assertEqual("HIGH", embedded.priority)
        self.assertEqual(cr.timestamp, embedded.timestamp)
        # the original is unchanged
        self.assertEqual(3, len(cr.comments))

    def test_equality_and_ordering_by_id(self) -> None:
        a = self.create_clearing_request("CR-2", ClearingRequestState.NEW)
        b = self.create_clearing_request("CR-2", ClearingRequestState.CLOSED)
        c = self.create_clearing_request("CR-1")

        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertTrue(c < a)
        self.assertNotEqual(a, "CR-2")

    def test_sorted_set_removes_duplicates(self) -> None:
        items = [self.create_clearing_request(cr_id) for cr_id in ["CR-3", "CR-1", "CR-3", "CR-2", "CR-1"]]

        result = SortedSet(items)

        self.assertEqual(["CR-1", "CR-2", "CR-3"], [cr.id for cr in result])


class TestComment(TestBase):
    def test_from_json(self) -> None:
        comment = Comment.from_json({"text": "hello", "commentedBy": self.MYEMAIL, "commentedOn": 42})

        self.assertEqual("hello", comment.text)
        self.assertEqual(42, comment.commented_on)
        self.assertFalse(comment.auto_generated)
        self.assertEqual(
            {"text": "hello", "commentedBy": self.MYEMAIL, "commentedOn": 42, "autoGenerated": False},
            comment.to_embedded().to_json())


class TestUser(TestBase):
    def test_from_json(self) -> None:
        user = User.from_json(self.get_user_for_test())

        self.assertEqual(self.MYEMAIL, user.email)
        self.assertEqual("Thomas Graf", user.full_name)
        self.assertFalse(user.deactivated)

    def test_from_json_minimal(self) -> None:
        user = User.from_json({"email": "x@y.z"})

        self.assertEqual("", user.full_name)
        self.assertEqual("", user.department)


class TestReleaseClearingStateSummary(TestBase):
    def test_add(self) -> None:
        summary = ReleaseClearingStateSummary()
        for state in ["APPROVED", "APPROVED", "UNDER_CLEARING", "INTERNAL_USE_SCAN_AVAILABLE",
                      "SCAN_AVAILABLE", "REPORT_AVAILABLE", "SENT_TO_CLEARING_TOOL", "NEW_CLEARING", "???"]:
            summary.add(state)

        self.assertEqual(9, summary.total)
        self.assertEqual(2, summary.approved)
        self.assertEqual(7, summary.open)
        self.assertEqual({
            "newRelease": 2,
            "sentToClearingTool": 1,
            "underClearing": 1,
            "reportAvailable": 1,
            "scanAvailable": 2,
            "approved": 2,
        }, summary.to_json())

    def test_empty(self) -> None:
        summary = ReleaseClearingStateSummary()

        self.assertEqual(0, summary.total)
        self.assertEqual(0, summary.open)
