# -------------------------------------------------------------------------------
# Copyright (c) 2025 Siemens
# All Rights Reserved.
# Author: thomas.graf@siemens.com
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Interfaces of the collaborators used by the clearing request access API.

Implementations raise the exceptions from capycra.main.exceptions:
NotFoundError when an item does not exist, RequestProcessingError on
any other service failure."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from capycra.clearing.model import ClearingRequest, ClearingRequestState, ReleaseClearingStateSummary, User


class UserContext(ABC):
    @abstractmethod
    def get_current_user(self) -> User:
        """The authenticated caller. Raises AuthenticationError."""

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Resolve an email address, None if there is no such user."""


class ClearingRequestService(ABC):
    @abstractmethod
    def get_by_id(self, cr_id: str, user: User) -> ClearingRequest:
        pass

    @abstractmethod
    def get_by_project_id(self, project_id: str, user: User) -> ClearingRequest:
        pass

    @abstractmethod
    def list_visible(self, user: User, state: Optional[ClearingRequestState] = None) -> List[ClearingRequest]:
        """All clearing requests the user may see. The result may contain
        the same request more than once."""


class ProjectService(ABC):
    @abstractmethod
    def get_for_user(self, project_id: str, user: User) -> Dict[str, Any]:
        pass

    @abstractmethod
    def get_clearing_info(self, project: Dict[str, Any], user: User) -> ReleaseClearingStateSummary:
        pass
