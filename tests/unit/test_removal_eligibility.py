"""RemovalEligibilityChecker unit tests."""

from unittest.mock import AsyncMock

import pytest

from subject_rights.application.dtos.privacy_request import PrivacyRequestResult
from subject_rights.application.use_cases.privacy.removal_eligibility import (
    RemovalEligibilityChecker,
)
from subject_rights.domain.entities.subject import Subject

REASON = "You cannot remove a super user account."


def _request(user_id: int | None) -> PrivacyRequestResult:
    return PrivacyRequestResult(
        id=1, email="x@example.com", request_type="remove", status="confirmed", user_id=user_id
    )


@pytest.fixture
def directory() -> AsyncMock:
    directory = AsyncMock()
    directory.load_subject = AsyncMock(
        return_value=Subject(id=5, name="n", username="u", email="e@example.com")
    )
    directory.has_capability = AsyncMock(return_value=False)
    return directory


def _checker(directory) -> RemovalEligibilityChecker:
    return RemovalEligibilityChecker(directory, capability="core.admin", denial_reason=REASON)


async def test_admin_is_denied_with_reason(directory) -> None:
    directory.has_capability = AsyncMock(return_value=True)

    status = await _checker(directory).can_erase(_request(5))

    assert status.can_remove is False
    assert status.reason == REASON
    assert directory.has_capability.call_args.args[1] == "core.admin"


async def test_regular_subject_is_permitted(directory) -> None:
    status = await _checker(directory).can_erase(_request(5))
    assert status.can_remove is True
    assert status.reason is None


@pytest.mark.parametrize("user_id", [None, 0])
async def test_request_without_subject_is_permitted(directory, user_id) -> None:
    status = await _checker(directory).can_erase(_request(user_id))

    assert status.can_remove is True
    assert status.reason is None
    directory.load_subject.assert_not_called()


async def test_unloadable_subject_is_permitted(directory) -> None:
    directory.load_subject = AsyncMock(return_value=None)

    status = await _checker(directory).can_erase(_request(5))

    assert status.can_remove is True
    directory.has_capability.assert_not_called()
