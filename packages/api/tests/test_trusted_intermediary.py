# This project was developed with assistance from AI tools.
"""Tests for trusted intermediary group management."""

import pytest
from db import Account, TrustedIntermediaryGroup

from factories import make_account, make_mock_session, make_result
from src.services.trusted_intermediary import (
    NoSuchTrustedIntermediaryError,
    NoSuchTrustedIntermediaryGroupError,
    add_trusted_intermediary_to_group,
    create_trusted_intermediary_group,
    delete_trusted_intermediary_group,
    get_trusted_intermediary_group,
    list_trusted_intermediary_groups,
    remove_trusted_intermediary_from_group,
)


def _group(id=1, name="Community Helpers"):
    return TrustedIntermediaryGroup(id=id, name=name, description="Local nonprofit")


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


class TestGroups:
    """Create, read, list, delete."""

    @pytest.mark.asyncio
    async def test_create(self):
        session = make_mock_session()

        group = await create_trusted_intermediary_group(session, "Helpers", "Local nonprofit")

        assert group.name == "Helpers"
        session.add.assert_called_once_with(group)
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list(self):
        groups = [_group(1), _group(2, "Other")]
        session = make_mock_session(make_result(rows=groups))
        assert await list_trusted_intermediary_groups(session) == groups

    @pytest.mark.asyncio
    async def test_get_missing(self):
        session = make_mock_session(make_result(scalar=None))
        assert await get_trusted_intermediary_group(session, 42) is None

    @pytest.mark.asyncio
    async def test_delete(self):
        group = _group()
        session = make_mock_session(make_result(scalar=group))

        await delete_trusted_intermediary_group(session, 1)

        session.delete.assert_awaited_once_with(group)
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self):
        session = make_mock_session(make_result(scalar=None))

        with pytest.raises(NoSuchTrustedIntermediaryGroupError) as exc_info:
            await delete_trusted_intermediary_group(session, 42)

        assert exc_info.value.group_id == 42
        session.commit.assert_not_awaited()


# ---------------------------------------------------------------------------
# Membership
# ---------------------------------------------------------------------------


class TestMembership:
    """Adding and removing intermediaries."""

    @pytest.mark.asyncio
    async def test_add_existing_account(self):
        group = _group()
        account = make_account(email_address="ti@example.com")
        session = make_mock_session(make_result(scalar=group), make_result(scalar=account))

        result = await add_trusted_intermediary_to_group(session, 1, "ti@example.com")

        assert result is account
        assert account.member_of_group is group
        session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_unknown_email_creates_account(self):
        group = _group()
        session = make_mock_session(make_result(scalar=group), make_result(scalar=None))

        result = await add_trusted_intermediary_to_group(session, 1, "new@example.com")

        assert isinstance(result, Account)
        assert result.email_address == "new@example.com"
        assert result in group.members
        session.add.assert_called_once_with(result)

    @pytest.mark.asyncio
    async def test_add_to_missing_group(self):
        session = make_mock_session(make_result(scalar=None))
        with pytest.raises(NoSuchTrustedIntermediaryGroupError):
            await add_trusted_intermediary_to_group(session, 9, "ti@example.com")

    @pytest.mark.asyncio
    async def test_remove_member(self):
        group = _group(id=1)
        account = make_account(id=5, member_of_group_id=1)
        session = make_mock_session(make_result(scalar=group), make_result(scalar=account))

        await remove_trusted_intermediary_from_group(session, 1, 5)

        assert account.member_of_group is None
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_remove_non_member_raises(self):
        group = _group(id=1)
        account = make_account(id=5, member_of_group_id=2)
        session = make_mock_session(make_result(scalar=group), make_result(scalar=account))

        with pytest.raises(NoSuchTrustedIntermediaryError) as exc_info:
            await remove_trusted_intermediary_from_group(session, 1, 5)

        assert exc_info.value.account_id == 5

    @pytest.mark.asyncio
    async def test_remove_unknown_account_raises(self):
        session = make_mock_session(make_result(scalar=_group()), make_result(scalar=None))
        with pytest.raises(NoSuchTrustedIntermediaryError):
            await remove_trusted_intermediary_from_group(session, 1, 5)

    @pytest.mark.asyncio
    async def test_remove_from_missing_group_raises(self):
        session = make_mock_session(make_result(scalar=None))
        with pytest.raises(NoSuchTrustedIntermediaryGroupError):
            await remove_trusted_intermediary_from_group(session, 1, 5)
