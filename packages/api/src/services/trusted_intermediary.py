# This project was developed with assistance from AI tools.
"""Trusted intermediary group management.

Groups collect the accounts allowed to act on behalf of applicants. Unknown
group or member ids raise typed ``LookupError`` subclasses so callers can
tell "no such group" from "not a member".
"""

import logging

from db import Account, TrustedIntermediaryGroup
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .user import get_account, lookup_account

logger = logging.getLogger(__name__)


class NoSuchTrustedIntermediaryGroupError(LookupError):
    """Raised when a group id does not exist."""

    def __init__(self, group_id: int):
        self.group_id = group_id
        super().__init__(f"No trusted intermediary group with id {group_id}")


class NoSuchTrustedIntermediaryError(LookupError):
    """Raised when an account does not exist or is not a member of the group."""

    def __init__(self, group_id: int, account_id: int):
        self.group_id = group_id
        self.account_id = account_id
        super().__init__(f"Account {account_id} is not a member of group {group_id}")


async def list_trusted_intermediary_groups(session: AsyncSession) -> list[TrustedIntermediaryGroup]:
    result = await session.execute(select(TrustedIntermediaryGroup).order_by(TrustedIntermediaryGroup.id))
    return list(result.scalars().all())


async def get_trusted_intermediary_group(
    session: AsyncSession, group_id: int,
) -> TrustedIntermediaryGroup | None:
    result = await session.execute(
        select(TrustedIntermediaryGroup).where(TrustedIntermediaryGroup.id == group_id)
    )
    return result.scalar_one_or_none()


async def _require_group(session: AsyncSession, group_id: int) -> TrustedIntermediaryGroup:
    group = await get_trusted_intermediary_group(session, group_id)
    if group is None:
        raise NoSuchTrustedIntermediaryGroupError(group_id)
    return group


async def create_trusted_intermediary_group(
    session: AsyncSession, name: str, description: str,
) -> TrustedIntermediaryGroup:
    group = TrustedIntermediaryGroup(name=name, description=description)
    session.add(group)
    await session.commit()
    logger.info("Created trusted intermediary group %s (%s)", group.id, name)
    return group


async def delete_trusted_intermediary_group(session: AsyncSession, group_id: int) -> None:
    """Delete a group.

    Raises:
        NoSuchTrustedIntermediaryGroupError: No group has this id.
    """
    group = await _require_group(session, group_id)
    await session.delete(group)
    await session.commit()
    logger.info("Deleted trusted intermediary group %s", group_id)


async def add_trusted_intermediary_to_group(
    session: AsyncSession, group_id: int, email_address: str,
) -> Account:
    """Make the account for ``email_address`` a member of the group.

    An email with no account gets a bare one, ready for the intermediary's
    first sign-in.

    Raises:
        NoSuchTrustedIntermediaryGroupError: No group has this id.
    """
    group = await _require_group(session, group_id)
    account = await lookup_account(session, email_address)
    if account is None:
        account = Account(email_address=email_address)
        session.add(account)
        logger.info("Created account for new trusted intermediary in group %s", group_id)
    account.member_of_group = group
    await session.commit()
    return account


async def remove_trusted_intermediary_from_group(
    session: AsyncSession, group_id: int, account_id: int,
) -> None:
    """Remove an account from the group.

    Raises:
        NoSuchTrustedIntermediaryGroupError: No group has this id.
        NoSuchTrustedIntermediaryError: The account is unknown or belongs
            to another group (or none).
    """
    group = await _require_group(session, group_id)
    account = await get_account(session, account_id)
    if account is None or account.member_of_group_id != group.id:
        raise NoSuchTrustedIntermediaryError(group_id, account_id)
    account.member_of_group = None
    await session.commit()
    logger.info("Removed account %s from trusted intermediary group %s", account_id, group_id)
