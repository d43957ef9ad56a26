# This project was developed with assistance from AI tools.
"""Applicant, account, and program lookups, and applicant merging.

Every function takes the caller's ``AsyncSession``; there is no module-level
session. Store errors (connectivity, constraint violations) propagate to the
caller unchanged.
"""

import logging

from db import Account, Applicant, Application, Program
from db.enums import LifecycleStage
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..schemas.program import ProgramDefinition

logger = logging.getLogger(__name__)


async def list_applicants(session: AsyncSession) -> set[Applicant]:
    result = await session.execute(select(Applicant))
    return set(result.scalars().all())


async def lookup_applicant(session: AsyncSession, applicant_id: int) -> Applicant | None:
    result = await session.execute(select(Applicant).where(Applicant.id == applicant_id))
    return result.scalar_one_or_none()


async def lookup_account(session: AsyncSession, email_address: str | None) -> Account | None:
    """Return the account registered to ``email_address``, with its applicants loaded."""
    if not email_address:
        return None
    result = await session.execute(
        select(Account)
        .options(selectinload(Account.applicants))
        .where(Account.email_address == email_address)
    )
    return result.scalar_one_or_none()


async def get_account(session: AsyncSession, account_id: int) -> Account | None:
    result = await session.execute(select(Account).where(Account.id == account_id))
    return result.scalar_one_or_none()


async def lookup_applicant_by_email(session: AsyncSession, email_address: str | None) -> Applicant | None:
    """Return the most recently created applicant of the account with this email."""
    account = await lookup_account(session, email_address)
    if account is None or not account.applicants:
        logger.debug("No applicant found for email lookup")
        return None
    return max(account.applicants, key=lambda applicant: applicant.created_at)


async def insert_applicant(session: AsyncSession, applicant: Applicant) -> Applicant:
    applicant.sync_applicant_data()
    session.add(applicant)
    await session.commit()
    return applicant


async def update_applicant(session: AsyncSession, applicant: Applicant) -> Applicant:
    # Mutations inside the answer document are invisible to the ORM until synced.
    applicant.sync_applicant_data()
    session.add(applicant)
    await session.commit()
    return applicant


async def programs_for_applicant(session: AsyncSession, applicant_id: int) -> list[ProgramDefinition]:
    """Programs to offer an applicant.

    Every active program, followed by every program the applicant has a draft
    application for. A program in both groups appears twice.
    """
    active = await session.execute(
        select(Program).where(Program.lifecycle_stage == LifecycleStage.ACTIVE).order_by(Program.id)
    )
    has_draft_application = (
        select(Application.id)
        .where(
            Application.applicant_id == applicant_id,
            Application.lifecycle_stage == LifecycleStage.DRAFT,
            Application.program_id == Program.id,
        )
        .exists()
    )
    in_progress = await session.execute(
        select(Program).where(has_draft_application).order_by(Program.id)
    )
    programs = [*active.scalars().all(), *in_progress.scalars().all()]
    return [ProgramDefinition.model_validate(program) for program in programs]


def _older_and_newer(left: Applicant, right: Applicant) -> tuple[Applicant, Applicant]:
    """Order two applicants by creation time, then by id, then as given.

    Unflushed applicants have no ``created_at``; they fall through to the id.
    """
    left_created, right_created = left.created_at, right.created_at
    if left_created is not None and right_created is not None and left_created != right_created:
        return (left, right) if left_created < right_created else (right, left)
    if left.id is not None and right.id is not None and left.id > right.id:
        return right, left
    return left, right


async def merge_applicants(
    session: AsyncSession,
    left: Applicant,
    right: Applicant,
    account: Account,
) -> Applicant:
    """Attach both applicants to ``account`` and fold the older one's answers into the newer.

    The account reassignment is committed before merging, so it survives a
    failure in the merge step. Where both applicants answered the same path,
    the newer applicant's answer is kept. The older applicant is not deleted.

    Returns:
        The newer applicant, holding the merged answers.
    """
    left.account = account
    right.account = account
    session.add(left)
    session.add(right)
    await session.commit()
    logger.info(
        "Reassigned applicants %s and %s to account %s", left.id, right.id, account.id,
    )

    older, newer = _older_and_newer(left, right)
    newer.applicant_data.merge_from(older.applicant_data)
    newer.sync_applicant_data()
    session.add(newer)
    await session.commit()
    logger.info("Merged applicant %s into applicant %s", older.id, newer.id)
    return newer
