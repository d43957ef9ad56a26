# This project was developed with assistance from AI tools.
"""Tests for applicant/account lookups, program listing, and applicant merging."""

from datetime import UTC, datetime

import pytest
from db import LifecycleStage, Path

from factories import (
    make_account,
    make_applicant,
    make_mock_session,
    make_program,
    make_result,
)
from src.schemas.program import ProgramDefinition
from src.services.user import (
    get_account,
    insert_applicant,
    list_applicants,
    lookup_account,
    lookup_applicant,
    lookup_applicant_by_email,
    merge_applicants,
    programs_for_applicant,
    update_applicant,
)

T1 = datetime(2026, 1, 1, tzinfo=UTC)
T2 = datetime(2026, 2, 1, tzinfo=UTC)
COLOR = Path.create("applicant.favorite_color")
SIZE = Path.create("applicant.size")


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


class TestLookups:
    """Single-row lookups return the row or None."""

    @pytest.mark.asyncio
    async def test_lookup_applicant(self):
        applicant = make_applicant(id=7)
        session = make_mock_session(make_result(scalar=applicant))

        assert await lookup_applicant(session, 7) is applicant

    @pytest.mark.asyncio
    async def test_lookup_applicant_missing(self):
        session = make_mock_session(make_result(scalar=None))
        assert await lookup_applicant(session, 99) is None

    @pytest.mark.asyncio
    async def test_list_applicants(self):
        first, second = make_applicant(id=1), make_applicant(id=2)
        session = make_mock_session(make_result(rows=[first, second]))

        assert await list_applicants(session) == {first, second}

    @pytest.mark.asyncio
    async def test_get_account(self):
        account = make_account(id=3)
        session = make_mock_session(make_result(scalar=account))
        assert await get_account(session, 3) is account

    @pytest.mark.asyncio
    async def test_lookup_account_blank_email_skips_query(self):
        session = make_mock_session()

        assert await lookup_account(session, "") is None
        assert await lookup_account(session, None) is None
        session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lookup_applicant_by_email_returns_newest(self):
        account = make_account()
        older = make_applicant(id=1, created_at=T1, account=account)
        newer = make_applicant(id=2, created_at=T2, account=account)
        session = make_mock_session(make_result(scalar=account))

        assert await lookup_applicant_by_email(session, account.email_address) is newer
        assert older in account.applicants

    @pytest.mark.asyncio
    async def test_lookup_applicant_by_unknown_email(self):
        session = make_mock_session(make_result(scalar=None))
        assert await lookup_applicant_by_email(session, "nobody@example.com") is None


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


class TestWrites:
    """insert/update flush the answer document before committing."""

    @pytest.mark.asyncio
    async def test_update_syncs_document(self):
        applicant = make_applicant(answers={})
        applicant.applicant_data.put_string(COLOR, "green")
        session = make_mock_session()

        result = await update_applicant(session, applicant)

        assert result is applicant
        assert '"favorite_color": "green"' in applicant.object
        session.add.assert_called_once_with(applicant)
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_insert(self):
        applicant = make_applicant()
        session = make_mock_session()

        await insert_applicant(session, applicant)

        session.add.assert_called_once_with(applicant)
        session.commit.assert_awaited_once()


# ---------------------------------------------------------------------------
# programs_for_applicant
# ---------------------------------------------------------------------------


class TestProgramsForApplicant:
    """Active programs followed by draft-application programs."""

    @pytest.mark.asyncio
    async def test_active_then_in_progress(self):
        p1 = make_program(id=1, name="P1", stage=LifecycleStage.ACTIVE)
        p2 = make_program(id=2, name="P2", stage=LifecycleStage.DRAFT)
        session = make_mock_session(make_result(rows=[p1]), make_result(rows=[p2]))

        programs = await programs_for_applicant(session, applicant_id=1)

        assert [p.name for p in programs] == ["P1", "P2"]
        assert all(isinstance(p, ProgramDefinition) for p in programs)
        assert session.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_program_in_both_groups_is_listed_twice(self):
        p1 = make_program(id=1, name="P1", stage=LifecycleStage.ACTIVE)
        session = make_mock_session(make_result(rows=[p1]), make_result(rows=[p1]))

        programs = await programs_for_applicant(session, applicant_id=1)

        assert [p.id for p in programs] == [1, 1]

    @pytest.mark.asyncio
    async def test_no_programs(self):
        session = make_mock_session(make_result(rows=[]), make_result(rows=[]))
        assert await programs_for_applicant(session, applicant_id=1) == []


# ---------------------------------------------------------------------------
# merge_applicants
# ---------------------------------------------------------------------------


class TestMergeApplicants:
    """Both applicants move to the account; the newer keeps its answers."""

    @pytest.mark.asyncio
    async def test_newer_answers_win(self):
        account = make_account(id=10)
        older = make_applicant(id=1, created_at=T1, answers={"applicant": {"favorite_color": "blue"}})
        newer = make_applicant(
            id=2, created_at=T2, answers={"applicant": {"favorite_color": "red", "size": "large"}},
        )
        session = make_mock_session()

        merged = await merge_applicants(session, older, newer, account)

        assert merged is newer
        assert merged.applicant_data.get_string(COLOR) == "red"
        assert merged.applicant_data.get_string(SIZE) == "large"
        assert older.account is account
        assert newer.account is account
        assert session.commit.await_count == 2

    @pytest.mark.asyncio
    async def test_older_is_chosen_by_created_at(self):
        account = make_account(id=10)
        older = make_applicant(id=1, created_at=T1, answers={"applicant": {"size": "small"}})
        newer = make_applicant(id=2, created_at=T2, answers={"applicant": {"favorite_color": "red"}})
        session = make_mock_session()

        merged = await merge_applicants(session, newer, older, account)

        assert merged is newer
        assert merged.applicant_data.get_string(SIZE) == "small"

    @pytest.mark.asyncio
    async def test_merge_is_written_back(self):
        account = make_account(id=10)
        older = make_applicant(id=1, created_at=T1, answers={"applicant": {"size": "small"}})
        newer = make_applicant(id=2, created_at=T2)
        session = make_mock_session()

        await merge_applicants(session, older, newer, account)

        assert '"size": "small"' in newer.object

    @pytest.mark.asyncio
    async def test_same_timestamp_lower_id_is_older(self):
        account = make_account(id=10)
        low = make_applicant(id=1, created_at=T1, answers={"applicant": {"favorite_color": "blue"}})
        high = make_applicant(id=5, created_at=T1, answers={"applicant": {"favorite_color": "red"}})
        session = make_mock_session()

        merged = await merge_applicants(session, high, low, account)

        assert merged is high
        assert merged.applicant_data.get_string(COLOR) == "red"

    @pytest.mark.asyncio
    async def test_reassignment_committed_before_merge_failure(self):
        account = make_account(id=10)
        older = make_applicant(id=1, created_at=T1)
        newer = make_applicant(id=2, created_at=T2)
        session = make_mock_session()
        session.commit.side_effect = [None, RuntimeError("connection lost")]

        with pytest.raises(RuntimeError):
            await merge_applicants(session, older, newer, account)

        assert older.account is account
        assert session.commit.await_count == 2

    @pytest.mark.asyncio
    async def test_unflushed_applicant_falls_back_to_id(self):
        account = make_account(id=10)
        flushed = make_applicant(id=1, created_at=T2, answers={"applicant": {"favorite_color": "blue"}})
        unflushed = make_applicant(id=2, answers={"applicant": {"favorite_color": "red"}})
        unflushed.created_at = None
        session = make_mock_session()

        merged = await merge_applicants(session, unflushed, flushed, account)

        assert merged is unflushed
        assert merged.applicant_data.get_string(COLOR) == "red"
