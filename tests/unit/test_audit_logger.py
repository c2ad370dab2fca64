"""Unit tests for the best-effort AuditLogger and the AuditLogReader."""

import asyncio
import logging
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from taxwise.application.dtos.audit_log import AuditLogResult
from taxwise.application.services.audit_log_reader import AuditLogReader
from taxwise.application.services.audit_logger import AuditLogger
from taxwise.domain.exceptions import AuditStoreNotConfiguredException, ValidationException
from taxwise.shared.enums import AuditLogAction
from tests.conftest import FakeAuditLogRepository


async def test_none_actor_is_stored_as_system() -> None:
    repo = FakeAuditLogRepository()

    await AuditLogger(repo).log_user_action(
        None, "", AuditLogAction.ALL_DATA_CLEARED
    )

    entry = repo.entries[0]
    assert entry.user_id == "system"
    assert entry.user_name == "System"
    assert entry.action == "All Data Cleared"
    assert entry.details == ""


async def test_plain_string_action_is_stored_verbatim() -> None:
    repo = FakeAuditLogRepository()

    await AuditLogger(repo).log_user_action("u1", "Jane", "Custom Action", "d")

    assert repo.entries[0].action == "Custom Action"
    assert repo.entries[0].details == "d"


async def test_store_failure_is_logged_and_swallowed(caplog: pytest.LogCaptureFixture) -> None:
    repo = AsyncMock()
    repo.append.side_effect = RuntimeError("firestore down")

    with caplog.at_level(logging.ERROR):
        result = await AuditLogger(repo).log_user_action(
            "u1", "Jane", AuditLogAction.DOCUMENT_EXPORTED, "x"
        )

    assert result is None
    repo.append.assert_awaited_once()
    assert "Failed to write audit log entry" in caplog.text


async def test_unconfigured_store_drops_records() -> None:
    await AuditLogger(None).log_user_action("u1", "Jane", AuditLogAction.LOGIN_SUCCESS)


def test_action_values_cover_all_recorded_actions() -> None:
    assert len(AuditLogAction.values()) == 16
    assert "AI Suggestions Requested" in AuditLogAction.values()


async def test_reader_returns_newest_first() -> None:
    repo = FakeAuditLogRepository()
    base = datetime(2024, 1, 1, tzinfo=UTC)
    for i in range(3):
        repo.stored.append(
            AuditLogResult(
                id=f"id{i}",
                timestamp=base + timedelta(minutes=i),
                user_id="u",
                user_name="U",
                action="Login Success",
                details="",
            )
        )

    entries = await AuditLogReader(repo).list_recent(2)

    assert [e.id for e in entries] == ["id2", "id1"]


async def test_reader_store_error_returns_empty_list() -> None:
    assert await AuditLogReader(FakeAuditLogRepository(fail=True)).list_recent() == []


async def test_reader_without_store_raises() -> None:
    with pytest.raises(AuditStoreNotConfiguredException):
        await AuditLogReader(None).list_recent()


@pytest.mark.parametrize("limit", [0, 501])
async def test_reader_rejects_out_of_range_limit(limit: int) -> None:
    with pytest.raises(ValidationException):
        await AuditLogReader(FakeAuditLogRepository()).list_recent(limit)


async def test_slow_store_is_abandoned_after_timeout(caplog: pytest.LogCaptureFixture) -> None:
    class SlowRepository(FakeAuditLogRepository):
        async def append(self, entry) -> None:
            await asyncio.sleep(10)
            await super().append(entry)

    repo = SlowRepository()
    caplog.set_level(logging.WARNING)

    await asyncio.wait_for(
        AuditLogger(repo, write_timeout=0.05).log_user_action(
            "u1", "Jane", AuditLogAction.DOCUMENT_EXPORTED, "Success"
        ),
        timeout=1,
    )

    assert repo.entries == []
    assert "timed out" in caplog.text
