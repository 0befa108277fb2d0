"""
序号服务层测试（内存 SQLite）
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import update
from sqlalchemy.exc import OperationalError

from app.core.exceptions import ConflictError, InternalError, NotFoundError, ValidationError
from app.models.serial import Serial
from app.services.serial_service import SerialService


async def test_create_and_list(db):
    created = await SerialService.create_serial(db, " FIRST ", 30, None)
    await SerialService.create_serial(db, "SECOND", None, "2030-01-01T00:00")

    assert created.code == "FIRST"
    assert created.duration_minutes == 30
    assert created.is_active is True

    views = await SerialService.list_serials(db)
    assert [v.code for v in views] == ["SECOND", "FIRST"]
    assert all(v.effective_active for v in views)


async def test_duplicate_code_is_conflict(db):
    await SerialService.create_serial(db, "DUP")
    with pytest.raises(ConflictError):
        await SerialService.create_serial(db, "  DUP  ")

    # 会话在冲突后仍可使用
    assert len(await SerialService.list_all(db)) == 1


async def test_invalid_input_does_not_touch_storage(db):
    with pytest.raises(ValidationError):
        await SerialService.create_serial(db, "", 10)
    assert await SerialService.list_all(db) == []


async def test_set_serial_active(db):
    await SerialService.create_serial(db, "TOGGLE", 10)

    updated = await SerialService.set_serial_active(db, "TOGGLE", False)
    assert updated.is_active is False
    assert updated.duration_minutes == 10

    [view] = await SerialService.list_serials(db)
    assert view.is_active is False
    assert view.effective_active is False

    await SerialService.set_serial_active(db, "TOGGLE", True)
    [view] = await SerialService.list_serials(db)
    assert view.effective_active is True


async def test_set_active_missing_code(db):
    with pytest.raises(NotFoundError):
        await SerialService.set_serial_active(db, "MISSING", True)


async def test_delete_serial(db):
    await SerialService.create_serial(db, "GONE")
    await SerialService.delete_serial(db, "GONE")
    assert await SerialService.get_by_code(db, "GONE") is None


async def test_delete_missing_code_is_not_found(db):
    with pytest.raises(NotFoundError) as exc_info:
        await SerialService.delete_serial(db, "NOPE")
    assert exc_info.value.code == "NOPE"


async def test_storage_counts(db):
    await SerialService.insert(db, "RAW", None, None)
    assert await SerialService.update_active(db, "RAW", False) == 1
    assert await SerialService.update_active(db, "OTHER", False) == 0
    assert await SerialService.delete(db, "RAW") == 1
    assert await SerialService.delete(db, "RAW") == 0


async def test_list_evaluates_usage_window(db):
    await SerialService.create_serial(db, "USED", 60)
    used_at = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
    await db.execute(
        update(Serial).where(Serial.code == "USED").values(activated_at=used_at)
    )
    await db.commit()

    [view] = await SerialService.list_serials(db, now=used_at + timedelta(minutes=59))
    assert view.effective_active is True
    assert view.effective_expires_at == used_at + timedelta(minutes=60)

    [view] = await SerialService.list_serials(db, now=used_at + timedelta(minutes=61))
    assert view.effective_active is False
    assert view.is_active is True


async def test_storage_failure_is_internal_error(db, monkeypatch):
    async def broken_list_all(session):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(SerialService, "list_all", staticmethod(broken_list_all))

    with pytest.raises(InternalError) as exc_info:
        await SerialService.list_serials(db)
    assert "connection lost" not in exc_info.value.message


async def test_list_survives_overflowing_usage_window(db):
    await SerialService.insert(db, "HUGE", 10 ** 12, None)
    await SerialService.create_serial(db, "NORMAL", 10)
    await db.execute(
        update(Serial).values(activated_at=datetime(2026, 1, 1, tzinfo=timezone.utc))
    )
    await db.commit()

    views = {v.code: v for v in await SerialService.list_serials(db)}
    assert views["HUGE"].effective_active is True
    assert views["HUGE"].effective_expires_at is None
    assert views["NORMAL"].effective_active is False


async def test_create_rejects_out_of_range_input(db):
    with pytest.raises(ValidationError):
        await SerialService.create_serial(db, "BIG", 10 ** 12)
    with pytest.raises(ValidationError):
        await SerialService.create_serial(db, "X" * 65)
    assert await SerialService.list_all(db) == []


async def test_set_active_missing_code_is_logged(db, caplog):
    with caplog.at_level(logging.WARNING, logger="app.services.serial_service"):
        with pytest.raises(NotFoundError):
            await SerialService.set_serial_active(db, "GHOST", False)
    assert "GHOST" in caplog.text
