"""
序号服务模块
"""

import logging
from datetime import datetime
from typing import Any, List, Optional
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import ConflictError, InternalError, NotFoundError
from app.models.serial import Serial
from app.schemas.serial import SerialRecord, SerialView
from app.services.serial_status import (
    apply_status_change,
    compute_effective_active,
    compute_effective_expiry,
    normalize_code,
    validate_new_serial,
)

logger = logging.getLogger(__name__)


class SerialService:
    """序号服务类，数据库会话由调用方传入"""

    # ---------------- 存储操作 ----------------

    @staticmethod
    async def get_by_code(db: AsyncSession, code: str) -> Optional[Serial]:
        """根据序号获取记录"""
        stmt = select(Serial).where(Serial.code == code)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def list_all(db: AsyncSession) -> List[Serial]:
        """按创建时间倒序获取全部序号"""
        stmt = select(Serial).order_by(Serial.created_at.desc())
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def insert(
        db: AsyncSession,
        code: str,
        duration_minutes: Optional[int],
        expires_at: Optional[datetime],
    ) -> Serial:
        """插入新序号，序号重复时抛出 ConflictError"""
        stmt = insert(Serial).values(
            code=code,
            duration_minutes=duration_minutes,
            expires_at=expires_at,
            is_active=True,
        )
        try:
            await db.execute(stmt)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictError(code)

        return await SerialService.get_by_code(db, code)

    @staticmethod
    async def update_active(db: AsyncSession, code: str, is_active: bool) -> int:
        """更新启用状态，返回受影响行数"""
        stmt = update(Serial).where(Serial.code == code).values(is_active=is_active)
        result = await db.execute(stmt)
        await db.commit()
        return result.rowcount

    @staticmethod
    async def delete(db: AsyncSession, code: str) -> int:
        """删除序号，返回受影响行数"""
        stmt = delete(Serial).where(Serial.code == code)
        result = await db.execute(stmt)
        await db.commit()
        return result.rowcount

    # ---------------- 业务操作 ----------------

    @staticmethod
    async def create_serial(
        db: AsyncSession,
        code: Any,
        duration: Any = None,
        expires: Any = None,
    ) -> SerialRecord:
        """校验输入并新增序号"""
        new_serial = validate_new_serial(code, duration, expires)

        try:
            serial = await SerialService.insert(
                db,
                new_serial.code,
                new_serial.duration_minutes,
                new_serial.expires_at,
            )
        except ConflictError:
            logger.warning("Serial %s already exists", new_serial.code)
            raise
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Error adding serial %s", new_serial.code)
            raise InternalError("新增序号时发生内部错误")

        logger.info(
            "Serial %s created (duration=%s, expires_at=%s)",
            serial.code, serial.duration_minutes, serial.expires_at,
        )
        return SerialRecord.model_validate(serial)

    @staticmethod
    async def list_serials(
        db: AsyncSession,
        now: Optional[datetime] = None,
    ) -> List[SerialView]:
        """获取全部序号并计算当前有效状态"""
        try:
            serials = await SerialService.list_all(db)
        except SQLAlchemyError:
            logger.exception("Error fetching serials")
            raise InternalError("获取序号列表时发生内部错误")

        return [
            SerialView(
                **SerialRecord.model_validate(serial).model_dump(),
                effective_active=compute_effective_active(serial, now),
                effective_expires_at=compute_effective_expiry(serial),
            )
            for serial in serials
        ]

    @staticmethod
    async def set_serial_active(
        db: AsyncSession,
        code: Any,
        is_active: bool,
    ) -> SerialRecord:
        """启用或停用序号"""
        code = normalize_code(code)

        try:
            serial = await SerialService.get_by_code(db, code)
            if serial is None:
                logger.warning("Serial %s not found for status update", code)
                raise NotFoundError(code)
            updated = apply_status_change(SerialRecord.model_validate(serial), is_active)

            rowcount = await SerialService.update_active(db, code, updated.is_active)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Error updating serial status %s", code)
            raise InternalError("更新序号状态时发生内部错误")

        # 读取与更新之间可能已被删除
        if rowcount == 0:
            logger.warning("Serial %s not found for status update", code)
            raise NotFoundError(code)

        logger.info("Serial %s is_active set to %s", code, updated.is_active)
        return updated

    @staticmethod
    async def delete_serial(db: AsyncSession, code: Any) -> None:
        """删除序号，不存在时抛出 NotFoundError"""
        code = normalize_code(code)

        try:
            rowcount = await SerialService.delete(db, code)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Error deleting serial %s", code)
            raise InternalError("删除序号时发生内部错误")

        if rowcount == 0:
            logger.warning("Serial %s not found for deletion", code)
            raise NotFoundError(code)

        logger.info("Serial %s deleted", code)
