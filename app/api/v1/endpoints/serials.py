"""
序号管理API端点
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.deps import get_current_admin
from app.db.deps import get_db
from app.schemas.serial import (
    SerialCreateRequest,
    SerialDeleteRequest,
    SerialOperationResponse,
    SerialStatusRequest,
    SerialView,
)
from app.services.serial_service import SerialService

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.post("", response_model=SerialOperationResponse, status_code=status.HTTP_201_CREATED)
async def add_serial(
    request: SerialCreateRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    新增序号
    """
    serial = await SerialService.create_serial(
        db, request.code, request.duration, request.expires
    )
    return SerialOperationResponse(
        message=f"序号 '{serial.code}' 新增成功",
        serial=serial
    )


@router.get("", response_model=List[SerialView])
async def list_serials(db: AsyncSession = Depends(get_db)):
    """
    获取序号列表（按创建时间倒序）
    """
    return await SerialService.list_serials(db)


@router.post("/status", response_model=SerialOperationResponse)
async def update_serial_status(
    request: SerialStatusRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    启用或停用序号
    """
    serial = await SerialService.set_serial_active(db, request.code, request.is_active)
    return SerialOperationResponse(
        message=f"序号 '{serial.code}' 状态更新成功",
        serial=serial
    )


@router.delete("", response_model=SerialOperationResponse)
async def delete_serial(
    request: SerialDeleteRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    删除序号
    """
    await SerialService.delete_serial(db, request.code)
    return SerialOperationResponse(message=f"序号 '{request.code.strip()}' 删除成功")
