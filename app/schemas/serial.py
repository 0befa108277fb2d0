"""
序号相关的Pydantic模型
"""

from datetime import datetime
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt


class SerialCreateRequest(BaseModel):
    """新增序号请求，字段在服务层统一校验"""
    code: Optional[str] = None
    duration: Optional[Union[StrictInt, str]] = None
    expires: Optional[str] = None


class SerialStatusRequest(BaseModel):
    """启用/停用请求"""
    model_config = ConfigDict(populate_by_name=True)

    code: Optional[str] = None
    is_active: StrictBool = Field(alias="isActive")


class SerialDeleteRequest(BaseModel):
    """删除请求"""
    code: Optional[str] = None


class NewSerial(BaseModel):
    """校验并规范化后的新序号"""
    code: str
    duration_minutes: Optional[int] = None
    expires_at: Optional[datetime] = None


class SerialRecord(BaseModel):
    """序号记录"""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    code: str
    duration_minutes: Optional[int] = None
    activated_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    is_active: bool = True
    created_at: datetime


class SerialView(SerialRecord):
    """列表展示用，附带计算出的有效状态"""
    effective_active: bool
    effective_expires_at: Optional[datetime] = None


class SerialOperationResponse(BaseModel):
    """写操作响应"""
    success: bool = True
    message: str
    serial: Optional[SerialRecord] = None
