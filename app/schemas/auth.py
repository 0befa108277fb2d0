"""
管理员认证相关的Pydantic模型
"""

from typing import Optional
from pydantic import BaseModel


class AdminLogin(BaseModel):
    """管理员登录模型"""
    username: str
    password: str


class Token(BaseModel):
    """JWT Token响应模型"""
    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    """Token数据模型"""
    username: Optional[str] = None
