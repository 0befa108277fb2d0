"""
管理员认证API端点
"""

import logging
from datetime import timedelta
from fastapi import APIRouter, HTTPException, status
from app.core.config import settings
from app.core.security import authenticate_admin, create_access_token
from app.schemas.auth import AdminLogin, Token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=Token)
async def login(admin_login: AdminLogin):
    """
    管理员登录
    """
    if not authenticate_admin(admin_login.username, admin_login.password):
        logger.warning("Failed admin login for %s", admin_login.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="账号或密码错误",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": settings.ADMIN_USERNAME}, expires_delta=access_token_expires
    )

    return {
        "access_token": access_token,
        "token_type": "bearer"
    }
