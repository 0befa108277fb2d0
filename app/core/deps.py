"""
FastAPI 依赖注入函数
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.config import settings
from app.core.security import verify_token

# HTTP Bearer Token 安全方案
security = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    """获取当前管理员的依赖注入函数"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="无效的认证凭据",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    # 验证token
    token_data = verify_token(credentials.credentials)
    if token_data is None or token_data.username != settings.ADMIN_USERNAME:
        raise credentials_exception

    return token_data.username
