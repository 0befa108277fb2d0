from fastapi import APIRouter
from app.api.v1.endpoints import auth, serials

api_router = APIRouter()

# 包含各模块的路由
api_router.include_router(auth.router, prefix="/auth", tags=["认证"])
api_router.include_router(serials.router, prefix="/serials", tags=["序号管理"])

@api_router.get("/status")
async def api_status():
    return {"status": "API v1 is running"}
