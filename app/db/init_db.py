"""
数据库初始化脚本
"""

import asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from app.core.config import settings
from app.models import Base  # 导入所有模型


async def create_tables(engine: AsyncEngine) -> None:
    """在给定引擎上创建所有表"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db():
    """初始化数据库表"""
    engine = create_async_engine(settings.DATABASE_URL)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(init_db())
