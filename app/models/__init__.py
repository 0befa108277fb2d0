"""
数据模型包
统一导入所有SQLAlchemy模型
"""

from app.db.base import Base
from app.models.serial import Serial

__all__ = [
    "Base",
    "Serial",
]
