from datetime import datetime, timezone
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import expression
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Serial(Base):
    """序号表模型"""
    __tablename__ = "serials"

    code = Column(
        String(64),
        primary_key=True,
        comment="序号字符串"
    )
    duration_minutes = Column(
        Integer,
        nullable=True,
        comment="首次使用后的有效分钟数"
    )
    activated_at = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="首次使用时间，由使用方写入"
    )
    expires_at = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="固定到期时间"
    )
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
        comment="管理员启用/停用标记"
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True,
        comment="创建时间"
    )

    def __repr__(self):
        return f"<Serial(code={self.code}, is_active={self.is_active})>"
